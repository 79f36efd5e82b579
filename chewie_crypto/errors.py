"""Exception hierarchy for signing and secret retrieval.

Every error that wraps a collaborator or decoding failure keeps the original
exception on ``cause`` and is raised ``from`` it, so the full chain is
available to callers and in tracebacks.
"""

from __future__ import annotations

from typing import Any


class ChewieError(Exception):
    """Base class for all chewie-crypto errors."""


class EncodingError(ValueError):
    """Raised by an encoding strategy when secret bytes cannot be decoded."""


# ---------------------------------------------------------------------------
# Key setup


class SetupError(ChewieError):
    """A signing key could not be created."""

    def __init__(self, resource_name: str, message: str) -> None:
        super().__init__(message)
        self.resource_name = resource_name


class RetrievalFailed(SetupError):
    """Fetching key metadata from the key-management service failed."""

    def __init__(self, resource_name: str, cause: BaseException) -> None:
        super().__init__(
            resource_name, f"Failed to retrieve key metadata for {resource_name}: {cause}"
        )
        self.cause = cause


class UnsupportedAlgorithm(SetupError):
    """The key exists but reports an algorithm with no known descriptor."""

    def __init__(self, resource_name: str, algorithm: Any) -> None:
        super().__init__(
            resource_name,
            f"Key {resource_name} uses unsupported algorithm {algorithm!s}",
        )
        self.algorithm = algorithm


# ---------------------------------------------------------------------------
# Signing


class SigningError(ChewieError):
    """A sign operation failed."""


class SignFailed(SigningError):
    """The key-management service rejected or failed the sign request."""

    def __init__(self, resource_name: str, cause: BaseException) -> None:
        super().__init__(f"Failed to sign with {resource_name}: {cause}")
        self.resource_name = resource_name
        self.cause = cause


# ---------------------------------------------------------------------------
# Secrets


class SecretError(ChewieError):
    """A secret could not be produced."""

    def __init__(self, resource_name: str, message: str) -> None:
        super().__init__(message)
        self.resource_name = resource_name


class AccessFailed(SecretError):
    """Accessing the secret version failed at the service or transport."""

    def __init__(self, resource_name: str, cause: BaseException) -> None:
        super().__init__(resource_name, f"Failed to access secret {resource_name}: {cause}")
        self.cause = cause


class MissingPayload(SecretError):
    """The secret response carried no payload.

    This happens when the secret version is disabled or destroyed. It is not
    the same as an empty payload, which is decoded like any other value.
    """

    def __init__(self, resource_name: str) -> None:
        super().__init__(resource_name, f"Secret {resource_name} has no payload")


class DecodeFailed(SecretError):
    """The payload was fetched but the encoding strategy rejected it."""

    def __init__(self, resource_name: str, cause: BaseException) -> None:
        super().__init__(resource_name, f"Failed to decode secret {resource_name}: {cause}")
        self.cause = cause


__all__ = [
    "ChewieError",
    "EncodingError",
    "SetupError",
    "RetrievalFailed",
    "UnsupportedAlgorithm",
    "SigningError",
    "SignFailed",
    "SecretError",
    "AccessFailed",
    "MissingPayload",
    "DecodeFailed",
]
