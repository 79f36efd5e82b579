"""Collaborator interfaces for key management and secret access."""

from __future__ import annotations

from typing import Protocol

from .models import KeyMetadata, SecretVersion, SignResult


class KeyManagementClient(Protocol):
    """Protocol for key-management backends.

    Implementations raise whatever their transport raises; callers wrap
    those failures. Retries and timeouts belong to the implementation.
    """

    async def get_key_metadata(self, resource_name: str) -> KeyMetadata:
        """Return metadata for the key version ``resource_name``."""

    async def asymmetric_sign(self, resource_name: str, data: bytes) -> SignResult:
        """Sign ``data`` with the key version ``resource_name``."""


class SecretManagerClient(Protocol):
    """Protocol for secret storage backends."""

    async def access_secret_version(self, resource_name: str) -> SecretVersion:
        """Return the payload of the secret version ``resource_name``."""
