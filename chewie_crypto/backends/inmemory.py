"""In-memory backends for tests and local development."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from .base import KeyManagementClient, SecretManagerClient
from .models import KeyMetadata, SecretVersion, SignResult

SignFunction = Callable[[bytes], bytes]


class NotFound(LookupError):
    """Raised when a resource was never registered."""


class InMemoryKeyManagement(KeyManagementClient):
    """Keep key versions in local memory.

    Each key version is registered with the algorithm identifier the backend
    should report and a function that produces signatures. Nothing is
    persisted across process restarts.
    """

    def __init__(self) -> None:
        self._keys: Dict[str, Tuple[str, SignFunction]] = {}

    def add_key(self, resource_name: str, algorithm: Any, sign: SignFunction) -> None:
        """Register (or replace) a key version.

        ``algorithm`` may be a raw identifier string or an enum member; enum
        members are stored by name, as the remote service reports them.
        """
        self._keys[resource_name] = (getattr(algorithm, "name", None) or str(algorithm), sign)

    def _get(self, resource_name: str) -> Tuple[str, SignFunction]:
        try:
            return self._keys[resource_name]
        except KeyError:
            raise NotFound(f"Key version {resource_name} not found") from None

    # ------------------------------------------------------------------
    async def get_key_metadata(self, resource_name: str) -> KeyMetadata:
        algorithm, _ = self._get(resource_name)
        return KeyMetadata(algorithm=algorithm)

    async def asymmetric_sign(self, resource_name: str, data: bytes) -> SignResult:
        _, sign = self._get(resource_name)
        return SignResult(signature=sign(data))


class InMemorySecretManager(SecretManagerClient):
    """Keep secret versions in local memory.

    A version registered with ``None`` behaves like a disabled or destroyed
    secret: it exists but has no payload.
    """

    def __init__(self) -> None:
        self._secrets: Dict[str, Optional[bytes]] = {}

    def add_secret(self, resource_name: str, payload: Optional[bytes]) -> None:
        """Register (or replace) a secret version."""
        self._secrets[resource_name] = payload

    def destroy(self, resource_name: str) -> None:
        """Drop the payload of an existing secret version."""
        if resource_name not in self._secrets:
            raise NotFound(f"Secret version {resource_name} not found")
        self._secrets[resource_name] = None

    # ------------------------------------------------------------------
    async def access_secret_version(self, resource_name: str) -> SecretVersion:
        if resource_name not in self._secrets:
            raise NotFound(f"Secret version {resource_name} not found")
        return SecretVersion(payload=self._secrets[resource_name])
