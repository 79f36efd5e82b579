"""Google Cloud KMS and Secret Manager backends."""

from __future__ import annotations

from typing import Any, Optional

try:
    from google.cloud import kms_v1
except ImportError:
    kms_v1 = None

try:
    from google.cloud import secretmanager_v1
except ImportError:
    secretmanager_v1 = None

from .base import KeyManagementClient, SecretManagerClient
from .models import KeyMetadata, SecretVersion, SignResult


def _enum_name(value: Any) -> str:
    # Values newer than the installed client library arrive as plain ints.
    return getattr(value, "name", None) or str(value)


class GoogleKeyManagement(KeyManagementClient):
    """Cloud KMS backend using ``KeyManagementServiceAsyncClient``.

    Transport, credentials, retries and timeouts are whatever the wrapped
    client is configured with.
    """

    def __init__(self, client: Optional[Any] = None) -> None:
        if client is None:
            if kms_v1 is None:
                raise ImportError(
                    "google-cloud-kms package is required for GoogleKeyManagement"
                )
            client = kms_v1.KeyManagementServiceAsyncClient()
        self.client = client

    async def get_key_metadata(self, resource_name: str) -> KeyMetadata:
        version = await self.client.get_crypto_key_version(request={"name": resource_name})
        return KeyMetadata(algorithm=_enum_name(version.algorithm))

    async def asymmetric_sign(self, resource_name: str, data: bytes) -> SignResult:
        response = await self.client.asymmetric_sign(
            request={"name": resource_name, "data": data}
        )
        return SignResult(signature=response.signature)


class GoogleSecretManager(SecretManagerClient):
    """Secret Manager backend using ``SecretManagerServiceAsyncClient``."""

    def __init__(self, client: Optional[Any] = None) -> None:
        if client is None:
            if secretmanager_v1 is None:
                raise ImportError(
                    "google-cloud-secret-manager package is required for GoogleSecretManager"
                )
            client = secretmanager_v1.SecretManagerServiceAsyncClient()
        self.client = client

    async def access_secret_version(self, resource_name: str) -> SecretVersion:
        response = await self.client.access_secret_version(request={"name": resource_name})
        # proto-plus returns an empty message for unset fields; check presence.
        if "payload" not in response:
            return SecretVersion(payload=None)
        return SecretVersion(payload=response.payload.data)
