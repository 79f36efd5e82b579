"""Backend factories and initialization."""

from __future__ import annotations

import os
from typing import Optional

from ..config import ChewieConfig, load_config
from .base import KeyManagementClient, SecretManagerClient
from .inmemory import InMemoryKeyManagement, InMemorySecretManager, NotFound
from .models import KeyMetadata, SecretVersion, SignResult


def get_key_management(
    backend: Optional[str] = None, config: Optional[ChewieConfig] = None
) -> KeyManagementClient:
    """Factory function to get the configured key-management backend."""

    config = config or load_config()
    backend = (
        backend or os.getenv("CHEWIE_KMS_BACKEND") or config.kms.backend
    ).lower()

    if backend == "inmemory":
        return InMemoryKeyManagement()
    elif backend == "gcp":
        from .gcp import GoogleKeyManagement

        return GoogleKeyManagement()
    else:
        raise ValueError(f"Unsupported key management backend: {backend}")


def get_secret_manager(
    backend: Optional[str] = None, config: Optional[ChewieConfig] = None
) -> SecretManagerClient:
    """Factory function to get the configured secret backend."""

    config = config or load_config()
    backend = (
        backend or os.getenv("CHEWIE_SECRETS_BACKEND") or config.secret_manager.backend
    ).lower()

    if backend == "inmemory":
        return InMemorySecretManager()
    elif backend == "gcp":
        from .gcp import GoogleSecretManager

        return GoogleSecretManager()
    else:
        raise ValueError(f"Unsupported secret manager backend: {backend}")


__all__ = [
    "KeyManagementClient",
    "SecretManagerClient",
    "InMemoryKeyManagement",
    "InMemorySecretManager",
    "NotFound",
    "KeyMetadata",
    "SignResult",
    "SecretVersion",
    "get_key_management",
    "get_secret_manager",
]
