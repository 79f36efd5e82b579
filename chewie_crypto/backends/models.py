"""Response models exchanged with collaborator backends."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class KeyMetadata(BaseModel):
    """Metadata for one key version."""

    algorithm: str = Field(..., description="Algorithm identifier as reported by the service")


class SignResult(BaseModel):
    """Result of an asymmetric sign request."""

    signature: bytes


class SecretVersion(BaseModel):
    """Result of accessing a secret version.

    ``payload`` is ``None`` when the service returned no payload at all,
    for example for a disabled or destroyed version.
    """

    payload: Optional[bytes] = None
