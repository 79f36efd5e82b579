"""Signer capability shared by remote and local keys."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Signer(Protocol):
    """Anything that can sign bytes and name its algorithm."""

    def algorithm(self) -> str:
        """Return the human-readable algorithm name, e.g. ``ECDSA-P256``."""
        ...

    async def sign(self, data: bytes) -> bytes:
        """Sign ``data`` and return the raw signature bytes."""
        ...


@runtime_checkable
class JwsSigner(Signer, Protocol):
    """A :class:`Signer` that also knows its JWS ``alg`` header value."""

    def jws_algorithm(self) -> str:
        """Return the JWS algorithm code, e.g. ``ES256``."""
        ...


__all__ = ["Signer", "JwsSigner"]
