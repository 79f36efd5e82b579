"""Secret source capability."""

from __future__ import annotations

from typing import Protocol, TypeVar

OutputT = TypeVar("OutputT", covariant=True)


class SecretSource(Protocol[OutputT]):
    """Anything that can produce a decoded secret value on demand."""

    async def get_secret(self) -> OutputT:
        """Fetch and decode the secret. Each call fetches anew."""
        ...
