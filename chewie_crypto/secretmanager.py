"""Secret retrieval from a secret storage service."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from .backends.base import SecretManagerClient
from .errors import AccessFailed, DecodeFailed, EncodingError, MissingPayload
from .secrets.encodings import EncodingStrategy

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT")


class SecretManagerSource(Generic[OutputT]):
    """A secret value stored in a secret storage service.

    The output type is chosen by ``encoding``. Values are never cached:
    every :meth:`get_secret` call fetches the version again and decodes it.

    Example::

        source = SecretManagerSource(
            client,
            "projects/p/secrets/api-token/versions/1",
            StringEncoding(),
        )
        token = await source.get_secret()
    """

    def __init__(
        self,
        client: SecretManagerClient,
        resource_name: str,
        encoding: EncodingStrategy[OutputT],
    ) -> None:
        self._client = client
        self._resource_name = resource_name
        self._encoding = encoding

    @property
    def resource_name(self) -> str:
        return self._resource_name

    @property
    def encoding(self) -> EncodingStrategy[OutputT]:
        return self._encoding

    async def get_secret(self) -> OutputT:
        """Fetch and decode the secret.

        Raises:
            AccessFailed: The backend call failed.
            MissingPayload: The version exists but carries no payload.
            DecodeFailed: The payload could not be decoded by ``encoding``.
        """
        try:
            version = await self._client.access_secret_version(self._resource_name)
        except Exception as e:
            raise AccessFailed(self._resource_name, e) from e

        if version.payload is None:
            raise MissingPayload(self._resource_name)

        try:
            value = self._encoding.decode(version.payload)
        except EncodingError as e:
            raise DecodeFailed(self._resource_name, e) from e

        logger.debug(f"Retrieved secret {self._resource_name}")
        return value

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(resource_name={self._resource_name!r}, "
            f"encoding={self._encoding!r})"
        )
