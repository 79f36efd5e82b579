"""Cloud KMS signing with automatic algorithm discovery."""

from __future__ import annotations

import logging

from .algorithms import AlgorithmDescriptor, lookup
from .backends.base import KeyManagementClient
from .errors import RetrievalFailed, SignFailed, UnsupportedAlgorithm
from .signer import JwsSigner

logger = logging.getLogger(__name__)


class AsymmetricSigningKey(JwsSigner):
    """An asymmetric key stored in a key-management service.

    The key's algorithm is resolved once, when the key is created with
    :meth:`create`, and reused for every signature. Instances hold no mutable
    state and can be shared between tasks.

    Example::

        key = await AsymmetricSigningKey.create(
            client,
            "projects/p/locations/l/keyRings/r/cryptoKeys/k/cryptoKeyVersions/1",
        )
        signature = await key.sign(b"payload")
    """

    def __init__(
        self,
        client: KeyManagementClient,
        resource_name: str,
        descriptor: AlgorithmDescriptor,
    ) -> None:
        self._client = client
        self._resource_name = resource_name
        self._descriptor = descriptor

    @classmethod
    async def create(
        cls, client: KeyManagementClient, resource_name: str
    ) -> "AsymmetricSigningKey":
        """Fetch the key's metadata and resolve its algorithm.

        Raises:
            RetrievalFailed: The metadata could not be fetched.
            UnsupportedAlgorithm: The key uses an algorithm with no descriptor.
        """
        try:
            metadata = await client.get_key_metadata(resource_name)
        except Exception as e:
            raise RetrievalFailed(resource_name, e) from e

        descriptor = lookup(metadata.algorithm)
        if descriptor is None:
            raise UnsupportedAlgorithm(resource_name, algorithm=metadata.algorithm)

        logger.debug(f"Resolved {resource_name} to {descriptor.name}")
        return cls(client, resource_name, descriptor)

    @property
    def resource_name(self) -> str:
        return self._resource_name

    @property
    def descriptor(self) -> AlgorithmDescriptor:
        return self._descriptor

    def algorithm(self) -> str:
        return self._descriptor.name

    def jws_algorithm(self) -> str:
        return self._descriptor.protocol_code

    async def sign(self, data: bytes) -> bytes:
        """Sign ``data`` remotely and return the signature unchanged."""
        try:
            result = await self._client.asymmetric_sign(self._resource_name, data)
        except Exception as e:
            raise SignFailed(self._resource_name, e) from e
        return result.signature

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(resource_name={self._resource_name!r}, "
            f"algorithm={self._descriptor.name!r})"
        )
