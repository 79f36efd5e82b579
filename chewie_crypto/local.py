"""Signer backed by key material held in process."""

from __future__ import annotations

from typing import Any, Callable

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, padding, rsa

from .algorithms import (
    ECDSA_P256,
    ECDSA_P384,
    EDDSA_ED25519,
    RSA_PKCS1_SHA256,
    AlgorithmDescriptor,
)
from .errors import UnsupportedAlgorithm
from .signer import JwsSigner


def _signer_for(private_key: Any) -> tuple[AlgorithmDescriptor, Callable[[bytes], bytes]] | None:
    if isinstance(private_key, ed25519.Ed25519PrivateKey):
        return EDDSA_ED25519, private_key.sign
    if isinstance(private_key, ec.EllipticCurvePrivateKey):
        if isinstance(private_key.curve, ec.SECP256R1):
            return ECDSA_P256, lambda data: private_key.sign(data, ec.ECDSA(hashes.SHA256()))
        if isinstance(private_key.curve, ec.SECP384R1):
            return ECDSA_P384, lambda data: private_key.sign(data, ec.ECDSA(hashes.SHA384()))
        return None
    if isinstance(private_key, rsa.RSAPrivateKey):
        return RSA_PKCS1_SHA256, lambda data: private_key.sign(
            data, padding.PKCS1v15(), hashes.SHA256()
        )
    return None


class LocalSigningKey(JwsSigner):
    """Sign with a ``cryptography`` private key.

    The algorithm follows from the key type: Ed25519, ECDSA on P-256 or
    P-384, or RSA with PKCS#1 v1.5 and SHA-256. ECDSA signatures are
    DER-encoded, matching what a key-management service returns.
    """

    def __init__(self, private_key: Any, key_id: str = "local") -> None:
        resolved = _signer_for(private_key)
        if resolved is None:
            raise UnsupportedAlgorithm(key_id, algorithm=type(private_key).__name__)
        self._key_id = key_id
        self._descriptor, self._sign = resolved

    @property
    def key_id(self) -> str:
        return self._key_id

    @property
    def descriptor(self) -> AlgorithmDescriptor:
        return self._descriptor

    def algorithm(self) -> str:
        return self._descriptor.name

    def jws_algorithm(self) -> str:
        return self._descriptor.protocol_code

    async def sign(self, data: bytes) -> bytes:
        return self._sign(data)
