"""Algorithm catalog for remote signing keys.

Maps the algorithm identifier reported by the key-management service onto a
canonical :class:`AlgorithmDescriptor`. Key-size variants that share the same
padding and hash collapse to one descriptor.

:func:`classify` lists every :class:`RemoteAlgorithmId` member explicitly and
ends in ``assert_never``, so a type checker reports a non-exhaustive match as
soon as a member is added without deciding how to classify it.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from types import MappingProxyType
from typing import Mapping, Optional, Union, assert_never

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class AlgorithmDescriptor(BaseModel):
    """Canonical description of one signature scheme."""

    model_config = ConfigDict(frozen=True)

    name: str
    protocol_code: str


class RemoteAlgorithmId(StrEnum):
    """Algorithm identifiers as reported by the key-management service."""

    CRYPTO_KEY_VERSION_ALGORITHM_UNSPECIFIED = "CRYPTO_KEY_VERSION_ALGORITHM_UNSPECIFIED"

    # Symmetric encryption
    GOOGLE_SYMMETRIC_ENCRYPTION = "GOOGLE_SYMMETRIC_ENCRYPTION"
    AES_128_GCM = "AES_128_GCM"
    AES_256_GCM = "AES_256_GCM"
    AES_128_CBC = "AES_128_CBC"
    AES_256_CBC = "AES_256_CBC"
    AES_128_CTR = "AES_128_CTR"
    AES_256_CTR = "AES_256_CTR"
    AES_256_KWP = "AES_256_KWP"
    EXTERNAL_SYMMETRIC_ENCRYPTION = "EXTERNAL_SYMMETRIC_ENCRYPTION"

    # RSA signing
    RSA_SIGN_PSS_2048_SHA256 = "RSA_SIGN_PSS_2048_SHA256"
    RSA_SIGN_PSS_3072_SHA256 = "RSA_SIGN_PSS_3072_SHA256"
    RSA_SIGN_PSS_4096_SHA256 = "RSA_SIGN_PSS_4096_SHA256"
    RSA_SIGN_PSS_4096_SHA512 = "RSA_SIGN_PSS_4096_SHA512"
    RSA_SIGN_PKCS1_2048_SHA256 = "RSA_SIGN_PKCS1_2048_SHA256"
    RSA_SIGN_PKCS1_3072_SHA256 = "RSA_SIGN_PKCS1_3072_SHA256"
    RSA_SIGN_PKCS1_4096_SHA256 = "RSA_SIGN_PKCS1_4096_SHA256"
    RSA_SIGN_PKCS1_4096_SHA512 = "RSA_SIGN_PKCS1_4096_SHA512"
    RSA_SIGN_RAW_PKCS1_2048 = "RSA_SIGN_RAW_PKCS1_2048"
    RSA_SIGN_RAW_PKCS1_3072 = "RSA_SIGN_RAW_PKCS1_3072"
    RSA_SIGN_RAW_PKCS1_4096 = "RSA_SIGN_RAW_PKCS1_4096"

    # RSA decryption
    RSA_DECRYPT_OAEP_2048_SHA256 = "RSA_DECRYPT_OAEP_2048_SHA256"
    RSA_DECRYPT_OAEP_3072_SHA256 = "RSA_DECRYPT_OAEP_3072_SHA256"
    RSA_DECRYPT_OAEP_4096_SHA256 = "RSA_DECRYPT_OAEP_4096_SHA256"
    RSA_DECRYPT_OAEP_4096_SHA512 = "RSA_DECRYPT_OAEP_4096_SHA512"
    RSA_DECRYPT_OAEP_2048_SHA1 = "RSA_DECRYPT_OAEP_2048_SHA1"
    RSA_DECRYPT_OAEP_3072_SHA1 = "RSA_DECRYPT_OAEP_3072_SHA1"
    RSA_DECRYPT_OAEP_4096_SHA1 = "RSA_DECRYPT_OAEP_4096_SHA1"

    # Elliptic curve signing
    EC_SIGN_P256_SHA256 = "EC_SIGN_P256_SHA256"
    EC_SIGN_P384_SHA384 = "EC_SIGN_P384_SHA384"
    EC_SIGN_SECP256K1_SHA256 = "EC_SIGN_SECP256K1_SHA256"
    EC_SIGN_ED25519 = "EC_SIGN_ED25519"

    # MAC
    HMAC_SHA256 = "HMAC_SHA256"
    HMAC_SHA1 = "HMAC_SHA1"
    HMAC_SHA384 = "HMAC_SHA384"
    HMAC_SHA512 = "HMAC_SHA512"
    HMAC_SHA224 = "HMAC_SHA224"

    # Post-quantum
    PQ_SIGN_ML_DSA_44 = "PQ_SIGN_ML_DSA_44"
    PQ_SIGN_ML_DSA_65 = "PQ_SIGN_ML_DSA_65"
    PQ_SIGN_ML_DSA_87 = "PQ_SIGN_ML_DSA_87"
    PQ_SIGN_ML_DSA_44_EXTERNAL_MU = "PQ_SIGN_ML_DSA_44_EXTERNAL_MU"
    PQ_SIGN_ML_DSA_65_EXTERNAL_MU = "PQ_SIGN_ML_DSA_65_EXTERNAL_MU"
    PQ_SIGN_ML_DSA_87_EXTERNAL_MU = "PQ_SIGN_ML_DSA_87_EXTERNAL_MU"
    PQ_SIGN_SLH_DSA_SHA2_128S = "PQ_SIGN_SLH_DSA_SHA2_128S"
    PQ_SIGN_HASH_SLH_DSA_SHA2_128S_SHA256 = "PQ_SIGN_HASH_SLH_DSA_SHA2_128S_SHA256"
    ML_KEM_768 = "ML_KEM_768"
    ML_KEM_1024 = "ML_KEM_1024"
    KEM_XWING = "KEM_XWING"


RSA_PSS_SHA256 = AlgorithmDescriptor(name="RSA-PSS-SHA256", protocol_code="PS256")
RSA_PSS_SHA512 = AlgorithmDescriptor(name="RSA-PSS-SHA512", protocol_code="PS512")
RSA_PKCS1_SHA256 = AlgorithmDescriptor(name="RSA-PKCS1-SHA256", protocol_code="RS256")
RSA_PKCS1_SHA512 = AlgorithmDescriptor(name="RSA-PKCS1-SHA512", protocol_code="RS512")
ECDSA_P256 = AlgorithmDescriptor(name="ECDSA-P256", protocol_code="ES256")
ECDSA_P384 = AlgorithmDescriptor(name="ECDSA-P384", protocol_code="ES384")
EDDSA_ED25519 = AlgorithmDescriptor(name="EdDSA-Ed25519", protocol_code="Ed25519")


def classify(algorithm: RemoteAlgorithmId) -> Optional[AlgorithmDescriptor]:
    """Return the descriptor for ``algorithm`` or ``None`` if it is not supported."""
    R = RemoteAlgorithmId
    match algorithm:
        case R.RSA_SIGN_PSS_2048_SHA256 | R.RSA_SIGN_PSS_3072_SHA256 | R.RSA_SIGN_PSS_4096_SHA256:
            return RSA_PSS_SHA256
        case R.RSA_SIGN_PSS_4096_SHA512:
            return RSA_PSS_SHA512
        case (
            R.RSA_SIGN_PKCS1_2048_SHA256
            | R.RSA_SIGN_PKCS1_3072_SHA256
            | R.RSA_SIGN_PKCS1_4096_SHA256
        ):
            return RSA_PKCS1_SHA256
        case R.RSA_SIGN_PKCS1_4096_SHA512:
            return RSA_PKCS1_SHA512
        case R.EC_SIGN_P256_SHA256:
            return ECDSA_P256
        case R.EC_SIGN_P384_SHA384:
            return ECDSA_P384
        case R.EC_SIGN_ED25519:
            return EDDSA_ED25519
        # Signing schemes with no descriptor: raw PKCS#1 signs a caller-built
        # DigestInfo, and secp256k1 has no JWS code.
        case (
            R.RSA_SIGN_RAW_PKCS1_2048
            | R.RSA_SIGN_RAW_PKCS1_3072
            | R.RSA_SIGN_RAW_PKCS1_4096
            | R.EC_SIGN_SECP256K1_SHA256
        ):
            return None
        case (
            R.PQ_SIGN_ML_DSA_44
            | R.PQ_SIGN_ML_DSA_65
            | R.PQ_SIGN_ML_DSA_87
            | R.PQ_SIGN_ML_DSA_44_EXTERNAL_MU
            | R.PQ_SIGN_ML_DSA_65_EXTERNAL_MU
            | R.PQ_SIGN_ML_DSA_87_EXTERNAL_MU
            | R.PQ_SIGN_SLH_DSA_SHA2_128S
            | R.PQ_SIGN_HASH_SLH_DSA_SHA2_128S_SHA256
        ):
            return None
        case (
            R.CRYPTO_KEY_VERSION_ALGORITHM_UNSPECIFIED
            | R.GOOGLE_SYMMETRIC_ENCRYPTION
            | R.AES_128_GCM
            | R.AES_256_GCM
            | R.AES_128_CBC
            | R.AES_256_CBC
            | R.AES_128_CTR
            | R.AES_256_CTR
            | R.AES_256_KWP
            | R.EXTERNAL_SYMMETRIC_ENCRYPTION
            | R.RSA_DECRYPT_OAEP_2048_SHA256
            | R.RSA_DECRYPT_OAEP_3072_SHA256
            | R.RSA_DECRYPT_OAEP_4096_SHA256
            | R.RSA_DECRYPT_OAEP_4096_SHA512
            | R.RSA_DECRYPT_OAEP_2048_SHA1
            | R.RSA_DECRYPT_OAEP_3072_SHA1
            | R.RSA_DECRYPT_OAEP_4096_SHA1
            | R.HMAC_SHA256
            | R.HMAC_SHA1
            | R.HMAC_SHA384
            | R.HMAC_SHA512
            | R.HMAC_SHA224
            | R.ML_KEM_768
            | R.ML_KEM_1024
            | R.KEM_XWING
        ):
            return None
        case _:
            assert_never(algorithm)


def lookup(algorithm: Union[RemoteAlgorithmId, str]) -> Optional[AlgorithmDescriptor]:
    """Resolve a reported algorithm identifier to its descriptor.

    Accepts a :class:`RemoteAlgorithmId` or the raw identifier string. Strings
    the catalog has never seen resolve to ``None``; they are never mapped to a
    default descriptor.
    """
    if not isinstance(algorithm, RemoteAlgorithmId):
        member = RemoteAlgorithmId.__members__.get(str(algorithm))
        if member is None:
            logger.warning(f"Unclassified remote algorithm identifier: {algorithm!s}")
            return None
        algorithm = member
    return classify(algorithm)


SUPPORTED_ALGORITHMS: Mapping[RemoteAlgorithmId, AlgorithmDescriptor] = MappingProxyType(
    {member: classify(member) for member in RemoteAlgorithmId if classify(member) is not None}
)


__all__ = [
    "AlgorithmDescriptor",
    "RemoteAlgorithmId",
    "SUPPORTED_ALGORITHMS",
    "classify",
    "lookup",
]
