"""chewie-crypto: backend-agnostic signing keys and secret retrieval."""

from .algorithms import SUPPORTED_ALGORITHMS, AlgorithmDescriptor, RemoteAlgorithmId, lookup
from .backends import get_key_management, get_secret_manager
from .errors import (
    AccessFailed,
    ChewieError,
    DecodeFailed,
    EncodingError,
    MissingPayload,
    RetrievalFailed,
    SecretError,
    SetupError,
    SignFailed,
    SigningError,
    UnsupportedAlgorithm,
)
from .jws import encode_jws
from .kms import AsymmetricSigningKey
from .local import LocalSigningKey
from .secretmanager import SecretManagerSource
from .secrets import (
    BytesEncoding,
    EncodingStrategy,
    JsonEncoding,
    ModelEncoding,
    SecretSource,
    StringEncoding,
)
from .signer import JwsSigner, Signer

__version__ = "0.1.0"
__all__ = [
    "AlgorithmDescriptor",
    "RemoteAlgorithmId",
    "SUPPORTED_ALGORITHMS",
    "lookup",
    "Signer",
    "JwsSigner",
    "AsymmetricSigningKey",
    "LocalSigningKey",
    "encode_jws",
    "EncodingStrategy",
    "BytesEncoding",
    "StringEncoding",
    "JsonEncoding",
    "ModelEncoding",
    "SecretSource",
    "SecretManagerSource",
    "get_key_management",
    "get_secret_manager",
    "ChewieError",
    "EncodingError",
    "SetupError",
    "RetrievalFailed",
    "UnsupportedAlgorithm",
    "SigningError",
    "SignFailed",
    "SecretError",
    "AccessFailed",
    "MissingPayload",
    "DecodeFailed",
]
