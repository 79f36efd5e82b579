"""Secret decoding strategies and the secret source capability."""

from .encodings import (
    BytesEncoding,
    EncodingStrategy,
    JsonEncoding,
    ModelEncoding,
    StringEncoding,
)
from .source import SecretSource

__all__ = [
    "EncodingStrategy",
    "BytesEncoding",
    "StringEncoding",
    "JsonEncoding",
    "ModelEncoding",
    "SecretSource",
]
