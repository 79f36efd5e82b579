"""Decoding strategies for raw secret payloads.

Each strategy turns the bytes returned by a secret backend into an
application value. Strategies are stateless and deterministic: the same
bytes always decode to equal values, and nothing is kept between calls.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Generic, Protocol, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import EncodingError

OutputT = TypeVar("OutputT", covariant=True)
ModelT = TypeVar("ModelT", bound=BaseModel)


class EncodingStrategy(Protocol[OutputT]):
    """Decode raw secret bytes into a typed value."""

    def decode(self, data: bytes) -> OutputT:
        """Return the decoded value or raise :class:`EncodingError`."""
        ...


@dataclass(frozen=True)
class BytesEncoding:
    """Return the payload unchanged."""

    def decode(self, data: bytes) -> bytes:
        return bytes(data)


@dataclass(frozen=True)
class StringEncoding:
    """Decode the payload as text, strictly."""

    encoding: str = "utf-8"

    def decode(self, data: bytes) -> str:
        try:
            return bytes(data).decode(self.encoding)
        except LookupError as e:
            raise EncodingError(f"Unknown text encoding {self.encoding!r}") from e
        except UnicodeDecodeError as e:
            raise EncodingError(f"Secret is not valid {self.encoding}: {e}") from e


@dataclass(frozen=True)
class JsonEncoding:
    """Parse the payload as a UTF-8 JSON document."""

    def decode(self, data: bytes) -> Any:
        try:
            return json.loads(bytes(data).decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise EncodingError(f"Secret is not a valid JSON document: {e}") from e


@dataclass(frozen=True)
class ModelEncoding(Generic[ModelT]):
    """Validate the payload as JSON into a pydantic model.

    Example::

        class DatabaseCredentials(BaseModel):
            user: str
            password: str

        encoding = ModelEncoding(DatabaseCredentials)
    """

    model: Type[ModelT]

    def decode(self, data: bytes) -> ModelT:
        try:
            return self.model.model_validate_json(bytes(data))
        except ValidationError as e:
            raise EncodingError(
                f"Secret does not match {self.model.__name__}: {e}"
            ) from e


__all__ = [
    "EncodingStrategy",
    "BytesEncoding",
    "StringEncoding",
    "JsonEncoding",
    "ModelEncoding",
]
