"""SecretManagerSource tests."""

import pytest
from pydantic import BaseModel

from chewie_crypto.backends import InMemorySecretManager, NotFound
from chewie_crypto.errors import (
    AccessFailed,
    DecodeFailed,
    EncodingError,
    MissingPayload,
    SecretError,
)
from chewie_crypto.secretmanager import SecretManagerSource
from chewie_crypto.secrets import BytesEncoding, JsonEncoding, ModelEncoding, StringEncoding

RESOURCE = "projects/test/secrets/my-private-secret/versions/1"


class Credentials(BaseModel):
    user: str
    password: str


class CountingSecrets(InMemorySecretManager):
    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    async def access_secret_version(self, resource_name):
        self.calls += 1
        return await super().access_secret_version(resource_name)


def _backend(payload):
    backend = CountingSecrets()
    backend.add_secret(RESOURCE, payload)
    return backend


@pytest.mark.asyncio
async def test_string_secret():
    source = SecretManagerSource(_backend(b"hunter2"), RESOURCE, StringEncoding())
    assert await source.get_secret() == "hunter2"


@pytest.mark.asyncio
async def test_json_and_model_secrets():
    payload = b'{"user": "app", "password": "s3cret"}'

    as_json = SecretManagerSource(_backend(payload), RESOURCE, JsonEncoding())
    as_model = SecretManagerSource(_backend(payload), RESOURCE, ModelEncoding(Credentials))

    assert await as_json.get_secret() == {"user": "app", "password": "s3cret"}
    assert await as_model.get_secret() == Credentials(user="app", password="s3cret")


@pytest.mark.asyncio
async def test_destroyed_secret_raises_missing_payload():
    backend = _backend(b"value")
    backend.destroy(RESOURCE)
    source = SecretManagerSource(backend, RESOURCE, StringEncoding())

    with pytest.raises(MissingPayload) as excinfo:
        await source.get_secret()

    assert excinfo.value.resource_name == RESOURCE
    assert isinstance(excinfo.value, SecretError)


@pytest.mark.asyncio
async def test_empty_payload_is_not_missing():
    source = SecretManagerSource(_backend(b""), RESOURCE, StringEncoding())
    assert await source.get_secret() == ""


@pytest.mark.asyncio
async def test_invalid_utf8_raises_decode_failed_with_cause_chain():
    source = SecretManagerSource(_backend(b"\xff\xfe\xfd"), RESOURCE, StringEncoding())

    with pytest.raises(DecodeFailed) as excinfo:
        await source.get_secret()

    assert isinstance(excinfo.value.cause, EncodingError)
    assert isinstance(excinfo.value.cause.__cause__, UnicodeDecodeError)
    assert not isinstance(excinfo.value, AccessFailed)


@pytest.mark.asyncio
async def test_unknown_text_encoding_raises_decode_failed():
    source = SecretManagerSource(_backend(b"hunter2"), RESOURCE, StringEncoding("no-such-codec"))

    with pytest.raises(DecodeFailed) as excinfo:
        await source.get_secret()

    assert isinstance(excinfo.value.cause, EncodingError)
    assert isinstance(excinfo.value.cause.__cause__, LookupError)


@pytest.mark.asyncio
async def test_model_mismatch_raises_decode_failed():
    source = SecretManagerSource(_backend(b'{"user": "app"}'), RESOURCE, ModelEncoding(Credentials))

    with pytest.raises(DecodeFailed):
        await source.get_secret()


@pytest.mark.asyncio
async def test_backend_failure_raises_access_failed():
    source = SecretManagerSource(InMemorySecretManager(), RESOURCE, BytesEncoding())

    with pytest.raises(AccessFailed) as excinfo:
        await source.get_secret()

    assert isinstance(excinfo.value.cause, NotFound)
    assert excinfo.value.__cause__ is excinfo.value.cause


@pytest.mark.asyncio
async def test_every_call_refetches():
    backend = _backend(b"first")
    source = SecretManagerSource(backend, RESOURCE, StringEncoding())

    assert await source.get_secret() == "first"
    backend.add_secret(RESOURCE, b"second")
    assert await source.get_secret() == "second"
    assert backend.calls == 2


def test_repr_does_not_include_secret_material():
    source = SecretManagerSource(_backend(b"top-secret"), RESOURCE, StringEncoding())
    assert "top-secret" not in repr(source)
    assert RESOURCE in repr(source)
