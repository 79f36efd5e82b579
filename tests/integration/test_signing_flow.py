"""End-to-end flows over the in-memory backends."""

import asyncio

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec

from chewie_crypto import (
    AsymmetricSigningKey,
    DecodeFailed,
    JsonEncoding,
    MissingPayload,
    SecretManagerSource,
    StringEncoding,
    UnsupportedAlgorithm,
    get_key_management,
    get_secret_manager,
)
from chewie_crypto.config import ChewieConfig

KEY = "projects/test/locations/us/keyRings/ring/cryptoKeys/key/cryptoKeyVersions/1"
SECRET = "projects/test/secrets/db/versions/1"


@pytest.mark.asyncio
async def test_signature_from_remote_key_verifies_against_public_key():
    private_key = ec.generate_private_key(ec.SECP256R1())
    kms = get_key_management("inmemory", config=ChewieConfig())
    kms.add_key(
        KEY,
        "EC_SIGN_P256_SHA256",
        lambda data: private_key.sign(data, ec.ECDSA(hashes.SHA256())),
    )

    key = await AsymmetricSigningKey.create(kms, KEY)
    signature = await key.sign(b"important document")

    assert key.algorithm() == "ECDSA-P256"
    private_key.public_key().verify(signature, b"important document", ec.ECDSA(hashes.SHA256()))


@pytest.mark.asyncio
async def test_reported_scenarios():
    kms = get_key_management("inmemory", config=ChewieConfig())
    kms.add_key(KEY, "RSA_SIGN_PKCS1_2048_SHA256", lambda data: b"signed data")
    kms.add_key(KEY + "0", "KEM_XWING", lambda data: b"")

    key = await AsymmetricSigningKey.create(kms, KEY)
    assert key.algorithm() == "RSA-PKCS1-SHA256"
    assert await key.sign(b"data") == b"signed data"

    with pytest.raises(UnsupportedAlgorithm) as excinfo:
        await AsymmetricSigningKey.create(kms, KEY + "0")
    assert excinfo.value.algorithm == "KEM_XWING"

    secrets = get_secret_manager("inmemory", config=ChewieConfig())
    secrets.add_secret(SECRET, b"\x80not utf-8")
    with pytest.raises(DecodeFailed) as decode_error:
        await SecretManagerSource(secrets, SECRET, StringEncoding()).get_secret()
    assert isinstance(decode_error.value.__cause__.__cause__, UnicodeDecodeError)

    secrets.destroy(SECRET)
    with pytest.raises(MissingPayload):
        await SecretManagerSource(secrets, SECRET, StringEncoding()).get_secret()


@pytest.mark.asyncio
async def test_shared_source_serves_concurrent_readers():
    secrets = get_secret_manager("inmemory", config=ChewieConfig())
    secrets.add_secret(SECRET, b'{"user": "svc", "password": "pw"}')
    source = SecretManagerSource(secrets, SECRET, JsonEncoding())

    values = await asyncio.gather(*(source.get_secret() for _ in range(10)))

    assert all(value == {"user": "svc", "password": "pw"} for value in values)
