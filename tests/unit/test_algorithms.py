"""Algorithm catalog tests."""

import pytest
from pydantic import ValidationError

from chewie_crypto.algorithms import (
    SUPPORTED_ALGORITHMS,
    AlgorithmDescriptor,
    RemoteAlgorithmId,
    classify,
    lookup,
)

R = RemoteAlgorithmId

EXPECTED = {
    R.RSA_SIGN_PSS_2048_SHA256: ("RSA-PSS-SHA256", "PS256"),
    R.RSA_SIGN_PSS_3072_SHA256: ("RSA-PSS-SHA256", "PS256"),
    R.RSA_SIGN_PSS_4096_SHA256: ("RSA-PSS-SHA256", "PS256"),
    R.RSA_SIGN_PSS_4096_SHA512: ("RSA-PSS-SHA512", "PS512"),
    R.RSA_SIGN_PKCS1_2048_SHA256: ("RSA-PKCS1-SHA256", "RS256"),
    R.RSA_SIGN_PKCS1_3072_SHA256: ("RSA-PKCS1-SHA256", "RS256"),
    R.RSA_SIGN_PKCS1_4096_SHA256: ("RSA-PKCS1-SHA256", "RS256"),
    R.RSA_SIGN_PKCS1_4096_SHA512: ("RSA-PKCS1-SHA512", "RS512"),
    R.EC_SIGN_P256_SHA256: ("ECDSA-P256", "ES256"),
    R.EC_SIGN_P384_SHA384: ("ECDSA-P384", "ES384"),
    R.EC_SIGN_ED25519: ("EdDSA-Ed25519", "Ed25519"),
}


@pytest.mark.parametrize("remote_id, expected", list(EXPECTED.items()))
def test_supported_algorithms_match_table(remote_id, expected):
    descriptor = lookup(remote_id)
    assert descriptor is not None
    assert (descriptor.name, descriptor.protocol_code) == expected


def test_every_member_is_classified():
    """Walking all members must never hit the exhaustiveness assertion."""
    for member in RemoteAlgorithmId:
        result = classify(member)
        if member in EXPECTED:
            assert result is not None
        else:
            assert result is None, f"{member.value} unexpectedly supported"


def test_supported_mapping_is_exactly_the_table():
    assert {k: (v.name, v.protocol_code) for k, v in SUPPORTED_ALGORITHMS.items()} == EXPECTED


@pytest.mark.parametrize(
    "remote_id",
    [
        R.KEM_XWING,
        R.ML_KEM_768,
        R.PQ_SIGN_ML_DSA_65,
        R.PQ_SIGN_ML_DSA_65_EXTERNAL_MU,
        R.AES_256_KWP,
        R.GOOGLE_SYMMETRIC_ENCRYPTION,
        R.HMAC_SHA256,
        R.RSA_DECRYPT_OAEP_2048_SHA256,
        R.RSA_SIGN_RAW_PKCS1_2048,
        R.EC_SIGN_SECP256K1_SHA256,
        R.CRYPTO_KEY_VERSION_ALGORITHM_UNSPECIFIED,
    ],
)
def test_unsupported_algorithms_resolve_to_none(remote_id):
    assert lookup(remote_id) is None


def test_lookup_accepts_raw_identifier_strings():
    assert lookup("EC_SIGN_P256_SHA256") == AlgorithmDescriptor(
        name="ECDSA-P256", protocol_code="ES256"
    )
    assert lookup("KEM_XWING") is None


def test_unknown_identifier_returns_none_and_warns(caplog):
    with caplog.at_level("WARNING", logger="chewie_crypto.algorithms"):
        assert lookup("PQ_SIGN_SOMETHING_FROM_THE_FUTURE") is None
    assert "PQ_SIGN_SOMETHING_FROM_THE_FUTURE" in caplog.text


def test_key_size_variants_share_one_descriptor():
    assert lookup(R.RSA_SIGN_PSS_2048_SHA256) is lookup(R.RSA_SIGN_PSS_4096_SHA256)


def test_descriptor_is_immutable():
    descriptor = lookup(R.EC_SIGN_ED25519)
    with pytest.raises(ValidationError):
        descriptor.name = "other"
    assert hash(descriptor) == hash(
        AlgorithmDescriptor(name="EdDSA-Ed25519", protocol_code="Ed25519")
    )


def test_members_cover_installed_kms_algorithms():
    kms_v1 = pytest.importorskip("google.cloud.kms_v1")
    reported = {m.name for m in kms_v1.CryptoKeyVersion.CryptoKeyVersionAlgorithm}
    assert reported - set(RemoteAlgorithmId.__members__) == set()


def test_member_string_is_the_reported_identifier():
    assert str(R.EC_SIGN_ED25519) == "EC_SIGN_ED25519"
    assert lookup(str(R.EC_SIGN_ED25519)) == lookup(R.EC_SIGN_ED25519)
