"""Compact JWS serialization on top of any :class:`JwsSigner`."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional, Union

from cryptography.hazmat.primitives.asymmetric import ec
from jwt.utils import base64url_encode, der_to_raw_signature

from .signer import JwsSigner

# ECDSA signers return DER; JWS wants the fixed-width r || s form.
_ECDSA_CURVES = {
    "ES256": ec.SECP256R1,
    "ES384": ec.SECP384R1,
}


def _json_bytes(value: Any) -> bytes:
    return json.dumps(value, separators=(",", ":"), sort_keys=True).encode("utf-8")


async def encode_jws(
    signer: JwsSigner,
    payload: Union[Dict[str, Any], bytes],
    headers: Optional[Dict[str, Any]] = None,
) -> str:
    """Sign ``payload`` and return a compact JWS.

    Args:
        signer: Key used for the signature; its ``jws_algorithm()`` becomes
            the ``alg`` header.
        payload: Claims dict (serialized as JSON) or raw payload bytes.
        headers: Extra protected header fields. ``alg`` is always taken
            from the signer.
    """
    alg = signer.jws_algorithm()
    header: Dict[str, Any] = {"typ": "JWT"} if isinstance(payload, dict) else {}
    header.update(headers or {})
    header["alg"] = alg

    body = _json_bytes(payload) if isinstance(payload, dict) else bytes(payload)
    signing_input = base64url_encode(_json_bytes(header)) + b"." + base64url_encode(body)

    signature = await signer.sign(signing_input)
    curve = _ECDSA_CURVES.get(alg)
    if curve is not None:
        signature = der_to_raw_signature(signature, curve())

    return (signing_input + b"." + base64url_encode(signature)).decode("ascii")


__all__ = ["encode_jws"]
