"""Command line interface for signing and secret retrieval."""

from __future__ import annotations

import asyncio
import base64
import json
import logging
from enum import Enum
from pathlib import Path
from typing import NoReturn, Optional

import typer

from chewie_crypto.algorithms import SUPPORTED_ALGORITHMS
from chewie_crypto.backends import get_key_management, get_secret_manager
from chewie_crypto.errors import ChewieError
from chewie_crypto.kms import AsymmetricSigningKey
from chewie_crypto.secretmanager import SecretManagerSource
from chewie_crypto.secrets import BytesEncoding, JsonEncoding, StringEncoding

logger = logging.getLogger(__name__)

app = typer.Typer(help="CLI for remote signing keys and secrets")

secret_app = typer.Typer(help="Commands for reading secrets")
app.add_typer(secret_app, name="secret")


class SecretFormat(str, Enum):
    string = "string"
    json = "json"
    bytes = "bytes"


_ENCODINGS = {
    SecretFormat.string: StringEncoding(),
    SecretFormat.json: JsonEncoding(),
    SecretFormat.bytes: BytesEncoding(),
}


def _fail(error: Exception) -> NoReturn:
    typer.secho(str(error), fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v")) -> None:
    """chewie CLI entry point."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@app.command("algorithms")
def algorithms() -> None:
    """
    List the remote algorithm identifiers that can be used for signing.

    Example:
        chewie algorithms
        # Output: EC_SIGN_P256_SHA256    ECDSA-P256    ES256
    """
    for remote_id, descriptor in SUPPORTED_ALGORITHMS.items():
        typer.echo(f"{remote_id.value}\t{descriptor.name}\t{descriptor.protocol_code}")


@app.command("sign")
def sign(
    resource_name: str,
    data: Optional[str] = typer.Option(None, help="UTF-8 text to sign"),
    file: Optional[Path] = typer.Option(None, help="File whose bytes are signed"),
) -> None:
    """
    Sign data with a key version and print the base64 signature.

    Example:
        chewie sign projects/p/locations/l/keyRings/r/cryptoKeys/k/cryptoKeyVersions/1 --data hello
    """
    if (data is None) == (file is None):
        typer.secho("Provide exactly one of --data or --file", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    try:
        payload = data.encode("utf-8") if data is not None else file.read_bytes()
    except OSError as e:
        _fail(e)
    try:
        client = get_key_management()
    except (ImportError, ValueError) as e:
        _fail(e)

    async def _sign() -> tuple[str, bytes]:
        key = await AsymmetricSigningKey.create(client, resource_name)
        return key.algorithm(), await key.sign(payload)

    try:
        algorithm, signature = asyncio.run(_sign())
    except ChewieError as e:
        _fail(e)

    logger.info(f"Signed {len(payload)} bytes with {resource_name}")
    typer.echo(f"algorithm: {algorithm}")
    typer.echo(base64.b64encode(signature).decode("ascii"))


@secret_app.command("get")
def secret_get(
    resource_name: str,
    encoding: SecretFormat = typer.Option(SecretFormat.string, help="How to decode the payload"),
) -> None:
    """
    Fetch a secret version and print its decoded value.

    Bytes are printed base64-encoded and JSON is pretty-printed.

    Example:
        chewie secret get projects/p/secrets/api-token/versions/latest --encoding json
    """
    try:
        client = get_secret_manager()
    except (ImportError, ValueError) as e:
        _fail(e)
    source = SecretManagerSource(client, resource_name, _ENCODINGS[encoding])
    try:
        value = asyncio.run(source.get_secret())
    except ChewieError as e:
        _fail(e)

    if encoding is SecretFormat.bytes:
        typer.echo(base64.b64encode(value).decode("ascii"))
    elif encoding is SecretFormat.json:
        typer.echo(json.dumps(value, indent=2))
    else:
        typer.echo(value)


if __name__ == "__main__":
    app()
