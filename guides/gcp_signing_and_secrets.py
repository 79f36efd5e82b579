"""Sign a JWT with a Cloud KMS key and read a database password.

Requires ``pip install chewie-crypto[gcp]`` and application default
credentials. Set KMS_KEY_VERSION and DB_PASSWORD_SECRET to full resource names.
"""

import asyncio
import os

from chewie_crypto import AsymmetricSigningKey, SecretManagerSource, StringEncoding, encode_jws
from chewie_crypto.backends import get_key_management, get_secret_manager


async def main():
    key = await AsymmetricSigningKey.create(
        get_key_management("gcp"), os.environ["KMS_KEY_VERSION"]
    )
    print("Key algorithm:", key.algorithm())

    token = await encode_jws(key, {"sub": "guide"}, headers={"kid": key.resource_name})
    print("Token:", token)

    password = SecretManagerSource(
        get_secret_manager("gcp"), os.environ["DB_PASSWORD_SECRET"], StringEncoding()
    )
    value = await password.get_secret()
    print("Password length:", len(value))


if __name__ == "__main__":
    asyncio.run(main())
