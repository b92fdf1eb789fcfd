"""
Credential deriver - one-way digest stored in place of the plaintext password.

NOT a production credential store: the digest is unsalted, single-round
SHA-256, so equal passwords produce equal derivatives and brute force is cheap.
It only keeps the raw password out of the state store of this demo. A real
deployment must hash server-side with a slow salted scheme (bcrypt/argon2).
"""

import asyncio
import hashlib

from .exceptions import CryptoUnavailable

DIGEST_ALGORITHM = "sha256"
DIGEST_HEX_LENGTH = 64


def derive(secret: str) -> str:
    """
    Derive the stored credential for a password.

    Args:
        secret: Plaintext password, digested exactly as given (no trimming)

    Returns:
        Lowercase hex SHA-256 digest of the UTF-8 bytes (64 characters)

    Raises:
        CryptoUnavailable: The interpreter cannot provide SHA-256
    """
    try:
        digest = hashlib.new(DIGEST_ALGORITHM)
    except ValueError as e:
        raise CryptoUnavailable(f"{DIGEST_ALGORITHM} digest unavailable") from e
    digest.update(secret.encode("utf-8"))
    return digest.hexdigest()


async def derive_async(secret: str) -> str:
    """Run derive() in a worker thread; the submit path awaits here."""
    return await asyncio.to_thread(derive, secret)
