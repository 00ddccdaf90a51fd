"""
Salt construction and the PBKDF2-HMAC-SHA256 contract
The primitive itself is hashlib's; nothing here re-implements it.
"""

import asyncio
import hashlib

from password_mint.constants import (
    DERIVED_BYTES,
    HASH_ALGORITHM,
    ITERATIONS,
    SALT_PREFIX,
    SALT_SEPARATOR,
)
from password_mint.errors import PrimitiveUnavailable
from password_mint.logging_config import log_primitive_unavailable


def build_salt(normalized_site: str, version: str) -> str:
    """
    Domain-separated salt for one site and rotation version
    The version is not validated: any string yields a distinct salt.
    """
    return SALT_PREFIX + normalized_site + SALT_SEPARATOR + version


def iterations_for(security_level: str) -> int:
    """Iteration count for a security level name"""
    level = getattr(security_level, "value", security_level)
    try:
        return ITERATIONS[level]
    except KeyError:
        allowed = ", ".join(ITERATIONS)
        raise ValueError(f"security level must be one of: {allowed}")


def ensure_primitive_available() -> None:
    """Raise PrimitiveUnavailable unless hashlib can run PBKDF2 with SHA-256"""
    if not hasattr(hashlib, "pbkdf2_hmac"):
        log_primitive_unavailable("hashlib.pbkdf2_hmac missing")
        raise PrimitiveUnavailable()
    if HASH_ALGORITHM not in hashlib.algorithms_available:
        log_primitive_unavailable(f"{HASH_ALGORITHM} not in hashlib")
        raise PrimitiveUnavailable()


def derive_bytes(
    hardened_phrase: str,
    salt: str,
    iterations: int,
    length: int = DERIVED_BYTES,
) -> bytes:
    """
    Run PBKDF2-HMAC-SHA256 over UTF-8 phrase and salt
    Returns exactly `length` bytes. Never falls back to another algorithm.
    """
    if iterations < 1:
        raise ValueError("iterations must be >= 1")
    if length < 1:
        raise ValueError("length must be >= 1")

    ensure_primitive_available()

    try:
        derived = hashlib.pbkdf2_hmac(
            HASH_ALGORITHM,
            hardened_phrase.encode("utf-8"),
            salt.encode("utf-8"),
            iterations,
            dklen=length,
        )
    except ValueError as e:
        # hashlib reports an unsupported digest as ValueError
        log_primitive_unavailable(type(e).__name__)
        raise PrimitiveUnavailable() from e

    if len(derived) != length:
        raise PrimitiveUnavailable(f"PBKDF2 returned {len(derived)} bytes, expected {length}")
    return derived


async def derive_bytes_async(
    hardened_phrase: str,
    salt: str,
    iterations: int,
    length: int = DERIVED_BYTES,
) -> bytes:
    """derive_bytes in a worker thread; cannot be interrupted once started"""
    return await asyncio.to_thread(derive_bytes, hardened_phrase, salt, iterations, length)
