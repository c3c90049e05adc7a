#!/usr/bin/env python3
"""
HMAC key normalization for SHA-256.

The key is brought to exactly one SHA-256 block (64 bytes):
- Key of 64 bytes: used verbatim
- Longer key: replaced by its SHA-256 digest, then zero-padded to 64 bytes
- Shorter key: zero-padded to 64 bytes
"""

import logging

from SHA256.sha256 import SHA256_Primitive

logger = logging.getLogger(__name__)

BLOCK_SIZE = SHA256_Primitive.BLOCK_SIZE


def normalize_key(key: bytes, length: int) -> bytes:
    """
    Normalize the first `length` bytes of `key` to one 64-byte block.

    Bytes of `key` past `length` are unused capacity and never affect
    the result.

    Args:
        key: Key buffer, len(key) is its capacity
        length: Number of meaningful key bytes

    Returns:
        64 bytes normalized key
    """
    if length < 0 or length > len(key):
        raise ValueError(f"Key length must be within 0..{len(key)}, got {length}")

    if length == BLOCK_SIZE:
        logger.debug("Key is exactly one block, used verbatim")
        return bytes(key[:BLOCK_SIZE])

    if length > BLOCK_SIZE:
        logger.debug("Key is %d bytes, longer than one block, hashing it", length)
        digest = SHA256_Primitive.hash_variable(key, length)
        return digest + b'\x00' * (BLOCK_SIZE - len(digest))

    logger.debug("Key is %d bytes, zero-padding to one block", length)
    return bytes(key[:length]) + b'\x00' * (BLOCK_SIZE - length)
