#!/usr/bin/env python3
"""
SHA-256 hash primitive used by the HMAC construction.

Two entry points are needed by HMAC:
1. Fixed mode: hash an exactly-sized buffer (the 96-byte outer input)
2. Variable mode: hash only the first L bytes of a buffer that may carry
   unused capacity behind them (long keys, the inner input)

The compression function itself comes from hashlib.
"""

import hashlib


class SHA256_Primitive:
    """
    SHA-256 in the two shapes the HMAC engine consumes.

    - Block size: 64 bytes (512 bits)
    - Digest size: 32 bytes (256 bits)
    """

    BLOCK_SIZE = 64
    DIGEST_SIZE = 32

    @staticmethod
    def hash_fixed(buffer: bytes) -> bytes:
        """
        Hash an exactly-sized buffer (Fixed mode).

        Args:
            buffer: Byte sequence, every byte participates

        Returns:
            32 bytes (256 bits) SHA-256 digest
        """
        hasher = hashlib.sha256()
        hasher.update(buffer)
        return hasher.digest()

    @staticmethod
    def hash_variable(buffer: bytes, length: int) -> bytes:
        """
        Hash the first `length` bytes of a buffer (Variable mode).

        Bytes at index >= length are unused capacity and never reach
        the hash.

        Args:
            buffer: Byte sequence of any capacity
            length: Number of meaningful bytes, 0 <= length <= len(buffer)

        Returns:
            32 bytes (256 bits) SHA-256 digest
        """
        if length < 0 or length > len(buffer):
            raise ValueError(
                f"Length must be within 0..{len(buffer)}, got {length}"
            )

        hasher = hashlib.sha256()
        hasher.update(memoryview(buffer)[:length])
        return hasher.digest()

    @staticmethod
    def hash_bytes(data: bytes) -> bytes:
        """Hash arbitrary byte sequence (standard SHA-256)."""
        return hashlib.sha256(data).digest()
