#!/usr/bin/env python3
"""
HMAC-SHA256 Implementation
Follows RFC 2104 / FIPS 198-1

HMAC: TAG = SHA256((K0 ^ opad) || SHA256((K0 ^ ipad) || message))
- K0 is the key normalized to one 64-byte block (see key_normalizer)
- ipad is 0x36 repeated 64 times
- opad is 0x5C repeated 64 times
- Only the used length of key and message is hashed, never the
  unused capacity of their buffers
"""

import hmac
import logging
from typing import Tuple, Union

from SHA256.sha256 import SHA256_Primitive

from .bounded_bytes import BoundedBytes, BytesLike
from .key_normalizer import normalize_key

logger = logging.getLogger(__name__)

IPAD_BYTE = 0x36
OPAD_BYTE = 0x5C
BLOCK_SIZE = SHA256_Primitive.BLOCK_SIZE
DIGEST_SIZE = SHA256_Primitive.DIGEST_SIZE

_IPAD = bytes([IPAD_BYTE] * BLOCK_SIZE)
_OPAD = bytes([OPAD_BYTE] * BLOCK_SIZE)


def _as_bounded(value: Union[BytesLike, BoundedBytes], name: str) -> BoundedBytes:
    if isinstance(value, BoundedBytes):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BoundedBytes(value)
    raise TypeError(f"{name} must be bytes or BoundedBytes, got {type(value).__name__}")


def derive_pads(normalized_key: bytes) -> Tuple[bytes, bytes]:
    """
    Compute (K0 ^ ipad) and (K0 ^ opad).

    Every byte goes through the same XOR, whatever its value.

    Args:
        normalized_key: 64 bytes normalized key

    Returns:
        (inner_pad, outer_pad), 64 bytes each
    """
    if len(normalized_key) != BLOCK_SIZE:
        raise ValueError(f"Normalized key must be {BLOCK_SIZE} bytes, "
                         f"got {len(normalized_key)} bytes")

    inner_pad = bytes(a ^ b for a, b in zip(normalized_key, _IPAD))
    outer_pad = bytes(a ^ b for a, b in zip(normalized_key, _OPAD))
    return inner_pad, outer_pad


def compute_tag(normalized_key: bytes, message: bytes, length: int) -> bytes:
    """
    Run the two HMAC hash passes.

    Algorithm:
    1. Derive inner_pad, outer_pad from the normalized key
    2. inner = SHA256(inner_pad || message[:length])
    3. tag = SHA256(outer_pad || inner)

    Args:
        normalized_key: 64 bytes normalized key
        message: Message buffer, len(message) is its capacity
        length: Number of meaningful message bytes

    Returns:
        32 bytes (256 bits) HMAC tag
    """
    inner_pad, outer_pad = derive_pads(normalized_key)

    inner_input = inner_pad + bytes(memoryview(message)[:length])
    inner_digest = SHA256_Primitive.hash_variable(inner_input, BLOCK_SIZE + length)

    outer_input = outer_pad + inner_digest
    return SHA256_Primitive.hash_fixed(outer_input)


class HMAC_SHA256:
    """
    HMAC-SHA256 keyed with a single secret.

    Behavior:
    1. Key is normalized to 64 bytes once, at construction
    2. Normalized key is XORed with ipad and opad
    3. Inner hash over (K0 ^ ipad) || message
    4. Outer hash over (K0 ^ opad) || inner digest
    """

    IPAD_BYTE = IPAD_BYTE
    OPAD_BYTE = OPAD_BYTE
    BLOCK_SIZE = BLOCK_SIZE
    DIGEST_SIZE = DIGEST_SIZE

    def __init__(self, key: Union[BytesLike, BoundedBytes]):
        """
        Initialize HMAC with a key.

        Args:
            key: bytes of any length, or BoundedBytes (only its used
                 length is part of the key)
        """
        key = _as_bounded(key, "Key")
        self.key_length = key.length
        self._normalized_key = normalize_key(key.buffer, key.length)

    def _compute_ipad_block(self) -> bytes:
        """
        Compute (K0 ^ ipad) block.

        Returns:
            64 bytes (512 bits)
        """
        return derive_pads(self._normalized_key)[0]

    def _compute_opad_block(self) -> bytes:
        """
        Compute (K0 ^ opad) block.

        Returns:
            64 bytes (512 bits)
        """
        return derive_pads(self._normalized_key)[1]

    def compute(self, message: Union[BytesLike, BoundedBytes]) -> bytes:
        """
        Compute HMAC-SHA256.

        Args:
            message: Message as bytes or BoundedBytes

        Returns:
            32 bytes (256 bits) HMAC value
        """
        message = _as_bounded(message, "Message")
        logger.debug("Computing HMAC over %d message bytes (capacity %d)",
                     message.length, message.capacity)
        return compute_tag(self._normalized_key, message.buffer, message.length)

    def compute_hex(self, message: Union[BytesLike, BoundedBytes]) -> str:
        """
        Compute HMAC and return as hex string.

        Returns:
            Hex string (64 characters for 256 bits)
        """
        return self.compute(message).hex()

    def verify(self, message: Union[BytesLike, BoundedBytes], tag: bytes) -> bool:
        """Check a tag in constant time."""
        return hmac.compare_digest(self.compute(message), tag)


def hmac_sha256(key: Union[BytesLike, BoundedBytes],
                message: Union[BytesLike, BoundedBytes]) -> bytes:
    """
    Compute HMAC-SHA256 of message under key.

    Args:
        key: Secret key, bytes or BoundedBytes
        message: Message, bytes or BoundedBytes

    Returns:
        32 bytes tag
    """
    return HMAC_SHA256(key).compute(message)


def hmac_sha256_var(key: BytesLike, key_length: int,
                    message: BytesLike, message_length: int) -> bytes:
    """
    Compute HMAC-SHA256 over dynamically sized buffers with explicit lengths.

    Only key[:key_length] and message[:message_length] are hashed. A
    length larger than its buffer raises CapacityError before hashing.
    """
    return hmac_sha256(BoundedBytes.from_buffer(key, key_length),
                       BoundedBytes.from_buffer(message, message_length))


def demo_hmac():
    """Show the HMAC computation with example data."""
    print("="*60)
    print("HMAC-SHA256 Test")
    print("="*60)

    key = b"63E9B5F9DA4584483662FC2E5A48763E9B5F9DA4584483662FC2E5A487FDRYYH"
    message = b"hello"

    hmac_obj = HMAC_SHA256(key)

    print(f"\nKey ({len(key)} bytes):")
    print(f"  {key.hex()}")

    print(f"\nMessage ({len(message)} bytes):")
    print(f"  {message!r}")

    hmac_value = hmac_obj.compute(message)

    print(f"\nHMAC-SHA256 Result (256 bits):")
    print(f"  {hmac_value.hex()}")
    print(f"  {list(hmac_value)}")

    print(f"\nIntermediate (K0 ^ ipad) block (512 bits):")
    print(f"  {hmac_obj._compute_ipad_block().hex()}")
    print(f"\nIntermediate (K0 ^ opad) block (512 bits):")
    print(f"  {hmac_obj._compute_opad_block().hex()}")

    print("\n" + "="*60)


if __name__ == "__main__":
    demo_hmac()
