#!/usr/bin/env python3
"""
Verification script to compare this HMAC-SHA256 with independent results.

Two kinds of checks:
1. Against the standard library's own HMAC (an independent implementation)
2. Against literal expected tags (golden vectors, RFC 4231)

Usage (from the python/ directory):
    python -m HMAC.verify_hmac
"""

import hashlib
import hmac

from HMAC.hmac_sha256 import DIGEST_SIZE, hmac_sha256


GOLDEN_KEY = b"63E9B5F9DA4584483662FC2E5A48763E9B5F9DA4584483662FC2E5A487FDRYYH"

GOLDEN_VECTORS = [
    # Exact-block key
    (GOLDEN_KEY, b"hello",
     bytes([243, 14, 222, 21, 160, 253, 85, 19, 34, 12, 79, 201, 14, 138, 30, 175,
            153, 185, 22, 108, 170, 58, 75, 138, 193, 119, 151, 53, 21, 125, 31, 42])),
    # Short key
    (b"63E9B5F9DA4584483662FC2E5A48763E9B5F9DA458448366", b"hello",
     bytes([119, 49, 131, 18, 148, 236, 222, 245, 254, 97, 107, 5, 181, 94, 168, 19,
            83, 246, 98, 214, 181, 170, 57, 140, 48, 248, 0, 175, 137, 180, 140, 3])),
    # Exact-block key, message longer than several blocks
    (GOLDEN_KEY, bytes([52] * 248),
     bytes([107, 120, 168, 169, 0, 12, 170, 67, 217, 252, 4, 64, 183, 157, 165, 20,
            238, 184, 21, 175, 122, 110, 79, 86, 153, 5, 176, 138, 202, 205, 144, 227])),
]

RFC_4231_VECTORS = [
    # Test Case 1
    (b"\x0b" * 20, b"Hi There",
     bytes.fromhex("b0344c61d8db38535ca8afceaf0bf12b881dc200c9833da726e9376c2e32cff7")),
    # Test Case 2
    (b"Jefe", b"what do ya want for nothing?",
     bytes.fromhex("5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843")),
    # Test Case 3
    (b"\xaa" * 20, b"\xdd" * 50,
     bytes.fromhex("773ea91e36800e46854db8ebd09181a72959098b3ef8c122d9635514ced565fe")),
    # Test Case 6, key larger than one block
    (b"\xaa" * 131, b"Test Using Larger Than Block-Size Key - Hash Key First",
     bytes.fromhex("60e431591ee0b67f0d8a26aacbf5b77f8e0bc6213728c5140546040f0ee37f54")),
]


def verify_vector(key: bytes, message: bytes, expected: bytes) -> bool:
    """
    Verify against a literal expected tag.

    Args:
        key: Secret key bytes
        message: Message bytes
        expected: Expected 32-byte tag

    Returns:
        bool: True if match, False otherwise
    """
    print("="*70)
    print(f"HMAC Verification: key {len(key)} bytes, message {len(message)} bytes")
    print("="*70)

    computed = hmac_sha256(key, message)

    print(f"\n  Expected HMAC:")
    print(f"    {expected.hex()}")
    print(f"\n  Computed HMAC:")
    print(f"    {computed.hex()}")

    match = (computed == expected)

    print(f"\n{'='*70}")
    if match:
        print("[PASS] MATCH: Computed tag equals the expected tag!")
    else:
        print("[FAIL] MISMATCH: Outputs differ!")
        print("\nDifferences:")

        if len(expected) != DIGEST_SIZE:
            print(f"  Length: Expected {len(expected)} bytes, Got {DIGEST_SIZE} bytes")

        for i, (exp_byte, comp_byte) in enumerate(zip(expected, computed)):
            if exp_byte != comp_byte:
                print(f"  Byte {i:2d}: Expected 0x{exp_byte:02x}, Got 0x{comp_byte:02x}")

    print("="*70)
    return match


def verify_against_reference(key: bytes, message: bytes) -> bool:
    """
    Verify against the standard library HMAC for the same key and message.

    Returns:
        bool: True if match, False otherwise
    """
    expected = hmac.new(key, message, hashlib.sha256).digest()
    return verify_vector(key, message, expected)


def example_verification() -> bool:
    """Run every vector and reference check, return True only if all pass."""
    print("\n*** HMAC-SHA256 Verification ***\n")

    results = []
    for key, message, expected in GOLDEN_VECTORS + RFC_4231_VECTORS:
        results.append(verify_vector(key, message, expected))

    # Long key, 99 bytes
    long_key = (GOLDEN_KEY * 2)[:99]
    results.append(verify_against_reference(long_key, b"hello"))

    passed = sum(results)
    print(f"\n{passed}/{len(results)} checks passed")
    return all(results)


if __name__ == "__main__":
    raise SystemExit(0 if example_verification() else 1)
