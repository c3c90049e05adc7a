#!/usr/bin/env python3
"""
Verification script to compare the SHA-256 primitive with published digests.

Usage (from the python/ directory):
    python -m SHA256.verify_sha256

The vectors are the example messages of FIPS 180-2, Appendix B.
"""

from SHA256.sha256 import SHA256_Primitive


FIPS_180_2_VECTORS = [
    (b"abc",
     "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (b"",
     "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
]


def verify_digest(data: bytes, expected_hex: str) -> bool:
    """
    Verify the primitive against a known digest.

    Both Fixed and Variable mode are checked. Variable mode is fed the
    message followed by junk capacity bytes, which must not change the
    digest.

    Args:
        data: Message bytes
        expected_hex: Expected 256-bit digest as hex string

    Returns:
        bool: True if both modes match
    """
    print("="*70)
    print(f"SHA-256 Verification ({len(data)} bytes)")
    print("="*70)

    expected = bytes.fromhex(expected_hex)
    fixed = SHA256_Primitive.hash_fixed(data)
    variable = SHA256_Primitive.hash_variable(data + b'\xa5' * 16, len(data))

    print(f"\nExpected Digest:")
    print(f"  {expected.hex()}")
    print(f"\nFixed mode:")
    print(f"  {fixed.hex()}")
    print(f"\nVariable mode:")
    print(f"  {variable.hex()}")

    match = (fixed == expected and variable == expected)

    print(f"\n{'='*70}")
    if match:
        print("[PASS] MATCH: Both modes produce the published digest!")
    else:
        print("[FAIL] MISMATCH: Outputs differ!")

        print("\nDifferences:")
        if len(expected) != SHA256_Primitive.DIGEST_SIZE:
            print(f"  Length: Expected {len(expected)} bytes, "
                  f"Got {SHA256_Primitive.DIGEST_SIZE} bytes")

        for i, (exp_byte, fix_byte, var_byte) in enumerate(zip(expected, fixed, variable)):
            if fix_byte != exp_byte or var_byte != exp_byte:
                print(f"  Byte {i:2d}: Expected 0x{exp_byte:02x}, "
                      f"Fixed 0x{fix_byte:02x}, Variable 0x{var_byte:02x}")

    print("="*70)
    return match


def example_verification() -> bool:
    """Run every FIPS 180-2 vector, return True only if all pass."""
    print("\n*** SHA-256 Primitive Verification ***\n")

    results = [verify_digest(data, digest) for data, digest in FIPS_180_2_VECTORS]

    passed = sum(results)
    print(f"\n{passed}/{len(results)} vectors passed")
    return all(results)


if __name__ == "__main__":
    raise SystemExit(0 if example_verification() else 1)
