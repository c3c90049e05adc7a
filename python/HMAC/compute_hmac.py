#!/usr/bin/env python3
"""
Command-line utility to compute HMAC-SHA256.

Usage (from the python/ directory):
    python -m HMAC.compute_hmac <key> <message> [--hex] [--verbose]

Key and message are UTF-8 text, or hex strings with --hex.

Example:
    python -m HMAC.compute_hmac Jefe "what do ya want for nothing?"
    python -m HMAC.compute_hmac 0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b0b 4869205468657265 --hex
"""

import logging
import sys

from HMAC.hmac_sha256 import BLOCK_SIZE, HMAC_SHA256
from HMAC.logging_config import setup_logging


def _parse_hex(value: str, name: str) -> bytes:
    value_clean = value.replace('0x', '').replace('_', '')
    try:
        return bytes.fromhex(value_clean)
    except ValueError:
        print(f"Error: Invalid hex {name}: {value}")
        sys.exit(1)


def _key_case(key_length: int) -> str:
    if key_length == BLOCK_SIZE:
        return "exact block, used verbatim"
    if key_length > BLOCK_SIZE:
        return "longer than block, hashed then zero-padded"
    return "shorter than block, zero-padded"


def main():
    flags = [arg for arg in sys.argv[1:] if arg in ('--hex', '--verbose')]
    args = [arg for arg in sys.argv[1:] if arg not in ('--hex', '--verbose')]

    if len(args) != 2:
        print("Usage: python -m HMAC.compute_hmac <key> <message> [--hex] [--verbose]")
        print("\nExample:")
        print("  python -m HMAC.compute_hmac Jefe \"what do ya want for nothing?\"")
        sys.exit(1)

    if '--verbose' in flags:
        setup_logging(logging.DEBUG)

    if '--hex' in flags:
        key = _parse_hex(args[0], "key")
        message = _parse_hex(args[1], "message")
    else:
        key = args[0].encode('utf-8')
        message = args[1].encode('utf-8')

    # Compute HMAC
    print("="*70)
    print("HMAC-SHA256 Computation")
    print("="*70)

    print(f"\nKey: {len(key)} bytes ({_key_case(len(key))})")
    print(f"Message: {len(message)} bytes")

    hmac_value = HMAC_SHA256(key).compute(message)

    print(f"\nHMAC-SHA256 (256 bits):")
    print(f"  {hmac_value.hex()}")

    print("\n" + "="*70)


if __name__ == "__main__":
    main()
