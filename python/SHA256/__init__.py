"""
SHA-256 hash primitive for the HMAC-SHA256 package.

Main classes:
    SHA256_Primitive: fixed-length and variable-length SHA-256 hashing

Example usage:
    from SHA256 import SHA256_Primitive

    digest = SHA256_Primitive.hash_fixed(b'abc')

    # Only the first 3 bytes are hashed, the rest is unused capacity
    same = SHA256_Primitive.hash_variable(b'abc\\xff\\xff', 3)
"""

from .sha256 import SHA256_Primitive

__all__ = ['SHA256_Primitive']
__version__ = '1.0.0'
