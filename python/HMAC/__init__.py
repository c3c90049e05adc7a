"""
HMAC-SHA256 Implementation (RFC 2104 / FIPS 198-1).

This package computes HMAC-SHA256 over keys and messages held in bounded
byte buffers, where only the used length of a buffer is ever hashed.

Main classes:
    HMAC_SHA256: HMAC computation class
    BoundedBytes: byte buffer with a capacity and a used length

Example usage:
    from HMAC import HMAC_SHA256, BoundedBytes, hmac_sha256

    tag = hmac_sha256(b'Jefe', b'what do ya want for nothing?')

    key = BoundedBytes(b'secret', capacity=128)
    hmac = HMAC_SHA256(key)
    result = hmac.compute(b'hello')
"""

from .bounded_bytes import BoundedBytes, CapacityError
from .hmac_sha256 import HMAC_SHA256, hmac_sha256, hmac_sha256_var
from .key_normalizer import normalize_key

__all__ = [
    'BoundedBytes',
    'CapacityError',
    'HMAC_SHA256',
    'hmac_sha256',
    'hmac_sha256_var',
    'normalize_key',
]
__version__ = '1.0.0'
