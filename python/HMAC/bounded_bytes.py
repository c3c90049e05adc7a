#!/usr/bin/env python3
"""
Bounded byte sequence used for HMAC keys and messages.

A bounded sequence has a declared capacity (the allocated size) and an
actual length (the bytes that take part in hashing). Only the first
`length` bytes are meaningful; whatever sits in the rest of the capacity
must never influence a digest.

A length that does not fit the capacity is rejected here, at
construction, so nothing downstream has to check it again.
"""

import hmac
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]


class CapacityError(ValueError):
    """Actual length exceeds the declared capacity."""


def _as_bytes(data, name: str) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"{name} must be bytes, bytearray or memoryview, "
                    f"got {type(data).__name__}")


class BoundedBytes:
    """
    Immutable byte buffer with a capacity and a used length.

    Build from meaningful data (tail is zero-filled up to capacity):
        key = BoundedBytes(b'secret', capacity=128)

    Or adopt a buffer whose tail holds stale bytes:
        msg = BoundedBytes.from_buffer(raw_buffer, used)
    """

    __slots__ = ('_buffer', '_length')

    def __init__(self, data: BytesLike, capacity: Optional[int] = None):
        data = _as_bytes(data, "data")

        if capacity is None:
            capacity = len(data)
        elif capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")

        if len(data) > capacity:
            raise CapacityError(
                f"Data is {len(data)} bytes, capacity is {capacity} bytes"
            )

        self._buffer = data + b'\x00' * (capacity - len(data))
        self._length = len(data)

    @classmethod
    def from_buffer(cls, buffer: BytesLike, length: int) -> "BoundedBytes":
        """
        Wrap a full-capacity buffer of which only `length` bytes are used.

        Args:
            buffer: Storage of capacity len(buffer); the tail is kept as is
            length: Number of meaningful bytes at the start of the buffer

        Returns:
            BoundedBytes with capacity len(buffer)
        """
        buffer = _as_bytes(buffer, "buffer")

        if length < 0:
            raise ValueError(f"Length must be non-negative, got {length}")
        if length > len(buffer):
            raise CapacityError(
                f"Length is {length} bytes, capacity is {len(buffer)} bytes"
            )

        instance = cls.__new__(cls)
        instance._buffer = buffer
        instance._length = length
        return instance

    @property
    def buffer(self) -> bytes:
        """Full storage, including unused capacity."""
        return self._buffer

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def used(self) -> bytes:
        """The meaningful bytes only."""
        return self._buffer[:self._length]

    def __len__(self) -> int:
        return self._length

    def __eq__(self, other):
        if not isinstance(other, BoundedBytes):
            return NotImplemented
        return hmac.compare_digest(self.used(), other.used())

    def __hash__(self):
        return hash(self.used())

    def __repr__(self):
        return f"BoundedBytes(length={self._length}, capacity={self.capacity})"
