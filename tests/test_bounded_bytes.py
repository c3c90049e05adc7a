import pytest

from HMAC import BoundedBytes, CapacityError


def test_capacity_defaults_to_data_length():
    value = BoundedBytes(b"hello")
    assert value.length == 5
    assert value.capacity == 5
    assert value.used() == b"hello"
    assert len(value) == 5


def test_unused_capacity_is_zero_filled():
    value = BoundedBytes(b"hi", capacity=6)
    assert value.buffer == b"hi\x00\x00\x00\x00"
    assert value.used() == b"hi"


def test_data_longer_than_capacity_is_rejected():
    with pytest.raises(CapacityError):
        BoundedBytes(b"toolong", capacity=3)


def test_capacity_error_is_value_error():
    assert issubclass(CapacityError, ValueError)


def test_negative_capacity_is_rejected():
    with pytest.raises(ValueError):
        BoundedBytes(b"", capacity=-1)


def test_from_buffer_keeps_stale_tail():
    value = BoundedBytes.from_buffer(b"abcXYZ", 3)
    assert value.capacity == 6
    assert value.buffer == b"abcXYZ"
    assert value.used() == b"abc"


def test_from_buffer_length_over_capacity_is_rejected():
    with pytest.raises(CapacityError):
        BoundedBytes.from_buffer(b"abc", 4)


def test_from_buffer_negative_length_is_rejected():
    with pytest.raises(ValueError):
        BoundedBytes.from_buffer(b"abc", -1)


def test_equality_ignores_unused_capacity():
    assert BoundedBytes.from_buffer(b"abc\x01", 3) == BoundedBytes(b"abc", capacity=10)
    assert BoundedBytes(b"abc") != BoundedBytes(b"abd")


def test_accepts_bytearray_and_memoryview():
    source = bytearray(b"key")
    value = BoundedBytes(source)
    source[0] = 0
    assert value.used() == b"key"
    assert BoundedBytes(memoryview(b"key")).used() == b"key"


def test_rejects_str():
    with pytest.raises(TypeError):
        BoundedBytes("text")


def test_repr_does_not_leak_content():
    assert "secret" not in repr(BoundedBytes(b"secret", capacity=8))


def test_equality_uses_constant_time_compare(monkeypatch):
    import HMAC.bounded_bytes as bounded_bytes
    calls = []
    real = bounded_bytes.hmac.compare_digest

    def recording(a, b):
        calls.append((a, b))
        return real(a, b)

    monkeypatch.setattr(bounded_bytes.hmac, "compare_digest", recording)
    assert BoundedBytes(b"key", capacity=8) == BoundedBytes.from_buffer(b"key\xff", 3)
    assert calls == [(b"key", b"key")]
