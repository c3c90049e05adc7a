import hashlib
import logging

import pytest

from HMAC import normalize_key


def test_exact_block_key_is_verbatim():
    key = bytes(range(64))
    assert normalize_key(key, 64) == key


def test_long_key_is_hashed_and_zero_padded():
    key = b"k" * 99
    normalized = normalize_key(key, 99)
    assert len(normalized) == 64
    assert normalized[:32] == hashlib.sha256(key).digest()
    assert normalized[32:] == b"\x00" * 32


def test_short_key_is_zero_padded():
    key = b"Jefe"
    normalized = normalize_key(key, 4)
    assert normalized[:4] == key
    assert normalized[4:] == b"\x00" * 60


def test_empty_key():
    assert normalize_key(b"", 0) == b"\x00" * 64


@pytest.mark.parametrize("length", [0, 10, 63, 64, 65, 200])
def test_unused_capacity_never_affects_result(length):
    data = bytes((i * 7) & 0xFF for i in range(length))
    zeros = data + b"\x00" * 50
    junk = data + b"\xee" * 50
    assert normalize_key(zeros, length) == normalize_key(junk, length)
    assert len(normalize_key(junk, length)) == 64


def test_long_key_with_capacity_hashes_only_used_bytes():
    key = b"a" * 70
    normalized = normalize_key(key + b"b" * 30, 70)
    assert normalized[:32] == hashlib.sha256(key).digest()


def test_exact_block_inside_larger_capacity():
    key = b"x" * 64
    assert normalize_key(key + b"y" * 10, 64) == key


@pytest.mark.parametrize("length", [-1, 4])
def test_length_outside_buffer_is_rejected(length):
    with pytest.raises(ValueError):
        normalize_key(b"abc", length)


def test_debug_log_names_case_without_key_bytes(caplog):
    with caplog.at_level(logging.DEBUG, logger="HMAC.key_normalizer"):
        normalize_key(b"supersecret" * 10, 110)
    assert "110 bytes" in caplog.text
    assert "supersecret" not in caplog.text
