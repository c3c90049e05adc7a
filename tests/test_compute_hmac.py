import hashlib
import hmac
import logging
import sys

import pytest

from HMAC import compute_hmac
from HMAC.verify_hmac import RFC_4231_VECTORS, example_verification, verify_vector


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["compute_hmac.py", *args])
    compute_hmac.main()


def test_text_arguments(monkeypatch, capsys):
    run_cli(monkeypatch, "Jefe", "what do ya want for nothing?")
    out = capsys.readouterr().out
    assert RFC_4231_VECTORS[1][2].hex() in out
    assert "Key: 4 bytes (shorter than block, zero-padded)" in out


def test_hex_arguments(monkeypatch, capsys):
    run_cli(monkeypatch, "0b" * 20, "4869205468657265", "--hex")
    assert RFC_4231_VECTORS[0][2].hex() in capsys.readouterr().out


def test_long_key_case_reported(monkeypatch, capsys):
    run_cli(monkeypatch, "aa" * 131, "00", "--hex")
    assert "longer than block" in capsys.readouterr().out


def test_verbose_flag(monkeypatch, capsys):
    levels = []
    monkeypatch.setattr(compute_hmac, "setup_logging", levels.append)
    run_cli(monkeypatch, "k" * 64, "m", "--verbose")
    assert levels == [logging.DEBUG]
    assert "exact block" in capsys.readouterr().out


@pytest.mark.parametrize("args", [[], ["only-key"], ["k", "m", "extra"], ["k", "m", "--bogus"]])
def test_usage_errors(monkeypatch, capsys, args):
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, *args)
    assert excinfo.value.code == 1
    assert "Usage:" in capsys.readouterr().out


def test_invalid_hex(monkeypatch, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, "zz", "00", "--hex")
    assert excinfo.value.code == 1
    assert "Error: Invalid hex key" in capsys.readouterr().out


def test_verify_vector_reports_differences(capsys):
    assert not verify_vector(b"Jefe", b"what do ya want for nothing?", b"\x00" * 32)
    out = capsys.readouterr().out
    assert "[FAIL]" in out
    assert "Byte  0" in out


def test_example_verification_passes():
    assert example_verification()


def test_arguments_starting_with_dashes_are_data(monkeypatch, capsys):
    run_cli(monkeypatch, "--key", "--message")
    out = capsys.readouterr().out
    assert "Usage:" not in out
    assert "Key: 5 bytes" in out
    assert hmac.new(b"--key", b"--message", hashlib.sha256).hexdigest() in out


def test_verify_vector_short_expected_tag(capsys):
    assert not verify_vector(b"k", b"m", b"\x00" * 4)
    out = capsys.readouterr().out
    assert "Length: Expected 4 bytes, Got 32 bytes" in out
    assert "[FAIL]" in out
