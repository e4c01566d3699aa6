"""Tests for the Base32 codec."""

from __future__ import annotations

import base64

import pytest

from otpcore import base32
from otpcore.base32 import InvalidCharacter

RFC4648_VECTORS = [
    (b"", ""),
    (b"f", "MY======"),
    (b"fo", "MZXQ===="),
    (b"foo", "MZXW6==="),
    (b"foob", "MZXW6YQ="),
    (b"fooba", "MZXW6YTB"),
    (b"foobar", "MZXW6YTBOI======"),
]


@pytest.mark.parametrize("raw, text", RFC4648_VECTORS)
def test_encode_rfc4648(raw, text):
    assert base32.encode(raw) == text


@pytest.mark.parametrize("raw, text", RFC4648_VECTORS)
def test_decode_rfc4648(raw, text):
    assert base32.decode(text) == raw


def test_decode_ignores_whitespace_and_case():
    assert base32.decode("jbsw y3dp") == base32.decode("JBSWY3DP") == b"Hello"
    assert base32.decode(" JBSW\tY3DP\n") == b"Hello"


def test_decode_without_padding():
    assert base32.decode("JBSWY3DPEHPK3PXP") == b"Hello!\xde\xad\xbe\xef"
    assert base32.decode("MZXW6") == b"foo"


def test_decode_drops_trailing_bits():
    # 10 bits: one full byte plus two leftover bits
    assert base32.decode("MY") == b"f"


@pytest.mark.parametrize(
    "text, bad",
    [
        ("JBSW1Y3DP", "1"),
        ("ABC!", "!"),
        ("MZXW8", "8"),
        # letters whose Unicode case mapping lands inside A-Z
        ("MZXW\u00df", "\u00df"),
        ("MZX\u0131", "\u0131"),
        ("MZXW6\ufb00", "\ufb00"),
    ],
)
def test_decode_rejects_invalid_characters(text, bad):
    with pytest.raises(InvalidCharacter) as excinfo:
        base32.decode(text)
    assert excinfo.value.character == bad


def test_invalid_character_is_a_value_error():
    with pytest.raises(ValueError):
        base32.decode("0000")


def test_round_trip_and_stdlib_agreement():
    data = bytes(range(256))
    for length in range(0, 41):
        chunk = data[length : length * 2]
        encoded = base32.encode(chunk)
        assert encoded == base64.b32encode(chunk).decode("ascii")
        assert base32.decode(encoded) == chunk
