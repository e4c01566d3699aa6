"""Tests for counter-based codes and the shared OTP base (RFC 4226 vectors)."""

from __future__ import annotations

import base64

import pytest

from otpcore import HOTP, OTP

SECRET = base64.b32encode(b"12345678901234567890").decode("ascii")

RFC4226_CODES = [
    "755224",
    "287082",
    "359152",
    "969429",
    "338314",
    "254676",
    "287922",
    "162583",
    "399871",
    "520489",
]


@pytest.mark.parametrize("count, expected", list(enumerate(RFC4226_CODES)))
def test_rfc4226_vectors(count, expected):
    assert HOTP(SECRET).at(count) == expected


def test_initial_count_shifts_counter():
    assert HOTP(SECRET, initial_count=5).at(0) == RFC4226_CODES[5]


def test_verify():
    hotp = HOTP(SECRET)
    assert hotp.verify("755224", 0)
    assert not hotp.verify("755224", 1)
    assert not hotp.verify("000000", 0)


@pytest.mark.parametrize("candidate", ["75522", "7552240", "75522a", "", 755224, None, "７５５２２４"])
def test_verify_malformed_is_false(candidate):
    assert HOTP(SECRET).verify(candidate, 0) is False


def test_int_to_bytestring():
    assert OTP.int_to_bytestring(0) == b"\x00" * 8
    assert OTP.int_to_bytestring(1) == b"\x00" * 7 + b"\x01"
    assert OTP.int_to_bytestring(0x3039) == b"\x00" * 6 + b"\x30\x39"


def test_negative_counter_rejected():
    with pytest.raises(ValueError):
        HOTP(SECRET).generate_otp(-1)


def test_empty_secret_rejected():
    with pytest.raises(ValueError):
        HOTP("====").at(0)


@pytest.mark.parametrize("digits", [5, 9])
def test_digits_out_of_range(digits):
    with pytest.raises(ValueError):
        HOTP(SECRET, digits=digits)


def test_eight_digit_codes_keep_leading_digits():
    assert HOTP(SECRET, digits=8).at(0) == "84755224"


def test_provisioning_uri():
    hotp = HOTP(SECRET, name="alice", issuer="Example")
    assert hotp.provisioning_uri() == (
        "otpauth://hotp/Example:alice?secret=" + SECRET + "&issuer=Example&counter=0&algorithm=SHA1&digits=6"
    )
    assert "counter=3" in hotp.provisioning_uri(initial_count=3)
