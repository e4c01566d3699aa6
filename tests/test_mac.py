"""Tests for HMAC-SHA1 (RFC 2202 vectors)."""

from __future__ import annotations

import hashlib
import hmac

import pytest

from otpcore.mac import hmac_sha1


@pytest.mark.parametrize(
    "key, data, expected",
    [
        (b"\x0b" * 20, b"Hi There", "b617318655057264e28bc0b6fb378c8ef146be00"),
        (b"Jefe", b"what do ya want for nothing?", "effcdf6ae5eb2fa2d27416d5f184df9c259a7c79"),
        (b"\xaa" * 20, b"\xdd" * 50, "125d7342b9ac11cd91a39af48aa17b4f63f175d3"),
        (bytes(range(1, 26)), b"\xcd" * 50, "4c9007f4026250c6bc8414f9bf50c86c2d7235da"),
        (
            b"\xaa" * 80,
            b"Test Using Larger Than Block-Size Key - Hash Key First",
            "aa4ae5e15272d00e95705637ce8a3b55ed402112",
        ),
        (
            b"\xaa" * 80,
            b"Test Using Larger Than Block-Size Key and Larger Than One Block-Size Data",
            "e8e99d0f45237d786d6bbaa7965c7808bbff1a91",
        ),
    ],
)
def test_rfc2202_vectors(key, data, expected):
    assert hmac_sha1(key, data).hex() == expected


@pytest.mark.parametrize("key_length", [0, 1, 63, 64, 65, 200])
def test_matches_stdlib_hmac(key_length):
    key = bytes(i % 256 for i in range(key_length))
    message = b"\x00\x00\x00\x00\x03\x64\x7a\xd5"
    assert hmac_sha1(key, message) == hmac.new(key, message, hashlib.sha1).digest()


def test_empty_message():
    assert hmac_sha1(b"key", b"") == hmac.new(b"key", b"", hashlib.sha1).digest()
