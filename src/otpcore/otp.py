from typing import Optional

from . import base32
from .mac import hmac_sha1

# counters travel as 8-byte unsigned integers
MAX_COUNTER = 0xFFFFFFFFFFFFFFFF


class OTP(object):
    """
    Base class for OTP handlers.

    An instance holds the secret of exactly one account. Create one per
    account (or per verification call); never share one across accounts.
    """

    def __init__(
        self,
        s: str,
        digits: int = 6,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
    ) -> None:
        if not 6 <= digits <= 8:
            raise ValueError("Digits may only be 6, 7, or 8")
        self.digits = digits
        self.secret = s
        self.name = name or "Secret"
        self.issuer = issuer

    def generate_otp(self, input: int) -> str:
        """
        :param input: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        """
        # Implements RFC 4226
        if input < 0:
            raise ValueError("input must be positive integer")
        if input > MAX_COUNTER:
            raise ValueError("input must fit in 64 bits")
        hmac_hash = hmac_sha1(self.byte_secret(), self.int_to_bytestring(input))

        # Dynamic truncation: the low nibble of the last byte picks 4 bytes,
        # read big-endian with the sign bit cleared
        offset = hmac_hash[-1] & 0xF
        code = (
            (hmac_hash[offset] & 0x7F) << 24
            | (hmac_hash[offset + 1] & 0xFF) << 16
            | (hmac_hash[offset + 2] & 0xFF) << 8
            | (hmac_hash[offset + 3] & 0xFF)
        )
        return str(code % 10**self.digits).zfill(self.digits)

    def well_formed(self, otp: object) -> bool:
        """
        True when ``otp`` could be a code from this generator at all: a string
        of exactly ``digits`` ASCII digits.
        """
        return isinstance(otp, str) and len(otp) == self.digits and otp.isascii() and otp.isdigit()

    def byte_secret(self) -> bytes:
        key = base32.decode(self.secret)
        if not key:
            raise ValueError("secret decodes to an empty key")
        return key

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        return i.to_bytes(padding, "big")

    def __repr__(self) -> str:
        return "{}(name={!r}, issuer={!r}, digits={})".format(type(self).__name__, self.name, self.issuer, self.digits)
