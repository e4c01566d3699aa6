import logging
import secrets
import warnings
from typing import Any, Dict
from urllib.parse import parse_qsl, unquote, urlparse

from . import base32
from .base32 import InvalidCharacter as InvalidCharacter
from .config import DEFAULT_CONFIG as DEFAULT_CONFIG
from .config import EngineConfig as EngineConfig
from .hotp import HOTP as HOTP
from .mac import hmac_sha1 as hmac_sha1
from .otp import OTP as OTP
from .sha1 import Sha1 as Sha1
from .totp import TOTP as TOTP
from .totp import generate as generate
from .totp import verify as verify
from .utils import build_uri as build_uri

logging.getLogger(__name__).addHandler(logging.NullHandler())


def random_base32(length_bytes: int = 20) -> str:
    """
    Generates a new shared secret from the system CSPRNG.

    The otpauth scheme does not use base32 padding, so it is stripped; the
    default 20 bytes encode to exactly 32 characters anyway.

    Secrets shorter than 16 bytes (128 bits, the RFC 4226 minimum) are still
    produced but trigger a warning.

    :param length_bytes: raw secret size in bytes
    :returns: uppercase Base32 secret
    """
    if length_bytes < 1:
        raise ValueError("Secrets need at least one byte")
    if length_bytes < 16:
        warnings.warn("Secrets should be at least 128 bits", stacklevel=2)
    return base32.encode(secrets.token_bytes(length_bytes)).rstrip("=")


def parse_uri(uri: str) -> OTP:
    """
    Parses the provisioning URI for the OTP; works for either TOTP or HOTP.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param uri: the hotp/totp URI to parse
    :returns: OTP object
    """
    # Secret (to be filled in later)
    secret = None

    # Data we'll parse to the correct constructor
    otp_data: Dict[str, Any] = {}

    parsed_uri = urlparse(uri)

    if parsed_uri.scheme != "otpauth":
        raise ValueError("Not an otpauth URI")

    # Parse issuer/accountname info
    accountinfo_parts = unquote(parsed_uri.path[1:]).split(":", 1)
    if len(accountinfo_parts) == 1:
        otp_data["name"] = accountinfo_parts[0]
    else:
        otp_data["issuer"] = accountinfo_parts[0]
        otp_data["name"] = accountinfo_parts[1]

    # Parse values
    for key, value in parse_qsl(parsed_uri.query):
        if key == "secret":
            secret = value
        elif key == "issuer":
            if "issuer" in otp_data and otp_data["issuer"] is not None and otp_data["issuer"] != value:
                raise ValueError("If issuer is specified in both label and parameters, it should be equal.")
            otp_data["issuer"] = value
        elif key == "algorithm":
            if value.upper() != "SHA1":
                raise ValueError("Invalid value for algorithm, only SHA1 is supported")
        elif key == "digits":
            digits = int(value)
            if digits not in [6, 7, 8]:
                raise ValueError("Digits may only be 6, 7, or 8")
            otp_data["digits"] = digits
        elif key == "period":
            otp_data["interval"] = int(value)
        elif key == "counter":
            otp_data["initial_count"] = int(value)

    # Every OTP needs a secret
    if not secret:
        raise ValueError("No secret found in URI")

    if parsed_uri.netloc == "totp":
        otp_data.pop("initial_count", None)
        return TOTP(secret, **otp_data)
    elif parsed_uri.netloc == "hotp":
        otp_data.pop("interval", None)
        return HOTP(secret, **otp_data)
    raise ValueError("Not a supported OTP type")
