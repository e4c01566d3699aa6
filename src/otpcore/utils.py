import unicodedata
from hmac import compare_digest
from typing import Dict, Optional, Union
from urllib.parse import quote, urlencode

# Characters encodeURIComponent leaves alone on top of quote()'s always-safe set
_COMPONENT_SAFE = "!~*'()"


def _quote(value: str) -> str:
    return quote(value, safe=_COMPONENT_SAFE)


def build_uri(
    secret: str,
    name: str,
    initial_count: Optional[int] = None,
    issuer: Optional[str] = None,
    algorithm: str = "SHA1",
    digits: int = 6,
    period: int = 30,
) -> str:
    """
    Returns the provisioning URI for the OTP; works for either TOTP or HOTP.

    This can then be encoded in a QR Code and used to provision the Google
    Authenticator app.

    See also:
        https://github.com/google/google-authenticator/wiki/Key-Uri-Format

    :param secret: the hotp/totp secret used to generate the URI, already Base32
    :param name: name of the account
    :param initial_count: starting counter value, defaults to None.
        If none, the OTP type will be assumed as TOTP.
    :param issuer: the name of the OTP issuer; this will be the
        organization title of the OTP entry in Authenticator
    :param algorithm: the algorithm used in the OTP generation.
    :param digits: the length of the OTP generated code.
    :param period: the number of seconds the OTP generator is set to
        expire every code. Ignored for HOTP.
    :returns: provisioning uri
    """
    # initial_count may be 0 as a valid param
    is_initial_count_present = initial_count is not None
    otp_type = "hotp" if is_initial_count_present else "totp"

    label = _quote(name)
    url_args: Dict[str, Union[int, str]] = {"secret": secret}
    if issuer is not None:
        label = _quote(issuer) + ":" + label
        url_args["issuer"] = issuer
    if is_initial_count_present:
        url_args["counter"] = initial_count  # type: ignore
    url_args["algorithm"] = algorithm.upper()
    url_args["digits"] = digits
    if not is_initial_count_present:
        url_args["period"] = period

    # The Base32 alphabet is all unreserved, so the secret comes through as is
    query = urlencode(url_args, safe=_COMPONENT_SAFE, quote_via=quote)
    return "otpauth://{0}/{1}?{2}".format(otp_type, label, query)


def strings_equal(s1: str, s2: str) -> bool:
    """
    Timing-attack resistant string comparison.

    Normal comparison using == will short-circuit on the first mismatching
    character. This avoids that by scanning the whole string, though we
    still reveal to a timing attack whether the strings are the same
    length.
    """
    s1 = unicodedata.normalize("NFKC", s1)
    s2 = unicodedata.normalize("NFKC", s2)
    return compare_digest(s1.encode("utf-8"), s2.encode("utf-8"))
