import calendar
import datetime
import logging
import math
import time
from typing import Iterator, Optional, Union

from . import utils
from .config import DEFAULT_CONFIG, EngineConfig
from .otp import MAX_COUNTER, OTP

logger = logging.getLogger(__name__)

ForTime = Union[int, float, datetime.datetime]


def _timestamp(for_time: ForTime) -> float:
    if isinstance(for_time, datetime.datetime):
        if for_time.tzinfo:
            return calendar.timegm(for_time.utctimetuple())
        return time.mktime(for_time.timetuple())
    return for_time


def _drift_order(window: int) -> Iterator[int]:
    # nearest steps first: 0, -1, +1, -2, +2, ...
    yield 0
    for step in range(1, window + 1):
        yield -step
        yield step


class TOTP(OTP):
    """
    Handler for time-based OTP counters.
    """

    def __init__(
        self,
        s: str,
        digits: int = 6,
        name: Optional[str] = None,
        issuer: Optional[str] = None,
        interval: int = 30,
    ) -> None:
        """
        :param s: secret in base32 format
        :param interval: the time interval in seconds for OTP. This defaults to 30.
        :param digits: number of integers in the OTP. Some apps expect this to be 6 digits, others support more.
        :param name: account name
        :param issuer: issuer
        """
        if interval <= 0:
            raise ValueError("interval must be a positive number of seconds")
        self.interval = interval
        super().__init__(s=s, digits=digits, name=name, issuer=issuer)

    def at(self, for_time: ForTime, counter_offset: int = 0) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        To get the time until the next timecode change (seconds until the current OTP expires), use this instead:

        .. code:: python

            totp = otpcore.TOTP(...)
            time_remaining = totp.remaining()

        :param for_time: the time to generate an OTP for
        :param counter_offset: the amount of ticks to add to the time counter
        :returns: OTP value
        """
        return self.generate_otp(self.timecode(for_time) + counter_offset)

    def now(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.at(time.time())

    def verify(self, otp: str, for_time: Optional[ForTime] = None, valid_window: int = 1) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        Each step within ``valid_window`` of ``for_time`` is tried, nearest
        first, with a constant-time comparison. A malformed ``otp`` is never
        an error, just a failed verification.

        :param otp: the OTP to check against
        :param for_time: Time to check OTP at (defaults to now)
        :param valid_window: extends the validity to this many counter ticks before and after the current one
        :returns: True if verification succeeded, False otherwise
        :raises InvalidCharacter: if the stored secret is not valid Base32
        """
        if valid_window < 0:
            raise ValueError("valid_window must not be negative")
        # A broken secret is a configuration bug; fail loudly even for bad input
        self.byte_secret()

        if not self.well_formed(otp):
            logger.debug("Rejected malformed code for %s", self.name)
            return False

        if for_time is None:
            for_time = time.time()
        counter = self.timecode(for_time)

        for offset in _drift_order(valid_window):
            if not 0 <= counter + offset <= MAX_COUNTER:
                logger.debug("Skipping out of range counter at offset %+d", offset)
                continue
            if utils.strings_equal(otp, self.generate_otp(counter + offset)):
                logger.debug("Accepted code for %s at drift offset %+d", self.name, offset)
                return True

        logger.debug("No code match for %s within %d step(s)", self.name, valid_window)
        return False

    def remaining(self, for_time: Optional[ForTime] = None) -> int:
        """
        Seconds left before the code for ``for_time`` (default now) rolls over,
        rounded up so a code still valid for part of a second reports 1.
        """
        if for_time is None:
            for_time = time.time()
        return math.ceil(self.interval - _timestamp(for_time) % self.interval)

    def provisioning_uri(self, name: Optional[str] = None, issuer_name: Optional[str] = None) -> str:
        """
        Returns the provisioning URI for the OTP.  This can then be
        encoded in a QR Code and used to provision an OTP app like
        Google Authenticator.

        See also:
            https://github.com/google/google-authenticator/wiki/Key-Uri-Format

        """
        return utils.build_uri(
            self.secret,
            name if name else self.name,
            issuer=issuer_name if issuer_name else self.issuer,
            digits=self.digits,
            period=self.interval,
        )

    def timecode(self, for_time: ForTime) -> int:
        """
        Accepts either a timezone naive (`for_time.tzinfo is None`) or
        a timezone aware datetime as argument and returns the
        corresponding counter value (timecode).

        """
        return int(_timestamp(for_time) // self.interval)


def generate(
    secret: str,
    time_step_offset: int = 0,
    now: Optional[ForTime] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> str:
    """
    Code for ``secret`` at ``now`` (default: the wall clock), shifted by
    ``time_step_offset`` steps.

    :raises InvalidCharacter: if ``secret`` is not valid Base32
    :raises ValueError: if the resulting counter is negative or does not fit in 64 bits
    """
    totp = TOTP(secret, digits=config.digits, interval=config.interval)
    return totp.at(time.time() if now is None else now, time_step_offset)


def verify(
    secret: str,
    candidate: str,
    window: Optional[int] = None,
    now: Optional[ForTime] = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> bool:
    """
    Checks ``candidate`` against every code within ``window`` steps of ``now``.
    ``window`` falls back to ``config.valid_window``.
    """
    totp = TOTP(secret, digits=config.digits, interval=config.interval)
    if window is None:
        window = config.valid_window
    return totp.verify(candidate, for_time=now, valid_window=window)
