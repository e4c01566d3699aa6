from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """
    Fixed TOTP parameters shared by generation, verification and the
    provisioning URI.

    :param interval: time step in seconds
    :param digits: length of the generated code
    :param algorithm: HMAC hash name, as written in the otpauth URI
    :param valid_window: number of steps either side of now that verify accepts
    """

    interval: int = 30
    digits: int = 6
    algorithm: str = "SHA1"
    valid_window: int = 1

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise ValueError("interval must be a positive number of seconds")
        if not 6 <= self.digits <= 8:
            raise ValueError("Digits may only be 6, 7, or 8")
        if self.algorithm.upper() != "SHA1":
            raise ValueError("Only the SHA1 algorithm is supported")
        if self.valid_window < 0:
            raise ValueError("valid_window must not be negative")


DEFAULT_CONFIG = EngineConfig()
