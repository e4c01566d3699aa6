from .sha1 import Sha1, sha1

# Implements RFC 2104 (HMAC) on top of the local SHA-1

_IPAD = 0x36
_OPAD = 0x5C


def hmac_sha1(key: bytes, message: bytes) -> bytes:
    """
    Keyed SHA-1 of ``message``.

    Keys longer than the 64-byte SHA-1 block are hashed down first; shorter
    keys are zero-extended to a full block before being mixed with the pads.

    :param key: shared secret, any length
    :param message: data to authenticate
    :returns: 20-byte MAC
    """
    block_size = Sha1.block_size
    if len(key) > block_size:
        key = sha1(key)
    key = bytes(key).ljust(block_size, b"\0")

    i_key_pad = bytes(k ^ _IPAD for k in key)
    o_key_pad = bytes(k ^ _OPAD for k in key)

    inner = sha1(i_key_pad + bytes(message))
    return sha1(o_key_pad + inner)
