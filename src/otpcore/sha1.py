import struct
from typing import List, Tuple

# Implements RFC 3174 (US Secure Hash Algorithm 1)

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 64


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _compress(state: Tuple[int, ...], block: bytes) -> Tuple[int, ...]:
    # 16 big-endian words from the block, expanded to the 80 word schedule
    w: List[int] = list(struct.unpack(">16I", block))
    for j in range(16, 80):
        w.append(_rotl(w[j - 3] ^ w[j - 8] ^ w[j - 14] ^ w[j - 16], 1))

    a, b, c, d, e = state
    for j in range(80):
        if j < 20:
            # ~b is negative in Python, but & d keeps it within 32 bits
            f = (b & c) | (~b & d)
            k = 0x5A827999
        elif j < 40:
            f = b ^ c ^ d
            k = 0x6ED9EBA1
        elif j < 60:
            f = (b & c) | (b & d) | (c & d)
            k = 0x8F1BBCDC
        else:
            f = b ^ c ^ d
            k = 0xCA62C1D6
        temp = (_rotl(a, 5) + f + e + k + w[j]) & _MASK32
        e, d, c, b, a = d, c, _rotl(b, 30), a, temp

    return tuple((x + y) & _MASK32 for x, y in zip(state, (a, b, c, d, e)))


def _padding(message_length: int) -> bytes:
    # 0x80, zeros up to 56 mod 64, then the message length in bits
    zeros = (55 - message_length) % _BLOCK_SIZE
    return b"\x80" + b"\x00" * zeros + struct.pack(">Q", (message_length * 8) & _MASK64)


class Sha1(object):
    """
    Incremental SHA-1 hasher with the same surface as the hashlib objects.

    >>> h = Sha1(b"ab")
    >>> h.update(b"c")
    >>> h.hexdigest()
    'a9993e364706816aba3e25717850c26c9cd0d89d'
    """

    name = "sha1"
    digest_size = 20
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """
        Feeds more bytes into the hash. Complete 64-byte blocks are compressed
        straight away; the remainder is buffered for the next call.

        :param data: bytes-like input
        """
        data = bytes(data)
        self._length += len(data)
        buffer = self._buffer + data
        full = len(buffer) - len(buffer) % _BLOCK_SIZE
        state = self._state
        for i in range(0, full, _BLOCK_SIZE):
            state = _compress(state, buffer[i : i + _BLOCK_SIZE])
        self._state = state
        self._buffer = buffer[full:]

    def digest(self) -> bytes:
        """
        Returns the 20-byte digest of everything fed so far. The hasher is
        left untouched, so more data can still be added afterwards.
        """
        tail = self._buffer + _padding(self._length)
        state = self._state
        for i in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, tail[i : i + _BLOCK_SIZE])
        return struct.pack(">5I", *state)

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> "Sha1":
        other = Sha1()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other


def sha1(data: bytes) -> bytes:
    """
    One-shot SHA-1 of ``data``.

    :param data: message of any length, including empty
    :returns: 20-byte digest
    """
    return Sha1(data).digest()
