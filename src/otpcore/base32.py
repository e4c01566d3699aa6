from typing import Dict

# RFC 4648 section 6 alphabet
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
# ASCII only: lowercase letters map to the same values as their capitals
_VALUES: Dict[str, int] = {char: value for value, char in enumerate(ALPHABET)}
_VALUES.update({char.lower(): value for char, value in list(_VALUES.items()) if char.isalpha()})


class InvalidCharacter(ValueError):
    """
    Raised when Base32 text holds a character outside ``A-Z2-7``.
    """

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__("Invalid base32 character: {!r}".format(character))


def decode(text: str) -> bytes:
    """
    Decodes Base32 text to bytes.

    Whitespace and ``=`` padding are dropped and case is ignored, so
    ``"jbsw y3dp"`` and ``"JBSWY3DP"`` decode the same. Bits left over after
    the last complete byte are discarded.

    :param text: Base32 text
    :returns: decoded bytes
    :raises InvalidCharacter: on any character outside the alphabet
    """
    normalized = "".join(text.split()).replace("=", "")

    result = bytearray()
    buffer = 0
    bits = 0
    for char in normalized:
        value = _VALUES.get(char)
        if value is None:
            raise InvalidCharacter(char)
        buffer = (buffer << 5) | value
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1
    return bytes(result)


def encode(data: bytes) -> str:
    """
    Encodes bytes as uppercase Base32, padded with ``=`` to a multiple of 8.
    """
    chars = []
    buffer = 0
    bits = 0
    for byte in bytes(data):
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            chars.append(ALPHABET[(buffer >> bits) & 0x1F])
        buffer &= (1 << bits) - 1
    if bits:
        # final partial group, right-padded with zero bits
        chars.append(ALPHABET[(buffer << (5 - bits)) & 0x1F])
    chars.extend("=" * (-len(chars) % 8))
    return "".join(chars)
