"""Fixed-width hexadecimal encoding and decoding.

Each value becomes exactly 2 * width uppercase hex digits, most
significant nibble first. width is the value size in bytes: 1 for
bytes, 2 for 16-bit code units, 4 for 32-bit ints, and so on. Values
are reduced modulo 2**(8 * width) before encoding, so -1 with width=1
encodes as "FF" (two's complement).

Decoding accepts upper and lower case digits and is strict. It raises
one of two errors instead of guessing:

    NonHexInput     -- a character outside 0-9, A-F, a-f
    NotEnoughInput  -- the text ends in the middle of a value

Both derive from HexDecodeError, itself a ValueError, so callers can
catch the family or the specific case.
"""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = "0123456789ABCDEF"


class HexDecodeError(ValueError):
    """Base class for hex decoding failures."""


class NonHexInput(HexDecodeError):
    """Raised when the input contains a character that is not a hex digit."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"non-hex character {char!r} at position {position}")
        self.char = char
        self.position = position


class NotEnoughInput(HexDecodeError):
    """Raised when the input ends partway through a value."""

    def __init__(self, position: int, width: int) -> None:
        super().__init__(
            f"input ends at position {position} inside a {2 * width}-digit value"
        )
        self.position = position
        self.width = width


def _check_width(width: int) -> None:
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")


def _nibble(char: str, position: int) -> int:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    raise NonHexInput(char, position)


def encode_one(value: int, width: int = 1) -> str:
    """Encode a single integer as 2 * width hex digits."""
    digits = []
    for _ in range(2 * width):
        digits.append(_DIGITS[value & 0x0F])
        value >>= 4
    return "".join(reversed(digits))


def encode(values: Iterable[int], width: int = 1) -> str:
    """Encode a sequence of integers (e.g. bytes) as one hex string."""
    _check_width(width)
    return "".join(encode_one(v, width) for v in values)


def decode(text: str, width: int = 1) -> list[int]:
    """Decode a hex string into integers of `width` bytes each."""
    _check_width(width)
    digits_per_value = 2 * width
    values: list[int] = []
    value = 0
    for position, char in enumerate(text):
        value = (value << 4) | _nibble(char, position)
        if (position + 1) % digits_per_value == 0:
            values.append(value)
            value = 0
    if len(text) % digits_per_value:
        raise NotEnoughInput(len(text), width)
    return values


def hexlify(data: bytes | bytearray | str) -> str:
    """Hex-encode bytes. A str is encoded as UTF-8 first."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return encode(data)


def unhexlify(text: str) -> bytes:
    """Decode a hex string into bytes."""
    return bytes(decode(text))
