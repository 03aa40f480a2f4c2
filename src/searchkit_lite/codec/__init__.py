"""Hex encoding and decoding."""

from searchkit_lite.codec.hex import (
    HexDecodeError,
    NonHexInput,
    NotEnoughInput,
    decode,
    encode,
    hexlify,
    unhexlify,
)

__all__ = [
    "HexDecodeError",
    "NonHexInput",
    "NotEnoughInput",
    "decode",
    "encode",
    "hexlify",
    "unhexlify",
]
