"""Skip tables for the Boyer-Moore family of matchers.

A skip table maps a pattern symbol to an integer offset. Symbols that
never appear in the pattern map to a fixed default. Boyer-Moore stores
the rightmost occurrence of each symbol (default -1); Horspool stores
the distance from that occurrence to the end of the pattern (default m).

Two representations sit behind the same interface:

    ArraySkipTable  -- a dense array.array with one slot per byte
                       value. 256 ints up front, no hashing on lookup.
    MapSkipTable    -- a dict holding only the symbols that were
                       inserted. Works for any hashable symbol type.

The choice is a time/space trade-off only. Both produce identical
lookups for every symbol in their domain, so a matcher can be built
with either and return the same results.
"""

from __future__ import annotations

import array
from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator, Sequence

# Number of distinct values a byte-sized symbol can take.
BYTE_DOMAIN = 256

REPRESENTATIONS = ("auto", "array", "map")


class SkipTable(ABC):
    """Interface shared by the array and map representations."""

    __slots__ = ("_default",)

    def __init__(self, default: int) -> None:
        self._default = default

    @property
    def default(self) -> int:
        return self._default

    @abstractmethod
    def insert(self, symbol: Hashable, value: int) -> None:
        """Store `value` for `symbol`, replacing any previous value."""
        ...

    @abstractmethod
    def lookup(self, symbol: Hashable) -> int:
        """Return the stored value for `symbol`, or the default."""
        ...

    @abstractmethod
    def items(self) -> Iterator[tuple[Hashable, int]]:
        """Yield (symbol, value) for every entry that differs from the default."""
        ...

    def accepts(self, corpus: Sequence) -> bool:
        """True if every symbol of `corpus` is a valid lookup key."""
        return True

    def __getitem__(self, symbol: Hashable) -> int:
        return self.lookup(symbol)

    def __len__(self) -> int:
        return sum(1 for _ in self.items())


class ArraySkipTable(SkipTable):
    """Dense table for byte-valued symbols (ints in range 0..255)."""

    __slots__ = ("_slots",)

    def __init__(self, default: int) -> None:
        super().__init__(default)
        self._slots = array.array("i", [default]) * BYTE_DOMAIN

    def insert(self, symbol: int, value: int) -> None:
        self._slots[symbol] = value

    def lookup(self, symbol: int) -> int:
        return self._slots[symbol]

    def accepts(self, corpus: Sequence) -> bool:
        return is_byte_sequence(corpus)

    def items(self) -> Iterator[tuple[int, int]]:
        default = self._default
        for symbol, value in enumerate(self._slots):
            if value != default:
                yield symbol, value

    def memory_estimate_bytes(self) -> int:
        return self._slots.itemsize * len(self._slots)


class MapSkipTable(SkipTable):
    """Sparse table for arbitrary hashable symbols."""

    __slots__ = ("_entries",)

    def __init__(self, default: int) -> None:
        super().__init__(default)
        self._entries: dict[Hashable, int] = {}

    def insert(self, symbol: Hashable, value: int) -> None:
        self._entries[symbol] = value

    def lookup(self, symbol: Hashable) -> int:
        return self._entries.get(symbol, self._default)

    def items(self) -> Iterator[tuple[Hashable, int]]:
        default = self._default
        for symbol, value in self._entries.items():
            if value != default:
                yield symbol, value

    def memory_estimate_bytes(self) -> int:
        # roughly 64 bytes per dict entry, same rule of thumb as elsewhere
        return len(self._entries) * 64


def is_byte_sequence(seq: Sequence) -> bool:
    """True if every symbol of `seq` is guaranteed to be an int in 0..255."""
    if isinstance(seq, (bytes, bytearray)):
        return True
    if isinstance(seq, memoryview):
        return seq.format == "B"
    if isinstance(seq, array.array):
        return seq.typecode == "B"
    return False


def make_skip_table(
    pattern: Sequence,
    default: int,
    representation: str = "auto",
) -> SkipTable:
    """Create an empty skip table suited to the symbols of `pattern`.

    representation="auto" picks the array form for byte sequences and
    the map form for everything else. "array" and "map" force a form;
    forcing "array" on a non-byte pattern is rejected.
    """
    if representation not in REPRESENTATIONS:
        raise ValueError(
            f"representation must be one of {REPRESENTATIONS}, got {representation!r}"
        )
    if representation == "auto":
        representation = "array" if is_byte_sequence(pattern) else "map"
    if representation == "array":
        if not is_byte_sequence(pattern):
            raise ValueError(
                "array skip table requires a byte pattern "
                f"(bytes, bytearray), got {type(pattern).__name__}"
            )
        return ArraySkipTable(default)
    return MapSkipTable(default)
