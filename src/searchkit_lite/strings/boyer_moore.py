"""Boyer-Moore substring search.

Boyer and Moore (1977) align the pattern with the corpus and compare
right to left. On a mismatch two independent rules propose a shift:

    bad character  -- move the pattern so the corpus symbol that
                      mismatched lines up with its rightmost occurrence
                      in the pattern (or past it, if it never occurs).
    good suffix    -- move the pattern so the suffix that already
                      matched lines up with an earlier copy of itself,
                      or with the longest pattern prefix that is also
                      a suffix of the matched part.

The good-suffix table is built from two border-table passes, one over
the pattern and one over the reversed pattern. suffix[j] is the shift
to apply when pattern[j:] matched and pattern[j-1] did not.

Combining the two shifts is where implementations usually go wrong.
We take the bad-character shift only when the mismatched symbol's
last occurrence is left of the mismatch (so the shift moves forward)
and the shift is strictly larger than the good-suffix shift.
Otherwise we take the good-suffix shift, which is always >= 1.

References:
    Boyer & Moore, "A fast string searching algorithm", CACM 1977.
    Gusfield, "Algorithms on Strings, Trees and Sequences", ch. 2.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from searchkit_lite.strings.border import border_table
from searchkit_lite.strings.matcher import NOT_FOUND, Matcher
from searchkit_lite.strings.skip_table import SkipTable, make_skip_table

log = logging.getLogger(__name__)


def build_suffix_table(pattern: Sequence) -> list[int]:
    """Good-suffix shifts for a non-empty pattern, indexed 0..m."""
    count = len(pattern)
    prefix = border_table(pattern)
    prefix_reversed = border_table(list(reversed(pattern)))

    # Fallback for every position: slide the longest border of the
    # whole pattern into place.
    suffix = [count - prefix[count - 1]] * (count + 1)
    for i in range(count):
        j = count - prefix_reversed[i]
        k = i - prefix_reversed[i] + 1
        if suffix[j] > k:
            suffix[j] = k
    return suffix


class BoyerMoore(Matcher):
    """Boyer-Moore matcher with bad-character and good-suffix tables.

    Usage:
        bm = BoyerMoore("abcdabcy")
        bm.search("abcxabcdabcdabcy")   # 8
        bm.search("nothing here")       # -1

    `table` selects the skip table representation: "auto" (array for
    byte patterns, dict otherwise), "array" or "map".
    """

    __slots__ = ("_skip", "_suffix")

    name = "bm"

    def __init__(self, pattern: Sequence, table: str = "auto") -> None:
        super().__init__(pattern)
        self._skip: SkipTable | None = None
        self._suffix: list[int] = []
        if self._m == 0:
            log.debug("Boyer-Moore: empty pattern, no tables built")
            return

        skip = make_skip_table(pattern, -1, table)
        for i, symbol in enumerate(pattern):
            skip.insert(symbol, i)
        self._skip = skip
        self._suffix = build_suffix_table(pattern)
        log.debug(
            "Boyer-Moore tables built: m=%d skip=%s(%d entries) suffix=%s",
            self._m, type(skip).__name__, len(skip), self._suffix,
        )

    @property
    def skip_table(self) -> SkipTable | None:
        return self._skip

    @property
    def suffix_table(self) -> list[int]:
        return list(self._suffix)

    def _check_corpus(self, corpus: Sequence) -> None:
        super()._check_corpus(corpus)
        if self._skip is not None and not self._skip.accepts(corpus):
            raise TypeError(
                f"byte pattern cannot search {type(corpus).__name__} corpus"
            )

    def _scan(self, corpus: Sequence, start: int, end: int) -> int:
        pattern = self._pattern
        m = self._m
        lookup = self._skip.lookup  # type: ignore[union-attr]
        suffix = self._suffix

        pos = start
        last = end - m
        while pos <= last:
            j = m
            while pattern[j - 1] == corpus[pos + j - 1]:
                j -= 1
                if j == 0:
                    return pos
            k = lookup(corpus[pos + j - 1])
            shift = j - k - 1
            if k < j and shift > suffix[j]:
                pos += shift
            else:
                pos += suffix[j]
        return NOT_FOUND
