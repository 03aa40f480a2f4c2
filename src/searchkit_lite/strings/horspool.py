"""Boyer-Moore-Horspool substring search.

Horspool (1980) keeps only the bad-character idea and simplifies it:
after any mismatch, look at the corpus symbol currently under the
pattern's last position and shift so that symbol lines up with its
rightmost occurrence in pattern[:-1]. Symbols that do not occur there
shift the pattern by its full length.

No good-suffix table, so construction is cheaper and the inner loop
is tighter. The price is the worst case: on repetitive inputs such as
pattern "baaa" in corpus "aaaa...a" every alignment compares almost
the whole pattern and then shifts by one, giving O(n * m).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from searchkit_lite.strings.matcher import NOT_FOUND, Matcher
from searchkit_lite.strings.skip_table import SkipTable, make_skip_table

log = logging.getLogger(__name__)


class BoyerMooreHorspool(Matcher):
    """Boyer-Moore-Horspool matcher with a single shift table."""

    __slots__ = ("_skip",)

    name = "bmh"

    def __init__(self, pattern: Sequence, table: str = "auto") -> None:
        super().__init__(pattern)
        m = self._m
        skip = make_skip_table(pattern, m, table)
        # The last symbol is left out: a shift of 0 would never advance.
        for i in range(m - 1):
            skip.insert(pattern[i], m - 1 - i)
        self._skip: SkipTable = skip
        log.debug(
            "Horspool table built: m=%d skip=%s(%d entries)",
            m, type(skip).__name__, len(skip),
        )

    @property
    def skip_table(self) -> SkipTable:
        return self._skip

    def _check_corpus(self, corpus: Sequence) -> None:
        super()._check_corpus(corpus)
        if self._m and not self._skip.accepts(corpus):
            raise TypeError(
                f"byte pattern cannot search {type(corpus).__name__} corpus"
            )

    def _scan(self, corpus: Sequence, start: int, end: int) -> int:
        pattern = self._pattern
        m = self._m
        lookup = self._skip.lookup

        pos = start
        last = end - m
        while pos <= last:
            j = m - 1
            while pattern[j] == corpus[pos + j]:
                if j == 0:
                    return pos
                j -= 1
            pos += lookup(corpus[pos + m - 1])
        return NOT_FOUND
