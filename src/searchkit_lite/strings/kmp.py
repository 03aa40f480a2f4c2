"""Knuth-Morris-Pratt substring search.

KMP (1977) scans the corpus strictly left to right and never moves
backwards in it. It tracks how many pattern symbols currently match
(idx). When the next corpus symbol does not extend the match, the
failure table says how long a prefix of the pattern is still known to
match, so idx drops to that length and the same corpus symbol is
tried again. Each corpus symbol is consumed once and each fallback
shortens idx, so the total work is O(n + m) whatever the alphabet
or pattern structure.

failure[0] is -1 by convention; failure[i] for i in 1..m is the
longest proper border of pattern[:i], read straight off the shared
border table.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from searchkit_lite.strings.border import border_table
from searchkit_lite.strings.matcher import NOT_FOUND, Matcher

log = logging.getLogger(__name__)


class KnuthMorrisPratt(Matcher):
    """Knuth-Morris-Pratt matcher.

    Needs only equality between symbols, not hashing, so it also works
    for unhashable symbols such as lists.
    """

    __slots__ = ("_failure",)

    name = "kmp"

    def __init__(self, pattern: Sequence) -> None:
        super().__init__(pattern)
        self._failure = [-1] + border_table(pattern)
        log.debug("KMP failure table built: m=%d failure=%s", self._m, self._failure)

    @property
    def failure_table(self) -> list[int]:
        return list(self._failure)

    def _scan(self, corpus: Sequence, start: int, end: int) -> int:
        pattern = self._pattern
        m = self._m
        failure = self._failure

        idx = 0
        for pos in range(start, end):
            symbol = corpus[pos]
            while idx > 0 and pattern[idx] != symbol:
                idx = failure[idx]
            if pattern[idx] == symbol:
                idx += 1
                if idx == m:
                    return pos - m + 1
        return NOT_FOUND
