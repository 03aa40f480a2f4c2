"""One-shot search helpers and the algorithm registry.

The *_search functions build a throwaway matcher, run one search and
discard it. Use the matcher classes directly when the same pattern is
searched for in more than one corpus, since the tables are the
expensive part.

naive_search is the O(n * m) baseline used by tests and benchmarks:
try every alignment, compare left to right.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from searchkit_lite.strings.boyer_moore import BoyerMoore
from searchkit_lite.strings.horspool import BoyerMooreHorspool
from searchkit_lite.strings.kmp import KnuthMorrisPratt
from searchkit_lite.strings.matcher import NOT_FOUND, Matcher


class NaiveMatcher(Matcher):
    """Brute-force matcher with no tables. Baseline for comparisons."""

    __slots__ = ()

    name = "naive"

    def _scan(self, corpus: Sequence, start: int, end: int) -> int:
        pattern = self._pattern
        m = self._m
        for pos in range(start, end - m + 1):
            for j in range(m):
                if pattern[j] != corpus[pos + j]:
                    break
            else:
                return pos
        return NOT_FOUND


ALGORITHMS: dict[str, Callable[[Sequence], Matcher]] = {
    BoyerMoore.name: BoyerMoore,
    BoyerMooreHorspool.name: BoyerMooreHorspool,
    KnuthMorrisPratt.name: KnuthMorrisPratt,
    NaiveMatcher.name: NaiveMatcher,
}


def make_matcher(algorithm: str, pattern: Sequence) -> Matcher:
    """Build a matcher by registry name ("bm", "bmh", "kmp", "naive")."""
    try:
        factory = ALGORITHMS[algorithm]
    except KeyError:
        raise ValueError(
            f"unknown algorithm {algorithm!r}, expected one of {sorted(ALGORITHMS)}"
        ) from None
    return factory(pattern)


def boyer_moore_search(corpus: Sequence, pattern: Sequence) -> int:
    """Position of the first occurrence of `pattern` in `corpus`, or -1."""
    return BoyerMoore(pattern).search(corpus)


def boyer_moore_horspool_search(corpus: Sequence, pattern: Sequence) -> int:
    """Position of the first occurrence of `pattern` in `corpus`, or -1."""
    return BoyerMooreHorspool(pattern).search(corpus)


def knuth_morris_pratt_search(corpus: Sequence, pattern: Sequence) -> int:
    """Position of the first occurrence of `pattern` in `corpus`, or -1."""
    return KnuthMorrisPratt(pattern).search(corpus)


def naive_search(
    corpus: Sequence, pattern: Sequence, start: int = 0, end: int | None = None
) -> int:
    """Brute-force reference search with str.find window semantics."""
    return NaiveMatcher(pattern).search(corpus, start, end)
