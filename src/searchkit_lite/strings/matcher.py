"""Common base for the single-pattern matchers.

Every matcher follows the same life cycle: build its tables from the
pattern once in __init__, then answer any number of search() calls.
The base class owns the parts that do not depend on the algorithm:

    - window normalisation for start/end (same rules as str.find)
    - the empty-pattern and short-corpus shortcuts
    - the symbol type check between pattern and corpus
    - find_all(), which resumes search() one symbol past each hit

Subclasses implement _scan(), which is only ever called with a
non-empty pattern and a window at least as long as the pattern.
Nothing in search() writes to the matcher, so one instance can be
shared between threads.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

NOT_FOUND = -1


def normalize_window(length: int, start: int, end: int | None) -> tuple[int, int]:
    """Clamp start/end the way str.find does. Start may exceed end."""
    if end is None or end > length:
        end = length
    elif end < 0:
        end = max(end + length, 0)
    if start < 0:
        start = max(start + length, 0)
    return start, end


class Matcher(ABC):
    """A pattern plus the tables needed to find it in any corpus."""

    __slots__ = ("_pattern", "_m")

    #: short name used by the registry, CLI and reports
    name = ""

    def __init__(self, pattern: Sequence) -> None:
        self._pattern = pattern
        self._m = len(pattern)

    @property
    def pattern(self) -> Sequence:
        return self._pattern

    def __len__(self) -> int:
        return self._m

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._pattern!r})"

    def __call__(self, corpus: Sequence) -> int:
        return self.search(corpus)

    def search(self, corpus: Sequence, start: int = 0, end: int | None = None) -> int:
        """Return the index of the first match in corpus[start:end], or -1.

        The index is relative to the whole corpus, not the window.
        An empty pattern matches at `start`.
        """
        self._check_corpus(corpus)
        start, end = normalize_window(len(corpus), start, end)
        if end - start < self._m:
            return NOT_FOUND
        if self._m == 0:
            return start
        return self._scan(corpus, start, end)

    def find_all(
        self, corpus: Sequence, start: int = 0, end: int | None = None
    ) -> Iterator[int]:
        """Yield every match position in order, overlapping matches included."""
        pos = self.search(corpus, start, end)
        while pos != NOT_FOUND:
            yield pos
            pos = self.search(corpus, pos + 1, end)

    def _check_corpus(self, corpus: Sequence) -> None:
        """Reject a corpus whose symbols cannot compare equal to the pattern's."""
        if isinstance(self._pattern, str) != isinstance(corpus, str):
            raise TypeError(
                f"cannot search {type(corpus).__name__} corpus "
                f"for {type(self._pattern).__name__} pattern"
            )

    @abstractmethod
    def _scan(self, corpus: Sequence, start: int, end: int) -> int:
        """Search corpus[start:end]; caller guarantees 0 < m <= end - start."""
        ...
