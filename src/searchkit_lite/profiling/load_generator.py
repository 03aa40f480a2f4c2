"""Generate reproducible search workloads for benchmarking.

Three corpus kinds:
  - random:   letters drawn uniformly from a 26-symbol alphabet. Most
              alignments fail on the first comparison, which is where
              the Boyer-Moore family shines.
  - dna:      the 4-symbol alphabet ACGT. Small alphabets weaken the
              bad-character rule, so shifts get shorter.
  - periodic: "aaaa...a". Adversarial input: patterns like "baa...a"
              make Horspool compare almost the whole pattern at every
              alignment, while Boyer-Moore and KMP stay linear.

Patterns are a mix of hits (sliced out of the corpus, so they are
guaranteed to occur) and misses (random strings, or the adversarial
"b" + "a" * (m - 1) for the periodic kind). A random miss can still
occur in the corpus by chance; the harness counts actual matches.
"""
from __future__ import annotations

import random
import string
from dataclasses import dataclass

KINDS = ("random", "dna", "periodic")

_ALPHABETS = {
    "random": string.ascii_lowercase,
    "dna": "ACGT",
    "periodic": "a",
}


@dataclass(slots=True)
class SearchWorkload:
    """A corpus plus the patterns to look for in it."""
    kind: str
    corpus: str
    patterns: list[str]


class CorpusGenerator:
    """Generate corpora and patterns from a seeded RNG."""

    __slots__ = ("_rng", "_kind", "_corpus_size", "_pattern_size", "_hit_rate")

    def __init__(
        self,
        corpus_size: int = 100_000,
        pattern_size: int = 16,
        kind: str = "random",
        hit_rate: float = 0.5,
        seed: int = 42,
    ) -> None:
        if kind not in KINDS:
            raise ValueError(f"kind must be one of {KINDS}, got {kind!r}")
        if corpus_size <= 0:
            raise ValueError(f"corpus_size must be positive, got {corpus_size}")
        if not (0 < pattern_size <= corpus_size):
            raise ValueError(
                f"pattern_size must be in 1..{corpus_size}, got {pattern_size}"
            )
        if not (0.0 <= hit_rate <= 1.0):
            raise ValueError(f"hit_rate must be in [0, 1], got {hit_rate}")
        self._rng = random.Random(seed)
        self._kind = kind
        self._corpus_size = corpus_size
        self._pattern_size = pattern_size
        self._hit_rate = hit_rate

    @property
    def kind(self) -> str:
        return self._kind

    def corpus(self) -> str:
        alphabet = _ALPHABETS[self._kind]
        if len(alphabet) == 1:
            return alphabet * self._corpus_size
        return "".join(self._rng.choices(alphabet, k=self._corpus_size))

    def hit(self, corpus: str) -> str:
        """A pattern sliced out of `corpus`."""
        m = self._pattern_size
        offset = self._rng.randint(0, len(corpus) - m)
        return corpus[offset:offset + m]

    def miss(self) -> str:
        """A pattern that is unlikely (periodic: certain) not to occur."""
        m = self._pattern_size
        if self._kind == "periodic":
            return "b" + "a" * (m - 1)
        alphabet = _ALPHABETS[self._kind]
        return "".join(self._rng.choices(alphabet, k=m))

    def generate(self, searches: int = 100) -> SearchWorkload:
        """Build one corpus and `searches` patterns for it."""
        if searches <= 0:
            raise ValueError(f"searches must be positive, got {searches}")
        corpus = self.corpus()
        patterns = []
        for _ in range(searches):
            if self._rng.random() < self._hit_rate:
                patterns.append(self.hit(corpus))
            else:
                patterns.append(self.miss())
        return SearchWorkload(kind=self._kind, corpus=corpus, patterns=patterns)
