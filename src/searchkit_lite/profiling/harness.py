"""Benchmark harness for the substring matchers.

For each algorithm the harness runs the same workload: build one
matcher per pattern, search the shared corpus, and record the time
spent in table construction and in scanning separately. Keeping the
two apart matters here, because the whole point of the Boyer-Moore
family is paying for tables up front to scan faster.

Wall-clock numbers are noisy. The harness also counts corpus probes
(symbol reads) for one search per algorithm, which is deterministic
and shows the asymptotic behaviour directly: on the periodic workload
Horspool's probe count grows with n * m while Boyer-Moore and KMP stay
proportional to n.
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import time
from collections.abc import Sequence
from dataclasses import dataclass

from searchkit_lite.profiling.load_generator import CorpusGenerator, SearchWorkload
from searchkit_lite.strings.matcher import NOT_FOUND
from searchkit_lite.strings.search import ALGORITHMS, make_matcher

log = logging.getLogger(__name__)


@dataclass(slots=True)
class BenchmarkResult:
    """Timing and work counts for one algorithm on one workload."""
    algorithm: str
    kind: str
    corpus_size: int
    pattern_size: int
    searches: int
    matches: int
    build_time_ms: float
    search_time_ms: float
    total_time_ms: float
    searches_per_sec: float
    probes: int
    cprofile_stats: str | None = None


class CountingSequence(Sequence):
    """Read-only view over a sequence that counts element reads."""

    def __init__(self, data: Sequence) -> None:
        self._data = data
        self.reads = 0

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        self.reads += 1
        return self._data[index]


def count_probes(algorithm: str, corpus: Sequence, pattern: Sequence) -> int:
    """Number of corpus symbols read by one search.

    The pattern is converted to a list so the matcher accepts the
    counting wrapper (a str pattern only searches str corpora).
    """
    matcher = make_matcher(algorithm, list(pattern))
    counted = CountingSequence(corpus)
    matcher.search(counted)
    return counted.reads


def run_workload(
    algorithm: str,
    workload: SearchWorkload,
    profile: bool = False,
) -> BenchmarkResult:
    """Run every pattern of `workload` through `algorithm`."""
    if algorithm not in ALGORITHMS:
        raise ValueError(
            f"unknown algorithm {algorithm!r}, expected one of {sorted(ALGORITHMS)}"
        )
    corpus = workload.corpus
    patterns = workload.patterns

    build_ms = 0.0
    search_ms = 0.0
    matches = 0
    cprofile_text = None

    def _run():
        nonlocal build_ms, search_ms, matches
        for pattern in patterns:
            t0 = time.perf_counter()
            matcher = make_matcher(algorithm, pattern)
            build_ms += (time.perf_counter() - t0) * 1000

            t0 = time.perf_counter()
            if matcher.search(corpus) != NOT_FOUND:
                matches += 1
            search_ms += (time.perf_counter() - t0) * 1000

    t_total_start = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(30)
        cprofile_text = s.getvalue()
    else:
        _run()
    total_ms = (time.perf_counter() - t_total_start) * 1000

    sps = len(patterns) / (total_ms / 1000) if total_ms > 0 else 0
    probes = count_probes(algorithm, corpus, patterns[0]) if patterns else 0
    log.debug(
        "%s on %s corpus: %d/%d matched in %.1f ms",
        algorithm, workload.kind, matches, len(patterns), total_ms,
    )

    return BenchmarkResult(
        algorithm=algorithm,
        kind=workload.kind,
        corpus_size=len(corpus),
        pattern_size=len(patterns[0]) if patterns else 0,
        searches=len(patterns),
        matches=matches,
        build_time_ms=build_ms,
        search_time_ms=search_ms,
        total_time_ms=total_ms,
        searches_per_sec=sps,
        probes=probes,
        cprofile_stats=cprofile_text,
    )


def run_benchmark(
    algorithms: Sequence[str] | None = None,
    corpus_size: int = 100_000,
    pattern_size: int = 16,
    kind: str = "random",
    searches: int = 100,
    hit_rate: float = 0.5,
    seed: int = 42,
    profile: bool = False,
) -> list[BenchmarkResult]:
    """Generate one workload and run it through each algorithm.

    algorithms defaults to every registered matcher. All algorithms
    see the same corpus and patterns, so their match counts must agree.
    """
    gen = CorpusGenerator(
        corpus_size=corpus_size,
        pattern_size=pattern_size,
        kind=kind,
        hit_rate=hit_rate,
        seed=seed,
    )
    workload = gen.generate(searches)
    names = list(algorithms) if algorithms is not None else list(ALGORITHMS)
    return [run_workload(name, workload, profile=profile) for name in names]
