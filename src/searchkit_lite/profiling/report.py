"""Report generation for benchmark results.

Formats BenchmarkResult data into human-readable tables for
terminal output.
"""
from __future__ import annotations

from searchkit_lite.profiling.harness import BenchmarkResult


def format_report(result: BenchmarkResult, label: str | None = None) -> str:
    """Format a single BenchmarkResult as a readable report string."""
    title = label or result.algorithm
    total = result.total_time_ms or 1.0
    lines = [
        f"=== {title} ===",
        f"Workload:          {result.kind}, n={result.corpus_size:,}, "
        f"m={result.pattern_size}",
        f"Searches:          {result.searches:,} ({result.matches:,} matched)",
        f"Total time:        {result.total_time_ms:.1f} ms",
        f"Throughput:        {result.searches_per_sec:,.0f} searches/sec",
        f"",
        f"Breakdown:",
        f"  Table build:     {result.build_time_ms:.1f} ms "
        f"({result.build_time_ms / total * 100:.1f}%)",
        f"  Scanning:        {result.search_time_ms:.1f} ms "
        f"({result.search_time_ms / total * 100:.1f}%)",
        f"  Corpus probes:   {result.probes:,} (first pattern)",
    ]
    return "\n".join(lines)


def format_comparison(
    results: list[BenchmarkResult],
    baseline: str = "naive",
) -> str:
    """Format a side-by-side table, with speedups relative to `baseline`.

    If the baseline algorithm is not among the results, the first
    result is used instead.
    """
    if not results:
        return ""
    base = next((r for r in results if r.algorithm == baseline), results[0])

    def _speedup(old: float, new: float) -> str:
        if new <= 0:
            return "inf"
        ratio = old / new
        return f"{ratio:.1f}x"

    lines = [
        f"{'Algorithm':<10} {'Build (ms)':>12} {'Search (ms)':>12} "
        f"{'Probes':>12} {'Matches':>8} {'Speedup':>9}",
        "-" * 68,
    ]
    for r in results:
        lines.append(
            f"{r.algorithm:<10} {r.build_time_ms:>12.1f} {r.search_time_ms:>12.1f} "
            f"{r.probes:>12,} {r.matches:>8,} "
            f"{_speedup(base.total_time_ms, r.total_time_ms):>9}"
        )
    return "\n".join(lines)
