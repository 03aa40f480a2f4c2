"""Benchmark harness and workload generation for the matchers."""

from searchkit_lite.profiling.harness import (
    BenchmarkResult,
    count_probes,
    run_benchmark,
    run_workload,
)
from searchkit_lite.profiling.load_generator import CorpusGenerator, SearchWorkload
from searchkit_lite.profiling.report import format_comparison, format_report

__all__ = [
    "BenchmarkResult",
    "CorpusGenerator",
    "SearchWorkload",
    "count_probes",
    "format_comparison",
    "format_report",
    "run_benchmark",
    "run_workload",
]
