"""
Benchmark module.

Provides infrastructure for comparing the search algorithms:
- Problem: Defines a benchmark grid
- run_case: Runs one algorithm on one problem
- BenchmarkResult: Stores results (JSONL on disk)
- summarize: Computes per-algorithm statistics
"""

from src.benchmark.runner import (
    AlgorithmSummary,
    BenchmarkResult,
    Problem,
    append_result,
    check_agreement,
    load_results,
    make_problems,
    run_case,
    summarize,
)

__all__ = [
    "AlgorithmSummary",
    "BenchmarkResult",
    "Problem",
    "append_result",
    "check_agreement",
    "load_results",
    "make_problems",
    "run_case",
    "summarize",
]
