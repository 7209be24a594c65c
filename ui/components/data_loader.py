"""
Data loader for benchmark results (JSONL).
"""

from functools import lru_cache

from src.benchmark import AlgorithmSummary, BenchmarkResult, load_results, summarize
from src.config import BENCHMARK_RESULTS_PATH


@lru_cache(maxsize=1)
def _cached_results() -> tuple[BenchmarkResult, ...]:
    return tuple(load_results(BENCHMARK_RESULTS_PATH))


def get_results() -> list[BenchmarkResult]:
    """Get all benchmark results."""
    return list(_cached_results())


def get_summaries() -> list[AlgorithmSummary]:
    """Per-algorithm summaries, fewest visited nodes first."""
    return summarize(get_results())


def get_layouts() -> list[str]:
    """Distinct layout names present in the results."""
    return sorted({r.layout for r in get_results()})


def get_results_for_layouts(
    layouts: list[str],
) -> tuple[list[BenchmarkResult], list[AlgorithmSummary]]:
    """
    Results and summaries restricted to the given layouts.

    An empty selection gives no results and no summaries.
    """
    results = [r for r in get_results() if r.layout in layouts]
    return results, summarize(results)


def clear_cache() -> None:
    """Forget loaded results (after a new benchmark run)."""
    _cached_results.cache_clear()
