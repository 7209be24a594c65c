"""
Benchmark runner comparing the search algorithms on shared layouts.

Results are stored one JSON object per line so a long run can be
resumed after a crash.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

import numpy as np

from src.grid.layouts import get_layout
from src.grid.model import Grid
from src.grid.node import Coord
from src.visualizer.engine import run_search

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Problem:
    """
    One benchmark grid.

    Attributes:
        layout: Wall layout name (see src.grid.LAYOUT_NAMES)
        seed: Seed for the random layout (ignored by the others)
        rows: Grid height
        cols: Grid width
        start: Start coordinate
        finish: Finish coordinate
    """

    layout: str
    seed: int
    rows: int
    cols: int
    start: Coord
    finish: Coord

    @property
    def key(self) -> str:
        return f"{self.layout}:{self.seed}:{self.rows}x{self.cols}:{self.start}->{self.finish}"

    def build_grid(self) -> Grid:
        walls = get_layout(self.layout, self.rows, self.cols, self.start, self.finish, seed=self.seed)
        return Grid.build(self.rows, self.cols, self.start, self.finish, walls=walls)


@dataclass
class BenchmarkResult:
    algorithm: str
    problem: str
    layout: str
    path_found: bool
    path_length: int
    visited_count: int
    time_ms: float
    negative_cycle: bool = False


@dataclass
class AlgorithmSummary:
    algorithm: str
    runs: int
    paths_found: int
    avg_path_length: float
    avg_visited: float
    avg_time_ms: float
    median_time_ms: float


def make_problems(
    rows: int,
    cols: int,
    start: Coord,
    finish: Coord,
    random_layouts: int,
) -> list[Problem]:
    """The empty and barrier layouts plus `random_layouts` seeded random ones."""
    problems = [
        Problem("empty", 0, rows, cols, start, finish),
        Problem("barrier", 0, rows, cols, start, finish),
    ]
    problems.extend(
        Problem("random", seed, rows, cols, start, finish) for seed in range(random_layouts)
    )
    return problems


def run_case(algorithm: str, problem: Problem) -> BenchmarkResult:
    """Run one algorithm on one problem."""
    run = run_search(problem.build_grid(), algorithm)
    return BenchmarkResult(
        algorithm=run.algorithm,
        problem=problem.key,
        layout=problem.layout,
        path_found=run.path_found,
        path_length=len(run.path) if run.path_found else 0,
        visited_count=run.visited_count,
        time_ms=run.execution_time_ms,
        negative_cycle=run.negative_cycle,
    )


def load_results(jsonl_path: Path) -> list[BenchmarkResult]:
    """Load results from a JSONL file, skipping malformed lines."""
    results: list[BenchmarkResult] = []
    if not jsonl_path.exists():
        return results

    with open(jsonl_path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                results.append(BenchmarkResult(**json.loads(line)))
            except (json.JSONDecodeError, TypeError):
                logger.warning(f"Skipping malformed benchmark line: {line[:80]}")
    return results


def append_result(jsonl_path: Path, result: BenchmarkResult) -> None:
    """Append a single result to the JSONL file."""
    jsonl_path.parent.mkdir(parents=True, exist_ok=True)
    with open(jsonl_path, "a", encoding="utf-8") as f:
        f.write(json.dumps(asdict(result)) + "\n")


def summarize(results: list[BenchmarkResult]) -> list[AlgorithmSummary]:
    """Per-algorithm averages, sorted by mean visited count (fewest first)."""
    by_algorithm: dict[str, list[BenchmarkResult]] = {}
    for r in results:
        by_algorithm.setdefault(r.algorithm, []).append(r)

    summaries = []
    for algorithm, runs in by_algorithm.items():
        times = np.array([r.time_ms for r in runs], dtype=float)
        visited = np.array([r.visited_count for r in runs], dtype=float)
        lengths = np.array([r.path_length for r in runs if r.path_found], dtype=float)
        summaries.append(
            AlgorithmSummary(
                algorithm=algorithm,
                runs=len(runs),
                paths_found=int(lengths.size),
                avg_path_length=float(lengths.mean()) if lengths.size else 0.0,
                avg_visited=float(visited.mean()),
                avg_time_ms=float(times.mean()),
                median_time_ms=float(np.median(times)),
            )
        )

    summaries.sort(key=lambda s: s.avg_visited)
    return summaries


def check_agreement(results: list[BenchmarkResult]) -> list[str]:
    """
    Problems on which the algorithms disagree about the shortest path.

    All three are exact on a uniform-cost grid, so this should be empty.
    """
    lengths: dict[str, set[int]] = {}
    for r in results:
        lengths.setdefault(r.problem, set()).add(r.path_length)
    return sorted(problem for problem, seen in lengths.items() if len(seen) > 1)
