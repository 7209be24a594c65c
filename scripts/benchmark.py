#!/usr/bin/env python3
"""
Benchmark comparing Dijkstra, Bellman-Ford and A* on shared grids.

Features:
- Incremental save: Results appended after each run (survives crashes)
- Resume support: Automatically skips already-completed runs
- Use --fresh to start over and clear previous results

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --layouts 50
    python scripts/benchmark.py --algorithms astar dijkstra
    python scripts/benchmark.py --fresh
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

logging.basicConfig(level=logging.WARNING)  # Quiet mode

from src.benchmark import (  # noqa: E402
    append_result,
    check_agreement,
    load_results,
    make_problems,
    run_case,
    summarize,
)
from src.config import (  # noqa: E402
    BENCHMARK_RESULTS_PATH,
    DEFAULT_BENCHMARK_LAYOUTS,
    DEFAULT_FINISH,
    DEFAULT_START,
    GRID_COLS,
    GRID_ROWS,
)
from src.search import ALGORITHM_NAMES  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(description="Search algorithm benchmark")
    parser.add_argument(
        "--algorithms",
        nargs="+",
        default=ALGORITHM_NAMES,
        choices=ALGORITHM_NAMES,
        help="Algorithms to compare (default: all)",
    )
    parser.add_argument(
        "--layouts",
        type=int,
        default=DEFAULT_BENCHMARK_LAYOUTS,
        help=f"Number of random layouts (default: {DEFAULT_BENCHMARK_LAYOUTS})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=str(BENCHMARK_RESULTS_PATH),
        help="JSONL results file",
    )
    parser.add_argument("--fresh", action="store_true", help="Clear cached results and start fresh")
    args = parser.parse_args()

    jsonl_path = Path(args.output)
    problems = make_problems(GRID_ROWS, GRID_COLS, DEFAULT_START, DEFAULT_FINISH, args.layouts)

    # Load or clear cached results
    if args.fresh and jsonl_path.exists():
        jsonl_path.unlink()
        print("Cleared cached results (--fresh)")
    all_results = load_results(jsonl_path)
    completed = {(r.algorithm, r.problem) for r in all_results}
    if completed:
        print(f"Resuming: {len(completed)} runs already completed")

    print("=" * 80)
    print("GRID PATHFINDING BENCHMARK")
    print("=" * 80)
    print(f"Grid: {GRID_ROWS} x {GRID_COLS}, {DEFAULT_START} -> {DEFAULT_FINISH}")
    print(f"Problems: {len(problems)}")
    print(f"Algorithms: {', '.join(args.algorithms)}")
    print()

    for algorithm in args.algorithms:
        print(f"\n{algorithm}:")
        for i, problem in enumerate(problems, 1):
            label = f"[{i:3}/{len(problems)}] {problem.layout:8} seed={problem.seed:<4}"
            if (algorithm, problem.key) in completed:
                print(f"  {label} : CACHED")
                continue

            result = run_case(algorithm, problem)
            all_results.append(result)
            append_result(jsonl_path, result)  # Incremental save

            status = f"PATH {result.path_length:3}" if result.path_found else "NO PATH "
            print(f"  {label} : {status} visited={result.visited_count:4} ({result.time_ms:.2f}ms)")

    # ==========================================================================
    # SUMMARY
    # ==========================================================================

    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)

    summaries = summarize([r for r in all_results if r.algorithm in args.algorithms])

    print(f"\n{'Algorithm':<15} {'Runs':>6} {'Paths':>6} {'AvgLen':>8} {'AvgVisited':>11} {'AvgMs':>8} {'MedMs':>8}")
    print("-" * 68)
    for s in summaries:
        print(
            f"{s.algorithm:<15} {s.runs:>6} {s.paths_found:>6} {s.avg_path_length:>8.1f} "
            f"{s.avg_visited:>11.1f} {s.avg_time_ms:>8.2f} {s.median_time_ms:>8.2f}"
        )

    disagreements = check_agreement(all_results)
    if disagreements:
        print(f"\nWarning: algorithms disagree on {len(disagreements)} problems:")
        for problem in disagreements[:10]:
            print(f"  {problem}")
        return 1

    print(f"\nAll algorithms agree on every shortest path. Results: {jsonl_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
