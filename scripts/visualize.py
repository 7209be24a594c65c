#!/usr/bin/env python3
"""
Grid Pathfinding CLI - Run one search and print the grid.

Usage:
    python scripts/visualize.py
    python scripts/visualize.py --algorithm astar --layout barrier
    python scripts/visualize.py --start 2,3 --finish 10,30 --wall 5,5 --wall 0,15:10,15
    python scripts/visualize.py --rows 20 --cols 60 --layout random --seed 7 --animate

Algorithms:
    dijkstra     - Closest-first expansion (default)
    bellman-ford - Repeated relaxation, visits batched per round
    astar        - Manhattan-guided best-first expansion

Layouts:
    empty    - No walls
    barrier  - Vertical wall through the middle with one gap at the bottom
    random   - Seeded random walls (--seed, --density)
    enclosed - Finish surrounded by walls (no path)
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

from src.config import (  # noqa: E402
    DEFAULT_ALGORITHM,
    GRID_COLS,
    GRID_ROWS,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    RANDOM_WALL_DENSITY,
    RANDOM_WALL_SEED,
)
from src.grid import LAYOUT_NAMES, InvalidGridError, get_layout, parse_cells, parse_coord  # noqa: E402
from src.search import ALGORITHM_NAMES  # noqa: E402
from src.visualizer import (  # noqa: E402
    ApplyEndpoints,
    LoadWalls,
    SelectAlgorithm,
    SetFinish,
    SetStart,
    Visualize,
    build_animation,
    format_execution_time,
    initial_state,
    reduce,
    render_ascii,
)


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a grid shortest-path search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--algorithm",
        type=str,
        default=DEFAULT_ALGORITHM,
        choices=ALGORITHM_NAMES + ["a*"],
        help=f"Algorithm to run (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument("--rows", type=int, default=GRID_ROWS, help=f"Grid rows (default: {GRID_ROWS})")
    parser.add_argument("--cols", type=int, default=GRID_COLS, help=f"Grid columns (default: {GRID_COLS})")
    parser.add_argument(
        "--start",
        type=str,
        default="0,0",
        help="Start cell as row,col (default: 0,0)",
    )
    parser.add_argument(
        "--finish",
        type=str,
        default=None,
        help="Finish cell as row,col (default: bottom-right corner)",
    )
    parser.add_argument(
        "--layout",
        type=str,
        default="empty",
        choices=LAYOUT_NAMES,
        help="Wall layout preset (default: empty)",
    )
    parser.add_argument(
        "--wall",
        type=str,
        action="append",
        default=[],
        help="Extra wall cells as row,col or row,col:row,col (repeatable)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_WALL_SEED,
        help=f"Seed for the random layout (default: {RANDOM_WALL_SEED})",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=RANDOM_WALL_DENSITY,
        help=f"Wall density for the random layout (default: {RANDOM_WALL_DENSITY})",
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Print the animation schedule summary",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL.upper()
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        start = parse_coord(args.start)
        finish = parse_coord(args.finish) if args.finish else (args.rows - 1, args.cols - 1)
        extra_walls = [cell for text in args.wall for cell in parse_cells(text)]

        state = initial_state(rows=args.rows, cols=args.cols, algorithm=args.algorithm)
        state = reduce(state, SetStart(*start))
        state = reduce(state, SetFinish(*finish))
        state = reduce(state, ApplyEndpoints())

        walls = get_layout(
            args.layout,
            args.rows,
            args.cols,
            state.grid.start.coord,
            state.grid.finish.coord,
            seed=args.seed,
            density=args.density,
        )
        state = reduce(state, LoadWalls(tuple(walls + extra_walls)))
        state = reduce(state, SelectAlgorithm(args.algorithm))
    except (InvalidGridError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n" + "=" * 60)
    print("Grid Pathfinding")
    print("=" * 60)
    print(f"  Grid:      {args.rows} x {args.cols}")
    print(f"  Start:     {state.grid.start.coord}")
    print(f"  Finish:    {state.grid.finish.coord}")
    print(f"  Algorithm: {state.algorithm}")
    print(f"  Layout:    {args.layout} ({len(state.grid.walls)} walls)")
    print("=" * 60 + "\n")

    try:
        state = reduce(state, Visualize())
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130  # Standard exit code for Ctrl+C

    run = state.last_run
    print(render_ascii(state.grid, run))

    print("\n" + "=" * 60)
    if run.path_found:
        print(f"Path found: cost {run.cost} ({len(run.path) - 1} steps)")
    else:
        print("No path found")
    print("=" * 60)

    print(f"\nVisited nodes:  {run.visited_count}")
    print(f"Execution time: {format_execution_time(run.execution_time_ms)}")
    if run.negative_cycle:
        print("Warning: negative weight cycle detected")

    if args.animate:
        frames = build_animation(run)
        print(f"\nAnimation: {len(frames)} frames over {frames[-1].delay_ms / 1000:.2f} seconds")

    return 0 if run.path_found else 1


if __name__ == "__main__":
    sys.exit(main())
