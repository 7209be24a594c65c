"""
Search runner and animation scheduling.

run_search() is the only place a search is invoked: it validates the
grid, gives the algorithm a fresh state store, times the run and
reconstructs the path. build_animation() turns a finished run into the
delayed frames the presentation layer plays back.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from src.config import COST_REVEAL_DELAY_MS, PATH_DELAY_MS, VISIT_DELAY_MS
from src.grid.model import Grid
from src.grid.node import Coord
from src.search import get_algorithm, reconstruct_path
from src.search.state import SearchStates
from src.visualizer.state import SearchRun

logger = logging.getLogger(__name__)

FRAME_VISITED = "visited"
FRAME_PATH = "path"
FRAME_COST = "cost"


@dataclass(frozen=True)
class AnimationFrame:
    """
    One deferred visual update.

    Attributes:
        delay_ms: Milliseconds after playback starts
        kind: "visited", "path" or "cost"
        coord: Cell to recolor (None for the cost frame)
    """

    delay_ms: int
    kind: str
    coord: Coord | None = None


def run_search(grid: Grid, algorithm: str) -> SearchRun:
    """
    Run one algorithm from the grid's start to its finish.

    Args:
        grid: Grid to search (never modified)
        algorithm: Algorithm name (see src.search.ALGORITHM_NAMES)

    Returns:
        SearchRun with trace, path and timing

    Raises:
        InvalidGridError: If the grid lacks a unique start or finish
        ValueError: If the algorithm name is unknown
    """
    grid.validate(allow_same_endpoints=True)
    searcher = get_algorithm(algorithm)
    start, finish = grid.start, grid.finish

    logger.info(f"Running {searcher.name}: {start.coord} -> {finish.coord}")

    states = SearchStates.fresh(grid)
    t0 = time.perf_counter()
    result = searcher.search(grid, start, finish, states)
    path = reconstruct_path(grid, result.states, finish)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    run = SearchRun(
        algorithm=searcher.name,
        start=start.coord,
        finish=finish.coord,
        visited=tuple(result.visited),
        path=tuple(path),
        execution_time_ms=round(elapsed_ms, 2),
        negative_cycle=result.negative_cycle,
    )

    if run.path_found:
        logger.info(
            f"{searcher.name}: path of {len(run.path)} nodes, "
            f"{run.visited_count} visited, {run.execution_time_ms:.2f}ms"
        )
    else:
        logger.info(f"{searcher.name}: no path, {run.visited_count} visited")

    return run


def build_animation(
    run: SearchRun,
    visit_delay_ms: int = VISIT_DELAY_MS,
    path_delay_ms: int = PATH_DELAY_MS,
    cost_delay_ms: int = COST_REVEAL_DELAY_MS,
) -> list[AnimationFrame]:
    """
    Schedule the playback of a finished run.

    Visited cells come first, one every `visit_delay_ms`. The path
    starts right after the last visited frame, one cell every
    `path_delay_ms`, and the cost frame follows the last path frame
    after `cost_delay_ms`.

    Returns:
        Frames sorted by delay
    """
    frames = [
        AnimationFrame(delay_ms=visit_delay_ms * i, kind=FRAME_VISITED, coord=node.coord)
        for i, node in enumerate(run.visited)
    ]

    path_start = visit_delay_ms * len(run.visited)
    frames.extend(
        AnimationFrame(delay_ms=path_start + path_delay_ms * j, kind=FRAME_PATH, coord=node.coord)
        for j, node in enumerate(run.path)
    )

    last_path_offset = path_delay_ms * max(len(run.path) - 1, 0)
    frames.append(
        AnimationFrame(delay_ms=path_start + last_path_offset + cost_delay_ms, kind=FRAME_COST)
    )
    return frames
