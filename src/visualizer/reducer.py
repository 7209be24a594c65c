"""
Pure state transitions for the visualizer: (state, action) -> state.

The only side effect is the timed search performed for Visualize.
"""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from src.config import DEFAULT_ALGORITHM, DEFAULT_FINISH, DEFAULT_START, GRID_COLS, GRID_ROWS
from src.grid.model import Grid
from src.search import get_algorithm
from src.visualizer.engine import run_search
from src.visualizer.state import (
    Action,
    ApplyEndpoints,
    ClearWalls,
    LoadWalls,
    Phase,
    RevealCost,
    SelectAlgorithm,
    SetFinish,
    SetStart,
    ToggleWall,
    ToggleWalls,
    VisualizerState,
    Visualize,
)

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def clamp_coordinate(value: object, size: int) -> int:
    """
    Turn raw input into an index in [0, size - 1].

    Strings are read up to the first non-digit ("3abc" -> 3, "3.9" -> 3).
    Anything without a leading integer becomes 0.
    """
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return 0
        number = int(match.group(1))
    else:
        try:
            number = int(value)
        except (TypeError, ValueError, OverflowError):
            return 0
    return min(max(number, 0), size - 1)


def initial_state(
    rows: int = GRID_ROWS,
    cols: int = GRID_COLS,
    start: tuple[int, int] = DEFAULT_START,
    finish: tuple[int, int] | None = None,
    algorithm: str = DEFAULT_ALGORITHM,
) -> VisualizerState:
    """
    Build the starting state: a wall-free grid with the default endpoints.

    The finish defaults to the bottom-right corner of the given size.
    """
    if finish is None:
        finish = DEFAULT_FINISH if (rows, cols) == (GRID_ROWS, GRID_COLS) else (rows - 1, cols - 1)
    # Endpoints outside a custom size are pulled into bounds
    start = (clamp_coordinate(start[0], rows), clamp_coordinate(start[1], cols))
    finish = (clamp_coordinate(finish[0], rows), clamp_coordinate(finish[1], cols))
    grid = Grid.build(rows, cols, start, finish, allow_same_endpoints=True)
    return VisualizerState(
        grid=grid,
        start_input=start,
        finish_input=finish,
        algorithm=get_algorithm(algorithm).name,
    )


def _committed(state: VisualizerState, grid: Grid) -> VisualizerState:
    """New grid, stale results dropped."""
    return replace(state, grid=grid, phase=Phase.GRID_COMMITTED, last_run=None, show_cost=False)


def reduce(state: VisualizerState, action: Action) -> VisualizerState:
    """
    Apply one action.

    Args:
        state: Current state
        action: Action to apply

    Returns:
        The next state (the input is never modified)

    Raises:
        ValueError: For an unknown algorithm or action type
    """
    rows, cols = state.grid.rows, state.grid.cols

    if isinstance(action, SetStart):
        coord = (clamp_coordinate(action.row, rows), clamp_coordinate(action.col, cols))
        return replace(state, start_input=coord)

    if isinstance(action, SetFinish):
        coord = (clamp_coordinate(action.row, rows), clamp_coordinate(action.col, cols))
        return replace(state, finish_input=coord)

    if isinstance(action, SelectAlgorithm):
        return replace(state, algorithm=get_algorithm(action.name).name)

    if isinstance(action, ApplyEndpoints):
        grid = Grid.build(
            rows, cols, state.start_input, state.finish_input, allow_same_endpoints=True
        )
        logger.debug(f"Endpoints applied: {state.start_input} -> {state.finish_input}")
        return _committed(state, grid)

    if isinstance(action, ToggleWall):
        if not state.grid.in_bounds((action.row, action.col)):
            return state
        return _committed(state, state.grid.with_wall_toggled((action.row, action.col)))

    if isinstance(action, ToggleWalls):
        grid = state.grid
        for cell in action.cells:
            if grid.in_bounds(cell):
                grid = grid.with_wall_toggled(cell)
        if grid is state.grid:
            return state
        return _committed(state, grid)

    if isinstance(action, ClearWalls):
        return _committed(state, state.grid.cleared())

    if isinstance(action, LoadWalls):
        return _committed(state, state.grid.with_walls(action.walls))

    if isinstance(action, Visualize):
        run = run_search(state.grid, state.algorithm)
        return replace(state, phase=Phase.RESULTS_AVAILABLE, last_run=run, show_cost=False)

    if isinstance(action, RevealCost):
        if state.phase is not Phase.RESULTS_AVAILABLE:
            return state
        return replace(state, show_cost=True)

    raise ValueError(f"Unknown action: {action!r}")


def format_execution_time(ms: float) -> str:
    """Execution time as shown next to the cost (two decimals)."""
    return f"{ms:.2f} ms"
