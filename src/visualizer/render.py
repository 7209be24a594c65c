"""
Plain-text rendering of a grid and a finished run, for the CLI.
"""

from __future__ import annotations

from src.grid.model import Grid
from src.visualizer.state import SearchRun

CELL_START = "S"
CELL_FINISH = "F"
CELL_WALL = "#"
CELL_PATH = "*"
CELL_VISITED = "."
CELL_EMPTY = " "


def render_ascii(grid: Grid, run: SearchRun | None = None, border: bool = True) -> str:
    """
    Draw the grid as text.

    Start, finish and walls always show; path cells override visited
    cells. A path is only drawn when one was found.
    """
    visited = {node.coord for node in run.visited} if run else set()
    path = {node.coord for node in run.path} if run and run.path_found else set()

    lines = []
    for row in grid.iter_rows():
        chars = []
        for node in row:
            if node.is_start:
                chars.append(CELL_START)
            elif node.is_finish:
                chars.append(CELL_FINISH)
            elif node.is_wall:
                chars.append(CELL_WALL)
            elif node.coord in path:
                chars.append(CELL_PATH)
            elif node.coord in visited:
                chars.append(CELL_VISITED)
            else:
                chars.append(CELL_EMPTY)
        lines.append("".join(chars))

    if border:
        edge = "+" + "-" * grid.cols + "+"
        lines = [edge] + [f"|{line}|" for line in lines] + [edge]
    return "\n".join(lines)
