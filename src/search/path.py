"""
Shortest-path reconstruction from search back-links.
"""

from __future__ import annotations

from src.grid.model import Grid
from src.grid.node import Node
from src.search.state import SearchStates


def reconstruct_path(grid: Grid, states: SearchStates, finish: Node) -> list[Node]:
    """
    Follow `previous` links from the finish back to the start.

    Only meaningful after a search has filled `states`. If the finish
    was never reached the result is just [finish].

    Args:
        grid: The grid that was searched
        states: Store filled by the search
        finish: Node to walk back from

    Returns:
        Nodes from start to finish (inclusive)
    """
    path: list[Node] = []
    current: Node | None = finish
    while current is not None:
        path.append(current)
        previous = states[current].previous
        current = grid[previous] if previous is not None else None
    path.reverse()
    return path


def path_exists(path: list[Node]) -> bool:
    """
    Whether a reconstructed path counts as found.

    A path of one node is reported as "no path", which also covers
    start == finish.
    """
    return len(path) > 1
