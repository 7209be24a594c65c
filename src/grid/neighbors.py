"""
Shared 4-neighbor lookup used by every search algorithm.
"""

from __future__ import annotations

from src.grid.model import Grid
from src.grid.node import Node

# Fixed lookup order: up, down, left, right. Traversal and tie-breaking
# in all three algorithms depend on this order.
DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def get_neighbors(node: Node, grid: Grid) -> list[Node]:
    """
    Return the orthogonal neighbors of `node` that lie inside the grid.

    Walls are included; callers skip them before relaxing.
    """
    neighbors = []
    for d_row, d_col in DIRECTIONS:
        coord = (node.row + d_row, node.col + d_col)
        if grid.in_bounds(coord):
            neighbors.append(grid[coord])
    return neighbors
