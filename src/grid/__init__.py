"""
Grid model module.

Provides the static side of the search problem:
- Node: One cell (identity and role flags)
- Grid: Fixed-size node matrix with one start and one finish
- get_neighbors: Shared 4-neighbor lookup
- Layouts: Wall presets (barrier, random, enclosed)
"""

from src.grid.layouts import (
    LAYOUT_NAMES,
    barrier_walls,
    enclosing_walls,
    get_layout,
    parse_cells,
    parse_coord,
    random_walls,
)
from src.grid.model import Grid, InvalidGridError
from src.grid.neighbors import DIRECTIONS, get_neighbors
from src.grid.node import Coord, Node

__all__ = [
    "Coord",
    "Node",
    "Grid",
    "InvalidGridError",
    "DIRECTIONS",
    "get_neighbors",
    "LAYOUT_NAMES",
    "barrier_walls",
    "enclosing_walls",
    "get_layout",
    "parse_cells",
    "parse_coord",
    "random_walls",
]
