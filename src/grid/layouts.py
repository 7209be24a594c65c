"""
Wall layout presets.

Each layout is a plain list of (row, col) wall coordinates that can be
applied with Grid.build(walls=...) or Grid.with_walls().
"""

from __future__ import annotations

import random

from src.config import RANDOM_WALL_DENSITY, RANDOM_WALL_SEED
from src.grid.neighbors import DIRECTIONS
from src.grid.node import Coord

LAYOUT_NAMES = ["empty", "barrier", "random", "enclosed"]


def parse_coord(text: str) -> Coord:
    """
    Parse a "row,col" string.

    Raises:
        ValueError: If the text is not two comma-separated integers
    """
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected 'row,col', got '{text}'")
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f"Expected integer 'row,col', got '{text}'") from None


def parse_cells(text: str) -> list[Coord]:
    """
    Parse several cells at once.

    Items are separated by ";" or newlines. Each item
    is either "row,col" or a rectangle "row,col:row,col" (corners
    inclusive, in any order), expanded row-major.

    Example:
        "1,1; 3,4:3,6" -> [(1, 1), (3, 4), (3, 5), (3, 6)]

    Raises:
        ValueError: If any item is malformed
    """
    cells: list[Coord] = []
    for item in text.replace("\n", ";").split(";"):
        item = item.strip()
        if not item:
            continue
        if ":" not in item:
            cells.append(parse_coord(item))
            continue
        first, _, second = item.partition(":")
        (r1, c1), (r2, c2) = parse_coord(first), parse_coord(second)
        cells.extend(
            (r, c)
            for r in range(min(r1, r2), max(r1, r2) + 1)
            for c in range(min(c1, c2), max(c1, c2) + 1)
        )
    return cells


def barrier_walls(
    rows: int,
    col: int,
    length: int | None = None,
    top: int = 0,
    gap_row: int | None = None,
) -> list[Coord]:
    """
    Vertical wall in column `col`, starting at row `top`.

    Args:
        rows: Grid height (the barrier is clipped to it)
        col: Column of the barrier
        length: Number of rows covered (default: all but the last two)
        top: First row of the barrier
        gap_row: Optional row inside the barrier left open

    Returns:
        Wall coordinates, top to bottom
    """
    if length is None:
        length = max(rows - 2, 0)
    bottom = min(rows, top + length)
    return [(r, col) for r in range(top, bottom) if r != gap_row]


def random_walls(
    rows: int,
    cols: int,
    density: float = RANDOM_WALL_DENSITY,
    seed: int | None = RANDOM_WALL_SEED,
    exclude: tuple[Coord, ...] = (),
) -> list[Coord]:
    """
    Scatter walls uniformly at random.

    Args:
        rows: Grid height
        cols: Grid width
        density: Probability that a cell becomes a wall (0-1)
        seed: Random seed for reproducibility
        exclude: Cells that must stay open (typically start and finish)

    Returns:
        Wall coordinates in row-major order
    """
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"Wall density must be between 0 and 1, got {density}")

    rng = random.Random(seed)
    keep_open = set(exclude)
    walls = []
    for r in range(rows):
        for c in range(cols):
            # Draw for every cell so excluded cells don't shift the sequence
            roll = rng.random()
            if roll < density and (r, c) not in keep_open:
                walls.append((r, c))
    return walls


def enclosing_walls(rows: int, cols: int, coord: Coord) -> list[Coord]:
    """Walls on every in-bounds orthogonal neighbor of `coord`."""
    row, col = coord
    return [
        (row + d_row, col + d_col)
        for d_row, d_col in DIRECTIONS
        if 0 <= row + d_row < rows and 0 <= col + d_col < cols
    ]


def get_layout(
    name: str,
    rows: int,
    cols: int,
    start: Coord,
    finish: Coord,
    seed: int | None = RANDOM_WALL_SEED,
    density: float = RANDOM_WALL_DENSITY,
) -> list[Coord]:
    """
    Get a wall layout by name.

    Args:
        name: Layout identifier (empty, barrier, random, enclosed)
        rows: Grid height
        cols: Grid width
        start: Start coordinate (kept open)
        finish: Finish coordinate (kept open; enclosed by "enclosed")
        seed: Seed for the random layout
        density: Wall density for the random layout

    Returns:
        List of wall coordinates

    Raises:
        ValueError: If layout name is unknown
    """
    if name == "empty":
        return []
    if name == "barrier":
        # Full-height barrier in the middle column with a single gap near the bottom
        return barrier_walls(rows, cols // 2, length=rows, gap_row=rows - 1)
    if name == "random":
        return random_walls(rows, cols, density=density, seed=seed, exclude=(start, finish))
    if name == "enclosed":
        return enclosing_walls(rows, cols, finish)

    available = ", ".join(LAYOUT_NAMES)
    raise ValueError(f"Unknown layout '{name}'. Available: {available}")
