"""
Grid model: a fixed-size, row-major collection of Nodes.

Grids are treated as values. Operations that change the wall layout
return a new Grid and leave the original untouched, so a grid handed
to a running search can never change underneath it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from src.grid.node import Coord, Node

logger = logging.getLogger(__name__)


class InvalidGridError(ValueError):
    """Raised when a grid violates the start/finish/bounds invariants."""


class Grid:
    """
    A rows x cols grid of Nodes with exactly one start and one finish.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        start: The unique start node
        finish: The unique finish node
    """

    def __init__(self, nodes: list[list[Node]]) -> None:
        """
        Wrap an existing node matrix.

        Prefer Grid.build() for new grids; this constructor does not
        check the start/finish invariants (call validate() for that).

        Args:
            nodes: Row-major node matrix, every row the same length
        """
        if not nodes or not nodes[0]:
            raise InvalidGridError("Grid must have at least one row and one column")
        width = len(nodes[0])
        if any(len(row) != width for row in nodes):
            raise InvalidGridError("All grid rows must have the same length")

        self._nodes = nodes
        self._start: Node | None = None
        self._finish: Node | None = None
        for node in self:
            if node.is_start and self._start is None:
                self._start = node
            if node.is_finish and self._finish is None:
                self._finish = node

    @classmethod
    def build(
        cls,
        rows: int,
        cols: int,
        start: Coord,
        finish: Coord,
        walls: Iterable[Coord] = (),
        allow_same_endpoints: bool = False,
    ) -> Grid:
        """
        Build a fresh grid.

        Args:
            rows: Number of rows (> 0)
            cols: Number of columns (> 0)
            start: (row, col) of the start node
            finish: (row, col) of the finish node
            walls: Cells to turn into walls (start/finish and out-of-bounds
                cells are ignored)
            allow_same_endpoints: Permit start == finish

        Returns:
            A validated Grid

        Raises:
            InvalidGridError: If dimensions or endpoints are invalid
        """
        if rows <= 0 or cols <= 0:
            raise InvalidGridError(f"Grid dimensions must be positive, got {rows}x{cols}")
        for label, (r, c) in (("start", start), ("finish", finish)):
            if not (0 <= r < rows and 0 <= c < cols):
                raise InvalidGridError(
                    f"{label.capitalize()} {(r, c)} is outside the {rows}x{cols} grid"
                )

        wall_set = set(walls)
        nodes = [
            [
                Node(
                    row=r,
                    col=c,
                    is_start=(r, c) == tuple(start),
                    is_finish=(r, c) == tuple(finish),
                    is_wall=(r, c) in wall_set and (r, c) not in (tuple(start), tuple(finish)),
                )
                for c in range(cols)
            ]
            for r in range(rows)
        ]
        grid = cls(nodes)
        grid.validate(allow_same_endpoints=allow_same_endpoints)
        logger.debug(f"Built {rows}x{cols} grid {start} -> {finish} with {len(grid.walls)} walls")
        return grid

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return len(self._nodes)

    @property
    def cols(self) -> int:
        return len(self._nodes[0])

    @property
    def start(self) -> Node:
        if self._start is None:
            raise InvalidGridError("Grid has no start node")
        return self._start

    @property
    def finish(self) -> Node:
        if self._finish is None:
            raise InvalidGridError("Grid has no finish node")
        return self._finish

    @property
    def walls(self) -> frozenset[Coord]:
        """Coordinates of every wall cell."""
        return frozenset(node.coord for node in self if node.is_wall)

    def in_bounds(self, coord: Coord) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def node_at(self, row: int, col: int) -> Node:
        """
        Return the node at (row, col).

        Raises:
            IndexError: If the coordinate is outside the grid
        """
        if not self.in_bounds((row, col)):
            raise IndexError(f"Cell {(row, col)} is outside the {self.rows}x{self.cols} grid")
        return self._nodes[row][col]

    def __getitem__(self, coord: Coord) -> Node:
        return self.node_at(*coord)

    def __iter__(self) -> Iterator[Node]:
        """Iterate over all nodes in row-major order."""
        for row in self._nodes:
            yield from row

    def __len__(self) -> int:
        return self.rows * self.cols

    def iter_rows(self) -> Iterator[list[Node]]:
        """Iterate over rows (copies, so callers can't mutate the grid)."""
        for row in self._nodes:
            yield list(row)

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def validate(self, allow_same_endpoints: bool = False) -> None:
        """
        Check the start/finish invariants.

        Raises:
            InvalidGridError: If there isn't exactly one start and one
                finish, or if they coincide (unless allowed)
        """
        starts = [node for node in self if node.is_start]
        finishes = [node for node in self if node.is_finish]

        if len(starts) != 1:
            raise InvalidGridError(f"Grid must have exactly one start node, found {len(starts)}")
        if len(finishes) != 1:
            raise InvalidGridError(f"Grid must have exactly one finish node, found {len(finishes)}")
        if starts[0].coord == finishes[0].coord and not allow_same_endpoints:
            raise InvalidGridError(f"Start and finish must differ, both are {starts[0].coord}")

    # -------------------------------------------------------------------------
    # Wall layout (each returns a new Grid)
    # -------------------------------------------------------------------------

    def with_wall_toggled(self, coord: Coord) -> Grid:
        """
        Return a copy with the wall flag of one cell flipped.

        Start and finish cells can be toggled too; searches treat a
        walled endpoint as impassable.
        """
        row, col = coord
        node = self.node_at(row, col)
        nodes = [list(r) for r in self._nodes]
        nodes[row][col] = node.with_wall(not node.is_wall)
        return Grid(nodes)

    def with_walls(self, walls: Iterable[Coord]) -> Grid:
        """Return a copy whose wall layout is exactly `walls` (endpoints excluded)."""
        wall_set = {coord for coord in walls if self.in_bounds(coord)}
        nodes = [
            [
                node.with_wall(node.coord in wall_set and not (node.is_start or node.is_finish))
                for node in row
            ]
            for row in self._nodes
        ]
        return Grid(nodes)

    def cleared(self) -> Grid:
        """Return a copy with no walls."""
        return self.with_walls(())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._nodes == other._nodes

    def __repr__(self) -> str:
        return (
            f"Grid({self.rows}x{self.cols}, start={self._start.coord if self._start else None}, "
            f"finish={self._finish.coord if self._finish else None}, walls={len(self.walls)})"
        )
