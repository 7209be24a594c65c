"""
Node dataclass for a single grid cell.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

# (row, col) index of a cell
Coord = tuple[int, int]


@dataclass(frozen=True)
class Node:
    """
    One cell of the grid.

    Nodes carry only identity and role data. Search bookkeeping
    (distance, visited flag, back-link) lives in a separate
    SearchStates store owned by the running algorithm.

    Attributes:
        row: Row index (0 at the top)
        col: Column index (0 at the left)
        is_start: Whether this is the search origin
        is_finish: Whether this is the search target
        is_wall: Whether the cell is impassable
    """

    row: int
    col: int
    is_start: bool = False
    is_finish: bool = False
    is_wall: bool = False

    @property
    def coord(self) -> Coord:
        """The (row, col) identity of this node."""
        return (self.row, self.col)

    def with_wall(self, is_wall: bool) -> Node:
        """Return a copy of this node with the wall flag set."""
        return replace(self, is_wall=is_wall)

    def __repr__(self) -> str:
        flags = "".join(
            flag
            for flag, on in (("S", self.is_start), ("F", self.is_finish), ("#", self.is_wall))
            if on
        )
        return f"Node({self.row}, {self.col}{', ' + flags if flags else ''})"
