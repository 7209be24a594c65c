"""
Per-run search bookkeeping, kept apart from the static grid.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

from src.grid.model import Grid
from src.grid.node import Coord, Node

# Distance of a node the search has not reached
UNREACHED = math.inf


@dataclass
class SearchState:
    """
    Scratch data for one node during one search.

    Attributes:
        distance: Best known cost from the start (A*'s g score)
        f: A* priority, distance + heuristic
        is_visited: Whether the node is already in the visitation trace
        previous: (row, col) of the predecessor on the best known path
    """

    distance: float = UNREACHED
    f: float = UNREACHED
    is_visited: bool = False
    previous: Coord | None = None

    @property
    def g(self) -> float:
        """Alias for distance, as A* calls it."""
        return self.distance

    @property
    def is_reached(self) -> bool:
        return self.distance != UNREACHED

    def reset(self) -> None:
        self.distance = UNREACHED
        self.f = UNREACHED
        self.is_visited = False
        self.previous = None


@dataclass
class SearchStates:
    """
    Mapping from node coordinate to SearchState for one grid.

    A store belongs to exactly one search at a time. Algorithms reset
    every entry before they start, so a store can be reused between
    runs on the same grid.
    """

    rows: int
    cols: int
    _states: dict[Coord, SearchState] = field(default_factory=dict, repr=False)

    @classmethod
    def fresh(cls, grid: Grid) -> SearchStates:
        """Create a store with every node at its initial sentinel values."""
        states = cls(rows=grid.rows, cols=grid.cols)
        for node in grid:
            states._states[node.coord] = SearchState()
        return states

    def reset(self) -> None:
        """Return every entry to its initial sentinel values."""
        for state in self._states.values():
            state.reset()

    def fits(self, grid: Grid) -> bool:
        """Whether this store has an entry for every node of `grid`."""
        return (self.rows, self.cols) == (grid.rows, grid.cols)

    def __getitem__(self, key: Node | Coord) -> SearchState:
        coord = key.coord if isinstance(key, Node) else key
        return self._states[coord]

    def __contains__(self, key: object) -> bool:
        coord = key.coord if isinstance(key, Node) else key
        return coord in self._states

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def visited_count(self) -> int:
        return sum(1 for state in self._states.values() if state.is_visited)
