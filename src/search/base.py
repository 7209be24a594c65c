"""
Search algorithm base class and result record.

All algorithms implement run() over a prepared SearchStates store;
search() is the public entry point that allocates or resets the store.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from src.grid.model import Grid
from src.grid.node import Node
from src.search.state import SearchStates

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """
    Output of a single search.

    Attributes:
        algorithm: Name of the algorithm that produced it
        visited: Nodes in the order they were finalized (the visitation trace)
        states: Per-node bookkeeping after the search, used for path reconstruction
        negative_cycle: Whether a relaxable edge remained after the last pass
            (Bellman-Ford only)
        passes: Number of relaxation passes performed (Bellman-Ford only)
    """

    algorithm: str
    visited: list[Node]
    states: SearchStates
    negative_cycle: bool = False
    passes: int = 0

    @property
    def visited_count(self) -> int:
        return len(self.visited)


class SearchAlgorithm(ABC):
    """
    Abstract base class for grid shortest-path algorithms.

    Implementations take a grid plus start and finish nodes belonging to
    it, fill a SearchStates store and return the visitation trace. The
    grid itself is never modified.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier (e.g., 'dijkstra', 'astar')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the strategy."""
        ...

    @abstractmethod
    def run(self, grid: Grid, start: Node, finish: Node, states: SearchStates) -> SearchResult:
        """
        Run the search on a freshly reset store.

        Args:
            grid: Grid to search
            start: Start node (must belong to grid)
            finish: Finish node (must belong to grid)
            states: Store with every entry at its initial values

        Returns:
            SearchResult with the visitation trace
        """
        ...

    def search(
        self,
        grid: Grid,
        start: Node,
        finish: Node,
        states: SearchStates | None = None,
    ) -> SearchResult:
        """
        Search from start to finish.

        Args:
            grid: Grid to search
            start: Start node (must belong to grid)
            finish: Finish node (must belong to grid)
            states: Optional store to reuse. It is reset before the search,
                so reusing a store gives the same result as a fresh one.

        Returns:
            SearchResult with the visitation trace and filled store

        Raises:
            ValueError: If `states` was built for a different grid size
        """
        if states is None:
            states = SearchStates.fresh(grid)
        elif not states.fits(grid):
            raise ValueError(
                f"Search state store is {states.rows}x{states.cols}, "
                f"grid is {grid.rows}x{grid.cols}"
            )
        else:
            states.reset()

        logger.debug(f"{self.name}: searching {start.coord} -> {finish.coord}")
        result = self.run(grid, start, finish, states)
        logger.debug(f"{self.name}: visited {result.visited_count} nodes")
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
