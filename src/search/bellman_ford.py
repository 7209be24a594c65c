"""
Bellman-Ford on a uniform-cost grid.

Visits are reported in batches: after each relaxation pass, every node
that became reachable is appended in row-major order. The trace
therefore shows how far the search got per round, not the exact moment
each node was discovered.
"""

from __future__ import annotations

import logging

from src.config import EDGE_WEIGHT
from src.grid.model import Grid
from src.grid.neighbors import get_neighbors
from src.grid.node import Node
from src.search.base import SearchAlgorithm, SearchResult
from src.search.state import SearchStates

logger = logging.getLogger(__name__)


class BellmanFord(SearchAlgorithm):
    """
    Bellman-Ford shortest-path search.

    Runs up to V-1 passes over every reachable non-wall node, stopping
    early at a fixed point. Does not stop when the finish is reached.
    """

    @property
    def name(self) -> str:
        return "bellman-ford"

    @property
    def description(self) -> str:
        return "Bellman-Ford: relaxes every edge each round until nothing changes"

    def _relax_pass(self, grid: Grid, states: SearchStates) -> bool:
        """Relax all edges out of reachable non-wall nodes once. Returns True if anything changed."""
        updated = False
        for node in grid:
            state = states[node]
            if node.is_wall or not state.is_reached:
                continue
            for neighbor in get_neighbors(node, grid):
                if neighbor.is_wall:
                    continue
                neighbor_state = states[neighbor]
                new_distance = state.distance + EDGE_WEIGHT
                if new_distance < neighbor_state.distance:
                    neighbor_state.distance = new_distance
                    neighbor_state.previous = node.coord
                    updated = True
        return updated

    def _has_relaxable_edge(self, grid: Grid, states: SearchStates) -> bool:
        """Whether any edge could still be relaxed (a negative cycle, with general weights)."""
        for node in grid:
            state = states[node]
            if node.is_wall or not state.is_reached:
                continue
            for neighbor in get_neighbors(node, grid):
                if neighbor.is_wall:
                    continue
                if state.distance + EDGE_WEIGHT < states[neighbor].distance:
                    return True
        return False

    def run(self, grid: Grid, start: Node, finish: Node, states: SearchStates) -> SearchResult:
        visited: list[Node] = []
        result = SearchResult(algorithm=self.name, visited=visited, states=states)

        states[start].distance = 0
        node_count = len(grid)

        for _ in range(node_count - 1):
            updated = self._relax_pass(grid, states)
            result.passes += 1

            # Batch everything reached so far into the trace, row-major
            for node in grid:
                state = states[node]
                if state.is_reached and not state.is_visited and not node.is_wall:
                    state.is_visited = True
                    visited.append(node)

            if not updated:
                break

        if self._has_relaxable_edge(grid, states):
            result.negative_cycle = True
            logger.warning("Bellman-Ford: graph contains a negative weight cycle")

        logger.debug(
            f"Bellman-Ford: {result.passes} passes, "
            f"finish {'reached' if states[finish].is_reached else 'unreachable'}"
        )
        return result
