"""
Dijkstra's algorithm on a uniform-cost grid.
"""

from __future__ import annotations

import heapq
import itertools
import logging

from src.config import EDGE_WEIGHT
from src.grid.model import Grid
from src.grid.neighbors import get_neighbors
from src.grid.node import Node
from src.search.base import SearchAlgorithm, SearchResult
from src.search.state import SearchStates

logger = logging.getLogger(__name__)


class Dijkstra(SearchAlgorithm):
    """
    Dijkstra's shortest-path search.

    The frontier is a binary heap keyed on (distance, insertion order),
    so nodes at equal distance come out in the order they were
    discovered. A node may be pushed more than once; only its first pop
    counts, later copies are dropped. Walls never enter the frontier.
    """

    @property
    def name(self) -> str:
        return "dijkstra"

    @property
    def description(self) -> str:
        return "Dijkstra: expands the closest unvisited node first"

    def run(self, grid: Grid, start: Node, finish: Node, states: SearchStates) -> SearchResult:
        visited: list[Node] = []
        result = SearchResult(algorithm=self.name, visited=visited, states=states)

        if start.is_wall:
            logger.info("Dijkstra: start node is a wall, nothing to search")
            return result

        states[start].distance = 0
        counter = itertools.count()
        frontier: list[tuple[float, int, Node]] = [(0, next(counter), start)]

        while frontier:
            _, _, current = heapq.heappop(frontier)
            current_state = states[current]
            if current_state.is_visited:
                continue

            current_state.is_visited = True
            visited.append(current)

            if current.coord == finish.coord:
                return result

            for neighbor in get_neighbors(current, grid):
                if neighbor.is_wall:
                    continue
                neighbor_state = states[neighbor]
                if neighbor_state.is_visited:
                    continue

                new_distance = current_state.distance + EDGE_WEIGHT
                if new_distance < neighbor_state.distance:
                    neighbor_state.distance = new_distance
                    neighbor_state.previous = current.coord
                    heapq.heappush(frontier, (new_distance, next(counter), neighbor))

        logger.info(f"Dijkstra: frontier exhausted, {finish.coord} unreachable")
        return result
