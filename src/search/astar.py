"""
A* search with a Manhattan-distance heuristic.
"""

from __future__ import annotations

import heapq
import itertools
import logging

from src.config import EDGE_WEIGHT
from src.grid.model import Grid
from src.grid.neighbors import get_neighbors
from src.grid.node import Coord, Node
from src.search.base import SearchAlgorithm, SearchResult
from src.search.state import SearchStates

logger = logging.getLogger(__name__)


def manhattan_distance(node_a: Node, node_b: Node) -> int:
    """|d_row| + |d_col|; admissible and consistent on a 4-connected unit grid."""
    return abs(node_a.row - node_b.row) + abs(node_a.col - node_b.col)


class _OpenSet:
    """
    Priority queue with decrease-key.

    Entries are ordered by (f, g, insertion order). Each node has at
    most one live entry; improving a node invalidates its old heap
    entry and pushes a replacement that keeps the original insertion
    order, which behaves like updating the entry in place.
    """

    def __init__(self) -> None:
        self._heap: list[list] = []
        self._entries: dict[Coord, list] = {}
        self._counter = itertools.count()

    def __contains__(self, node: Node) -> bool:
        return node.coord in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, node: Node, f: float, g: float) -> None:
        """Add `node`, or update its priority if already present."""
        existing = self._entries.get(node.coord)
        if existing is not None:
            if existing[0] == f and existing[1] == g:
                return
            existing[-1] = False
            order = existing[2]
        else:
            order = next(self._counter)
        entry = [f, g, order, node, True]
        self._entries[node.coord] = entry
        heapq.heappush(self._heap, entry)

    def pop(self) -> Node:
        """
        Remove and return the best node.

        Raises:
            KeyError: If the open set is empty
        """
        while self._heap:
            *_, node, live = heapq.heappop(self._heap)
            if live:
                del self._entries[node.coord]
                return node
        raise KeyError("pop from an empty open set")


class AStar(SearchAlgorithm):
    """
    A* shortest-path search.

    Expands nodes by lowest f = g + h, preferring lower g on ties.
    Optimal on uniform-cost grids because the Manhattan heuristic never
    overestimates.
    """

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "A*: Dijkstra guided by Manhattan distance to the finish"

    def run(self, grid: Grid, start: Node, finish: Node, states: SearchStates) -> SearchResult:
        visited: list[Node] = []
        result = SearchResult(algorithm=self.name, visited=visited, states=states)

        start_state = states[start]
        start_state.distance = 0
        start_state.f = manhattan_distance(start, finish)

        open_set = _OpenSet()
        open_set.push(start, start_state.f, start_state.distance)

        while open_set:
            current = open_set.pop()

            # Walls only get here if toggled after being queued
            if current.is_wall:
                continue

            current_state = states[current]
            if not current_state.is_visited:
                current_state.is_visited = True
                visited.append(current)

            if current.coord == finish.coord:
                return result

            for neighbor in get_neighbors(current, grid):
                if neighbor.is_wall:
                    continue

                neighbor_state = states[neighbor]
                tentative_g = current_state.distance + EDGE_WEIGHT
                if tentative_g < neighbor_state.distance:
                    neighbor_state.previous = current.coord
                    neighbor_state.distance = tentative_g
                    neighbor_state.f = tentative_g + manhattan_distance(neighbor, finish)
                    open_set.push(neighbor, neighbor_state.f, tentative_g)

        logger.info(f"A*: open set exhausted, {finish.coord} unreachable")
        return result
