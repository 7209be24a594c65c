"""
Search algorithms module.

Provides the shortest-path engine:
- Dijkstra: Closest-first expansion
- BellmanFord: Repeated edge relaxation, batched by round
- AStar: Manhattan-guided best-first expansion
- reconstruct_path: Back-link walk from finish to start
"""

from src.search.astar import AStar, manhattan_distance
from src.search.base import SearchAlgorithm, SearchResult
from src.search.bellman_ford import BellmanFord
from src.search.dijkstra import Dijkstra
from src.search.path import path_exists, reconstruct_path
from src.search.state import UNREACHED, SearchState, SearchStates

__all__ = [
    "SearchAlgorithm",
    "SearchResult",
    "SearchState",
    "SearchStates",
    "UNREACHED",
    "Dijkstra",
    "BellmanFord",
    "AStar",
    "manhattan_distance",
    "reconstruct_path",
    "path_exists",
    "ALGORITHM_NAMES",
    "get_algorithm",
]

ALGORITHM_NAMES = ["dijkstra", "bellman-ford", "astar"]


def get_algorithm(name: str) -> SearchAlgorithm:
    """
    Get a search algorithm by name.

    Args:
        name: Algorithm identifier (dijkstra, bellman-ford, astar or a*)

    Returns:
        Instantiated algorithm

    Raises:
        ValueError: If algorithm name is unknown
    """
    algorithms = {
        "dijkstra": Dijkstra,
        "bellman-ford": BellmanFord,
        "astar": AStar,
        "a*": AStar,
    }

    key = name.strip().lower()
    if key not in algorithms:
        available = ", ".join(ALGORITHM_NAMES)
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    return algorithms[key]()
