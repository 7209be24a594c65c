"""
Unit tests for the individual search algorithms.
"""

import logging
import math

import pytest

from src.grid import Grid, enclosing_walls
from src.search import (
    AStar,
    BellmanFord,
    Dijkstra,
    SearchStates,
    get_algorithm,
    manhattan_distance,
    reconstruct_path,
)
from src.search.astar import _OpenSet


def coords(nodes) -> list[tuple[int, int]]:
    return [node.coord for node in nodes]


@pytest.fixture
def enclosed_grid() -> Grid:
    """5x5 grid whose finish at (4, 4) is walled in."""
    return Grid.build(5, 5, (0, 0), (4, 4), walls=enclosing_walls(5, 5, (4, 4)))


class TestRegistry:
    """Test algorithm lookup by name."""

    def test_known_names(self):
        """Each canonical name should map to its class."""
        assert isinstance(get_algorithm("dijkstra"), Dijkstra)
        assert isinstance(get_algorithm("bellman-ford"), BellmanFord)
        assert isinstance(get_algorithm("astar"), AStar)

    def test_aliases(self):
        """'a*' and mixed case should resolve too."""
        assert isinstance(get_algorithm("A*"), AStar)
        assert isinstance(get_algorithm(" Dijkstra "), Dijkstra)

    def test_unknown_name(self):
        """Unknown names should raise with the available list."""
        with pytest.raises(ValueError, match="Available"):
            get_algorithm("bfs")

    def test_names_round_trip(self):
        """Instances should report their canonical name."""
        for name in ("dijkstra", "bellman-ford", "astar"):
            assert get_algorithm(name).name == name


class TestSearchStates:
    """Test the per-run bookkeeping store."""

    def test_fresh_values(self, small_grid):
        """Fresh entries should be unreached, unvisited, unlinked."""
        states = SearchStates.fresh(small_grid)
        assert len(states) == 25
        state = states[(2, 3)]
        assert state.distance == math.inf
        assert state.f == math.inf
        assert state.is_visited is False
        assert state.previous is None

    def test_lookup_by_node(self, small_grid):
        """Nodes and coordinates should address the same entry."""
        states = SearchStates.fresh(small_grid)
        assert states[small_grid[(1, 1)]] is states[(1, 1)]

    def test_reset(self, small_grid):
        """reset should restore every sentinel."""
        states = SearchStates.fresh(small_grid)
        states[(1, 1)].distance = 3
        states[(1, 1)].is_visited = True
        states[(1, 1)].previous = (0, 1)
        states.reset()
        assert not states[(1, 1)].is_reached
        assert states[(1, 1)].previous is None
        assert states.visited_count() == 0

    def test_mismatched_store_rejected(self, small_grid, empty_grid):
        """A store for another grid size should be refused."""
        states = SearchStates.fresh(small_grid)
        with pytest.raises(ValueError):
            Dijkstra().search(empty_grid, empty_grid.start, empty_grid.finish, states)


class TestDijkstra:
    """Test Dijkstra's algorithm."""

    def test_trace_starts_at_start_ends_at_finish(self, small_grid):
        """Start is popped first, finish last."""
        result = Dijkstra().search(small_grid, small_grid.start, small_grid.finish)
        assert result.visited[0] == small_grid.start
        assert result.visited[-1] == small_grid.finish

    def test_equal_distance_insertion_order(self, small_grid):
        """Nodes at equal distance come out in discovery order."""
        result = Dijkstra().search(small_grid, small_grid.start, small_grid.finish)
        assert coords(result.visited[:6]) == [(0, 0), (1, 0), (0, 1), (2, 0), (1, 1), (0, 2)]

    def test_visits_each_node_once(self, empty_grid):
        """No node should appear twice in the trace."""
        result = Dijkstra().search(empty_grid, empty_grid.start, empty_grid.finish)
        assert len(set(coords(result.visited))) == len(result.visited)

    def test_distances(self, small_grid):
        """Finish distance should be the Manhattan distance."""
        result = Dijkstra().search(small_grid, small_grid.start, small_grid.finish)
        assert result.states[small_grid.finish].distance == 8

    def test_stops_at_finish(self):
        """Nodes farther than the finish should not be visited."""
        grid = Grid.build(1, 10, (0, 0), (0, 3))
        result = Dijkstra().search(grid, grid.start, grid.finish)
        assert coords(result.visited) == [(0, 0), (0, 1), (0, 2), (0, 3)]

    def test_walls_never_visited(self, barrier_grid):
        """Walls should never enter the trace."""
        result = Dijkstra().search(barrier_grid, barrier_grid.start, barrier_grid.finish)
        assert not any(node.is_wall for node in result.visited)

    def test_unreachable_finish(self, enclosed_grid):
        """All reachable nodes are visited, then the search gives up."""
        result = Dijkstra().search(enclosed_grid, enclosed_grid.start, enclosed_grid.finish)
        assert len(result.visited) == 25 - 3
        assert enclosed_grid.finish not in result.visited

    def test_walled_start(self, small_grid):
        """A walled start should produce an empty trace."""
        grid = small_grid.with_wall_toggled((0, 0))
        result = Dijkstra().search(grid, grid.start, grid.finish)
        assert result.visited == []


class TestBellmanFord:
    """Test Bellman-Ford."""

    def test_visits_all_reachable(self, small_grid):
        """No early exit at the finish: every reachable node is visited."""
        result = BellmanFord().search(small_grid, small_grid.start, small_grid.finish)
        assert len(result.visited) == 25

    def test_row_major_batches(self, small_grid):
        """From the top-left, one pass reaches everything, reported row-major."""
        result = BellmanFord().search(small_grid, small_grid.start, small_grid.finish)
        assert coords(result.visited) == [node.coord for node in small_grid]

    def test_fixed_point_early_exit(self, small_grid):
        """A pass without updates should end the loop."""
        result = BellmanFord().search(small_grid, small_grid.start, small_grid.finish)
        assert result.passes == 2

    def test_first_round_batch(self):
        """Nodes reached in the same round are ordered row-major, not by discovery."""
        grid = Grid.build(5, 5, (4, 4), (0, 0))
        result = BellmanFord().search(grid, grid.start, grid.finish)
        assert coords(result.visited[:3]) == [(3, 4), (4, 3), (4, 4)]

    def test_distances(self, barrier_grid):
        """Distances should match Dijkstra's."""
        bf = BellmanFord().search(barrier_grid, barrier_grid.start, barrier_grid.finish)
        dj = Dijkstra().search(barrier_grid, barrier_grid.start, barrier_grid.finish)
        finish = barrier_grid.finish
        assert bf.states[finish].distance == dj.states[finish].distance

    def test_unreachable_finish(self, enclosed_grid):
        """Enclosed finish is never reached."""
        result = BellmanFord().search(enclosed_grid, enclosed_grid.start, enclosed_grid.finish)
        assert enclosed_grid.finish not in result.visited
        assert len(result.visited) == 22
        assert result.negative_cycle is False

    def test_walled_start(self, small_grid):
        """A walled start is neither expanded nor visited."""
        grid = small_grid.with_wall_toggled((0, 0))
        result = BellmanFord().search(grid, grid.start, grid.finish)
        assert result.visited == []
        assert result.passes == 1

    def test_negative_cycle_warning(self, small_grid, monkeypatch, caplog):
        """A residual relaxable edge is logged but does not change the trace."""
        baseline = BellmanFord().search(small_grid, small_grid.start, small_grid.finish)

        monkeypatch.setattr(BellmanFord, "_has_relaxable_edge", lambda self, grid, states: True)
        with caplog.at_level(logging.WARNING, logger="src.search.bellman_ford"):
            result = BellmanFord().search(small_grid, small_grid.start, small_grid.finish)

        assert result.negative_cycle is True
        assert "negative weight cycle" in caplog.text
        assert coords(result.visited) == coords(baseline.visited)

    def test_no_residual_edges_on_unit_grid(self, barrier_grid):
        """With unit weights the post-pass scan finds nothing."""
        result = BellmanFord().search(barrier_grid, barrier_grid.start, barrier_grid.finish)
        assert result.negative_cycle is False


class TestOpenSet:
    """Test A*'s decrease-key priority queue."""

    def test_orders_by_f_then_g(self):
        """Lower f first; on equal f, lower g first."""
        grid = Grid.build(1, 4, (0, 0), (0, 3))
        open_set = _OpenSet()
        open_set.push(grid[(0, 1)], f=5, g=3)
        open_set.push(grid[(0, 2)], f=5, g=1)
        open_set.push(grid[(0, 3)], f=4, g=4)
        assert [open_set.pop().coord for _ in range(3)] == [(0, 3), (0, 2), (0, 1)]

    def test_insertion_order_breaks_full_ties(self):
        """Equal (f, g) should pop in insertion order."""
        grid = Grid.build(1, 4, (0, 0), (0, 3))
        open_set = _OpenSet()
        for col in (2, 0, 3):
            open_set.push(grid[(0, col)], f=1, g=1)
        assert [open_set.pop().coord for _ in range(3)] == [(0, 2), (0, 0), (0, 3)]

    def test_update_in_place(self):
        """Re-pushing a node should keep one live entry with the new priority."""
        grid = Grid.build(1, 4, (0, 0), (0, 3))
        open_set = _OpenSet()
        open_set.push(grid[(0, 1)], f=9, g=9)
        open_set.push(grid[(0, 2)], f=5, g=5)
        open_set.push(grid[(0, 1)], f=3, g=3)
        assert len(open_set) == 2
        assert grid[(0, 1)] in open_set
        assert open_set.pop().coord == (0, 1)
        assert open_set.pop().coord == (0, 2)
        assert len(open_set) == 0

    def test_update_keeps_insertion_position(self):
        """An updated node keeps its original place among equal priorities."""
        grid = Grid.build(1, 4, (0, 0), (0, 3))
        open_set = _OpenSet()
        open_set.push(grid[(0, 1)], f=9, g=9)
        open_set.push(grid[(0, 2)], f=5, g=5)
        open_set.push(grid[(0, 1)], f=5, g=5)
        assert open_set.pop().coord == (0, 1)

    def test_pop_empty(self):
        """Popping an empty open set should raise KeyError."""
        with pytest.raises(KeyError):
            _OpenSet().pop()


class TestAStar:
    """Test A* search."""

    def test_manhattan_distance(self, empty_grid):
        """Heuristic is |d_row| + |d_col|."""
        assert manhattan_distance(empty_grid.start, empty_grid.finish) == 53
        assert manhattan_distance(empty_grid[(3, 4)], empty_grid[(3, 4)]) == 0

    def test_trace_ends_at_finish(self, small_grid):
        """The search stops as soon as the finish is popped."""
        result = AStar().search(small_grid, small_grid.start, small_grid.finish)
        assert result.visited[0] == small_grid.start
        assert result.visited[-1] == small_grid.finish

    def test_f_scores(self, small_grid):
        """f should equal g plus the heuristic for reached nodes."""
        result = AStar().search(small_grid, small_grid.start, small_grid.finish)
        for node in result.visited:
            state = result.states[node]
            assert state.f == state.g + manhattan_distance(node, small_grid.finish)

    def test_straight_corridor(self):
        """In a corridor A* should visit only the cells on the way."""
        grid = Grid.build(1, 10, (0, 2), (0, 6))
        result = AStar().search(grid, grid.start, grid.finish)
        assert coords(result.visited) == [(0, 2), (0, 3), (0, 4), (0, 5), (0, 6)]

    def test_fewer_visits_than_dijkstra_on_open_grid(self):
        """Heuristic guidance should pay off when the finish is close."""
        grid = Grid.build(15, 40, (7, 10), (7, 20))
        astar = AStar().search(grid, grid.start, grid.finish)
        dijkstra = Dijkstra().search(grid, grid.start, grid.finish)
        assert len(astar.visited) < len(dijkstra.visited)

    def test_walled_start_discarded(self, small_grid):
        """A walled start is popped and discarded without being visited."""
        grid = small_grid.with_wall_toggled((0, 0))
        result = AStar().search(grid, grid.start, grid.finish)
        assert result.visited == []

    def test_unreachable_finish(self, enclosed_grid):
        """Open set exhausts; every reachable node ends up visited."""
        result = AStar().search(enclosed_grid, enclosed_grid.start, enclosed_grid.finish)
        assert len(result.visited) == 22
        assert reconstruct_path(enclosed_grid, result.states, enclosed_grid.finish) == [
            enclosed_grid.finish
        ]
