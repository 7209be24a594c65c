"""
Unit tests for the benchmark runner and result storage.
"""

import json

import pytest

from src.benchmark import (
    BenchmarkResult,
    Problem,
    append_result,
    check_agreement,
    load_results,
    make_problems,
    run_case,
    summarize,
)
from src.search import ALGORITHM_NAMES


@pytest.fixture
def problems():
    """Small problem set: empty, barrier and two random layouts."""
    return make_problems(10, 20, (0, 0), (9, 19), random_layouts=2)


def make_result(algorithm, problem="p", path_length=10, visited=50, time_ms=1.0):
    return BenchmarkResult(
        algorithm=algorithm,
        problem=problem,
        layout="empty",
        path_found=path_length > 0,
        path_length=path_length,
        visited_count=visited,
        time_ms=time_ms,
    )


class TestProblems:
    """Test problem generation."""

    def test_count_and_layouts(self, problems):
        """Fixed layouts first, then one per random seed."""
        assert len(problems) == 4
        assert [p.layout for p in problems] == ["empty", "barrier", "random", "random"]
        assert [p.seed for p in problems[2:]] == [0, 1]

    def test_keys_unique(self, problems):
        assert len({p.key for p in problems}) == len(problems)

    def test_build_grid_reproducible(self, problems):
        """The same problem always builds the same grid."""
        random_problem = problems[2]
        assert random_problem.build_grid() == random_problem.build_grid()

    def test_build_grid_keeps_endpoints_open(self, problems):
        for problem in problems:
            grid = problem.build_grid()
            assert not grid.start.is_wall
            assert not grid.finish.is_wall


class TestRunCase:
    """Test running one algorithm on one problem."""

    @pytest.mark.parametrize("algorithm", ALGORITHM_NAMES)
    def test_empty_layout(self, algorithm):
        """Corner to corner on 10x20 is 29 nodes."""
        problem = Problem("empty", 0, 10, 20, (0, 0), (9, 19))
        result = run_case(algorithm, problem)
        assert result.algorithm == algorithm
        assert result.problem == problem.key
        assert result.path_found
        assert result.path_length == 29
        assert result.visited_count > 0
        assert result.negative_cycle is False

    def test_algorithms_agree(self, problems):
        """All algorithms report the same lengths on every problem."""
        results = [run_case(name, p) for p in problems for name in ALGORITHM_NAMES]
        assert check_agreement(results) == []


class TestStorage:
    """Test JSONL persistence."""

    def test_append_and_load(self, tmp_path):
        """Results should round-trip through the file."""
        path = tmp_path / "nested" / "results.jsonl"
        first = make_result("dijkstra")
        second = make_result("astar", visited=20)
        append_result(path, first)
        append_result(path, second)

        assert load_results(path) == [first, second]

    def test_missing_file(self, tmp_path):
        """A missing file means no results yet."""
        assert load_results(tmp_path / "none.jsonl") == []

    def test_malformed_lines_skipped(self, tmp_path):
        """Broken lines are skipped, valid ones kept."""
        path = tmp_path / "results.jsonl"
        good = make_result("dijkstra")
        path.write_text(
            "not json\n"
            + json.dumps({"algorithm": "astar"}) + "\n"
            + "\n"
            + json.dumps(good.__dict__) + "\n",
            encoding="utf-8",
        )
        assert load_results(path) == [good]


class TestSummaries:
    """Test aggregation."""

    def test_summarize(self):
        """Averages per algorithm, fewest visited first."""
        results = [
            make_result("dijkstra", visited=100, time_ms=2.0),
            make_result("dijkstra", visited=80, time_ms=4.0),
            make_result("astar", visited=30, time_ms=1.0),
            make_result("astar", path_length=0, visited=10, time_ms=3.0),
        ]
        summaries = summarize(results)

        assert [s.algorithm for s in summaries] == ["astar", "dijkstra"]
        astar, dijkstra = summaries
        assert astar.runs == 2
        assert astar.paths_found == 1
        assert astar.avg_path_length == 10.0
        assert astar.avg_visited == 20.0
        assert dijkstra.avg_time_ms == 3.0
        assert dijkstra.median_time_ms == 3.0

    def test_summarize_empty(self):
        assert summarize([]) == []

    def test_check_agreement_flags_mismatch(self):
        """Problems with differing path lengths are reported."""
        results = [
            make_result("dijkstra", problem="a", path_length=10),
            make_result("astar", problem="a", path_length=10),
            make_result("dijkstra", problem="b", path_length=10),
            make_result("astar", problem="b", path_length=12),
        ]
        assert check_agreement(results) == ["b"]
