"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from src.grid import Grid, barrier_walls
from src.search import ALGORITHM_NAMES, get_algorithm


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def empty_grid() -> Grid:
    """Reference 15x40 grid, corner to corner, no walls."""
    return Grid.build(15, 40, (0, 0), (14, 39))


@pytest.fixture
def small_grid() -> Grid:
    """5x5 grid from (0, 0) to (4, 4), no walls."""
    return Grid.build(5, 5, (0, 0), (4, 4))


@pytest.fixture
def barrier_grid() -> Grid:
    """15x40 grid with a 13-row wall in column 20, open at rows 13-14."""
    walls = barrier_walls(15, 20, length=13)
    return Grid.build(15, 40, (7, 5), (7, 35), walls=walls)


@pytest.fixture(params=ALGORITHM_NAMES)
def algorithm(request):
    """Each search algorithm in turn."""
    return get_algorithm(request.param)
