"""
Visualizer state dataclasses and actions.

VisualizerState is immutable; every change goes through reduce() in
src.visualizer.reducer, which returns a new state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from src.grid.model import Grid
from src.grid.node import Coord, Node


class Phase(str, Enum):
    """Where the visualizer is in its edit/run cycle."""

    GRID_COMMITTED = "grid-committed"
    RESULTS_AVAILABLE = "results-available"


@dataclass(frozen=True)
class SearchRun:
    """
    Complete record of one timed search.

    Attributes:
        algorithm: Algorithm that ran
        start: Start coordinate
        finish: Finish coordinate
        visited: Visitation trace
        path: Reconstructed path (start to finish, or just [finish])
        execution_time_ms: Wall-clock time of search + reconstruction
        negative_cycle: Bellman-Ford's residual-relaxation warning
        timestamp: When the search ran
    """

    algorithm: str
    start: Coord
    finish: Coord
    visited: tuple[Node, ...]
    path: tuple[Node, ...]
    execution_time_ms: float
    negative_cycle: bool = False
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def path_found(self) -> bool:
        """A one-node path counts as "no path", including start == finish."""
        return len(self.path) > 1

    @property
    def cost(self) -> int:
        """
        Number of nodes on the reconstructed path.

        This is 1 when no path was found (the path is just [finish]);
        displays check path_found before showing it.
        """
        return len(self.path)

    @property
    def visited_count(self) -> int:
        return len(self.visited)


@dataclass(frozen=True)
class VisualizerState:
    """
    Everything the presentation layer needs to draw.

    Attributes:
        grid: Committed grid (walls included)
        start_input: Start coordinate as currently entered (applied on ApplyEndpoints)
        finish_input: Finish coordinate as currently entered
        algorithm: Selected algorithm name
        phase: Edit/run phase
        last_run: Most recent search, if any
        show_cost: Whether the cost display is revealed
    """

    grid: Grid
    start_input: Coord
    finish_input: Coord
    algorithm: str
    phase: Phase = Phase.GRID_COMMITTED
    last_run: SearchRun | None = None
    show_cost: bool = False

    @property
    def cost(self) -> int:
        return self.last_run.cost if self.last_run else 0

    @property
    def execution_time_ms(self) -> float:
        return self.last_run.execution_time_ms if self.last_run else 0.0

    @property
    def has_pending_endpoints(self) -> bool:
        """Whether entered endpoints differ from the committed grid's."""
        return (
            self.start_input != self.grid.start.coord
            or self.finish_input != self.grid.finish.coord
        )


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class SetStart:
    """Enter a start coordinate (raw input, clamped into bounds)."""

    row: object
    col: object


@dataclass(frozen=True)
class SetFinish:
    """Enter a finish coordinate (raw input, clamped into bounds)."""

    row: object
    col: object


@dataclass(frozen=True)
class SelectAlgorithm:
    name: str


@dataclass(frozen=True)
class ApplyEndpoints:
    """Rebuild the grid with the entered endpoints; clears walls."""


@dataclass(frozen=True)
class ToggleWall:
    row: int
    col: int


@dataclass(frozen=True)
class ToggleWalls:
    """Toggle several cells in order, like dragging across the grid."""

    cells: tuple[Coord, ...]


@dataclass(frozen=True)
class ClearWalls:
    pass


@dataclass(frozen=True)
class LoadWalls:
    """Replace the wall layout (endpoints are never walled)."""

    walls: tuple[Coord, ...]


@dataclass(frozen=True)
class Visualize:
    """Run the selected algorithm on a freshly reset copy of the grid."""


@dataclass(frozen=True)
class RevealCost:
    """Show the cost once the path animation has finished."""


Action = (
    SetStart
    | SetFinish
    | SelectAlgorithm
    | ApplyEndpoints
    | ToggleWall
    | ToggleWalls
    | ClearWalls
    | LoadWalls
    | Visualize
    | RevealCost
)
