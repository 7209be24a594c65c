"""
Visualizer orchestration module.

Provides the state machine between user input and the search engine:
- VisualizerState: Immutable snapshot the UI draws from
- reduce: (state, action) -> state transitions
- run_search: Timed search + path reconstruction
- build_animation: Deferred frames for playback
- render_ascii: Text rendering for the CLI
"""

from src.visualizer.engine import AnimationFrame, build_animation, run_search
from src.visualizer.reducer import clamp_coordinate, format_execution_time, initial_state, reduce
from src.visualizer.render import render_ascii
from src.visualizer.state import (
    ApplyEndpoints,
    ClearWalls,
    LoadWalls,
    Phase,
    RevealCost,
    SearchRun,
    SelectAlgorithm,
    SetFinish,
    SetStart,
    ToggleWall,
    ToggleWalls,
    VisualizerState,
    Visualize,
)

__all__ = [
    "AnimationFrame",
    "build_animation",
    "run_search",
    "clamp_coordinate",
    "format_execution_time",
    "initial_state",
    "reduce",
    "render_ascii",
    "Phase",
    "SearchRun",
    "VisualizerState",
    "SetStart",
    "SetFinish",
    "SelectAlgorithm",
    "ApplyEndpoints",
    "ToggleWall",
    "ToggleWalls",
    "ClearWalls",
    "LoadWalls",
    "Visualize",
    "RevealCost",
]
