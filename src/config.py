"""
Configuration constants for the Grid Pathfinding Visualizer.

All paths, grid defaults, and tunable parameters are defined here.
Any value read from the environment can also be set in a local .env file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of src/
PROJECT_ROOT = Path(__file__).parent.parent

# Data directory (benchmark results)
DATA_DIR = PROJECT_ROOT / "data"

# Benchmark results, one JSON object per line
BENCHMARK_RESULTS_PATH = DATA_DIR / "benchmark_results.jsonl"

# =============================================================================
# Grid Configuration
# =============================================================================

# Reference grid size (15 rows x 40 columns)
GRID_ROWS = int(os.environ.get("GRID_ROWS", "15"))
GRID_COLS = int(os.environ.get("GRID_COLS", "40"))

# Default endpoints: top-left corner to bottom-right corner
DEFAULT_START = (0, 0)
DEFAULT_FINISH = (GRID_ROWS - 1, GRID_COLS - 1)

# =============================================================================
# Search Configuration
# =============================================================================

# Algorithm selected when the visualizer starts
DEFAULT_ALGORITHM = os.environ.get("DEFAULT_ALGORITHM", "dijkstra")

# Cost of moving between two orthogonally adjacent cells
EDGE_WEIGHT = 1

# =============================================================================
# Animation Configuration
# =============================================================================

# Delay between consecutive visited-cell frames (milliseconds)
VISIT_DELAY_MS = 10

# Delay between consecutive shortest-path frames (milliseconds)
PATH_DELAY_MS = 20

# Pause after the last path frame before the cost is shown (milliseconds)
COST_REVEAL_DELAY_MS = 500

# =============================================================================
# Layout Configuration
# =============================================================================

# Fraction of cells turned into walls by the "random" layout
RANDOM_WALL_DENSITY = 0.25

# Seed used by the "random" layout when none is given
RANDOM_WALL_SEED = 42

# =============================================================================
# Benchmark Configuration
# =============================================================================

# Number of random layouts per benchmark run
DEFAULT_BENCHMARK_LAYOUTS = 20

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Format shared by the scripts and the Streamlit app
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_grid_config() -> dict[str, bool]:
    """Check that the configured defaults describe a usable grid."""
    return {
        "rows_positive": GRID_ROWS > 0,
        "cols_positive": GRID_COLS > 0,
        "start_in_bounds": 0 <= DEFAULT_START[0] < GRID_ROWS and 0 <= DEFAULT_START[1] < GRID_COLS,
        "finish_in_bounds": 0 <= DEFAULT_FINISH[0] < GRID_ROWS and 0 <= DEFAULT_FINISH[1] < GRID_COLS,
        "endpoints_distinct": DEFAULT_START != DEFAULT_FINISH,
    }


def get_failed_config_checks() -> list[str]:
    """Return names of failed grid configuration checks."""
    status = validate_grid_config()
    return [name for name, ok in status.items() if not ok]
