"""
Tests for configuration defaults.
"""

from src import config


class TestConfig:
    """Test the configured grid defaults."""

    def test_default_checks_pass(self):
        """The shipped defaults describe a usable grid."""
        assert config.get_failed_config_checks() == []

    def test_finish_is_bottom_right(self):
        assert config.DEFAULT_FINISH == (config.GRID_ROWS - 1, config.GRID_COLS - 1)

    def test_animation_delays(self):
        """Path frames are slower than visited frames."""
        assert config.VISIT_DELAY_MS < config.PATH_DELAY_MS < config.COST_REVEAL_DELAY_MS

    def test_results_under_data_dir(self):
        assert config.BENCHMARK_RESULTS_PATH.parent == config.DATA_DIR

    def test_project_root(self, project_root):
        """PROJECT_ROOT should point at the repository root."""
        assert config.PROJECT_ROOT.resolve() == project_root.resolve()
