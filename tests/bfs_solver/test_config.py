import pytest

from ricochet.bfs_solver.config import SolverConfig
from ricochet.game.levels import PuzzleBuilder


class TestSolverConfig:
    def test_defaults(self):
        config = SolverConfig()

        assert (config.max_width, config.max_height) == (8, 8)
        assert config.num_helpers == 2
        assert config.num_pieces == 3
        assert (config.bits_x, config.bits_y) == (3, 3)
        assert config.state_key_bits == 19
        assert config.dense_table_size == 1 << 19
        assert config.resolve_visited_strategy() == "dense"

    def test_bits_for_uneven_board(self):
        config = SolverConfig(max_width=16, max_height=5, num_helpers=1)

        assert (config.bits_x, config.bits_y) == (4, 3)
        assert config.state_key_bits == 2 * 7 + 1

    def test_single_cell_board_uses_one_bit(self):
        config = SolverConfig(max_width=1, max_height=1, num_helpers=0)

        assert (config.bits_x, config.bits_y) == (1, 1)

    def test_auto_switches_to_hash(self):
        config = SolverConfig(max_width=16, max_height=16, num_helpers=2)

        assert config.state_key_bits == 25
        assert config.resolve_visited_strategy() == "hash"

    def test_for_board(self):
        puzzle = PuzzleBuilder(5, 3).set_main((0, 0)).add_goal((4, 2)).build()

        config = SolverConfig.for_board(puzzle.board, 1, max_states=100)

        assert (config.max_width, config.max_height) == (5, 3)
        assert config.num_helpers == 1
        assert config.max_states == 100

    def test_fitted_to_keeps_other_settings(self):
        puzzle = PuzzleBuilder(4, 6).set_main((0, 0)).add_goal((3, 5)).build()
        config = SolverConfig(visited_strategy="hash", max_states=50)

        fitted = config.fitted_to(puzzle.board, 0)

        assert (fitted.max_width, fitted.max_height, fitted.num_helpers) == (4, 6, 0)
        assert fitted.visited_strategy == "hash"
        assert fitted.max_states == 50
        assert (config.max_width, config.num_helpers) == (8, 2)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_width": 0},
            {"max_height": 17},
            {"num_helpers": -1},
            {"visited_strategy": "bloom"},
            {"dense_table_limit": 0},
            {"max_states": 0},
            {"progress_interval": -5},
        ],
    )
    def test_invalid_config(self, kwargs):
        with pytest.raises(ValueError):
            SolverConfig(**kwargs)
