import pytest

from ricochet.game.board import CellType
from ricochet.game.board_builder import BoardBuilder, BoardConfig
from ricochet.game.notation import format_puzzle


class TestBoardBuilder:
    def test_deterministic_generation(self):
        config = BoardConfig(board_w=7, board_h=6, num_blockers=9, num_helpers=2)

        first = BoardBuilder(config, seed=42).generate_puzzle()
        second = BoardBuilder(config, seed=42).generate_puzzle()

        assert format_puzzle(first) == format_puzzle(second)

    def test_generated_puzzles_are_valid(self):
        config = BoardConfig(board_w=5, board_h=5, num_blockers=6, num_helpers=3)
        puzzles = BoardBuilder(config, seed=7).generate_puzzles(20)

        assert len(puzzles) == 20
        for puzzle in puzzles:
            assert puzzle.validate() == []

    def test_element_counts(self):
        config = BoardConfig(
            board_w=8, board_h=8, num_blockers=8, num_helpers=2, num_goals=2
        )
        puzzle = BoardBuilder(config, seed=1).generate_puzzle("Counted")

        assert puzzle.name == "Counted"
        assert puzzle.board.dimensions() == (8, 8)
        assert puzzle.board.count_cells(CellType.WALL) == 8
        assert puzzle.board.count_cells(CellType.GOAL) == 2
        assert puzzle.board.count_cells(CellType.START) == 1
        assert puzzle.num_helpers == 2

    def test_full_board(self):
        config = BoardConfig(board_w=2, board_h=2, num_blockers=1, num_helpers=1)
        puzzle = BoardBuilder(config, seed=3).generate_puzzle()

        assert puzzle.validate() == []


class TestBoardConfig:
    def test_defaults(self):
        config = BoardConfig()
        assert (config.board_w, config.board_h) == (8, 8)
        assert config.num_helpers == 2

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"board_w": 0},
            {"board_h": 17},
            {"num_blockers": -1},
            {"num_helpers": -1},
            {"num_goals": 0},
            {"board_w": 2, "board_h": 2, "num_blockers": 2, "num_helpers": 1},
        ],
    )
    def test_invalid_config(self, kwargs):
        with pytest.raises(ValueError):
            BoardConfig(**kwargs)
