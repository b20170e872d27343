import pytest

from ricochet.game.board import Direction
from ricochet.game.board_builder import BoardBuilder, BoardConfig
from ricochet.game.levels import PuzzleBuilder
from ricochet.game.movement import (MOVE_ORDER, apply_move, move_piece,
                                    replay_moves, slide, successors)
from ricochet.game.state import Move, State


class TestSlide:
    def test_slides_to_board_edge(self):
        puzzle = PuzzleBuilder(5, 1).set_main((0, 0)).add_goal((4, 0)).build()

        assert slide(puzzle.board, puzzle.initial_state, 0, Direction.RIGHT) == (4, 0)

    def test_blocked_on_first_step(self):
        puzzle = PuzzleBuilder(5, 1).set_main((0, 0)).add_goal((4, 0)).build()

        assert slide(puzzle.board, puzzle.initial_state, 0, Direction.LEFT) is None
        assert slide(puzzle.board, puzzle.initial_state, 0, Direction.UP) is None
        assert move_piece(puzzle.board, puzzle.initial_state, 0, Direction.UP) is None

    def test_stops_before_wall(self):
        puzzle = (
            PuzzleBuilder(5, 1)
            .set_main((0, 0))
            .add_blocker((3, 0))
            .add_goal((4, 0))
            .build()
        )

        assert slide(puzzle.board, puzzle.initial_state, 0, Direction.RIGHT) == (2, 0)

    def test_stops_before_other_piece(self):
        puzzle = (
            PuzzleBuilder(5, 5)
            .set_main((0, 2))
            .add_helper((3, 2))
            .add_goal((4, 4))
            .build()
        )
        board, state = puzzle.board, puzzle.initial_state

        assert slide(board, state, 0, Direction.RIGHT) == (2, 2)
        assert slide(board, state, 1, Direction.LEFT) == (1, 2)
        assert slide(board, state, 1, Direction.RIGHT) == (4, 2)

    def test_adjacent_piece_blocks_first_step(self):
        puzzle = (
            PuzzleBuilder(3, 1)
            .set_main((0, 0))
            .add_helper((1, 0))
            .add_goal((2, 0))
            .build()
        )

        assert slide(puzzle.board, puzzle.initial_state, 0, Direction.RIGHT) is None


class TestGoalFlag:
    def test_main_resting_on_goal_sets_flag(self):
        puzzle = PuzzleBuilder(2, 1).set_main((0, 0)).add_goal((1, 0)).build()

        state = move_piece(puzzle.board, puzzle.initial_state, 0, Direction.RIGHT)

        assert state.main_position == (1, 0)
        assert state.goal_visited

    def test_passing_over_goal_does_not_count(self):
        puzzle = PuzzleBuilder(3, 1).set_main((0, 0)).add_goal((1, 0)).build()

        state = move_piece(puzzle.board, puzzle.initial_state, 0, Direction.RIGHT)

        assert state.main_position == (2, 0)
        assert not state.goal_visited

    def test_helper_on_goal_does_not_count(self):
        puzzle = (
            PuzzleBuilder(3, 2)
            .set_main((0, 0))
            .add_helper((0, 1))
            .add_goal((2, 1))
            .build()
        )

        state = move_piece(puzzle.board, puzzle.initial_state, 1, Direction.RIGHT)

        assert state.helper_positions == ((2, 1),)
        assert not state.goal_visited

    def test_flag_is_monotonic(self):
        config = BoardConfig(board_w=6, board_h=6, num_blockers=5, num_helpers=2)
        for seed in range(5):
            puzzle = BoardBuilder(config, seed=seed).generate_puzzle()
            state = puzzle.initial_state.with_goal_visited()

            for _, next_state in successors(puzzle.board, state):
                assert next_state.goal_visited


class TestSuccessors:
    def test_order_is_piece_major_then_left_right_up_down(self):
        puzzle = (
            PuzzleBuilder(5, 5)
            .set_main((2, 2))
            .add_helper((0, 0))
            .add_goal((4, 4))
            .build()
        )

        moves = [move for move, _ in successors(puzzle.board, puzzle.initial_state)]

        assert MOVE_ORDER == (
            Direction.LEFT,
            Direction.RIGHT,
            Direction.UP,
            Direction.DOWN,
        )
        assert moves == [
            Move(0, Direction.LEFT),
            Move(0, Direction.RIGHT),
            Move(0, Direction.UP),
            Move(0, Direction.DOWN),
            Move(1, Direction.RIGHT),
            Move(1, Direction.DOWN),
        ]

    def test_successor_states(self):
        puzzle = PuzzleBuilder(5, 5).set_main((2, 2)).add_goal((4, 4)).build()

        states = {
            move.direction: state.main_position
            for move, state in successors(puzzle.board, puzzle.initial_state)
        }

        assert states == {
            Direction.LEFT: (0, 2),
            Direction.RIGHT: (4, 2),
            Direction.UP: (2, 0),
            Direction.DOWN: (2, 4),
        }

    def test_no_self_loops(self):
        config = BoardConfig(board_w=6, board_h=6, num_blockers=10, num_helpers=2)
        for seed in range(10):
            puzzle = BoardBuilder(config, seed=seed).generate_puzzle()
            state = puzzle.initial_state

            for _, next_state in successors(puzzle.board, state):
                assert next_state != state

    def test_exactly_one_piece_moves(self):
        config = BoardConfig(board_w=6, board_h=6, num_blockers=6, num_helpers=2)
        for seed in range(10):
            puzzle = BoardBuilder(config, seed=seed).generate_puzzle()
            state = puzzle.initial_state

            for move, next_state in successors(puzzle.board, state):
                changed = [
                    i
                    for i in range(state.num_pieces)
                    if state.positions[i] != next_state.positions[i]
                ]
                assert changed == [move.piece]
                assert len(set(next_state.positions)) == next_state.num_pieces
                assert not puzzle.board.is_wall(next_state.positions[move.piece])

    def test_enclosed_piece_has_no_moves(self):
        puzzle = (
            PuzzleBuilder(3, 3)
            .set_main((1, 1))
            .add_blockers([(1, 0), (0, 1), (2, 1), (1, 2)])
            .add_goal((0, 0))
            .build()
        )

        assert successors(puzzle.board, puzzle.initial_state) == []


class TestReplay:
    def test_replay_moves(self):
        puzzle = PuzzleBuilder(2, 1).set_main((0, 0)).add_goal((1, 0)).build()
        moves = [Move(0, Direction.RIGHT), Move(0, Direction.LEFT)]

        states = replay_moves(puzzle.board, puzzle.initial_state, moves)

        assert len(states) == 3
        assert states[-1] == State(((0, 0),), True)

    def test_replay_rejects_blocked_move(self):
        puzzle = PuzzleBuilder(2, 1).set_main((0, 0)).add_goal((1, 0)).build()

        with pytest.raises(ValueError):
            replay_moves(puzzle.board, puzzle.initial_state, [Move(0, Direction.LEFT)])

    def test_apply_move_unknown_piece(self):
        puzzle = PuzzleBuilder(2, 1).set_main((0, 0)).add_goal((1, 0)).build()

        with pytest.raises(ValueError):
            apply_move(puzzle.board, puzzle.initial_state, Move(1, Direction.LEFT))
