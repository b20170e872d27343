from ricochet.game.board import Direction
from ricochet.game.levels import PuzzleBuilder
from ricochet.game.state import Move, State
from ricochet.game.visualization import (HeadlessVisualizer, format_moves,
                                         render_state)


class TestRenderState:
    def test_pieces_and_cells(self):
        puzzle = (
            PuzzleBuilder(4, 2)
            .set_main((0, 0))
            .add_goal((1, 0))
            .add_helper((3, 0))
            .add_blocker((2, 1))
            .build()
        )

        text = render_state(puzzle.board, puzzle.initial_state)

        assert text.split("\n") == [
            "======",
            "|Mo H|",
            "|  # |",
            "======",
        ]

    def test_start_shows_when_main_leaves(self):
        puzzle = PuzzleBuilder(3, 1).set_main((0, 0)).add_goal((1, 0)).build()
        state = State(((2, 0),))

        assert render_state(puzzle.board, state).split("\n")[1] == "|+oM|"

    def test_format_moves(self):
        moves = [Move(0, Direction.RIGHT), Move(1, Direction.DOWN)]

        assert format_moves(moves) == "Main Right\nHelper1 Down"


class TestHeadlessVisualizer:
    def test_replay_returns_final_state(self, capsys):
        puzzle = PuzzleBuilder(2, 1).set_main((0, 0)).add_goal((1, 0)).build()
        visualizer = HeadlessVisualizer(puzzle.board)
        moves = [Move(0, Direction.RIGHT), Move(0, Direction.LEFT)]

        final = visualizer.replay(puzzle.initial_state, moves)

        assert final == State(((0, 0),), True)
        output = capsys.readouterr().out
        assert "Main Right" in output
        assert "Main Left" in output

    def test_quiet_replay(self, capsys):
        puzzle = PuzzleBuilder(2, 1).set_main((0, 0)).add_goal((1, 0)).build()
        visualizer = HeadlessVisualizer(puzzle.board)

        visualizer.replay(puzzle.initial_state, [Move(0, Direction.RIGHT)], verbose=False)

        assert capsys.readouterr().out == ""
