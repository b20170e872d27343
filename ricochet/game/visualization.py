from typing import Iterable, List

from .board import CELL_SYMBOLS, Board
from .movement import replay_moves
from .state import Move, State

MAIN_SYMBOL = "M"
HELPER_SYMBOL = "H"
EMPTY_SYMBOL = " "


def render_state(board: Board, state: State) -> str:
    """Draw the board framed with ``=`` and ``|`` and the pieces on top."""
    pieces = {position: HELPER_SYMBOL for position in state.helper_positions}
    pieces[state.main_position] = MAIN_SYMBOL

    border = "=" * (board.width + 2)
    lines = [border]
    for y in range(board.height):
        row = []
        for x in range(board.width):
            if (x, y) in pieces:
                row.append(pieces[(x, y)])
                continue
            symbol = CELL_SYMBOLS[board.get_cell_type(x, y)]
            row.append(EMPTY_SYMBOL if symbol == "." else symbol)
        lines.append("|" + "".join(row) + "|")
    lines.append(border)
    return "\n".join(lines)


def format_moves(moves: Iterable[Move]) -> str:
    return "\n".join(str(move) for move in moves)


class HeadlessVisualizer:
    """Prints puzzles and solution replays to stdout."""

    def __init__(self, board: Board):
        self.board = board

    def print_state(self, state: State) -> None:
        print(render_state(self.board, state))

    def replay(self, state: State, moves: List[Move], verbose: bool = True) -> State:
        states = replay_moves(self.board, state, moves)
        if verbose:
            self.print_state(states[0])
            for move, current in zip(moves, states[1:]):
                print(f"\n{move}")
                self.print_state(current)
        return states[-1]
