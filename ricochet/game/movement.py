"""
Sliding move generation.

A piece moves in a straight line until the next cell is off the board, a wall
or occupied by another piece, and comes to rest on the last free cell.
"""

from typing import Iterable, List, Optional, Tuple

from .board import Board, Direction, Position
from .state import MAIN_INDEX, Move, State

# Successor order is part of the solver's observable behaviour: when several
# shortest solutions exist, BFS returns the first one generated.
MOVE_ORDER = (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN)


def slide(
    board: Board, state: State, index: int, direction: Direction
) -> Optional[Position]:
    """Resting cell of piece ``index`` sliding in ``direction``.

    Returns None when the piece is blocked on its first step.
    """
    x, y = state.positions[index]
    dx, dy = direction.dx, direction.dy
    occupied = state.positions

    moved = False
    while True:
        nx, ny = x + dx, y + dy
        if board.is_blocked((nx, ny)) or (nx, ny) in occupied:
            break
        x, y = nx, ny
        moved = True

    if not moved:
        return None
    return x, y


def move_piece(
    board: Board, state: State, index: int, direction: Direction
) -> Optional[State]:
    resting = slide(board, state, index, direction)
    if resting is None:
        return None

    next_state = state.with_position(index, resting)
    if index == MAIN_INDEX and board.is_goal(resting):
        next_state = next_state.with_goal_visited()
    return next_state


def apply_move(board: Board, state: State, move: Move) -> Optional[State]:
    """Apply one move; None if the piece cannot move that way."""
    if not 0 <= move.piece < state.num_pieces:
        raise ValueError(f"No piece with index {move.piece}")
    return move_piece(board, state, move.piece, move.direction)


def successors(board: Board, state: State) -> List[Tuple[Move, State]]:
    """Every state reachable in one move, piece-major then MOVE_ORDER."""
    result = []
    for index in range(state.num_pieces):
        for direction in MOVE_ORDER:
            next_state = move_piece(board, state, index, direction)
            if next_state is not None:
                result.append((Move(index, direction), next_state))
    return result


def replay_moves(board: Board, state: State, moves: Iterable[Move]) -> List[State]:
    """States visited while replaying ``moves``, starting with ``state``.

    Raises ValueError if a move is blocked.
    """
    states = [state]
    for i, move in enumerate(moves):
        next_state = apply_move(board, states[-1], move)
        if next_state is None:
            raise ValueError(f"Move {i} ({move}) is blocked")
        states.append(next_state)
    return states
