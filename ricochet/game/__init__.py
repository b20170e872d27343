"""
Puzzle model for ricochet-style sliding puzzles: board, state and moves.
"""

from .board import Board, CellType, Direction
from .levels import Puzzle, PuzzleBuilder
from .movement import MOVE_ORDER, apply_move, replay_moves, successors
from .notation import PuzzleFormatError, format_puzzle, parse_puzzle
from .state import Move, PieceRole, State

__all__ = [
    "Board",
    "CellType",
    "Direction",
    "Puzzle",
    "PuzzleBuilder",
    "MOVE_ORDER",
    "apply_move",
    "replay_moves",
    "successors",
    "PuzzleFormatError",
    "format_puzzle",
    "parse_puzzle",
    "Move",
    "PieceRole",
    "State",
]
