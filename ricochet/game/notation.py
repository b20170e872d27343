"""
Colon-separated puzzle notation.

A puzzle is written as ``map:W:H`` followed by ``tag:x:y`` triples, e.g.::

    map:8:8:main_robot:0:0:goal:2:4:helper_robot:7:0:blocker:2:0

Helpers keep the order in which they appear. The main robot's cell is the
start cell.
"""

from pathlib import Path
from typing import List, Union

from .levels import Puzzle, PuzzleBuilder

MAP_TAG = "map"
MAIN_TAG = "main_robot"
HELPER_TAG = "helper_robot"
GOAL_TAG = "goal"
BLOCKER_TAG = "blocker"

PIECE_TAGS = (MAIN_TAG, HELPER_TAG, GOAL_TAG, BLOCKER_TAG)


class PuzzleFormatError(ValueError):
    """Raised for puzzle strings that cannot be parsed."""


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise PuzzleFormatError(f"Invalid {what}: {token!r}") from None


def parse_puzzle(text: str, name: str = "Puzzle") -> Puzzle:
    items = text.strip().split(":")
    if len(items) % 3 != 0:
        raise PuzzleFormatError(
            f"Expected tag:x:y triples, got {len(items)} tokens"
        )
    if items[0] != MAP_TAG:
        raise PuzzleFormatError(f"Puzzle must start with '{MAP_TAG}', got {items[0]!r}")

    width = _to_int(items[1], "width")
    height = _to_int(items[2], "height")
    try:
        builder = PuzzleBuilder(width, height, name)
        for i in range(3, len(items), 3):
            tag = items[i]
            position = (_to_int(items[i + 1], "x"), _to_int(items[i + 2], "y"))
            if tag == MAIN_TAG:
                if builder.main is not None:
                    raise PuzzleFormatError("Puzzle has more than one main robot")
                builder.set_main(position)
            elif tag == HELPER_TAG:
                builder.add_helper(position)
            elif tag == GOAL_TAG:
                builder.add_goal(position)
            elif tag == BLOCKER_TAG:
                builder.add_blocker(position)
            else:
                raise PuzzleFormatError(f"Unknown tag {tag!r}")
        return builder.build()
    except PuzzleFormatError:
        raise
    except ValueError as e:
        raise PuzzleFormatError(str(e)) from e


def format_puzzle(puzzle: Puzzle) -> str:
    """Canonical notation string for ``puzzle``.

    The notation marks START at the main piece, so a puzzle whose main piece
    is elsewhere has no notation and raises PuzzleFormatError.
    """
    board = puzzle.board
    state = puzzle.initial_state
    if board.start_position != state.main_position:
        raise PuzzleFormatError(
            f"Main piece at {state.main_position} is not on the start cell "
            f"{board.start_position}"
        )
    parts = [MAP_TAG, str(board.width), str(board.height)]

    x, y = state.main_position
    parts += [MAIN_TAG, str(x), str(y)]
    for x, y in board.goal_positions:
        parts += [GOAL_TAG, str(x), str(y)]
    for x, y in state.helper_positions:
        parts += [HELPER_TAG, str(x), str(y)]
    for x, y in board.wall_positions:
        parts += [BLOCKER_TAG, str(x), str(y)]
    return ":".join(parts)


def load_puzzle_file(path: Union[str, Path]) -> List[Puzzle]:
    """Read one puzzle per line; blank lines and ``#`` comments are skipped."""
    path = Path(path)
    puzzles = []
    with open(path, "r") as f:
        for line_number, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                puzzles.append(parse_puzzle(line, f"{path.stem}:{line_number}"))
            except PuzzleFormatError as e:
                raise PuzzleFormatError(f"{path}:{line_number}: {e}") from e
    return puzzles


def save_puzzle_file(path: Union[str, Path], puzzles: List[Puzzle]) -> None:
    with open(path, "w") as f:
        for puzzle in puzzles:
            f.write(format_puzzle(puzzle) + "\n")
