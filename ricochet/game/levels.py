import json
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from .board import Board, CellType, Position
from .state import State


class Puzzle:
    """A board together with the initial piece placement."""

    def __init__(self, board: Board, initial_state: State, name: str = "Puzzle"):
        self.board = board
        self.initial_state = initial_state
        self.name = name

    @property
    def num_helpers(self) -> int:
        return self.initial_state.num_helpers

    def validate(self) -> List[str]:
        errors = []
        board = self.board
        state = self.initial_state

        starts = board.find_cells_by_type(CellType.START)
        if len(starts) != 1:
            errors.append(f"Board must contain exactly one start cell, found {len(starts)}")

        if not board.find_cells_by_type(CellType.GOAL):
            errors.append("Board must contain at least one goal cell")

        if state.goal_visited:
            errors.append("Initial state must not have the goal visited")

        for index, position in enumerate(state.positions):
            label = "Main piece" if index == 0 else f"Helper {index}"
            if not board.in_bounds(position):
                errors.append(f"{label} at {position} is outside board boundaries")
            elif board.is_wall(position):
                errors.append(f"{label} at {position} is placed on a wall")

        seen = set()
        for position in state.positions:
            if position in seen:
                errors.append(f"Multiple pieces at position {position}")
            seen.add(position)

        return errors

    def is_valid(self) -> bool:
        return not self.validate()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "board": self.board.to_dict(),
            "state": self.initial_state.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Puzzle":
        return cls(
            board=Board.from_dict(data["board"]),
            initial_state=State.from_dict(data["state"]),
            name=data.get("name", "Puzzle"),
        )

    def save_to_file(self, filename: str) -> None:
        with open(filename, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filename: str) -> "Puzzle":
        with open(filename, "r") as f:
            data = json.load(f)
        return cls.from_dict(data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Puzzle):
            return NotImplemented
        return self.board == other.board and self.initial_state == other.initial_state

    def __str__(self) -> str:
        return (
            f"Puzzle: {self.name} ({self.board.width}x{self.board.height}, "
            f"{self.num_helpers} helpers)"
        )


class PuzzleBuilder:
    """Fluent construction of puzzles.

    Placing the main piece also marks its cell as the start cell, which is
    where it has to return after visiting a goal.
    """

    def __init__(self, width: int, height: int, name: str = "Custom Puzzle"):
        self.width = width
        self.height = height
        self.name = name
        self.grid = np.zeros((height, width), dtype=np.int8)
        self.main: Optional[Position] = None
        self.helpers: List[Position] = []

    def _check(self, position: Position) -> Tuple[int, int]:
        x, y = position
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError(f"Position ({x}, {y}) is outside the {self.width}x{self.height} board")
        return x, y

    def set_cell(self, position: Position, cell_type: CellType) -> "PuzzleBuilder":
        x, y = self._check(position)
        self.grid[y, x] = cell_type.value
        return self

    def add_blocker(self, position: Position) -> "PuzzleBuilder":
        return self.set_cell(position, CellType.WALL)

    def add_blockers(self, positions) -> "PuzzleBuilder":
        for position in positions:
            self.add_blocker(position)
        return self

    def add_goal(self, position: Position) -> "PuzzleBuilder":
        return self.set_cell(position, CellType.GOAL)

    def set_main(self, position: Position) -> "PuzzleBuilder":
        if self.main is not None:
            x, y = self.main
            if self.grid[y, x] == CellType.START.value:
                self.grid[y, x] = CellType.EMPTY.value
        self.set_cell(position, CellType.START)
        self.main = (position[0], position[1])
        return self

    def add_helper(self, position: Position) -> "PuzzleBuilder":
        self.helpers.append(self._check(position))
        return self

    def build(self) -> Puzzle:
        if self.main is None:
            raise ValueError("Puzzle needs a main piece")
        board = Board(self.width, self.height, self.grid)
        state = State.initial(self.main, self.helpers)
        return Puzzle(board, state, self.name)

    def validate_and_build(self) -> Tuple[Puzzle, List[str]]:
        puzzle = self.build()
        errors = puzzle.validate()
        return puzzle, errors
