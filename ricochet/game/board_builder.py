"""
BoardBuilder for generating random sliding puzzles.

Used to build benchmark corpora for the solver.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Set

from .board import MAX_BOARD_SIZE, Position
from .levels import Puzzle, PuzzleBuilder


@dataclass
class BoardConfig:
    """Configuration for puzzle generation."""

    board_w: int = 8
    board_h: int = 8
    num_blockers: int = 8
    num_helpers: int = 2
    num_goals: int = 1

    def __post_init__(self):
        if not (1 <= self.board_w <= MAX_BOARD_SIZE):
            raise ValueError("board_w out of range")
        if not (1 <= self.board_h <= MAX_BOARD_SIZE):
            raise ValueError("board_h out of range")
        if self.num_blockers < 0 or self.num_helpers < 0:
            raise ValueError("num_blockers and num_helpers must be non-negative")
        if self.num_goals < 1:
            raise ValueError("num_goals must be at least 1")

        # main + helpers + goals + blockers all need distinct cells
        needed = 1 + self.num_helpers + self.num_goals + self.num_blockers
        if needed > self.board_w * self.board_h:
            raise ValueError(
                f"Board {self.board_w}x{self.board_h} is too small for {needed} items"
            )


class BoardBuilder:
    """Generates random puzzles."""

    def __init__(self, config: BoardConfig, seed: Optional[int] = None):
        """Initialize board builder with configuration.

        Args:
            config: Puzzle generation configuration
            seed: Random seed for deterministic generation
        """
        self.config = config
        self.rng = random.Random(seed)

    def generate_puzzle(self, name: str = "Generated Puzzle") -> Puzzle:
        """Generate a complete puzzle.

        Every item lands on its own cell, so the result always passes
        ``Puzzle.validate``.
        """
        builder = PuzzleBuilder(self.config.board_w, self.config.board_h, name)
        taken: Set[Position] = set()

        builder.set_main(self._pick_free_cell(taken))
        for _ in range(self.config.num_goals):
            builder.add_goal(self._pick_free_cell(taken))
        for _ in range(self.config.num_helpers):
            builder.add_helper(self._pick_free_cell(taken))
        for _ in range(self.config.num_blockers):
            builder.add_blocker(self._pick_free_cell(taken))

        return builder.build()

    def generate_puzzles(self, count: int, prefix: str = "Puzzle") -> List[Puzzle]:
        return [self.generate_puzzle(f"{prefix} {i}") for i in range(count)]

    def _pick_free_cell(self, taken: Set[Position]) -> Position:
        free = [
            (x, y)
            for y in range(self.config.board_h)
            for x in range(self.config.board_w)
            if (x, y) not in taken
        ]
        position = self.rng.choice(free)
        taken.add(position)
        return position
