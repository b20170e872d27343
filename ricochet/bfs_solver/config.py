"""
Configuration for the BFS solver.
"""

from dataclasses import dataclass, replace
from typing import Optional

from ..game.board import MAX_BOARD_SIZE, Board
from ..game.state import bits_for

VISITED_STRATEGIES = ("auto", "hash", "dense")


@dataclass
class SolverConfig:
    """Bounds and tuning knobs for one search."""

    # Board bounds and piece count the solver accepts
    max_width: int = 8
    max_height: int = 8
    num_helpers: int = 2

    # Visited-set implementation: "hash", "dense" or "auto"
    visited_strategy: str = "auto"
    dense_table_limit: int = 1 << 24  # Max entries of a dense table ("auto" only)

    # Resource cap; None means only available memory limits the search
    max_states: Optional[int] = None

    # Log a progress line every N expanded states (0 disables)
    progress_interval: int = 0

    def __post_init__(self):
        """Validate configuration."""
        if not (1 <= self.max_width <= MAX_BOARD_SIZE):
            raise ValueError(f"max_width must be in [1, {MAX_BOARD_SIZE}]")
        if not (1 <= self.max_height <= MAX_BOARD_SIZE):
            raise ValueError(f"max_height must be in [1, {MAX_BOARD_SIZE}]")
        if self.num_helpers < 0:
            raise ValueError("num_helpers must be non-negative")
        if self.visited_strategy not in VISITED_STRATEGIES:
            raise ValueError(
                f"visited_strategy must be one of {VISITED_STRATEGIES}, "
                f"got {self.visited_strategy!r}"
            )
        if self.dense_table_limit <= 0:
            raise ValueError("dense_table_limit must be positive")
        if self.max_states is not None and self.max_states <= 0:
            raise ValueError("max_states must be positive")
        if self.progress_interval < 0:
            raise ValueError("progress_interval must be non-negative")

    @classmethod
    def for_board(cls, board: Board, num_helpers: int, **kwargs) -> "SolverConfig":
        """Tightest config that accepts ``board`` with ``num_helpers`` helpers."""
        return cls(
            max_width=board.width,
            max_height=board.height,
            num_helpers=num_helpers,
            **kwargs,
        )

    def fitted_to(self, board: Board, num_helpers: int) -> "SolverConfig":
        """Copy of this config with bounds and helper count taken from a puzzle."""
        return replace(
            self,
            max_width=board.width,
            max_height=board.height,
            num_helpers=num_helpers,
        )

    @property
    def num_pieces(self) -> int:
        return 1 + self.num_helpers

    @property
    def bits_x(self) -> int:
        return bits_for(self.max_width)

    @property
    def bits_y(self) -> int:
        return bits_for(self.max_height)

    @property
    def state_key_bits(self) -> int:
        """Width of a packed state: every piece position plus the goal flag."""
        return self.num_pieces * (self.bits_x + self.bits_y) + 1

    @property
    def dense_table_size(self) -> int:
        return 1 << self.state_key_bits

    def resolve_visited_strategy(self) -> str:
        if self.visited_strategy != "auto":
            return self.visited_strategy
        if self.dense_table_size <= self.dense_table_limit:
            return "dense"
        return "hash"
