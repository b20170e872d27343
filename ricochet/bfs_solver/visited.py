"""
Visited-state sets for the BFS solver.

Both implementations answer the same question, "was this state seen before",
and behave identically with respect to search outcomes.
"""

from typing import Set

import numpy as np

from ..game.state import State
from .config import SolverConfig


class HashVisitedSet:
    """Python set keyed by State values."""

    strategy = "hash"

    def __init__(self):
        self._states: Set[State] = set()

    def add(self, state: State) -> bool:
        """Insert ``state``; return False if it was already present."""
        if state in self._states:
            return False
        self._states.add(state)
        return True

    def __contains__(self, state: State) -> bool:
        return state in self._states

    def __len__(self) -> int:
        return len(self._states)


class DenseVisitedTable:
    """Direct-address boolean table keyed by the packed state."""

    strategy = "dense"

    def __init__(self, num_pieces: int, bits_x: int, bits_y: int):
        self.num_pieces = num_pieces
        self.bits_x = bits_x
        self.bits_y = bits_y
        size = 1 << (num_pieces * (bits_x + bits_y) + 1)
        self._table = np.zeros(size, dtype=np.bool_)
        self._count = 0

    def key(self, state: State) -> int:
        return state.pack(self.bits_x, self.bits_y)

    def add(self, state: State) -> bool:
        """Insert ``state``; return False if it was already present."""
        key = self.key(state)
        if self._table[key]:
            return False
        self._table[key] = True
        self._count += 1
        return True

    def __contains__(self, state: State) -> bool:
        return bool(self._table[self.key(state)])

    def __len__(self) -> int:
        return self._count

    @property
    def nbytes(self) -> int:
        return self._table.nbytes


def create_visited_set(config: SolverConfig):
    """Build the visited set selected by ``config``."""
    strategy = config.resolve_visited_strategy()
    if strategy == "dense":
        return DenseVisitedTable(config.num_pieces, config.bits_x, config.bits_y)
    return HashVisitedSet()
