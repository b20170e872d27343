"""
BFS solver for ricochet-style sliding puzzles.

Finds shortest move sequences that take the main piece to a goal and back.
"""

from .batch import BatchEntry, solve_batch
from .config import SolverConfig
from .solver import BFSResult, BFSSolver, SearchNode, SearchOutcome, is_goal_state
from .visited import DenseVisitedTable, HashVisitedSet, create_visited_set

__all__ = [
    "BFSSolver",
    "BFSResult",
    "SearchNode",
    "SearchOutcome",
    "is_goal_state",
    "SolverConfig",
    "BatchEntry",
    "solve_batch",
    "DenseVisitedTable",
    "HashVisitedSet",
    "create_visited_set",
]
