"""
BFS solver for finding shortest solutions to ricochet-style sliding puzzles.

The main piece has to rest on a goal cell at least once and then come back to
its start cell. Every move costs one, so the first goal state dequeued is a
shortest solution.
"""

import time
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..game.board import Board
from ..game.levels import Puzzle
from ..game.movement import successors
from ..game.state import Move, State
from ..util.logger import logger
from .config import SolverConfig
from .visited import create_visited_set


class SearchOutcome(Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    RESOURCE_EXHAUSTED = "resource_exhausted"


@dataclass
class BFSResult:
    """Result of BFS solving."""

    outcome: SearchOutcome
    moves: Optional[List[Move]]
    terminal_state: Optional[State]
    states_visited: int
    nodes_explored: int
    time_taken_ms: float

    @property
    def success(self) -> bool:
        return self.outcome == SearchOutcome.SOLVED

    @property
    def solution_length(self) -> int:
        return len(self.moves) if self.moves is not None else 0


class SearchNode:
    """Search tree node linked to its parent.

    Only the parent link is stored, so extending a path costs O(1); the move
    list is rebuilt once, when a goal is found.
    """

    __slots__ = ("state", "move", "parent", "depth")

    def __init__(
        self,
        state: State,
        move: Optional[Move] = None,
        parent: Optional["SearchNode"] = None,
    ):
        self.state = state
        self.move = move
        self.parent = parent
        self.depth = parent.depth + 1 if parent is not None else 0

    def path(self) -> List[Move]:
        moves = []
        node = self
        while node.parent is not None:
            moves.append(node.move)
            node = node.parent
        moves.reverse()
        return moves


def is_goal_state(board: Board, state: State) -> bool:
    """Goal visited and the main piece back on the start cell."""
    return state.goal_visited and board.is_start(state.main_position)


class BFSSolver:
    """BFS solver for sliding puzzles."""

    def __init__(self, config: Optional[SolverConfig] = None):
        """Initialize BFS solver.

        Args:
            config: Board bounds, helper count and visited-set settings. When
                omitted, a tight config is derived from each puzzle solved.
        """
        self.config = config
        self.logger = logger.bind(component="bfs_solver")

    def solve_puzzle(self, puzzle: Puzzle) -> BFSResult:
        return self.solve(puzzle.board, puzzle.initial_state)

    def solve(self, board: Board, initial_state: State) -> BFSResult:
        """Find a shortest solution using BFS.

        Args:
            board: Static puzzle board
            initial_state: Starting piece positions

        Returns:
            BFSResult with the move list if the puzzle is solvable
        """
        config = self.config or SolverConfig.for_board(board, initial_state.num_helpers)
        self._check_inputs(config, board, initial_state)

        start_time = time.time()
        visited = create_visited_set(config)
        self.logger.debug(
            f"Searching {board.width}x{board.height} board with "
            f"{initial_state.num_helpers} helpers ({visited.strategy} visited set)"
        )

        try:
            result = self._search(config, board, initial_state, visited)
        except MemoryError:
            states_visited = len(visited)
            visited = None
            self.logger.error(
                f"Out of memory after {states_visited} states, abandoning search"
            )
            result = (SearchOutcome.RESOURCE_EXHAUSTED, None, states_visited, 0)

        outcome, node, states_visited, nodes_explored = result
        elapsed_ms = (time.time() - start_time) * 1000

        if outcome == SearchOutcome.SOLVED:
            moves = node.path()
            self.logger.debug(
                f"Solved in {len(moves)} moves, {states_visited} states visited, "
                f"{elapsed_ms:.1f}ms"
            )
            return BFSResult(
                outcome=outcome,
                moves=moves,
                terminal_state=node.state,
                states_visited=states_visited,
                nodes_explored=nodes_explored,
                time_taken_ms=elapsed_ms,
            )

        self.logger.debug(
            f"No solution ({outcome.value}), {states_visited} states visited, "
            f"{elapsed_ms:.1f}ms"
        )
        return BFSResult(
            outcome=outcome,
            moves=None,
            terminal_state=None,
            states_visited=states_visited,
            nodes_explored=nodes_explored,
            time_taken_ms=elapsed_ms,
        )

    def _search(self, config: SolverConfig, board: Board, initial_state: State, visited):
        queue = deque([SearchNode(initial_state)])
        visited.add(initial_state)
        nodes_explored = 0
        depth = 0
        max_states = config.max_states

        while queue:
            node = queue.popleft()
            nodes_explored += 1

            if node.depth > depth:
                depth = node.depth
                self.logger.debug(
                    f"Depth {depth}: frontier {len(queue) + 1}, visited {len(visited)}"
                )

            if is_goal_state(board, node.state):
                return SearchOutcome.SOLVED, node, len(visited), nodes_explored

            if config.progress_interval and nodes_explored % config.progress_interval == 0:
                self.logger.info(
                    f"Explored {nodes_explored} nodes, visited {len(visited)}, "
                    f"frontier {len(queue)}"
                )

            for move, state in successors(board, node.state):
                if state in visited:
                    continue
                if max_states is not None and len(visited) >= max_states:
                    self.logger.warning(f"State limit of {max_states} reached")
                    return (
                        SearchOutcome.RESOURCE_EXHAUSTED,
                        None,
                        len(visited),
                        nodes_explored,
                    )
                visited.add(state)
                queue.append(SearchNode(state, move, node))

        return SearchOutcome.UNSOLVABLE, None, len(visited), nodes_explored

    def _check_inputs(self, config: SolverConfig, board: Board, state: State) -> None:
        if board.width > config.max_width or board.height > config.max_height:
            raise ValueError(
                f"Board {board.width}x{board.height} exceeds configured bounds "
                f"{config.max_width}x{config.max_height}"
            )
        if state.num_helpers != config.num_helpers:
            raise ValueError(
                f"State has {state.num_helpers} helpers, solver configured for "
                f"{config.num_helpers}"
            )
        for position in state.positions:
            if not board.in_bounds(position):
                raise ValueError(f"Piece at {position} is outside the board")
