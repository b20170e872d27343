#!/usr/bin/env python3
"""
Debug script for BFS solver - runs in verbose mode with detailed logging.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path to import ricochet modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from ricochet.bfs_solver.config import SolverConfig
from ricochet.bfs_solver.solver import BFSSolver
from ricochet.game.board_builder import BoardBuilder, BoardConfig
from ricochet.game.movement import successors
from ricochet.game.notation import format_puzzle, parse_puzzle
from ricochet.game.visualization import HeadlessVisualizer
from ricochet.util.logger import set_level


def main():
    """Run debug BFS solver."""
    parser = argparse.ArgumentParser(description="Debug BFS solver with verbose output")
    parser.add_argument("--puzzle", type=str, default=None, help="Puzzle string")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--size", type=int, default=8, help="Board size for generation")
    parser.add_argument("--helpers", type=int, default=2, help="Helpers for generation")
    parser.add_argument("--blockers", type=int, default=8, help="Blockers for generation")
    parser.add_argument(
        "--visited", choices=["auto", "hash", "dense"], default="auto"
    )
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=10000,
        help="Log every N expanded nodes",
    )

    args = parser.parse_args()
    set_level("DEBUG")

    if args.puzzle:
        puzzle = parse_puzzle(args.puzzle, "Debug Puzzle")
    else:
        print(f"Generating puzzle with seed {args.seed}")
        config = BoardConfig(
            board_w=args.size,
            board_h=args.size,
            num_blockers=args.blockers,
            num_helpers=args.helpers,
        )
        puzzle = BoardBuilder(config, seed=args.seed).generate_puzzle(
            f"Debug Puzzle {args.seed}"
        )

    print("=== BFS Solver Debug Session ===")
    print(f"Puzzle: {format_puzzle(puzzle)}")
    errors = puzzle.validate()
    if errors:
        print("Invalid puzzle:")
        for error in errors:
            print(f"  {error}")
        sys.exit(2)

    visualizer = HeadlessVisualizer(puzzle.board)
    visualizer.print_state(puzzle.initial_state)

    print("\nMoves from the initial state:")
    for move, state in successors(puzzle.board, puzzle.initial_state):
        print(f"  {move}: {state.positions} goal_visited={state.goal_visited}")

    config = SolverConfig.for_board(
        puzzle.board,
        puzzle.num_helpers,
        visited_strategy=args.visited,
        progress_interval=args.progress_interval,
    )
    print(f"\nVisited strategy: {config.resolve_visited_strategy()}")
    result = BFSSolver(config).solve_puzzle(puzzle)

    print("\n=== Final Result ===")
    print(f"Outcome: {result.outcome.value}")
    print(f"Length: {result.solution_length}")
    print(f"Time: {result.time_taken_ms:.1f}ms")
    print(f"States visited: {result.states_visited}")
    print(f"Nodes explored: {result.nodes_explored}")

    if result.success:
        print("\n=== Replay ===")
        visualizer.replay(puzzle.initial_state, result.moves)


if __name__ == "__main__":
    main()
