#!/usr/bin/env python3
"""
Ricochet Puzzle Solver

Finds shortest solutions for sliding-piece puzzles where the main robot must
visit a goal and return to its start.
"""

import argparse
import cProfile
import pstats
import sys

from ricochet.bfs_solver.batch import solve_batch
from ricochet.bfs_solver.config import SolverConfig
from ricochet.bfs_solver.solver import BFSSolver, SearchOutcome
from ricochet.game.levels import Puzzle, PuzzleBuilder
from ricochet.game.notation import load_puzzle_file, parse_puzzle
from ricochet.game.visualization import format_moves, render_state
from ricochet.util.logger import logger, set_level

log = logger.bind(component="cli")


def create_demo_puzzle() -> Puzzle:
    """The 8x8 two-helper reference puzzle."""
    builder = PuzzleBuilder(8, 8, "Demo Puzzle")
    builder.set_main((0, 0))
    builder.add_goal((2, 4))
    builder.add_helper((7, 0))
    builder.add_helper((7, 1))
    builder.add_blockers(
        [(2, 0), (5, 0), (6, 0), (3, 3), (2, 5), (3, 6), (1, 7), (4, 7)]
    )
    return builder.build()


def build_config(args, puzzle: Puzzle = None) -> SolverConfig:
    kwargs = {"visited_strategy": args.visited, "max_states": args.max_states}
    if puzzle is not None:
        return SolverConfig.for_board(puzzle.board, puzzle.num_helpers, **kwargs)
    return SolverConfig(
        max_width=args.max_size,
        max_height=args.max_size,
        num_helpers=args.helpers if args.helpers is not None else 2,
        **kwargs,
    )


def run_single(puzzle: Puzzle, args) -> int:
    errors = puzzle.validate()
    if errors:
        for error in errors:
            log.error(error)
        return 2

    solver = BFSSolver(build_config(args, puzzle))

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        result = solver.solve_puzzle(puzzle)
        profiler.disable()
        pstats.Stats(profiler, stream=sys.stderr).sort_stats("cumulative").print_stats(20)
    else:
        result = solver.solve_puzzle(puzzle)

    if result.outcome == SearchOutcome.UNSOLVABLE:
        print("Could not solve puzzle.")
        print(f"Nodes visited: {result.states_visited}")
        return 1
    if result.outcome == SearchOutcome.RESOURCE_EXHAUSTED:
        print("Search gave up: resource limit reached.")
        print(f"Nodes visited: {result.states_visited}")
        return 3

    print(render_state(puzzle.board, result.terminal_state))
    print(format_moves(result.moves))
    print(f"Moves: {result.solution_length}")
    print(f"Nodes visited: {result.states_visited}")
    print(f"Time: {result.time_taken_ms:.1f}ms")
    return 0


def run_batch(puzzles, args) -> int:
    invalid = [(p.name, p.validate()) for p in puzzles]
    invalid = [(name, errors) for name, errors in invalid if errors]
    if invalid:
        for name, errors in invalid:
            log.bind(id=name).error("; ".join(errors))
        return 2

    # Without --helpers, bounds and helper count come from each puzzle
    fit_config = args.helpers is None
    config = build_config(args)

    entries = solve_batch(
        puzzles,
        config=config,
        max_workers=args.workers,
        use_processes=not args.threads,
        show_progress=not args.quiet,
        fit_config=fit_config,
    )

    for entry in sorted(entries, key=lambda e: e.index):
        if entry.error is not None:
            print(f"{entry.name}: error {entry.error}")
        elif entry.success:
            moves = ", ".join(str(m) for m in entry.result.moves)
            print(
                f"{entry.name}: {entry.result.solution_length} moves "
                f"({entry.result.states_visited} states) {moves}"
            )
        else:
            print(f"{entry.name}: {entry.result.outcome.value}")

    return 0 if all(entry.error is None for entry in entries) else 1


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Ricochet Puzzle Solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                  # Solve the demo puzzle
  python main.py --puzzle map:2:1:main_robot:0:0:goal:1:0
  python main.py --file puzzles/examples.txt --workers 4
  python main.py --profile                        # Profile the demo puzzle
        """,
    )

    parser.add_argument("--puzzle", type=str, help="Puzzle in map:W:H:... notation")
    parser.add_argument("--file", type=str, help="File with one puzzle per line")
    parser.add_argument(
        "--workers", type=int, default=None, help="Parallel workers for --file"
    )
    parser.add_argument(
        "--threads", action="store_true", help="Use threads instead of processes"
    )
    parser.add_argument(
        "--visited",
        choices=["auto", "hash", "dense"],
        default="auto",
        help="Visited-set implementation",
    )
    parser.add_argument(
        "--max-states", type=int, default=None, help="Give up after N visited states"
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=16,
        help="Board bound for a shared batch config (with --helpers)",
    )
    parser.add_argument(
        "--helpers",
        type=int,
        default=None,
        help="Helper count for a shared batch config (default: per puzzle)",
    )
    parser.add_argument(
        "--profile", action="store_true", help="Profile the search with cProfile"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings")

    args = parser.parse_args()

    if args.verbose:
        set_level("DEBUG")
    elif args.quiet:
        set_level("WARNING")

    try:
        if args.file:
            return run_batch(load_puzzle_file(args.file), args)
        if args.puzzle:
            return run_single(parse_puzzle(args.puzzle), args)
        return run_single(create_demo_puzzle(), args)
    except (ValueError, OSError) as e:
        log.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
