#!/usr/bin/env python3
"""
Generate a corpus of solved puzzles with randomized board configurations.

Puzzles are generated from consecutive seeds, solved in parallel and written
to a CSV file together with their optimal solutions.
"""

import argparse
import csv
import random
import sys
import time
from pathlib import Path
from typing import List, Optional

# Add parent directory to path to import ricochet modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from ricochet.bfs_solver.batch import solve_batch
from ricochet.bfs_solver.config import SolverConfig
from ricochet.game.board_builder import BoardBuilder, BoardConfig
from ricochet.game.levels import Puzzle
from ricochet.game.notation import format_puzzle
from ricochet.game.state import Move

FIELDNAMES = [
    "seed",
    "board_w",
    "board_h",
    "num_blockers",
    "num_helpers",
    "puzzle",
    "outcome",
    "solution_length",
    "solution",
    "states_visited",
]


def solution_to_string(solution: Optional[List[Move]]) -> str:
    """Convert solution list to string representation."""
    if not solution:
        return "[]"
    return "[" + ",".join(f"[{m.piece},{m.direction.name}]" for m in solution) + "]"


def generate_random_config(rng: random.Random) -> BoardConfig:
    """Generate a random board configuration."""
    board_w = rng.choices([4, 5, 6, 7, 8], weights=[10, 20, 25, 25, 20])[0]
    board_h = rng.choices([4, 5, 6, 7, 8], weights=[10, 20, 25, 25, 20])[0]

    # Blockers - 5-25% of cells
    blocker_density = rng.uniform(0.05, 0.25)
    num_blockers = int(board_w * board_h * blocker_density)

    num_helpers = rng.choices([0, 1, 2, 3], weights=[10, 30, 45, 15])[0]

    return BoardConfig(
        board_w=board_w,
        board_h=board_h,
        num_blockers=num_blockers,
        num_helpers=num_helpers,
    )


def main():
    parser = argparse.ArgumentParser(description="Generate solved puzzle corpus")
    parser.add_argument(
        "--output", type=str, default="corpus.csv", help="Output CSV file"
    )
    parser.add_argument(
        "--count", type=int, default=1000, help="Number of puzzles to attempt"
    )
    parser.add_argument("--start-seed", type=int, default=1, help="Starting seed value")
    parser.add_argument(
        "--config-seed", type=int, default=None, help="Seed for config randomization"
    )
    parser.add_argument(
        "--workers", type=int, default=None, help="Parallel worker processes"
    )
    parser.add_argument(
        "--max-states",
        type=int,
        default=2_000_000,
        help="Give up on a puzzle after N visited states",
    )
    parser.add_argument(
        "--keep-unsolvable",
        action="store_true",
        help="Also write puzzles without a solution",
    )

    args = parser.parse_args()

    config_rng = random.Random(args.config_seed)
    puzzles: List[Puzzle] = []
    configs: List[BoardConfig] = []
    for i in range(args.count):
        seed = args.start_seed + i
        config = generate_random_config(config_rng)
        puzzles.append(BoardBuilder(config, seed=seed).generate_puzzle(f"{seed}"))
        configs.append(config)

    print(f"Generating {args.count} puzzles...")
    print(f"Output: {args.output}")
    print(f"Config randomization seed: {args.config_seed}")

    start_time = time.time()
    solver_config = SolverConfig(max_states=args.max_states)
    entries = solve_batch(
        puzzles,
        config=solver_config,
        max_workers=args.workers,
        fit_config=True,
    )

    written = 0
    outcome_stats = {}
    with open(args.output, "w", newline="") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=FIELDNAMES)
        writer.writeheader()

        for entry in sorted(entries, key=lambda e: e.index):
            if entry.error is not None:
                outcome_stats["error"] = outcome_stats.get("error", 0) + 1
                continue

            result = entry.result
            outcome = result.outcome.value
            outcome_stats[outcome] = outcome_stats.get(outcome, 0) + 1
            if not result.success and not args.keep_unsolvable:
                continue

            config = configs[entry.index]
            writer.writerow(
                {
                    "seed": args.start_seed + entry.index,
                    "board_w": config.board_w,
                    "board_h": config.board_h,
                    "num_blockers": config.num_blockers,
                    "num_helpers": config.num_helpers,
                    "puzzle": format_puzzle(puzzles[entry.index]),
                    "outcome": outcome,
                    "solution_length": result.solution_length,
                    "solution": solution_to_string(result.moves),
                    "states_visited": result.states_visited,
                }
            )
            written += 1

    elapsed = time.time() - start_time
    print("\n=== Generation Complete ===")
    print(f"Attempted: {args.count:,} puzzles")
    print(f"Written: {written:,} puzzles")
    print(f"Time elapsed: {elapsed:.1f}s")
    print(f"Outcomes: {outcome_stats}")


if __name__ == "__main__":
    main()
