"""
Parallel solving of independent puzzles.

Each task owns its board, state and visited set; nothing mutable is shared, so
puzzles are simply fanned out to a pool and collected as they complete.
"""

from concurrent.futures import (Executor, ProcessPoolExecutor,
                                ThreadPoolExecutor, as_completed)
from dataclasses import dataclass
from typing import List, Optional, Sequence

from tqdm import tqdm

from ..game.levels import Puzzle
from ..util.logger import logger
from .config import SolverConfig
from .solver import BFSResult, BFSSolver


@dataclass
class BatchEntry:
    """Outcome of one puzzle in a batch."""

    index: int
    name: str
    result: Optional[BFSResult] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.result is not None and self.result.success


def solve_one(
    puzzle: Puzzle, config: Optional[SolverConfig] = None, fit_config: bool = False
) -> BFSResult:
    if config is not None and fit_config:
        config = config.fitted_to(puzzle.board, puzzle.num_helpers)
    return BFSSolver(config).solve_puzzle(puzzle)


def solve_batch(
    puzzles: Sequence[Puzzle],
    config: Optional[SolverConfig] = None,
    max_workers: Optional[int] = None,
    use_processes: bool = True,
    show_progress: bool = True,
    fit_config: bool = False,
) -> List[BatchEntry]:
    """Solve every puzzle and return entries in completion order.

    Args:
        puzzles: Puzzles to solve
        config: Solver config shared by all tasks (derived per puzzle if None)
        max_workers: Pool size, defaults to the executor's own default
        use_processes: Process pool if True, otherwise a thread pool
        show_progress: Display a tqdm progress bar
        fit_config: Take board bounds and helper count of ``config`` from
            each puzzle, keeping its other settings

    Returns:
        One BatchEntry per puzzle, in no particular order
    """
    log = logger.bind(component="batch")
    if not puzzles:
        return []

    executor_cls = ProcessPoolExecutor if use_processes else ThreadPoolExecutor
    log.info(
        f"Solving {len(puzzles)} puzzles with {executor_cls.__name__}"
        f" (max_workers={max_workers})"
    )

    entries: List[BatchEntry] = []
    with executor_cls(max_workers=max_workers) as executor:
        futures = _submit_all(executor, puzzles, config, fit_config)

        for future in tqdm(
            as_completed(futures),
            total=len(futures),
            desc="Solving",
            unit="puzzle",
            disable=not show_progress,
        ):
            index, puzzle = futures[future]
            try:
                result = future.result()
            except Exception as e:
                log.bind(id=puzzle.name).error(f"Solver failed: {e!r}")
                entries.append(BatchEntry(index, puzzle.name, error=repr(e)))
                continue

            log.bind(id=puzzle.name).debug(
                f"{result.outcome.value}: {result.solution_length} moves, "
                f"{result.states_visited} states"
            )
            entries.append(BatchEntry(index, puzzle.name, result=result))

    solved = sum(1 for entry in entries if entry.success)
    log.info(f"Batch complete: {solved}/{len(entries)} solved")
    return entries


def _submit_all(executor: Executor, puzzles: Sequence[Puzzle], config, fit_config):
    return {
        executor.submit(solve_one, puzzle, config, fit_config): (index, puzzle)
        for index, puzzle in enumerate(puzzles)
    }
