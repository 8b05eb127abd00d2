"""Main solver module: places the words one after another and prints the results."""

import sys
from collections.abc import Sequence
from concurrent.futures import ProcessPoolExecutor
from contextlib import ExitStack
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from wordpaths.board import Grid
from wordpaths.puzzle_config import PuzzleConfig
from wordpaths.render import flatten, flatten_word
from wordpaths.solver.config import SolverConfig
from wordpaths.solver.config import config as solver_config
from wordpaths.solver.parallel import get_executor, search_grids_parallel
from wordpaths.solver.paths import enumerate_paths
from wordpaths.solver.task_args import TaskArgs
from wordpaths.solver.utils import TIMESTAMP_FMT, WordPlacement, int_comma, time_str
from wordpaths.tiles import Tile


@dataclass
class SolveResult:
    """Outcome of placing a word list."""

    grids: list[Grid[Tile]]
    """Final candidate grids."""

    placed: list[str] = field(default_factory=list)
    """Words placed on the grids, in placement order."""

    skipped: list[str] = field(default_factory=list)
    """Words that could not be placed on any candidate grid."""


def search_grids(grids: Sequence[Grid[Tile]], placement: WordPlacement) -> list[Grid[Tile]]:
    """Place one word on every candidate grid and collect all resulting grids."""
    word, start, end = placement
    out: list[Grid[Tile]] = []
    for grid in grids:
        out.extend(enumerate_paths(grid, word, start, end))
    return out


def add_words(
    grids: Sequence[Grid[Tile]],
    placements: Sequence[WordPlacement],
    *,
    logf: TextIO,
    executor: ProcessPoolExecutor | None = None,
    settings: SolverConfig | None = None,
) -> SolveResult:
    """Place each word in turn on the whole candidate set.

    Each word's grids replace the candidate set.  A word that fits no candidate grid is
    skipped and the candidate set is kept as it was; earlier words are never revisited.

    Args:
        grids: The starting candidate grids.
        placements: Words with their anchors, in placement order.
        logf: Stream receiving progress lines.
        executor: Optional process pool for searching large candidate sets.
        settings: Solver settings, defaulting to the global config.

    Returns:
        The final candidate grids with the placed and skipped words.
    """
    settings = settings or solver_config
    result = SolveResult(grids=list(grids))

    for i, placement in enumerate(placements):
        word = placement.word
        print(
            f'searching "{word}" on {int_comma(len(result.grids))} grids',
            file=logf,
            flush=True,
        )
        if executor is not None and len(result.grids) >= settings.parallel_min_grids:
            out = search_grids_parallel(
                executor,
                result.grids,
                placement,
                chunk_size=settings.parallel_chunk_size,
            )
        else:
            out = search_grids(result.grids, placement)

        if out:
            result.grids = out
            result.placed.append(word)
            continue

        print(f'could not produce any paths to fit "{word}"!', file=logf, flush=True)
        result.skipped.append(word)
        if settings.stop_on_unplaceable:
            result.skipped.extend(p.word for p in placements[i + 1 :])
            break

    return result


def print_results(
    result: SolveResult,
    words: Sequence[str],
    *,
    out: TextIO,
    show_word_views: bool = True,
) -> None:
    """Print the merged grid, then the view of each word."""
    print(flatten(result.grids), file=out)
    if not show_word_views:
        return
    for word in words:
        print(f'Showing only "{word}":', file=out)
        print(flatten_word(result.grids, word), file=out)


def solve_one(
    task_args: TaskArgs,
    *,
    logf: TextIO,
    out: TextIO,
    executor: ProcessPoolExecutor | None = None,
    settings: SolverConfig | None = None,
) -> SolveResult:
    """Run one full placement and print its results.

    Args:
        task_args (TaskArgs): Validated inputs.
        logf: Stream receiving progress lines.
        out: Stream receiving the rendered grids.
        executor: Optional process pool.
        settings: Solver settings, defaulting to the global config.
    """
    settings = settings or solver_config
    start = time()
    result = add_words(
        [task_args.grid.copy()],
        task_args.placements,
        logf=logf,
        executor=executor,
        settings=settings,
    )
    print_results(result, task_args.words, out=out, show_word_views=settings.show_word_views)
    print(
        f"{int_comma(len(result.grids))} grids, {len(result.placed)} words placed, "
        f"{len(result.skipped)} skipped in {time_str(time() - start)}",
        file=logf,
        flush=True,
    )
    return result


def run(
    config: PuzzleConfig,
    iterations: int = 1,
    *,
    out: TextIO | None = None,
    settings: SolverConfig | None = None,
) -> list[SolveResult]:
    """Run the solver on the given configuration.

    Args:
        config (PuzzleConfig): The puzzle to solve.
        iterations (int): Number of times to repeat the solve, for timing.
        out: Stream receiving the rendered grids, defaulting to stdout.
        settings: Solver settings, defaulting to the global config.

    Returns:
        The result of each iteration.
    """
    settings = settings or solver_config
    out = out or sys.stdout

    with ExitStack() as stack:
        if settings.log_file is not None:
            logfile = Path(settings.log_file)
            logfile.parent.mkdir(parents=True, exist_ok=True)
            logf: TextIO = stack.enter_context(open(logfile, "w", encoding="utf-8"))
        else:
            logf = out

        try:
            return _run(config, iterations, logf=logf, out=out, settings=settings, stack=stack)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            sys.exit(1)


def _run(
    config: PuzzleConfig,
    iterations: int,
    *,
    logf: TextIO,
    out: TextIO,
    settings: SolverConfig,
    stack: ExitStack,
) -> list[SolveResult]:
    print("Solver config:", file=logf, flush=True)
    pprint(settings.model_dump(), stream=logf, width=120)
    print(f"config: {config}", file=logf, flush=True)

    task_args = TaskArgs(config=config, settings=settings)
    print("Solver initialized with:", file=logf, flush=True)
    pprint(task_args.summary(), stream=logf, width=120)
    print(f"loaded {len(task_args.words)} words!", file=logf, flush=True)

    executor = None
    if settings.use_parallel:
        executor = stack.enter_context(get_executor(settings.max_workers))

    results: list[SolveResult] = []
    for _ in range(iterations):
        results.append(
            solve_one(task_args, logf=logf, out=out, executor=executor, settings=settings)
        )

    finish = datetime.now().astimezone().strftime(TIMESTAMP_FMT)
    print(
        f"Finished {iterations} iterations at {finish}, total time "
        f"{time_str(time() - task_args.start_time)}",
        file=logf,
        flush=True,
    )
    return results
