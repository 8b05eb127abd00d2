"""Implementation of the parallel search: task distribution and worker management."""

import os
import traceback
from collections.abc import Iterator, Sequence
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from typing import Literal, TypedDict

from wordpaths.board import Grid
from wordpaths.solver.paths import enumerate_paths
from wordpaths.solver.utils import WordPlacement
from wordpaths.tiles import Tile


class WorkerTaskPayload(TypedDict):
    """Payload submitted to worker processes."""

    grids: list[Grid[Tile]]
    """Candidate grids to search."""
    placement: WordPlacement
    """Word to place, with its anchors."""


@dataclass
class Result:
    """Wrapper for worker task results."""

    status: Literal["success", "no_paths", "error"]
    grids: list[Grid[Tile]] = field(default_factory=list)
    err_msg: str | None = None


def get_executor(n_workers: int | None = None) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor.

    Args:
        n_workers (int | None): Number of worker processes to create.  If None,
            defaults to number of CPU cores minus one.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        n_workers = max(1, cpus - 1)  # Leave one core free
    if n_workers > cpus:
        raise ValueError(
            f"Requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
        )
    return ProcessPoolExecutor(max_workers=n_workers)


def _chunks(grids: Sequence[Grid[Tile]], size: int) -> Iterator[list[Grid[Tile]]]:
    for start in range(0, len(grids), size):
        yield list(grids[start : start + size])


def search_grids_parallel(
    executor: ProcessPoolExecutor,
    grids: Sequence[Grid[Tile]],
    placement: WordPlacement,
    *,
    chunk_size: int = 256,
) -> list[Grid[Tile]]:
    """Place one word on every candidate grid using worker processes.

    Results are collected in submission order, so the output matches the sequential
    search exactly.

    Args:
        executor (ProcessPoolExecutor): Executor for managing worker processes.
        grids: Candidate grids to search.
        placement (WordPlacement): The word to place, with its anchors.
        chunk_size (int): Number of grids per worker task.

    Returns:
        The union of all grids produced for the word.

    Raises:
        RuntimeError: If a worker fails.
    """
    tasks: list[WorkerTaskPayload] = [
        {"grids": chunk, "placement": placement} for chunk in _chunks(grids, max(1, chunk_size))
    ]
    futures = [executor.submit(_worker_task, task) for task in tasks]

    out: list[Grid[Tile]] = []
    for future in futures:
        result = future.result()
        if result.status == "error":
            for pending in futures:
                pending.cancel()
            raise RuntimeError(f"Worker for word '{placement.word}' failed:\n{result.err_msg}")
        out.extend(result.grids)
    return out


def _worker_task(args: WorkerTaskPayload) -> Result:
    """Worker task to place a word on a chunk of candidate grids.

    Args:
        args (dict): Dictionary received from `executor.submit` containing:
            - "grids": The candidate grids.
            - "placement": The word and its anchors.

    Returns:
        A Result wrapper.
    """
    try:
        word, start, end = args["placement"]
        grids: list[Grid[Tile]] = []
        for grid in args["grids"]:
            grids.extend(enumerate_paths(grid, word, start, end))
        return Result(status="success" if grids else "no_paths", grids=grids)
    except Exception as e:
        return Result(
            status="error",
            err_msg=f"Worker encountered an error: {str(e)}\n{traceback.format_exc()}",
        )
