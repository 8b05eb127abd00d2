"""Enumeration of every path a word can take across a grid."""

from wordpaths.board import Grid, Point
from wordpaths.tiles import Tile, claim_tile


def extend_paths(
    grid: Grid[Tile],
    word: str,
    current: Point,
    target: Point,
    pos: int,
    accum: list[Grid[Tile]],
) -> None:
    """Extend a partial path of `word` through `current`, collecting every completed grid.

    `word[pos:]` is the part of the word still to be laid down, starting at `current`.
    Grids are never modified in place: a cell claimed by the word produces a new grid, so
    sibling branches never see each other's cells.

    Args:
        grid: The grid as left by the path so far.
        word: The word being placed.
        current: The cell that should hold `word[pos]`.
        target: The cell that must hold the last letter.
        pos: Index of the next letter of `word`.
        accum: Completed grids are appended here, in depth-first order.
    """
    remaining = len(word) - pos - 1
    if current == target and remaining == 0:
        accum.append(grid.copy())
        return

    # Unit steps cannot cover more than `remaining` cells of distance
    if current.dist(target) > remaining:
        return

    tile = grid[current]
    claimed = claim_tile(tile, word, word[pos])
    if claimed is None:
        return
    if claimed is not tile:
        grid = grid.replace(current, claimed)

    for p in grid.neighbors(current):
        extend_paths(grid, word, p, target, pos + 1, accum)


def enumerate_paths(grid: Grid[Tile], word: str, start: Point, end: Point) -> list[Grid[Tile]]:
    """Return one grid for every way `word` can run from `start` to `end`.

    The grid passed in is left unchanged.
    """
    accum: list[Grid[Tile]] = []
    extend_paths(grid, word, start, end, 0, accum)
    return accum
