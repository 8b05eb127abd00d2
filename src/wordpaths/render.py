"""Rendering of candidate grids as character grids."""

from collections.abc import Sequence

import numpy as np

from wordpaths.board import Grid
from wordpaths.tiles import Tile, default_char, mask_tile


def project(grid: Grid[Tile]) -> Grid[str]:
    """Map each tile of a grid to its display character."""
    return grid.map(default_char)


def flatten(grids: Sequence[Grid[Tile]]) -> Grid[str]:
    """Collapse a set of candidate grids into one character grid.

    A cell shows its character if every grid agrees on it, and a blank otherwise.

    Raises:
        ValueError: If `grids` is empty or the grids differ in size.
    """
    if not grids:
        raise ValueError("Cannot flatten an empty set of grids.")
    width, height = grids[0].width, grids[0].height
    if any(g.width != width or g.height != height for g in grids):
        raise ValueError("Cannot flatten grids of different dimensions.")

    # One row per grid, one column per cell
    chars = np.array([project(g).tiles for g in grids], dtype=object).reshape(
        len(grids), width * height
    )
    agree = (chars == chars[0]).all(axis=0)
    folded = np.where(agree, chars[0], " ")
    return Grid(width, height, folded.tolist())


def flatten_word(grids: Sequence[Grid[Tile]], word: str) -> Grid[str]:
    """Flatten the grids showing only the fixed letters and the cells of `word`."""
    return flatten([g.map(lambda tile: mask_tile(tile, word)) for g in grids])
