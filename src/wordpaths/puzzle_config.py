"""Loader for puzzle files."""

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from wordpaths.board import Grid
from wordpaths.tiles import Tile, parse_tile
from wordpaths.wordlist import load_word_list


@dataclass
class PuzzleConfig:
    """A puzzle configuration: the starting grid and the words to fit onto it."""

    dims: tuple[int, int]
    """The height and width of the puzzle grid."""

    board_str: str
    """The initial state of the puzzle board, in row-major order.

    Fixed letters are stored in lowercase.  Blank cells are represented by spaces.
    """

    words: list[str]
    """The words to place, lowercase, in the order they were listed."""

    def __post_init__(self) -> None:
        """Validate the board and the words."""
        height, width = self.dims
        if height <= 0 or width <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.dims}.")
        if len(self.board_str) != height * width:
            raise ValueError(f"Board string length does not match dimensions {self.dims}.")

        for word in self.words:
            if not word:
                raise ValueError("Words must not be empty.")
            if word != word.lower():
                raise ValueError(f"Word '{word}' is not lowercase.")

    def __str__(self) -> str:
        """Return a string representation of the Config."""
        return (
            f"{self.dims[0]}x{self.dims[1]} grid, {len(self.words)} words\n"
            + "\n".join(self.board_rows())
        )

    def board_rows(self) -> list[str]:
        """Split the board string into its rows."""
        width = self.dims[1]
        return [self.board_str[i : i + width] for i in range(0, len(self.board_str), width)]

    def to_grid(self) -> Grid[Tile]:
        """Build the starting grid of tiles."""
        height, width = self.dims
        return Grid(width, height, map(parse_tile, self.board_str))


def clean(lines: list[str]) -> tuple[tuple[int, int], str]:
    """Pad the grid lines to the longest one and lowercase them.

    Returns:
        The (height, width) of the grid and the row-major board string.
    """
    width = max(len(line) for line in lines)
    board_str = "".join(line.ljust(width) for line in lines).lower()
    return (len(lines), width), board_str


def load_grid(grid_path: PathLike | str) -> tuple[tuple[int, int], str]:
    """Load a grid file, one row per line.

    Args:
        grid_path: Path to the grid file.

    Returns:
        The (height, width) of the grid and the row-major board string.
    """
    path = Path(grid_path)
    if not path.is_file():
        raise FileNotFoundError(f"Grid file not found: {path}")

    lines = path.read_text(encoding="utf-8").splitlines()
    if not any(lines):
        raise ValueError(f"Grid file is empty: {path}")
    return clean(lines)


def load_config(grid_path: PathLike | str, words_path: PathLike | str) -> PuzzleConfig:
    """Load a puzzle from a grid file and a word list file."""
    dims, board_str = load_grid(grid_path)
    return PuzzleConfig(dims=dims, board_str=board_str, words=load_word_list(words_path))
