"""Utility functions for the word path solver."""

from collections.abc import Iterable, Mapping
from typing import NamedTuple

from wordpaths.board import Grid, Point
from wordpaths.exceptions import DuplicateAnchorError, MissingAnchorError
from wordpaths.tiles import Fixed, Tile

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


class WordPlacement(NamedTuple):
    """A word together with the points its path must start and end on."""

    word: str
    start: Point
    end: Point


def build_letter_map(grid: Grid[Tile]) -> dict[str, Point]:
    """Map each fixed letter of the grid to its position.

    Raises:
        DuplicateAnchorError: If a fixed letter appears more than once.
    """
    letter_map: dict[str, Point] = {}
    for p in grid.points():
        tile = grid[p]
        if not isinstance(tile, Fixed):
            continue
        if tile.letter in letter_map:
            first = letter_map[tile.letter]
            raise DuplicateAnchorError(
                f"Already have letter '{tile.letter}' at point {first.x},{first.y} "
                f"(found again at {p.x},{p.y})."
            )
        letter_map[tile.letter] = p
    return letter_map


def word_anchors(letter_map: Mapping[str, Point], word: str) -> tuple[Point, Point]:
    """Get the start and end points of a word from its first and last letters.

    Raises:
        MissingAnchorError: If either letter is not a fixed letter on the grid.
    """
    for letter in (word[0], word[-1]):
        if letter not in letter_map:
            raise MissingAnchorError(f"No cell holds letter '{letter}' needed by word '{word}'.")
    return letter_map[word[0]], letter_map[word[-1]]


def order_words(words: Iterable[str], *, by_length: bool = True) -> list[str]:
    """Order words for placement: shortest first (stable) or as given."""
    if by_length:
        return sorted(words, key=len)
    return list(words)


def get_placements(
    letter_map: Mapping[str, Point], words: Iterable[str]
) -> list[WordPlacement]:
    """Look up the anchors of every word, failing before any search starts."""
    return [WordPlacement(word, *word_anchors(letter_map, word)) for word in words]


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.sss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
