"""Module for tile-related classes and functions.

Every cell of a crossword grid holds one of four tile kinds:

- ``Fixed``: a letter printed on the puzzle, which anchors words and never changes.
- ``Empty``: a blank cell not yet claimed by any word.
- ``OneWord``: a blank cell claimed by a single word.
- ``TwoWords``: a blank cell where two different words cross.  It can take no more words.
"""

from typing import NamedTuple, TypeAlias


class Fixed(NamedTuple):
    """A letter printed on the puzzle."""

    letter: str


class Empty(NamedTuple):
    """A blank cell."""


class OneWord(NamedTuple):
    """A blank cell claimed by one word."""

    letter: str
    word: str


class TwoWords(NamedTuple):
    """A blank cell where two words cross."""

    letter: str
    first: str
    second: str


Tile: TypeAlias = Fixed | Empty | OneWord | TwoWords

EMPTY = Empty()


def parse_tile(ch: str) -> Tile:
    """Create a tile from a character of a grid file."""
    if ch == " ":
        return EMPTY
    return Fixed(ch.lower())


def claim_tile(tile: Tile, word: str, letter: str) -> Tile | None:
    """Returns the tile after `word` passes through it with `letter`.

    Returns None if the word cannot pass through the tile: the letters disagree, the tile
    is already claimed by this same word, or two words already cross there.  A matching
    `Fixed` tile is returned unchanged.
    """
    if isinstance(tile, Fixed):
        return tile if tile.letter == letter else None
    if isinstance(tile, Empty):
        return OneWord(letter, word)
    if isinstance(tile, OneWord):
        if tile.letter == letter and tile.word != word:
            return TwoWords(tile.letter, tile.word, word)
        return None
    return None


def tile_words(tile: Tile) -> tuple[str, ...]:
    """The words claiming a tile."""
    if isinstance(tile, OneWord):
        return (tile.word,)
    if isinstance(tile, TwoWords):
        return (tile.first, tile.second)
    return ()


def _one_char(letter: str, cased: str) -> str:
    # Some letters change length when recased, e.g. "ß".upper() == "SS"
    return cased if len(cased) == 1 else letter


def default_char(tile: Tile) -> str:
    """Character shown for a tile: fixed letters in uppercase, word letters in lowercase.

    Always a single character, so rendered rows keep the grid's width.
    """
    if isinstance(tile, Fixed):
        return _one_char(tile.letter, tile.letter.upper())
    if isinstance(tile, (OneWord, TwoWords)):
        return _one_char(tile.letter, tile.letter.lower())
    return " "


def mask_tile(tile: Tile, word: str) -> Tile:
    """Blank out a tile unless it is fixed or claimed by `word`."""
    if isinstance(tile, Fixed) or word in tile_words(tile):
        return tile
    return EMPTY
