"""Module for word list management."""

from os import PathLike
from pathlib import Path


def load_word_list(word_list_path: PathLike | str) -> list[str]:
    """Load the words to place, one per line.

    Words are lowercased and blank lines are skipped.  Order is preserved.

    Args:
        word_list_path: Path to the word list file.

    Returns:
        A list of words.
    """
    path = Path(word_list_path)
    if not path.is_file():
        raise FileNotFoundError(f"Word list file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return [word.lower() for line in f if (word := line.strip())]
