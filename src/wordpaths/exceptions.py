"""Exception hierarchy for puzzle configuration failures."""


class PuzzleConfigError(ValueError):
    """Base exception for a grid and word list that cannot be solved together."""


class DuplicateAnchorError(PuzzleConfigError):
    """Raised when a fixed letter appears more than once on the grid."""


class MissingAnchorError(PuzzleConfigError):
    """Raised when a word's first or last letter is not on the grid."""
