"""Validated solver inputs, built before any search runs."""

from datetime import datetime
from time import time

from wordpaths.puzzle_config import PuzzleConfig
from wordpaths.solver.config import SolverConfig
from wordpaths.solver.config import config as solver_config
from wordpaths.solver.utils import (
    TIMESTAMP_FMT,
    build_letter_map,
    get_placements,
    order_words,
)


class TaskArgs:
    """Wrapper for the inputs of a solver run.

    Building one checks that the grid and the word list fit together: every fixed letter
    is unique and every word starts and ends on a fixed letter.  Any problem is raised
    here, so the search itself only ever sees valid placements.
    """

    def __init__(self, *, config: PuzzleConfig, settings: SolverConfig | None = None) -> None:
        """Prepare the grid, letter map and word placements.

        Args:
            config (PuzzleConfig): The puzzle to solve.
            settings (SolverConfig | None): Solver settings, defaulting to the global config.

        Raises:
            DuplicateAnchorError: If a fixed letter appears twice on the grid.
            MissingAnchorError: If a word's first or last letter is not on the grid.
        """
        settings = settings or solver_config

        self.puzzle_config = config
        """The puzzle configuration."""

        self.grid = config.to_grid()
        """The starting grid."""

        self.letter_map = build_letter_map(self.grid)
        """Mapping of fixed letters to their points.  Never modified after construction."""

        self.words = list(config.words)
        """Words in input order, used for the per-word views."""

        self.placements = get_placements(
            self.letter_map,
            order_words(self.words, by_length=settings.sort_words_by_length),
        )
        """Words with their anchors, in placement order."""

        self.start_time = time()
        """Timestamp when the solver started, in seconds since the epoch."""

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the task arguments."""
        height, width = self.puzzle_config.dims
        return {
            "dims": f"{height}x{width}",
            "anchors": "".join(sorted(self.letter_map)),
            "words_count": len(self.words),
            "placement_order": [p.word for p in self.placements],
            "start_time": datetime.fromtimestamp(self.start_time)
            .astimezone()
            .strftime(TIMESTAMP_FMT),
        }
