"""Word path solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class SolverConfig(BaseSettings):
    """Configuration settings for the word path solver."""

    sort_words_by_length: bool = True
    """Whether to place shorter words first, which keeps the candidate set small early on.
    Default: True."""

    stop_on_unplaceable: bool = False
    """Whether to stop placing words once one cannot be placed on any candidate grid.

    By default the word is skipped and the remaining words are still placed.
    """

    use_parallel: bool = False
    """Whether to search the candidate grids with a pool of worker processes. Default: False."""

    max_workers: int | None = None
    """Maximum number of worker processes to use. If None (default), uses os.cpu_count() - 1."""

    parallel_min_grids: int = 64
    """Smallest candidate set that is searched in parallel; smaller sets are searched inline.
    Default: 64."""

    parallel_chunk_size: int = 256
    """Number of candidate grids sent to a worker in one task. Default: 256."""

    show_word_views: bool = True
    """Whether to print the per-word view of every word after the merged grid. Default: True."""

    log_file: str | None = None
    """File receiving progress and diagnostic lines. If None (default), they go to stdout."""

    model_config = SettingsConfigDict(
        env_prefix="WORDPATHS_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
