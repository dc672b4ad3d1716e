"""
Session configuration.

Constants are the game rules; BrainConfig carries the per-session knobs the
Brain needs (opener, parallelism, RNG seed). CLIs build a BrainConfig from
their argparse flags.
"""

from __future__ import annotations

from dataclasses import dataclass

# Fixed by the game; variable lengths are not supported.
WORD_LENGTH = 5

# Wordle turn budget. The harness refuses any other value.
MAX_TURNS = 6

# Precomputed offline as a strong first guess against the full dictionary.
DEFAULT_OPENER = "tares"


@dataclass(frozen=True)
class BrainConfig:
    """
    Read-only settings for one advising session.

    opener    : word returned without any entropy work while it is still a
                candidate (None disables the shortcut)
    workers   : processes used to rank the guess universe; None or 1 = serial
    chunksize : universe words per worker task (None = derived from workers)
    seed      : seed for the Brain's RNG (last-attempt random pick)
    """
    opener: str | None = DEFAULT_OPENER
    workers: int | None = None
    chunksize: int | None = None
    seed: int | None = None

    def __post_init__(self):
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be >= 1; got {self.workers}")
        if self.chunksize is not None and self.chunksize < 1:
            raise ValueError(f"chunksize must be >= 1; got {self.chunksize}")
