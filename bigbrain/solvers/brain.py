"""
Candidate Brain: owns the live candidate set for one game.

Lifecycle:
  - built once from the Word Store (candidates == universe initially)
  - prune() once per accepted (guess, feedback) row, strictly sequential
  - suggest() for the next guess; done() once a single word is left

The guess universe never changes during a session; the candidate list only
shrinks and keeps dictionary order.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, List, Tuple

from bigbrain.config import BrainConfig
from bigbrain.engine import Feedback, NoCandidates, Word, filter_candidates, pattern_string
from . import entropy

log = logging.getLogger(__name__)


def _dedupe(words: Iterable[str]) -> List[Word]:
    seen, out = set(), []
    for w in words:
        w = Word(w)
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


class CandidateBrain:
    def __init__(self, dictionary: Iterable[str], *, extra_guesses: Iterable[str] = (),
                 config: BrainConfig | None = None):
        words = _dedupe(dictionary)
        if not words:
            raise ValueError("dictionary must contain at least one word")

        self.config = config or BrainConfig()
        self.candidates: List[Word] = words
        # Extra guesses may be proposed but are never answers
        self.universe: Tuple[Word, ...] = tuple(_dedupe(list(words) + list(extra_guesses)))
        self.opener: Word | None = Word(self.config.opener) if self.config.opener else None
        self.rng = random.Random(self.config.seed)

    def __len__(self) -> int:
        return len(self.candidates)

    @property
    def remaining(self) -> int:
        """Current candidate count (for progress display)."""
        return len(self.candidates)

    def done(self) -> bool:
        return len(self.candidates) == 1

    def prune(self, guessed_word: str, feedback: Feedback) -> None:
        """Drop every candidate inconsistent with this (guess, feedback) row."""
        before = len(self.candidates)
        self.candidates = filter_candidates(self.candidates, guessed_word, feedback)
        log.debug("prune %s %s: %d -> %d candidates", guessed_word,
                  pattern_string(feedback.pattern()), before, len(self.candidates))

    def suggest(self, is_last_attempt: bool = False) -> Word:
        """
        Next guess to play.

        Raises NoCandidates when the feedback has ruled out every word.
        """
        if not self.candidates:
            raise NoCandidates()
        if len(self.candidates) == 1:
            return self.candidates[0]
        if is_last_attempt:
            # No later turn to profit from information; just take a shot
            return self.rng.choice(self.candidates)
        if self.opener is not None and self.opener in self.candidates:
            log.debug("opener %s still a candidate; skipping entropy", self.opener)
            return self.opener
        return Word(entropy.best(self.universe, self.candidates,
                                 workers=self.config.workers,
                                 chunksize=self.config.chunksize))

    def rank(self, top: int | None = None) -> entropy.Ranking:
        """Entropy ranking for the current state, best first."""
        if not self.candidates:
            raise NoCandidates()
        results = entropy.rank(self.universe, self.candidates,
                               workers=self.config.workers,
                               chunksize=self.config.chunksize)
        results.reverse()
        return results if top is None else results[:top]
