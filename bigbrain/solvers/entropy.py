"""
Entropy Solver (expected information gain).

Main idea:
  - For each guess g in the guess universe, partition the CURRENT candidates
    by the feedback pattern g would produce against each of them.
  - Shannon entropy H over those buckets (bits) = expected information gain,
    assuming the hidden word is uniform over the candidates.
  - Rank the universe ascending by H with a stable sort; the last entry wins.

The universe is scored in full, not just the candidates: a word that cannot
be the answer can still split the candidates better than any that can.

Tie-break:
  - Equal scores keep universe order (stable sort), so the LAST of the tied
    words in universe order is picked. Deterministic, no RNG.

Parallelism:
  - Each guess reads only the candidate snapshot and writes its own bucket
    counter, so the universe is split into chunks and mapped over a process
    pool. Executor.map yields results in submission order, so the merged
    list matches the serial one before sorting.
"""

from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import List, Sequence, Tuple

import numpy as np

from bigbrain.engine import NoCandidates, score_pattern

log = logging.getLogger(__name__)

Ranking = List[Tuple[str, float]]

# Keep each worker busy with a few tasks rather than one huge one
CHUNKS_PER_WORKER = 4


def score_guess(guess: str, candidates: Sequence[str]) -> float:
    """Entropy in bits of the feedback distribution `guess` induces over `candidates`."""
    n = len(candidates)
    if n <= 1:
        return 0.0

    # localize for speed
    _pattern = score_pattern
    buckets = Counter(_pattern(guess, ans) for ans in candidates)

    counts = np.fromiter(buckets.values(), dtype=np.float64, count=len(buckets))
    p = counts / n
    return float(np.sum(p * np.log2(1.0 / p)))  # == -sum(p*log2(p))


def _score_chunk(chunk: Sequence[str], candidates: Sequence[str]) -> List[float]:
    """Worker task: scores for one slice of the universe, in slice order."""
    return [score_guess(g, candidates) for g in chunk]


def _chunks(words: Sequence[str], size: int) -> List[Sequence[str]]:
    return [words[i:i + size] for i in range(0, len(words), size)]


def _score_all(universe: Sequence[str], candidates: Tuple[str, ...],
               workers: int | None, chunksize: int | None) -> List[float]:
    if not workers or workers == 1 or len(universe) < 2:
        return _score_chunk(universe, candidates)

    size = chunksize or max(1, len(universe) // (workers * CHUNKS_PER_WORKER))
    task = partial(_score_chunk, candidates=candidates)
    scores: List[float] = []
    with ProcessPoolExecutor(max_workers=workers) as executor:
        for part in executor.map(task, _chunks(universe, size)):
            scores.extend(part)
    return scores


def rank(universe: Sequence[str], candidates: Sequence[str], *,
         workers: int | None = None, chunksize: int | None = None) -> Ranking:
    """
    Score every universe word and stable-sort ascending by entropy.

    Args:
      universe   : words the solver may propose (order matters for ties)
      candidates : words still consistent with all feedback
      workers    : process count; None or 1 scores in-process
      chunksize  : universe words per task (default derived from workers)

    Returns:
      [(word, bits), ...] ascending by bits; best guess last.
    """
    universe = tuple(universe)
    # Immutable snapshot shared read-only by every task
    snapshot = tuple(candidates)

    log.debug("ranking %d guesses against %d candidates (workers=%s)",
              len(universe), len(snapshot), workers or 1)
    scores = _score_all(universe, snapshot, workers, chunksize)
    return sorted(zip(universe, scores), key=lambda ws: ws[1])


def best(universe: Sequence[str], candidates: Sequence[str], *,
         workers: int | None = None, chunksize: int | None = None) -> str:
    """The highest-entropy guess: the last entry of rank()."""
    if not candidates:
        raise NoCandidates()
    if not universe:
        raise NoCandidates("guess universe is empty")
    results = rank(universe, candidates, workers=workers, chunksize=chunksize)
    word, bits = results[-1]
    log.debug("best guess %s (%.4f bits)", word, bits)
    return word
