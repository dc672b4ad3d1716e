"""
Experiment harness core primitives.

- run_case:  play one puzzle (one hidden answer) with a fresh CandidateBrain.
- run_batch: play many puzzles in sequence (optionally a sample prefix).
- summarize: aggregate per-game results into a few headline numbers.
- Enforces Wordle's 6-turn limit at the harness layer.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import time
from dataclasses import replace
from typing import Dict, Iterable, List, Tuple

import numpy as np
from tqdm import tqdm

from bigbrain.config import BrainConfig, MAX_TURNS
from bigbrain.engine import NoCandidates, is_solved, pattern_string, score
from bigbrain.solvers import CandidateBrain


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a different turn budget."""
    if max_turns != MAX_TURNS:
        raise ValueError(f"max_turns must be {MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        answer: str,
        *,
        dictionary: Iterable[str],
        extra_guesses: Iterable[str] = (),
        config: BrainConfig | None = None,
        max_turns: int = MAX_TURNS,
) -> Dict:
    """
    Execute one game until the brain wins, runs dry, or the turn budget ends.

    Args:
        answer:        the hidden word for this case
        dictionary:    candidate answers (also the base guess universe)
        extra_guesses: additional allowed guesses that are never answers
        config:        BrainConfig (opener, workers, seed)
        max_turns:     must be 6 (Wordle rule; enforced)

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str),
            failure (None | "no_candidates" | "out_of_turns")
    """
    _assert_wordle_turns(max_turns)

    brain = CandidateBrain(dictionary, extra_guesses=extra_guesses, config=config)

    # History accumulates (guess, pattern) tuples for logging and CSV output
    history: List[Tuple[str, str]] = []
    failure = "out_of_turns"

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        try:
            guess = brain.suggest(is_last_attempt=(turn == max_turns))
        except NoCandidates:
            # Answer outside the dictionary; nothing left to propose
            failure = "no_candidates"
            break

        fb = score(guess, answer)
        history.append((str(guess), pattern_string(fb.pattern())))

        if is_solved(fb):
            failure = None
            break

        # Narrow candidate set using the new feedback before next turn
        brain.prune(guess, fb)

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "success": failure is None, "guesses": len(history), "time_ms": dt,
        "history": history, "answer": answer, "failure": failure,
    }


def run_batch(
        answers: List[str],
        *,
        dictionary: List[str],
        extra_guesses: Iterable[str] = (),
        config: BrainConfig | None = None,
        max_turns: int = MAX_TURNS,
        sample: int | None = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K answers
    are used to speed up quick experiments.

    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _assert_wordle_turns(max_turns)

    config = config or BrainConfig()
    extra_guesses = list(extra_guesses)
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    iterator = tqdm(pool, ncols=80, desc="Solving", unit="game") if progress else pool

    out: List[Dict] = []
    for idx, ans in enumerate(iterator, start=1):
        case_seed = None if config.seed is None else (config.seed + idx)
        r = run_case(
            ans, dictionary=dictionary, extra_guesses=extra_guesses,
            config=replace(config, seed=case_seed), max_turns=max_turns,
        )
        out.append(r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Headline numbers for a batch.

    Returns:
        dict with games, solved, success_rate, mean_guesses and
        median_guesses (over solved games only; None if nothing solved),
        and histogram {guess_count: games} for solved games.
    """
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    games = len(results)
    hist: Dict[int, int] = {}
    if solved.size:
        counts = np.bincount(solved, minlength=MAX_TURNS + 1)
        hist = {int(k): int(counts[k]) for k in range(1, len(counts)) if counts[k]}
    return {
        "games": games,
        "solved": int(solved.size),
        "success_rate": (solved.size / games) if games else 0.0,
        "mean_guesses": float(solved.mean()) if solved.size else None,
        "median_guesses": float(np.median(solved)) if solved.size else None,
        "histogram": hist,
    }
