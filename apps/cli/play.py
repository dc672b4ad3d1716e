# apps/cli/play.py
"""
Interactive Wordle advisor.

This script:
  1) Loads the dictionary (fatal on any entry that isn't 5 letters).
  2) Suggests a guess, then reads the feedback Wordle showed for it:
       g = green (correct), y = yellow (misplaced), space/-/. = gray (absent)
     or, with --answer, scores the guess itself against a known word.
  3) Prunes the candidates and repeats for up to 6 rows.

The player may also type the word they actually played when it differs from
the suggestion; it must be a word the advisor knows.
"""

from __future__ import annotations

import argparse
import logging
import sys

from bigbrain.config import BrainConfig, DEFAULT_OPENER, MAX_TURNS
from bigbrain.datasets import load_words
from bigbrain.engine import (
    MalformedDictionaryEntry, MalformedFeedbackInput, NoCandidates, Word,
    is_solved, parse_feedback, pattern_string, score, validate_guess,
)
from bigbrain.solvers import CandidateBrain

OPENING = "Let's start with {}. Type Wordle's feedback: 'g' green, 'y' yellow, ' ' or '-' gray."
NEXT = "{} words left. Next, try {}."
CLOSING = "Last chance! Let's try {}."
WON = "Solved! The word was {}."
LOST = "Lost! We ran out of rows. Better luck next time."
FAILED = ("None of the words I know match the feedback. Either a row was mistyped "
          "or the word is not in my dictionary.")


def _ask(prompt: str) -> str:
    return input(prompt)


def _read_played(guess: str, allowed: set) -> str:
    """Word actually played this row; blank keeps the suggestion."""
    while True:
        raw = _ask(f"played [{guess}]: ").strip().lower()
        if not raw:
            return guess
        if validate_guess(raw, allowed):
            return raw
        print(f"'{raw}' is not a word I know; try again.")


def _read_feedback(played: str):
    while True:
        codes = _ask("feedback: ").rstrip("\r\n")
        try:
            return parse_feedback(codes, played)
        except MalformedFeedbackInput as e:
            print(f"{e}; try again.")


def _print_top(brain: CandidateBrain, k: int) -> None:
    for word, bits in brain.rank(top=k):
        print(f"  {word}  {bits:.3f} bits")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="bigbrain: Wordle advisor")
    ap.add_argument("--words", required=True, help="dictionary file, one 5-letter word per line")
    ap.add_argument("--allowed", help="extra allowed guesses (never answers)")
    ap.add_argument("--answer", help="score guesses against this word instead of asking")
    ap.add_argument("--opener", default=DEFAULT_OPENER,
                    help="first guess used while still a candidate ('' to disable)")
    ap.add_argument("--workers", type=int, help="processes used to rank guesses")
    ap.add_argument("--seed", type=int, help="RNG seed for the last-row pick")
    ap.add_argument("--top", type=int, default=0, help="also show the K best guesses each row")
    ap.add_argument("--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        answer = Word(args.answer) if args.answer else None
    except MalformedDictionaryEntry as e:
        print(f"Bad answer: {e}", file=sys.stderr)
        return 2

    try:
        words = load_words(args.words)
        extra = load_words(args.allowed) if args.allowed else []
    except (MalformedDictionaryEntry, FileNotFoundError) as e:
        print(f"Bad dictionary: {e}", file=sys.stderr)
        return 2

    config = BrainConfig(opener=args.opener or None, workers=args.workers, seed=args.seed)
    brain = CandidateBrain(words, extra_guesses=extra, config=config)
    allowed = set(brain.universe)

    for row in range(MAX_TURNS):
        try:
            guess = brain.suggest(is_last_attempt=(row == MAX_TURNS - 1))
        except NoCandidates:
            print(FAILED)
            return 1

        if row == 0:
            print(OPENING.format(guess))
        elif row == MAX_TURNS - 1:
            print(CLOSING.format(guess))
        else:
            print(NEXT.format(brain.remaining, guess))
        if args.top:
            _print_top(brain, args.top)

        if answer:
            played = guess
            fb = score(played, answer)
            print(f"{played} {pattern_string(fb.pattern())}")
        else:
            try:
                played = _read_played(guess, allowed)
                fb = _read_feedback(played)
            except EOFError:
                return 1

        if is_solved(fb):
            print(WON.format(played))
            return 0

        brain.prune(played, fb)
        # With a known answer the last candidate still has to be scored
        if not answer and brain.done() and row < MAX_TURNS - 1:
            print(WON.format(brain.suggest()))
            return 0

    print(LOST)
    return 1


if __name__ == "__main__":
    sys.exit(main())
