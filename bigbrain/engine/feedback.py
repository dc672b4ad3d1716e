"""
Wordle-style feedback for a single (guess, solution) pair.

Conventions (same one-character codes as the CSV/log output):
  - 'G'  : Correct   = letter in the correct position
  - 'Y'  : Misplaced = letter present elsewhere in the solution
  - '-'  : Absent    = letter not present (or present fewer times than guessed)

Every mark carries the GUESSED letter at its position, so a feedback row
alone is enough to rebuild constraints. For entropy only the shape matters,
so `pattern()` drops the letters and keeps the category tags.

Algorithm (two-pass, duplicate-safe):
  1) First pass marks all positions where guess and solution agree.
  2) Second pass walks the remaining guess positions left to right; each one
     claims the first solution position that is neither Correct nor already
     claimed and holds the same letter. No claim -> Absent.
  A letter guessed k times against a solution holding it m times therefore
  gets at most min(k, m) non-Absent marks, Correct ones first.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator, Tuple

from bigbrain.config import WORD_LENGTH
from .errors import MalformedFeedbackInput
from .words import Word


class Mark(enum.Enum):
    CORRECT = "G"
    MISPLACED = "Y"
    ABSENT = "-"


# Letter-stripped feedback; the grouping key for entropy
FeedbackPattern = Tuple[Mark, ...]


@dataclass(frozen=True)
class FeedbackMark:
    letter: str
    kind: ClassVar[Mark]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.letter!r})"


@dataclass(frozen=True, repr=False)
class Correct(FeedbackMark):
    kind: ClassVar[Mark] = Mark.CORRECT


@dataclass(frozen=True, repr=False)
class Misplaced(FeedbackMark):
    kind: ClassVar[Mark] = Mark.MISPLACED


@dataclass(frozen=True, repr=False)
class Absent(FeedbackMark):
    kind: ClassVar[Mark] = Mark.ABSENT


_MARK_TYPES = {Mark.CORRECT: Correct, Mark.MISPLACED: Misplaced, Mark.ABSENT: Absent}

# Codes a player may type for each category (case-insensitive)
_INPUT_CODES = {
    "g": Mark.CORRECT,
    "y": Mark.MISPLACED,
    " ": Mark.ABSENT,
    "-": Mark.ABSENT,
    ".": Mark.ABSENT,
    "x": Mark.ABSENT,
    "b": Mark.ABSENT,
}


class Feedback:
    """An immutable row of exactly WORD_LENGTH marks."""

    __slots__ = ("marks",)

    def __init__(self, marks: Iterable[FeedbackMark]):
        marks = tuple(marks)
        if len(marks) != WORD_LENGTH:
            raise MalformedFeedbackInput(
                f"feedback must have {WORD_LENGTH} marks; got {len(marks)}")
        if not all(isinstance(m, FeedbackMark) for m in marks):
            raise MalformedFeedbackInput(f"not a feedback mark in {marks!r}")
        self.marks: Tuple[FeedbackMark, ...] = marks

    def __iter__(self) -> Iterator[FeedbackMark]:
        return iter(self.marks)

    def __len__(self) -> int:
        return len(self.marks)

    def __getitem__(self, i: int) -> FeedbackMark:
        return self.marks[i]

    def __eq__(self, other) -> bool:
        if isinstance(other, Feedback):
            return self.marks == other.marks
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.marks)

    def __repr__(self) -> str:
        return f"Feedback({list(self.marks)!r})"

    @property
    def word(self) -> str:
        """The guessed word spelled by the marks' letters."""
        return "".join(m.letter for m in self.marks)

    def pattern(self) -> FeedbackPattern:
        return pattern(self)

    def is_solved(self) -> bool:
        return is_solved(self)


def _kinds(guess: str, solution: str) -> list:
    """Two-pass category tags; both arguments must already be Words."""
    kinds = [Mark.ABSENT] * WORD_LENGTH
    consumed = [False] * WORD_LENGTH

    # Pass 1: Correct positions claim their solution letter
    for i in range(WORD_LENGTH):
        if guess[i] == solution[i]:
            kinds[i] = Mark.CORRECT
            consumed[i] = True

    # Pass 2: first unclaimed matching solution letter, left to right
    for i in range(WORD_LENGTH):
        if kinds[i] is Mark.CORRECT:
            continue
        g = guess[i]
        for j in range(WORD_LENGTH):
            if not consumed[j] and solution[j] == g:
                consumed[j] = True
                kinds[i] = Mark.MISPLACED
                break

    return kinds


def score(guess: str, solution: str) -> Feedback:
    """
    Compute feedback for `guess` against `solution`.

    Examples:
      score("modem", "manas") -> [Correct('m'), Absent('o'), Absent('d'), Absent('e'), Absent('m')]
      score("qodmm", "manas") -> [Absent('q'), Absent('o'), Absent('d'), Misplaced('m'), Absent('m')]
    """
    guess = Word(guess)
    kinds = _kinds(guess, Word(solution))
    return Feedback(_MARK_TYPES[k](ch) for ch, k in zip(guess, kinds))


def score_pattern(guess: str, solution: str) -> FeedbackPattern:
    """Same as pattern(score(guess, solution)) without building the marks."""
    return tuple(_kinds(Word(guess), Word(solution)))


def pattern(feedback: Feedback) -> FeedbackPattern:
    """Drop the letters; keep the category tags in position order."""
    return tuple(m.kind for m in feedback)


def is_solved(feedback: Feedback) -> bool:
    return all(m.kind is Mark.CORRECT for m in feedback)


def pattern_string(patt: FeedbackPattern) -> str:
    """Render a pattern with the one-character codes, e.g. 'G-Y--'."""
    return "".join(m.value for m in patt)


def from_pattern(guess: str, patt: Iterable[Mark]) -> Feedback:
    """Attach the guess's letters to a letter-free pattern."""
    guess = Word(guess)
    patt = tuple(patt)
    if len(patt) != WORD_LENGTH:
        raise MalformedFeedbackInput(
            f"pattern must have {WORD_LENGTH} marks; got {len(patt)}")
    return Feedback(_MARK_TYPES[k](ch) for ch, k in zip(guess, patt))


def parse_feedback(codes: str, guess: str) -> Feedback:
    """
    Turn a row of player-typed codes into Feedback for `guess`.

    'g' = Correct, 'y' = Misplaced, and any of ' ', '-', '.', 'x', 'b' =
    Absent (case-insensitive). Raises MalformedFeedbackInput when the row is
    not exactly WORD_LENGTH codes or contains an unknown code.
    """
    if len(codes) != WORD_LENGTH:
        raise MalformedFeedbackInput(
            f"expected {WORD_LENGTH} feedback codes; got {len(codes)} ({codes!r})")
    kinds = []
    for i, ch in enumerate(codes):
        kind = _INPUT_CODES.get(ch.lower())
        if kind is None:
            raise MalformedFeedbackInput(f"unknown feedback code {ch!r} at position {i + 1}")
        kinds.append(kind)
    return from_pattern(guess, kinds)
