"""
Candidate filtering from a single feedback row.

Given:
  - a pool of candidate words
  - one (guess, feedback) pair

Return:
  - the words that satisfy every constraint that row implies, order kept.

The row is first reduced to a Constraints record (which letters are fixed
where, which are banned where, minimum letter counts), then each word is
checked against it. Rules:

  1. Correct(c) at i            -> word[i] == c
  2. Misplaced(c)/Absent(c) at i -> word[i] != c
  3. c marked Correct/Misplaced n times -> word holds c at least n times
  4. c marked only Absent       -> word must not hold c at ANY position that
                                   was marked Misplaced or Absent in this row

Filtering is idempotent: applying the same row twice keeps the same words.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Tuple

from .errors import MalformedFeedbackInput
from .feedback import Feedback, Mark
from .words import Word


@dataclass(frozen=True)
class Constraints:
    fixed: Tuple[Tuple[str, int], ...]      # (letter, position) that must match
    excluded: Tuple[Tuple[str, int], ...]   # (letter, position) that must not match
    min_counts: Dict[str, int]              # letter -> minimum occurrences
    absent_only: FrozenSet[str]             # Absent letters with no Correct/Misplaced mark
    exclude_mask: Tuple[int, ...]           # positions marked Misplaced or Absent

    def allows(self, word: str) -> bool:
        for c, i in self.fixed:
            if word[i] != c:
                return False

        for c, i in self.excluded:
            if word[i] == c:
                return False

        # Rule 4 bans the letter across the whole mask, not just its own slot
        for c in self.absent_only:
            for i in self.exclude_mask:
                if word[i] == c:
                    return False

        for c, n in self.min_counts.items():
            if word.count(c) < n:
                return False

        return True


def build_constraints(guess: str, feedback: Feedback) -> Constraints:
    """
    Reduce one (guess, feedback) pair to a Constraints record.

    Raises MalformedFeedbackInput when the marks do not spell `guess`.
    """
    guess = Word(guess)
    if feedback.word != guess:
        raise MalformedFeedbackInput(
            f"feedback letters {feedback.word!r} do not match guess {guess!r}")

    fixed: List[Tuple[str, int]] = []
    excluded: List[Tuple[str, int]] = []
    exclude_mask: List[int] = []
    absent_letters = set()
    counts: Counter = Counter()

    for i, m in enumerate(feedback):
        if m.kind is Mark.CORRECT:
            fixed.append((m.letter, i))
            counts[m.letter] += 1
        elif m.kind is Mark.MISPLACED:
            excluded.append((m.letter, i))
            exclude_mask.append(i)
            counts[m.letter] += 1
        else:
            excluded.append((m.letter, i))
            exclude_mask.append(i)
            absent_letters.add(m.letter)

    return Constraints(
        fixed=tuple(fixed),
        excluded=tuple(excluded),
        min_counts=dict(counts),
        absent_only=frozenset(c for c in absent_letters if counts[c] == 0),
        exclude_mask=tuple(exclude_mask),
    )


def filter_candidates(words: Iterable[str], guess: str, feedback: Feedback) -> List[str]:
    """
    Keep only the words consistent with the (guess, feedback) pair.

    Args:
      words    : iterable of candidate words
      guess    : the word that produced `feedback`
      feedback : the 5-mark row for `guess`

    Returns:
      List of surviving candidates (order preserved as in `words`).
    """
    rules = build_constraints(guess, feedback)
    return [w for w in words if rules.allows(w)]
