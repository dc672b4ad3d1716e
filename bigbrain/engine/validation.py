"""
Lightweight guess validation.

Answers the question: "May the player put this word in as a guess?"
A guess is valid iff:
  - it is a string
  - it is alphabetic a–z only
  - it has exactly WORD_LENGTH letters
  - it exists in the provided `allowed` collection (the guess universe)

Used by the interactive CLI when the player types the word they actually
played instead of taking the suggestion.
"""

from typing import Collection

from bigbrain.config import WORD_LENGTH


def validate_guess(word: str, allowed: Collection[str]) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Notes:
      - `allowed` is searched with `in`; pass a set (or the Brain's universe
        turned into one) when calling in a loop.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()

    # Shape/characters check
    if len(w) != WORD_LENGTH or not w.isalpha():
        return False

    return w in allowed
