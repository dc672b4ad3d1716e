"""
The Word value type.

A Word is a plain lowercase string that is guaranteed to be exactly
WORD_LENGTH characters long. Subclassing `str` keeps it immutable, hashable
and comparable by value, so it drops into sets, dict keys and sorted lists
exactly like the strings the rest of the code already handles.
"""

from __future__ import annotations

from bigbrain.config import WORD_LENGTH
from .errors import MalformedDictionaryEntry


class Word(str):
    __slots__ = ()

    def __new__(cls, value: str) -> "Word":
        if isinstance(value, Word):
            return value
        # Normalize; the Word Store canonicalizes to lowercase
        w = str(value).strip().lower()
        if len(w) != WORD_LENGTH:
            raise MalformedDictionaryEntry(w)
        return super().__new__(cls, w)

    def __repr__(self) -> str:
        return f"Word({str.__repr__(self)})"

