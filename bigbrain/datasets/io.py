from __future__ import annotations
import logging
from pathlib import Path
from typing import List

from bigbrain.engine import MalformedDictionaryEntry, Word
from bigbrain.config import WORD_LENGTH

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_words(p: Path | str) -> List[Word]:
    """
    Load a dictionary: one word per line, blanks skipped, lowercased.

    Any entry that is not exactly WORD_LENGTH characters is fatal and raises
    MalformedDictionaryEntry with its 1-based line number.
    """
    words: List[Word] = []
    for lineno, raw in enumerate(read_lines(p), start=1):
        w = raw.strip().lower()
        if not w:
            continue
        if len(w) != WORD_LENGTH:
            raise MalformedDictionaryEntry(w, line=lineno)
        words.append(Word(w))
    log.debug("loaded %d words from %s", len(words), p)
    return words
