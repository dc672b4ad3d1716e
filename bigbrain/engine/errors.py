"""
Error kinds raised by the engine.

Nothing in here is retried internally: every error is an explicit outcome for
the caller (CLI, harness, notebook) to act on.
"""


class BrainError(Exception):
    """Base class for all engine errors."""


class NoCandidates(BrainError):
    """
    No dictionary word is consistent with the feedback seen so far.

    Usually means the feedback was mis-entered or the hidden word is not in
    the dictionary. Asking again without new information cannot help.
    """

    def __init__(self, message: str = "no candidate words left"):
        super().__init__(message)


class MalformedDictionaryEntry(BrainError, ValueError):
    """A Word Store entry that is not exactly 5 characters long."""

    def __init__(self, entry: str, line: int | None = None):
        self.entry = entry
        self.line = line
        where = f" (line {line})" if line is not None else ""
        super().__init__(f"dictionary entry {entry!r}{where} is not 5 characters long")


class MalformedFeedbackInput(BrainError, ValueError):
    """A feedback row that is not 5 valid marks for the guessed word."""
