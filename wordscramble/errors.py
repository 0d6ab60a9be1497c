"""Exceptions raised by Word Scramble.

Word validation failures are not exceptions; they come back as
SubmissionResult values from the game engine.
"""

from pathlib import Path
from typing import Optional


class WordScrambleError(Exception):
    """Base class for Word Scramble errors."""


class WordListMissing(WordScrambleError):
    """The candidate root word list is missing or empty.

    Raised at game start. The host decides whether to abort or retry with
    another list.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class ConfigError(WordScrambleError):
    """Invalid configuration value."""
