"""Candidate root word loading for Word Scramble.

The bundled list lives in inputs/start.txt: plain text, one word per line.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from wordscramble.errors import WordListMissing

logger = logging.getLogger(__name__)

# Cache for loaded word lists (keyed by file path)
_WORDS_CACHE: Dict[str, List[str]] = {}


def default_words_file() -> Path:
    """Path to the bundled start.txt."""
    return Path(__file__).parent / "inputs" / "start.txt"


class WordListProvider:
    """Supply candidate root words from a newline-separated text file."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path else default_words_file()

    def load(self) -> List[str]:
        """Load candidate words (cached per path).

        Lines are stripped and lower-cased; blank lines are skipped, so a
        trailing newline never produces an empty root word.

        Raises:
            WordListMissing: if the file is absent or has no words
        """
        key = str(self.path)
        if key in _WORDS_CACHE:
            return _WORDS_CACHE[key]

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                words = [line.strip().lower() for line in f]
        except FileNotFoundError as e:
            raise WordListMissing(f"Could not load {self.path}", path=self.path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise WordListMissing(f"Could not load {self.path}: {e}", path=self.path) from e

        words = [w for w in words if w]
        if not words:
            raise WordListMissing(f"No words found in {self.path}", path=self.path)

        logger.info(f"Loaded {len(words)} root words from {self.path}")
        _WORDS_CACHE[key] = words
        return words


def clear_cache() -> None:
    _WORDS_CACHE.clear()
