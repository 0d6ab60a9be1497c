"""Dictionary oracles: decide whether a string is a real word.

Two backends:
- WordListDictionary: a plain word list, one word per line (offline, exact)
- WordfreqDictionary: wordfreq's frequency data; a word counts as real
  when its Zipf frequency reaches a threshold
"""

import logging
import unicodedata
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Union

from wordfreq import available_languages, zipf_frequency

from wordscramble.errors import ConfigError

if TYPE_CHECKING:
    from wordscramble.config import GameConfig

logger = logging.getLogger(__name__)


def _normalize(word: str) -> str:
    return unicodedata.normalize("NFC", word.strip().lower())


class DictionaryOracle:
    """Answers "is this a valid word in language L?"."""

    def is_valid(self, word: str, language: str = "en") -> bool:
        raise NotImplementedError


class WordListDictionary(DictionaryOracle):
    """Set-backed dictionary for a single language."""

    def __init__(self, words: Iterable[str], language: str = "en"):
        self.language = language
        self._words = {_normalize(w) for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Union[str, Path], language: str = "en") -> "WordListDictionary":
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"Dictionary file not found: {path}")
        try:
            with open(path, "r", encoding="utf-8") as f:
                dictionary = cls(f, language=language)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Could not read dictionary file {path}: {e}") from e
        logger.info(f"Loaded {len(dictionary)} dictionary words from {path}")
        return dictionary

    def __len__(self) -> int:
        return len(self._words)

    def is_valid(self, word: str, language: str = "en") -> bool:
        if language != self.language:
            return False
        return _normalize(word) in self._words


class WordfreqDictionary(DictionaryOracle):
    """Dictionary backed by wordfreq word frequencies."""

    def __init__(self, min_zipf: float = 1.5):
        self.min_zipf = min_zipf
        self._languages = set(available_languages())

    def is_valid(self, word: str, language: str = "en") -> bool:
        if language not in self._languages:
            logger.warning(f"wordfreq has no data for language '{language}'")
            return False
        frequency = zipf_frequency(word, language)
        logger.debug(f"zipf_frequency({word!r}, {language!r}) = {frequency}")
        return frequency >= self.min_zipf


def build_dictionary(config: "GameConfig") -> DictionaryOracle:
    """Create the dictionary backend named in the configuration."""
    if config.dictionary == "wordlist":
        if not config.dictionary_file:
            raise ConfigError("The 'wordlist' dictionary needs dictionary_file to be set")
        return WordListDictionary.from_file(config.dictionary_file, language=config.language)
    if config.dictionary == "wordfreq":
        return WordfreqDictionary(min_zipf=config.min_zipf)
    raise ConfigError(f"Unknown dictionary backend: {config.dictionary}")
