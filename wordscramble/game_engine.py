"""Shared game engine for Word Scramble.

This module holds the rules of a game session:
- Picking a root word for a new game
- The three submission checks (original, real, possible)
- Scoring and penalties

The interactive host (game.py) and the CLI both go through this module,
so the rules live in exactly one place.
"""

import random
import unicodedata
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import regex

from wordscramble.dictionary import DictionaryOracle
from wordscramble.errors import WordListMissing

_GRAPHEME = regex.compile(r"\X")


@dataclass
class Session:
    """State of a single game. Replaced wholesale on a new game."""
    root_word: str
    used_words: List[str] = field(default_factory=list)  # most recent first
    score: int = 0


@dataclass
class SubmissionResult:
    """Result of submitting a single word."""
    word: str
    outcome: str  # "accepted", "ignored", "duplicate", "unrecognized", "impossible"
    points: int
    score: int
    title: Optional[str] = None
    message: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.outcome == "accepted"

    @property
    def is_error(self) -> bool:
        """True if the submission failed one of the checks."""
        return self.title is not None


class GameEngine:
    """Core rules for Word Scramble.

    Every method is a classmethod; session state is passed in explicitly.
    """

    MIN_WORD_LENGTH = 3

    # Penalties, applied in check order
    DUPLICATE_PENALTY = 5
    UNRECOGNIZED_PENALTY = 10
    IMPOSSIBLE_PENALTY = 15

    @classmethod
    def start_game(
        cls,
        candidates: Sequence[str],
        rng: Optional[random.Random] = None,
    ) -> Session:
        """Create a fresh session with a root word picked uniformly at random.

        Raises:
            WordListMissing: if there are no candidates to pick from
        """
        if not candidates:
            raise WordListMissing("No candidate root words available")
        chooser = rng or random
        root_word = cls.normalize(chooser.choice(list(candidates)))
        return Session(root_word=root_word)

    @classmethod
    def normalize(cls, raw: str) -> str:
        """Lower-case, trim and NFC-normalize a submission."""
        return unicodedata.normalize("NFC", raw.strip().lower())

    @classmethod
    def letters(cls, word: str) -> List[str]:
        """Split a word into user-perceived characters (grapheme clusters)."""
        return _GRAPHEME.findall(unicodedata.normalize("NFC", word))

    @classmethod
    def is_original(cls, word: str, session: Session) -> bool:
        return word not in session.used_words

    @classmethod
    def is_real(cls, word: str, dictionary: DictionaryOracle, language: str = "en") -> bool:
        """Length check first, then the dictionary."""
        if len(cls.letters(word)) < cls.MIN_WORD_LENGTH:
            return False
        return dictionary.is_valid(word, language)

    @classmethod
    def is_possible(cls, word: str, root_word: str) -> bool:
        """True if every letter of word can be taken from a distinct letter of root_word."""
        remaining = cls.letters(root_word)
        for letter in cls.letters(word):
            try:
                remaining.remove(letter)
            except ValueError:
                return False
        return True

    @classmethod
    def word_score(cls, word: str) -> int:
        length = len(cls.letters(word))
        return length * length // 2

    @classmethod
    def submit_word(
        cls,
        raw: str,
        session: Session,
        dictionary: DictionaryOracle,
        language: str = "en",
    ) -> SubmissionResult:
        """Validate a submission and update the session in place.

        Checks run in a fixed order and stop at the first failure, so a
        submission is penalized at most once.

        Args:
            raw: Text as typed by the player
            session: Session to update
            dictionary: Oracle deciding whether a word is real
            language: Language code passed to the oracle

        Returns:
            SubmissionResult describing what happened
        """
        word = cls.normalize(raw)

        if not word:
            return SubmissionResult(word=word, outcome="ignored", points=0, score=session.score)

        if not cls.is_original(word, session):
            return cls._reject(
                session, word, "duplicate", cls.DUPLICATE_PENALTY,
                "Word already used", "Be more original",
            )

        if not cls.is_real(word, dictionary, language):
            return cls._reject(
                session, word, "unrecognized", cls.UNRECOGNIZED_PENALTY,
                "Word not recognized", "You can't just make them up, you know!",
            )

        if not cls.is_possible(word, session.root_word):
            return cls._reject(
                session, word, "impossible", cls.IMPOSSIBLE_PENALTY,
                "Word not possible", f"You can't spell that word from {session.root_word}!",
            )

        points = cls.word_score(word)
        session.used_words.insert(0, word)
        session.score += points
        return SubmissionResult(word=word, outcome="accepted", points=points, score=session.score)

    @classmethod
    def _reject(
        cls,
        session: Session,
        word: str,
        outcome: str,
        penalty: int,
        title: str,
        message: str,
    ) -> SubmissionResult:
        before = session.score
        session.score = max(0, session.score - penalty)
        return SubmissionResult(
            word=word,
            outcome=outcome,
            points=session.score - before,
            score=session.score,
            title=title,
            message=message,
        )
