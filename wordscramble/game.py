"""Core game logic for Word Scramble."""

import logging
import random
import uuid
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from wordscramble.dictionary import DictionaryOracle
from wordscramble.game_engine import GameEngine, Session, SubmissionResult
from wordscramble.word_list import WordListProvider

console = Console()
logger = logging.getLogger(__name__)


class WordScrambleGame:
    """The main game class for Word Scramble.

    The player is shown a root word and submits words spelled from its
    letters:
    - Already used word: -5 points
    - Shorter than 3 letters or not a real word: -10 points
    - Not spelled from the root word's letters: -15 points
    - Accepted word: length² / 2 points (rounded down)
    - Score never drops below 0

    A failed submission leaves an active error until the host calls
    acknowledge_error().
    """

    def __init__(
        self,
        word_list: WordListProvider,
        dictionary: DictionaryOracle,
        language: str = "en",
        quiet: bool = False,
        seed: Optional[int] = None,
    ):
        self.word_list = word_list
        self.dictionary = dictionary
        self.language = language
        self.quiet = quiet
        self.seed = seed
        self._rng = random.Random(seed) if seed is not None else None

        self.session: Optional[Session] = None
        self.active_error: Optional[SubmissionResult] = None
        self._candidates: Optional[List[str]] = None

        self.game_id = str(uuid.uuid4())[:8]

    def _print(self, *args, **kwargs):
        """Print to console unless in quiet mode."""
        if not self.quiet:
            console.print(*args, **kwargs)

    @property
    def root_word(self) -> str:
        return self._require_session().root_word

    @property
    def used_words(self) -> List[str]:
        return list(self._require_session().used_words)

    @property
    def score(self) -> int:
        return self._require_session().score

    @property
    def showing_error(self) -> bool:
        return self.active_error is not None

    def _require_session(self) -> Session:
        if self.session is None:
            raise RuntimeError("No game in progress; call start_game() first")
        return self.session

    def start_game(self) -> Session:
        """Start a new game, replacing any previous session.

        Raises:
            WordListMissing: if no candidate root words can be loaded
        """
        if self._candidates is None:
            self._candidates = self.word_list.load()

        self.session = GameEngine.start_game(self._candidates, rng=self._rng)
        self.active_error = None
        self.game_id = str(uuid.uuid4())[:8]
        logger.info(f"Game {self.game_id} started with root word '{self.session.root_word}'")
        return self.session

    def submit_word(self, raw: str) -> SubmissionResult:
        """Submit a word for the current game."""
        session = self._require_session()
        result = GameEngine.submit_word(raw, session, self.dictionary, self.language)

        if result.outcome == "ignored":
            logger.debug(f"Game {self.game_id}: ignored empty submission")
        elif result.is_error:
            self.active_error = result
            logger.info(
                f"Game {self.game_id}: rejected '{result.word}' ({result.outcome}), "
                f"{result.points} points, score {result.score}"
            )
        else:
            logger.info(
                f"Game {self.game_id}: accepted '{result.word}' "
                f"+{result.points} points, score {result.score}"
            )
        return result

    def acknowledge_error(self) -> None:
        self.active_error = None

    def display(self):
        """Display the score, root word and used words."""
        session = self._require_session()
        self._print(f"\n[bold]{session.score} points[/bold]")

        table = Table(title=f"[bold cyan]{session.root_word}[/bold cyan]", show_header=False)
        table.add_column(justify="right", style="dim")
        table.add_column()
        for word in session.used_words:
            table.add_row(str(len(GameEngine.letters(word))), word)
        if not session.used_words:
            table.add_row("", "[dim]No words yet[/dim]")
        self._print(table)

    def display_error(self):
        """Display the active error, if any."""
        if self.active_error is None:
            return
        self._print(
            Panel(
                self.active_error.message or "",
                title=f"[red]{self.active_error.title}[/red]",
                border_style="red",
            )
        )
