"""CLI subcommand for Word Scramble."""

import logging
import random
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from wordscramble.config import GameConfig, load_config
from wordscramble.dictionary import build_dictionary
from wordscramble.errors import ConfigError, WordListMissing
from wordscramble.game import WordScrambleGame
from wordscramble.game_engine import GameEngine, Session
from wordscramble.utils.logging import setup_logging
from wordscramble.word_list import WordListProvider

app = typer.Typer(help="Play Word Scramble: spell words from a root word")
console = Console()

NEW_GAME_COMMAND = ":new"
QUIT_COMMAND = ":quit"

OUTCOME_STYLES = {
    "accepted": "green",
    "ignored": "dim",
    "duplicate": "yellow",
    "unrecognized": "red",
    "impossible": "red",
}


def _load_config(
    config_file: Optional[str],
    words_file: Optional[str] = None,
    dictionary: Optional[str] = None,
    dictionary_file: Optional[str] = None,
) -> GameConfig:
    """Load configuration and apply command-line overrides."""
    try:
        config = load_config(config_file)
        if words_file:
            config.words_file = words_file
        if dictionary:
            config.dictionary = dictionary
        if dictionary_file:
            config.dictionary_file = dictionary_file
            if not dictionary:
                config.dictionary = "wordlist"
        return config.validate()
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)


def _build_game(config: GameConfig, seed: Optional[int] = None, quiet: bool = False) -> WordScrambleGame:
    try:
        dictionary = build_dictionary(config)
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    return WordScrambleGame(
        word_list=WordListProvider(config.words_file),
        dictionary=dictionary,
        language=config.language,
        quiet=quiet,
        seed=seed,
    )


def _start(game: WordScrambleGame) -> None:
    try:
        game.start_game()
    except WordListMissing as e:
        console.print(f"[red]Error: {e}[/red]")
        console.print("[yellow]Use --words-file to point at a list of root words[/yellow]")
        raise typer.Exit(1)


@app.command()
def play(
    words_file: Optional[str] = typer.Option(None, help="Path to a root word list (one word per line)"),
    dictionary: Optional[str] = typer.Option(None, help="Dictionary backend: 'wordfreq' or 'wordlist'"),
    dictionary_file: Optional[str] = typer.Option(None, help="Word list for the 'wordlist' dictionary"),
    seed: Optional[int] = typer.Option(None, help="Random seed for reproducible root words"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to a config YAML file"),
    log_path: Optional[str] = typer.Option(None, help="Directory for log files"),
    verbose: bool = typer.Option(False, help="Enable verbose logging"),
):
    """Play an interactive game.

    Type a word and press Enter to submit it. Type ':new' for a new game
    and ':quit' to stop.
    """
    config = _load_config(config_file, words_file, dictionary, dictionary_file)
    setup_logging(Path(log_path or config.log_path), verbose)
    logger = logging.getLogger(__name__)

    if seed is not None:
        logger.info(f"Random seed set to: {seed}")

    game = _build_game(config, seed=seed)
    _start(game)

    console.print(f"[dim]Type '{NEW_GAME_COMMAND}' for a new game, '{QUIT_COMMAND}' to stop.[/dim]")
    game.display()

    while True:
        try:
            raw = console.input("Enter your word: ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        command = raw.strip().lower()
        if command == QUIT_COMMAND:
            break
        if command == NEW_GAME_COMMAND:
            _start(game)
            game.display()
            continue

        result = game.submit_word(raw)
        if result.outcome == "ignored":
            continue

        if game.showing_error:
            game.display_error()
            try:
                console.input("[dim]Press Enter to continue[/dim]")
            except (EOFError, KeyboardInterrupt):
                console.print()
                break
            finally:
                game.acknowledge_error()
        game.display()

    console.print(f"[bold]Final score: {game.score} points[/bold]")


@app.command()
def check(
    root_word: str = typer.Argument(..., help="Root word to spell from"),
    words: List[str] = typer.Argument(..., help="Words to submit, in order"),
    dictionary: Optional[str] = typer.Option(None, help="Dictionary backend: 'wordfreq' or 'wordlist'"),
    dictionary_file: Optional[str] = typer.Option(None, help="Word list for the 'wordlist' dictionary"),
    config_file: Optional[str] = typer.Option(None, "--config", help="Path to a config YAML file"),
):
    """Submit words against a fixed root word and show the results."""
    config = _load_config(config_file, dictionary=dictionary, dictionary_file=dictionary_file)
    try:
        oracle = build_dictionary(config)
    except ConfigError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise typer.Exit(1)

    session = Session(root_word=GameEngine.normalize(root_word))

    table = Table(title=f"Root word: {session.root_word}")
    table.add_column("Word")
    table.add_column("Result")
    table.add_column("Points", justify="right")
    table.add_column("Score", justify="right")

    for word in words:
        result = GameEngine.submit_word(word, session, oracle, config.language)
        style = OUTCOME_STYLES[result.outcome]
        label = result.title or result.outcome.title()
        points = f"+{result.points}" if result.points > 0 else str(result.points)
        table.add_row(result.word, f"[{style}]{label}[/{style}]", points, str(result.score))

    console.print(table)
    console.print(f"[bold]Final score: {session.score} points[/bold]")


@app.command()
def roots(
    words_file: Optional[str] = typer.Option(None, help="Path to a root word list (one word per line)"),
    limit: int = typer.Option(10, min=0, help="Number of sample words to show"),
    seed: Optional[int] = typer.Option(None, help="Random seed for the sample"),
):
    """Show the available root words."""
    provider = WordListProvider(words_file)
    try:
        candidates = provider.load()
    except WordListMissing as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{len(candidates)}[/bold] root words in {provider.path}")
    sample = random.Random(seed).sample(candidates, min(limit, len(candidates)))
    for word in sorted(sample):
        console.print(f"  {word}")
