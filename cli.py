"""Command-line interface for Word Scramble.

This is the CLI entry point:
- `wordscramble play` - Play an interactive game
- `wordscramble check` - Score words against a fixed root word
- `wordscramble roots` - Show the available root words
"""

import typer
from rich.console import Console

from wordscramble.cli_wordscramble import app as wordscramble_app

# Main application
app = typer.Typer(
    help="Word Scramble - spell as many words as you can from a root word",
    no_args_is_help=True,
)
console = Console()

# Register game commands at the top level
app.add_typer(wordscramble_app)


@app.callback()
def main():
    """Word Scramble - a single-screen word game.

    Examples:

        # Play a game
        uv run wordscramble play

        # Play with a fixed seed and your own dictionary
        uv run wordscramble play --seed 42 --dictionary-file words.txt

        # Check some words against a root word
        uv run wordscramble check silkworm work milk worms
    """
    pass


@app.command()
def version():
    """Show version information."""
    from wordscramble import __version__

    console.print("[bold]Word Scramble[/bold]")
    console.print(f"  wordscramble: {__version__}")


if __name__ == "__main__":
    app()
