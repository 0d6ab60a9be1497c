"""Word Scramble: a single-screen word game.

The player is shown a root word and submits words spelled from its letters.
Each submission must be:
- Original (not already used): otherwise -5 points
- Real (3+ letters and in the dictionary): otherwise -10 points
- Possible (each root letter used at most once): otherwise -15 points

Accepted words score length² / 2 points. The score never goes below zero.
"""

from wordscramble.game import WordScrambleGame
from wordscramble.game_engine import GameEngine, Session, SubmissionResult

__version__ = "0.1.0"

__all__ = ["WordScrambleGame", "GameEngine", "Session", "SubmissionResult"]
