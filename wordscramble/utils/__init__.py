"""Utility modules for Word Scramble.

- logging: JSON-formatted log file setup
"""

from .logging import JSONFormatter, setup_logging

__all__ = ["JSONFormatter", "setup_logging"]
