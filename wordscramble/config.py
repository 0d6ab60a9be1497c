"""Configuration for Word Scramble.

Defaults come from inputs/config.yml; WORDSCRAMBLE_* environment variables
override individual values.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from wordscramble.errors import ConfigError

logger = logging.getLogger(__name__)

DICTIONARY_BACKENDS = ("wordfreq", "wordlist")

ENV_PREFIX = "WORDSCRAMBLE_"


def default_config_file() -> Path:
    return Path(__file__).parent / "inputs" / "config.yml"


@dataclass
class GameConfig:
    language: str = "en"
    dictionary: str = "wordfreq"
    dictionary_file: Optional[str] = None
    min_zipf: float = 1.5
    words_file: Optional[str] = None  # None means the bundled start.txt
    log_path: str = "logs/wordscramble"

    def validate(self) -> "GameConfig":
        if self.dictionary not in DICTIONARY_BACKENDS:
            raise ConfigError(
                f"Invalid dictionary '{self.dictionary}', expected one of: {', '.join(DICTIONARY_BACKENDS)}"
            )
        return self


def _read_yaml(config_file: Path) -> Dict[str, Any]:
    try:
        with open(config_file, "r") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Config file not found: {config_file}, using defaults")
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_file}: {e}")
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")
    return data.get("wordscramble", data) or {}


def _env_overrides() -> Dict[str, Any]:
    overrides = {}
    for f in fields(GameConfig):
        value = os.getenv(f"{ENV_PREFIX}{f.name.upper()}")
        if value is not None:
            overrides[f.name] = value
    return overrides


def load_config(config_file: Optional[Union[str, Path]] = None) -> GameConfig:
    """Load configuration from YAML, then apply environment overrides."""
    path = Path(config_file) if config_file else default_config_file()
    data = _read_yaml(path)
    data.update(_env_overrides())

    known = {f.name for f in fields(GameConfig)}
    values = {k: v for k, v in data.items() if k in known}
    for key in data.keys() - known:
        logger.debug(f"Ignoring unknown config key: {key}")

    if "min_zipf" in values:
        try:
            values["min_zipf"] = float(values["min_zipf"])
        except (TypeError, ValueError):
            raise ConfigError(f"min_zipf must be a number, got {values['min_zipf']!r}")

    return GameConfig(**values).validate()
