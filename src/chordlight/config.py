"""Tuning parameters and environment overrides.

The line classifier's thresholds have no musical derivation; they were
picked by eye against real song sheets.  Each one can be overridden with
an environment variable (or a ``.env`` file in the working directory):

  CHORDLIGHT_MAX_SHORT_LINE_WORDS   lines with more words than this and any
                                    non-chord word are lyrics (default 3)
  CHORDLIGHT_MIN_CHORD_RATIO        chord share a short mixed line needs to
                                    count as a chord line (default 0.7)
  CHORDLIGHT_TRANSPOSE_LIMIT        clamp for the interactive transpose
                                    counter (default 6)
  CHORDLIGHT_VOCABULARY             default vocabulary path or URL
"""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigError

ENV_PREFIX = "CHORDLIGHT_"


@dataclass(frozen=True)
class Settings:
    max_short_line_words: int = 3
    min_chord_ratio: float = 0.7
    transpose_limit: int = 6
    vocabulary_location: str | None = None


DEFAULT_SETTINGS = Settings()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(ENV_PREFIX + name, raw, "expected an integer") from None
    if value < 0:
        raise ConfigError(ENV_PREFIX + name, raw, "must not be negative")
    return value


def _env_ratio(name: str, default: float) -> float:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(ENV_PREFIX + name, raw, "expected a number") from None
    if not 0.0 <= value <= 1.0:
        raise ConfigError(ENV_PREFIX + name, raw, "must be between 0 and 1")
    return value


def load_settings(dotenv: bool = True) -> Settings:
    """Build :class:`Settings` from the environment, loading ``.env`` first.

    Raises ConfigError if a variable is set but cannot be parsed.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        max_short_line_words=_env_int("MAX_SHORT_LINE_WORDS", DEFAULT_SETTINGS.max_short_line_words),
        min_chord_ratio=_env_ratio("MIN_CHORD_RATIO", DEFAULT_SETTINGS.min_chord_ratio),
        transpose_limit=_env_int("TRANSPOSE_LIMIT", DEFAULT_SETTINGS.transpose_limit),
        vocabulary_location=os.environ.get(ENV_PREFIX + "VOCABULARY") or None,
    )
