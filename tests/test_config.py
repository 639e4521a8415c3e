import os
from unittest.mock import patch

import pytest

from chordlight.config import DEFAULT_SETTINGS, load_settings
from chordlight.exceptions import ConfigError

_VARS = (
    "CHORDLIGHT_MAX_SHORT_LINE_WORDS",
    "CHORDLIGHT_MIN_CHORD_RATIO",
    "CHORDLIGHT_TRANSPOSE_LIMIT",
    "CHORDLIGHT_VOCABULARY",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = load_settings(dotenv=False)
    assert settings == DEFAULT_SETTINGS
    assert settings.max_short_line_words == 3
    assert settings.min_chord_ratio == 0.7
    assert settings.transpose_limit == 6
    assert settings.vocabulary_location is None


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CHORDLIGHT_MAX_SHORT_LINE_WORDS", "5")
    monkeypatch.setenv("CHORDLIGHT_MIN_CHORD_RATIO", "0.5")
    monkeypatch.setenv("CHORDLIGHT_TRANSPOSE_LIMIT", "11")
    monkeypatch.setenv("CHORDLIGHT_VOCABULARY", "https://example.com/chords.json")
    settings = load_settings(dotenv=False)
    assert settings.max_short_line_words == 5
    assert settings.min_chord_ratio == 0.5
    assert settings.transpose_limit == 11
    assert settings.vocabulary_location == "https://example.com/chords.json"


def test_blank_values_use_defaults(monkeypatch):
    monkeypatch.setenv("CHORDLIGHT_MIN_CHORD_RATIO", "  ")
    assert load_settings(dotenv=False).min_chord_ratio == 0.7


def test_bad_integer_raises(monkeypatch):
    monkeypatch.setenv("CHORDLIGHT_MAX_SHORT_LINE_WORDS", "three")
    with pytest.raises(ConfigError, match="expected an integer"):
        load_settings(dotenv=False)


def test_negative_integer_raises(monkeypatch):
    monkeypatch.setenv("CHORDLIGHT_TRANSPOSE_LIMIT", "-1")
    with pytest.raises(ConfigError, match="must not be negative"):
        load_settings(dotenv=False)


def test_ratio_out_of_range_raises(monkeypatch):
    monkeypatch.setenv("CHORDLIGHT_MIN_CHORD_RATIO", "1.5")
    with pytest.raises(ConfigError, match="between 0 and 1"):
        load_settings(dotenv=False)


def test_dotenv_file_loaded(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("CHORDLIGHT_TRANSPOSE_LIMIT=4\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    with patch.dict(os.environ):
        assert load_settings().transpose_limit == 4
