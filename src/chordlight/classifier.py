"""Chord-line vs lyric-line classification.

Chord lines in plain-text song sheets have no markup; they are just
lines whose words happen to be chord symbols.  A word counts as a chord
if the vocabulary recognises it (exact match or root family).  The
decision is then made in order:

  1. every word is a chord                       → CHORD
  2. more than ``max_short_line_words`` words and
     at least one non-chord word                 → LYRIC
  3. otherwise                                   → CHORD if the chord share
                                                   reaches ``min_chord_ratio``

Short lines get the benefit of the doubt because chord lines are terse;
long mixed lines are treated as prose, since words like "A" and "E"
collide with chord roots all the time.
"""

import logging
import re

from .config import DEFAULT_SETTINGS, Settings
from .models import LineKind
from .vocabulary import ChordVocabulary

logger = logging.getLogger(__name__)

# Leading/trailing characters that are neither word characters nor '#'.
# 'b' is a word character already, so flats survive.
_EDGE_PUNCT_RE = re.compile(r"^[^\w#]+|[^\w#]+$")


def line_words(line: str) -> list[str]:
    """Split *line* on whitespace and strip edge punctuation from each word.

    Words that are pure punctuation (``"|"``, ``"--"``) are dropped.
    """
    words = (_EDGE_PUNCT_RE.sub("", w) for w in line.split())
    return [w for w in words if w]


def classify_line(
    line: str,
    vocabulary: ChordVocabulary | None,
    settings: Settings = DEFAULT_SETTINGS,
) -> LineKind:
    """Return :attr:`LineKind.CHORD` or :attr:`LineKind.LYRIC` for *line*.

    With no vocabulary every line is a lyric line.
    """
    if vocabulary is None:
        return LineKind.LYRIC

    words = line_words(line)
    if not words:
        return LineKind.LYRIC

    chord_count = sum(1 for w in words if vocabulary.recognizes(w))
    total = len(words)
    non_chord = total - chord_count

    if chord_count == total:
        return LineKind.CHORD
    if total > settings.max_short_line_words and non_chord > 0:
        return LineKind.LYRIC
    if chord_count / total >= settings.min_chord_ratio:
        return LineKind.CHORD
    return LineKind.LYRIC


def is_chord_line(
    line: str,
    vocabulary: ChordVocabulary | None,
    settings: Settings = DEFAULT_SETTINGS,
) -> bool:
    return classify_line(line, vocabulary, settings) is LineKind.CHORD


def classify_lines(
    text: str,
    vocabulary: ChordVocabulary | None,
    settings: Settings = DEFAULT_SETTINGS,
) -> list[tuple[str, LineKind]]:
    """Classify every ``"\\n"``-separated line of *text*, in order."""
    result = [(line, classify_line(line, vocabulary, settings)) for line in text.split("\n")]
    logger.debug(
        "Classified %d lines, %d chord lines",
        len(result),
        sum(1 for _, kind in result if kind is LineKind.CHORD),
    )
    return result
