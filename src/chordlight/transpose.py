"""Semitone transposition on the 12-tone pitch circle.

Roots are resolved through a sharp-spelled circle; flat spellings are
aliased onto their sharp equivalents first, so transposed output always
uses sharps (``Bb`` up 2 is ``C``, ``Eb`` up 12 is ``D#``).  Quality
suffixes pass through untouched.
"""

import re

PITCH_CIRCLE = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

FLAT_ALIASES = {"Db": "C#", "Eb": "D#", "Gb": "F#", "Ab": "G#", "Bb": "A#"}

ROOT_RE = re.compile(r"^[A-G][#b]?")


def normalize_root(root: str) -> str:
    """Return the sharp spelling of *root* (``"Db"`` → ``"C#"``); others unchanged."""
    return FLAT_ALIASES.get(root, root)


def split_chord(symbol: str) -> tuple[str, str]:
    """Split *symbol* into ``(root, suffix)``.

    Whitespace is dropped first.  The root is the first character plus a
    ``#``/``b`` in second position if there is one.
    """
    clean = "".join(symbol.split())
    if len(clean) >= 2 and clean[1] in "#b":
        return clean[:2], clean[2:]
    return clean[:1], clean[1:]


def transpose_root(root: str, semitones: int) -> str | None:
    """Shift *root* by *semitones*; ``None`` if the root is not on the circle."""
    try:
        index = PITCH_CIRCLE.index(normalize_root(root))
    except ValueError:
        return None
    return PITCH_CIRCLE[(index + semitones) % 12]


def transpose(root: str, suffix: str, semitones: int) -> str:
    """Transpose a chord given as separate root and quality suffix.

    Offset 0 returns ``root + suffix`` exactly as spelled.  Roots outside
    the pitch circle (``"Cb"``, ``"E#"``) are returned unchanged.
    """
    if semitones == 0:
        return root + suffix
    new_root = transpose_root(root, semitones)
    if new_root is None:
        return root + suffix
    return new_root + suffix


def transpose_chord(chord: str, semitones: int) -> str:
    """Transpose a whole chord symbol, e.g. ``transpose_chord("G7", 2) == "A7"``.

    With ``semitones == 0`` the input is returned verbatim, whitespace
    included.  An unmapped root comes back unchanged, whitespace removed.
    """
    if semitones == 0:
        return chord
    return transpose(*split_chord(chord), semitones)


def step_transpose(current: int, delta: int, limit: int = 6) -> int:
    """Move a user-facing transpose counter by *delta*, clamped to ``±limit``."""
    return max(-limit, min(limit, current + delta))


def format_offset(semitones: int) -> str:
    """Label for a transpose counter: ``"+2"``, ``"0"``, ``"-3"``."""
    return f"+{semitones}" if semitones > 0 else str(semitones)
