import pytest

from chordlight.transpose import (
    PITCH_CIRCLE,
    format_offset,
    normalize_root,
    split_chord,
    step_transpose,
    transpose,
    transpose_chord,
    transpose_root,
)

# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------


def test_normalize_root_aliases_flats():
    assert normalize_root("Db") == "C#"
    assert normalize_root("Eb") == "D#"
    assert normalize_root("Gb") == "F#"
    assert normalize_root("Ab") == "G#"
    assert normalize_root("Bb") == "A#"


def test_normalize_root_leaves_others():
    assert normalize_root("C") == "C"
    assert normalize_root("F#") == "F#"
    assert normalize_root("Cb") == "Cb"


def test_split_chord():
    assert split_chord("F#dim") == ("F#", "dim")
    assert split_chord("G7") == ("G", "7")
    assert split_chord("C #m") == ("C#", "m")
    assert split_chord("A") == ("A", "")


def test_transpose_root_unknown_returns_none():
    assert transpose_root("H", 1) is None
    assert transpose_root("E#", 1) is None


# ---------------------------------------------------------------------------
# transpose_chord
# ---------------------------------------------------------------------------


def test_transpose_up_keeps_suffix():
    assert transpose_chord("G7", 2) == "A7"


def test_transpose_down_wraps():
    assert transpose_chord("C", -1) == "B"


def test_transpose_flat_resolves_to_sharp():
    assert transpose_chord("Bb", 2) == "C"
    assert transpose_chord("Ebmaj7", -1) == "Dmaj7"


def test_transpose_zero_is_verbatim():
    assert transpose_chord("Db", 0) == "Db"
    assert transpose_chord("C #m", 0) == "C #m"


def test_transpose_twelve_gives_sharp_spelling():
    assert transpose_chord("Db", 12) == "C#"
    assert transpose_chord("Db", -12) == "C#"


@pytest.mark.parametrize("root", PITCH_CIRCLE)
def test_transpose_octave_is_identity_for_sharp_spellings(root):
    assert transpose_chord(root + "m7", 12) == root + "m7"
    assert transpose_chord(root + "m7", -12) == root + "m7"


def test_transpose_large_offsets():
    assert transpose_chord("Am", 50) == "Bm"
    assert transpose_chord("Am", -50) == "Gm"


def test_transpose_strips_whitespace_when_shifting():
    assert transpose_chord("C #m", 1) == "Dm"


def test_transpose_unmapped_root_returned_unchanged():
    assert transpose_chord("Cb", 3) == "Cb"
    assert transpose_chord("H7", 1) == "H7"
    assert transpose_chord("E #m", 1) == "E#m"


def test_transpose_separate_parts():
    assert transpose("F#", "dim", 1) == "Gdim"
    assert transpose("Db", "", 0) == "Db"
    assert transpose("E#", "m", 2) == "E#m"


# ---------------------------------------------------------------------------
# transpose counter
# ---------------------------------------------------------------------------


def test_step_transpose_moves():
    assert step_transpose(0, 1) == 1
    assert step_transpose(3, -5) == -2


def test_step_transpose_clamps():
    assert step_transpose(6, 1) == 6
    assert step_transpose(-6, -1) == -6


def test_step_transpose_custom_limit():
    assert step_transpose(11, 1, limit=11) == 11
    assert step_transpose(0, 20, limit=11) == 11


def test_format_offset():
    assert format_offset(2) == "+2"
    assert format_offset(0) == "0"
    assert format_offset(-3) == "-3"
