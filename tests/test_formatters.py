import pytest

from chordlight.formatters import (
    AnsiFormatter,
    BracketFormatter,
    HtmlFormatter,
    PlainFormatter,
    get_formatter,
)
from chordlight.models import RenderResult, Segment


def _result() -> RenderResult:
    return RenderResult(
        segments=[
            Segment.chord("G7", "A7"),
            Segment.text("  "),
            Segment.chord("C"),
            Segment.text("\n"),
            Segment.text("rock & <roll>"),
        ]
    )


def test_plain_uses_rendered_text():
    assert PlainFormatter().render(_result()) == "A7  C\nrock & <roll>"


def test_bracket_wraps_chords():
    assert BracketFormatter().render(_result()) == "[A7]  [C]\nrock & <roll>"


def test_html_escapes_and_wraps():
    out = HtmlFormatter().render(_result())
    assert out.startswith('<pre class="song">')
    assert out.endswith("</pre>")
    assert '<span class="chord">A7</span>  <span class="chord">C</span>' in out
    assert "rock &amp; &lt;roll&gt;" in out


def test_html_custom_class():
    out = HtmlFormatter(chord_class="acorde").render(_result())
    assert '<span class="acorde">A7</span>' in out


def test_ansi_styles_chords_only():
    out = AnsiFormatter().render(_result())
    assert "\x1b[" in out
    assert "A7" in out
    assert "rock & <roll>" in out


def test_get_formatter_by_name():
    assert isinstance(get_formatter("bracket"), BracketFormatter)
    assert isinstance(get_formatter("html"), HtmlFormatter)


def test_get_formatter_unknown_raises():
    with pytest.raises(ValueError, match="Unknown format"):
        get_formatter("pdf")
