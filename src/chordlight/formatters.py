"""Display formatters for a rendered segment stream.

Each formatter turns a :class:`~chordlight.models.RenderResult` into text
for one kind of display.  Chords are shown with their ``rendered``
spelling; text segments are emitted verbatim.

+-------------+----------------------------------------------+
| Name        | Chord ``G7`` appears as                      |
+=============+==============================================+
| ``plain``   | ``G7``                                       |
+-------------+----------------------------------------------+
| ``bracket`` | ``[G7]`` (ChordPro inline style)             |
+-------------+----------------------------------------------+
| ``html``    | ``<span class="chord">G7</span>``, inside a  |
|             | ``<pre class="song">`` block                 |
+-------------+----------------------------------------------+
| ``ansi``    | ``G7`` in bold green terminal colour         |
+-------------+----------------------------------------------+

Usage::

    from chordlight.formatters import get_formatter
    text = get_formatter("html").render(result)
"""

import html

import click

from .models import RenderResult, Segment


class Formatter:
    """Base formatter: chords and text both emitted as their rendered text."""

    name = "plain"

    def render(self, result: RenderResult) -> str:
        return "".join(self.render_segment(s) for s in result.segments)

    def render_segment(self, segment: Segment) -> str:
        if segment.is_chord:
            return self.render_chord(segment.rendered)
        return self.render_text(segment.rendered)

    def render_chord(self, chord: str) -> str:
        return chord

    def render_text(self, text: str) -> str:
        return text


class PlainFormatter(Formatter):
    name = "plain"


class BracketFormatter(Formatter):
    name = "bracket"

    def render_chord(self, chord: str) -> str:
        return f"[{chord}]"


class HtmlFormatter(Formatter):
    name = "html"

    def __init__(self, chord_class: str = "chord"):
        self.chord_class = chord_class

    def render(self, result: RenderResult) -> str:
        return f'<pre class="song">{super().render(result)}</pre>'

    def render_chord(self, chord: str) -> str:
        return f'<span class="{html.escape(self.chord_class)}">{html.escape(chord)}</span>'

    def render_text(self, text: str) -> str:
        return html.escape(text)


class AnsiFormatter(Formatter):
    name = "ansi"

    def render_chord(self, chord: str) -> str:
        return click.style(chord, fg="green", bold=True)


_FORMATTERS: dict[str, type[Formatter]] = {
    cls.name: cls for cls in (PlainFormatter, BracketFormatter, HtmlFormatter, AnsiFormatter)
}

FORMATTER_NAMES = tuple(_FORMATTERS)


def get_formatter(name: str) -> Formatter:
    """Return a formatter instance by name.

    Raises ValueError for unknown names.
    """
    try:
        return _FORMATTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown format {name!r}; choose from {', '.join(FORMATTER_NAMES)}") from None
