"""Segment composition: raw song text → ordered Text/Chord segment stream.

This is the engine's entry point.  Each line is classified; chord lines
are tokenized and their chords (optionally transposed) become
:class:`~chordlight.models.Segment` chords, everything else becomes text.
Lines are joined with explicit ``"\\n"`` text segments, so::

    render(text, vocab).original_text() == text

for every *text*, whatever the classification or transpose offset.

Usage::

    from chordlight.composer import render
    result = render(song_text, vocabulary, transpose_semitones=2)
    for segment in result.segments:
        ...
"""

import logging

from .classifier import classify_line
from .config import DEFAULT_SETTINGS, Settings
from .models import ChordCandidate, LineKind, RenderRequest, RenderResult, Segment
from .tokenizer import tokenize_chord_line
from .transpose import transpose
from .vocabulary import ChordVocabulary

logger = logging.getLogger(__name__)


class SegmentComposer:
    """Turn song text into segments using one vocabulary snapshot."""

    def __init__(
        self,
        vocabulary: ChordVocabulary | None,
        transpose_semitones: int = 0,
        settings: Settings = DEFAULT_SETTINGS,
    ):
        self.vocabulary = vocabulary
        self.transpose_semitones = transpose_semitones
        self.settings = settings

    def compose_line(self, line: str) -> list[Segment]:
        """Segments for a single line (no trailing newline)."""
        if classify_line(line, self.vocabulary, self.settings) is LineKind.LYRIC:
            return [Segment.text(line)] if line else []

        segments: list[Segment] = []
        for span in tokenize_chord_line(line, self.vocabulary):
            if isinstance(span, ChordCandidate):
                segments.append(self._chord_segment(span))
            else:
                segments.append(Segment.text(span))
        return segments

    def compose(self, text: str) -> RenderResult:
        if self.vocabulary is None:
            logger.warning("No chord vocabulary loaded; rendering all lines as lyrics")

        segments: list[Segment] = []
        for index, line in enumerate(text.split("\n")):
            if index > 0:
                segments.append(Segment.text("\n"))
            segments.extend(self.compose_line(line))
        return RenderResult(segments=segments)

    def _chord_segment(self, candidate: ChordCandidate) -> Segment:
        if self.transpose_semitones == 0:
            return Segment.chord(candidate.text)
        rendered = transpose(candidate.root, candidate.suffix, self.transpose_semitones)
        return Segment.chord(candidate.text, rendered)


# ---------------------------------------------------------------------------
# Convenience entry points
# ---------------------------------------------------------------------------


def render(
    text: str,
    vocabulary: ChordVocabulary | None,
    transpose_semitones: int = 0,
    settings: Settings = DEFAULT_SETTINGS,
) -> RenderResult:
    """Render *text* into a segment stream.

    Pure function of its arguments: calling it twice with the same inputs
    gives equal results.  Pass ``vocabulary=None`` when no vocabulary is
    available; every line then comes back as plain text.
    """
    return SegmentComposer(vocabulary, transpose_semitones, settings).compose(text)


def render_request(
    request: RenderRequest,
    vocabulary: ChordVocabulary | None,
    settings: Settings = DEFAULT_SETTINGS,
) -> RenderResult:
    return render(request.text, vocabulary, request.transpose_semitones, settings)
