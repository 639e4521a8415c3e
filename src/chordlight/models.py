from dataclasses import dataclass, field
from enum import Enum, auto


class LineKind(Enum):
    CHORD = auto()  # chord notation: "C   G   Am"
    LYRIC = auto()  # everything else, including blank lines


class SegmentKind(Enum):
    TEXT = auto()
    CHORD = auto()


@dataclass(frozen=True)
class ChordCandidate:
    """A chord-shaped run found inside a chord line.

    ``text`` is the literal slice ``line[start:end]``.  It may contain
    whitespace between the root letter and its accidental (``"C #m"``);
    ``symbol`` is the same run with that whitespace removed (``"C#m"``).
    """

    start: int
    end: int
    text: str

    @property
    def symbol(self) -> str:
        return "".join(self.text.split())

    @property
    def root(self) -> str:
        """Root letter plus optional accidental, e.g. ``"F#"`` from ``"F#dim"``."""
        symbol = self.symbol
        if len(symbol) >= 2 and symbol[1] in "#b":
            return symbol[:2]
        return symbol[:1]

    @property
    def suffix(self) -> str:
        """Quality suffix, e.g. ``"dim"`` from ``"F#dim"``."""
        return self.symbol[len(self.root):]


# A tokenizer span: verbatim text or a validated chord candidate.
Span = str | ChordCandidate


@dataclass(frozen=True)
class Segment:
    """One styled or plain piece of rendered output.

    ``original`` is the verbatim source text; joining every segment's
    ``original`` reproduces the input exactly.  ``rendered`` is what to
    display, which differs from ``original`` only for transposed chords.
    """

    kind: SegmentKind
    original: str
    rendered: str

    @classmethod
    def text(cls, value: str) -> "Segment":
        return cls(SegmentKind.TEXT, value, value)

    @classmethod
    def chord(cls, original: str, rendered: str | None = None) -> "Segment":
        return cls(SegmentKind.CHORD, original, original if rendered is None else rendered)

    @property
    def is_chord(self) -> bool:
        return self.kind is SegmentKind.CHORD


@dataclass(frozen=True)
class RenderRequest:
    """Input to the engine: song text and a signed semitone offset."""

    text: str
    transpose_semitones: int = 0


@dataclass
class RenderResult:
    """Ordered segment stream for one rendering request."""

    segments: list[Segment] = field(default_factory=list)

    def original_text(self) -> str:
        return "".join(s.original for s in self.segments)

    def rendered_text(self) -> str:
        return "".join(s.rendered for s in self.segments)

    def chords(self) -> list[Segment]:
        return [s for s in self.segments if s.is_chord]
