"""Character-level chord tokenizer for lines already classified as chord lines.

Chord lines are aligned with the lyric underneath by padding, so they are
scanned one character at a time rather than split into words.  The scan
is a single left-to-right pass:

  1. find the next ``A``–``G``; everything before it is text
  2. from that letter, skip whitespace; if a ``#`` or ``b`` follows, it is
     the accidental (the skipped whitespace stays in the candidate's text)
  3. extend through lowercase letters and digits: the quality suffix
  4. if the vocabulary recognises the candidate, emit it and continue
     after it; if not, emit only the starting letter as text and resume
     one character later, so a bad guess cannot swallow the start of a
     later chord

Example::

    tokenize_chord_line("C  G7  Xm", vocab)
    → [ChordCandidate(0, 1, "C"), "  ", ChordCandidate(3, 5, "G7"), "  Xm"]
"""

from .models import ChordCandidate, Span
from .vocabulary import ChordVocabulary

_ROOT_LETTERS = frozenset("ABCDEFG")
_ACCIDENTALS = frozenset("#b")


def _is_suffix_char(ch: str) -> bool:
    return ch.isascii() and (ch.islower() or ch.isdigit())


def find_root(line: str, pos: int) -> int:
    """Index of the next root letter at or after *pos*, or ``-1``."""
    for i in range(pos, len(line)):
        if line[i] in _ROOT_LETTERS:
            return i
    return -1


def scan_candidate(line: str, start: int) -> ChordCandidate:
    """Greedily read a chord-shaped run beginning at the root letter ``line[start]``."""
    end = start + 1

    lookahead = end
    while lookahead < len(line) and line[lookahead].isspace():
        lookahead += 1
    if lookahead < len(line) and line[lookahead] in _ACCIDENTALS:
        end = lookahead + 1

    while end < len(line) and _is_suffix_char(line[end]):
        end += 1

    return ChordCandidate(start=start, end=end, text=line[start:end])


def tokenize_chord_line(line: str, vocabulary: ChordVocabulary | None) -> list[Span]:
    """Split a chord line into verbatim text spans and recognised chords.

    Joining the text spans and each candidate's ``text`` reproduces *line*.
    Adjacent text spans are merged.
    """
    spans: list[Span] = []
    pending: list[str] = []
    pos = 0

    def flush() -> None:
        if pending:
            spans.append("".join(pending))
            pending.clear()

    while pos < len(line):
        start = find_root(line, pos)
        if start == -1:
            break
        if start > pos:
            pending.append(line[pos:start])

        candidate = scan_candidate(line, start)
        if vocabulary is not None and vocabulary.recognizes(candidate.symbol):
            flush()
            spans.append(candidate)
            pos = candidate.end
        else:
            pending.append(line[start])
            pos = start + 1

    if pos < len(line):
        pending.append(line[pos:])
    flush()
    return spans


def extract_chords(line: str, vocabulary: ChordVocabulary | None) -> list[ChordCandidate]:
    """Only the recognised chords of *line*, left to right."""
    return [s for s in tokenize_chord_line(line, vocabulary) if isinstance(s, ChordCandidate)]
