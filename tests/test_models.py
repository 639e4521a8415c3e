from chordlight.models import ChordCandidate, RenderRequest, RenderResult, Segment, SegmentKind


def test_text_segment_rendered_equals_original():
    seg = Segment.text("  la la")
    assert seg.kind == SegmentKind.TEXT
    assert seg.rendered == "  la la"
    assert not seg.is_chord


def test_chord_segment_defaults_rendered_to_original():
    seg = Segment.chord("Am")
    assert seg.is_chord
    assert seg.rendered == "Am"


def test_chord_segment_with_rendered():
    seg = Segment.chord("Am", "Bm")
    assert seg.original == "Am"
    assert seg.rendered == "Bm"


def test_candidate_parts():
    cand = ChordCandidate(start=4, end=10, text="F #dim")
    assert cand.symbol == "F#dim"
    assert cand.root == "F#"
    assert cand.suffix == "dim"


def test_candidate_bare_letter():
    cand = ChordCandidate(start=0, end=1, text="E")
    assert cand.root == "E"
    assert cand.suffix == ""


def test_render_request_defaults():
    assert RenderRequest(text="C").transpose_semitones == 0


def test_render_result_helpers():
    result = RenderResult(
        segments=[Segment.chord("G7", "A7"), Segment.text("\n"), Segment.text("la")]
    )
    assert result.original_text() == "G7\nla"
    assert result.rendered_text() == "A7\nla"
    assert result.chords() == [Segment.chord("G7", "A7")]


def test_render_result_defaults_empty():
    assert RenderResult().segments == []
