import logging
import sys
from pathlib import Path

import click

from .classifier import classify_lines
from .composer import render
from .config import Settings, load_settings
from .exceptions import (
    ConfigError,
    EmptyVocabularyError,
    UnsupportedSourceError,
    VocabularyFormatError,
    VocabularySourceError,
)
from .formatters import FORMATTER_NAMES, get_formatter
from .registry import load_vocabulary
from .transpose import step_transpose, transpose_chord
from .vocabulary import ChordVocabulary


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _resolve_vocabulary(location: str | None, settings: Settings) -> ChordVocabulary:
    location = location or settings.vocabulary_location
    if not location:
        _fail("No chord vocabulary given; pass --vocab or set CHORDLIGHT_VOCABULARY")

    try:
        return load_vocabulary(location)
    except VocabularySourceError as exc:
        msg = f"Could not read vocabulary {exc.location}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        _fail(msg)
    except (VocabularyFormatError, UnsupportedSourceError, EmptyVocabularyError) as exc:
        _fail(str(exc))


def _read_song(song_file) -> str:
    # Binary read keeps "\r" and trailing newlines exactly as in the file.
    try:
        return song_file.read().decode("utf-8")
    except UnicodeDecodeError:
        _fail(f"{song_file.name} is not valid UTF-8")


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Find, validate and transpose chords in plain-text song sheets."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        ctx.obj = load_settings()
    except ConfigError as exc:
        _fail(str(exc))


@main.command("render")
@click.argument("song_file", type=click.File("rb"))
@click.option("--vocab", "vocab_location", default=None, metavar="PATH|URL",
              help="Chord vocabulary (default: $CHORDLIGHT_VOCABULARY).")
@click.option("-t", "--transpose", "semitones", default=0, show_default=True,
              help="Semitones to shift every chord (negative shifts down), "
                   "clamped to +/- $CHORDLIGHT_TRANSPOSE_LIMIT (default 6).")
@click.option("-f", "--format", "fmt", type=click.Choice(FORMATTER_NAMES), default="plain",
              show_default=True, help="Output style for chords.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to PATH instead of stdout.")
@click.pass_obj
def render_cmd(settings: Settings, song_file, vocab_location: str | None, semitones: int,
               fmt: str, output_path: str | None) -> None:
    """Render SONG_FILE (or - for stdin) with chords highlighted."""
    vocabulary = _resolve_vocabulary(vocab_location, settings)
    semitones = step_transpose(0, semitones, settings.transpose_limit)
    result = render(_read_song(song_file), vocabulary, semitones, settings)
    text = get_formatter(fmt).render(result)

    if output_path is None:
        click.echo(text, nl=not text.endswith("\n"), color=fmt == "ansi")
        return

    dest = Path(output_path)
    try:
        dest.write_text(text, encoding="utf-8", newline="")
    except OSError as exc:
        _fail(f"Could not write {dest}: {exc.strerror}")
    click.echo(f"Written to {dest}")


@main.command("classify")
@click.argument("song_file", type=click.File("rb"))
@click.option("--vocab", "vocab_location", default=None, metavar="PATH|URL",
              help="Chord vocabulary (default: $CHORDLIGHT_VOCABULARY).")
@click.pass_obj
def classify_cmd(settings: Settings, song_file, vocab_location: str | None) -> None:
    """Label every line of SONG_FILE as CHORD or LYRIC."""
    vocabulary = _resolve_vocabulary(vocab_location, settings)
    for line, kind in classify_lines(_read_song(song_file), vocabulary, settings):
        click.echo(f"{kind.name:<5} | {line}")


@main.command("transpose", context_settings={"ignore_unknown_options": True})
@click.argument("chord")
@click.argument("semitones", type=int)
def transpose_cmd(chord: str, semitones: int) -> None:
    """Print CHORD shifted by SEMITONES, e.g. `chordlight transpose G7 2`."""
    click.echo(transpose_chord(chord, semitones))

