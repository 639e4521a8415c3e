"""Vocabulary source for files on the local filesystem.

``.json`` files go through the JSON parser; anything else is read as one
symbol per line.
"""

from pathlib import Path

from ..exceptions import VocabularySourceError
from .base import VocabularySource
from .parsing import parse_json_vocabulary, parse_text_vocabulary


class FileVocabularySource(VocabularySource):
    """Reads a chord list from a local path (``file://`` URLs included)."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return "://" not in location or location.startswith("file://")

    def fetch(self, location: str) -> str:
        path = _to_path(location)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise VocabularySourceError(location) from exc

    def extract(self, raw: str, location: str) -> list[str]:
        if _to_path(location).suffix.lower() == ".json":
            return parse_json_vocabulary(raw, location)
        return parse_text_vocabulary(raw)


def _to_path(location: str) -> Path:
    return Path(location.removeprefix("file://"))
