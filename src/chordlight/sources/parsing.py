"""Shared parsing for vocabulary documents.

Accepted JSON shapes::

    {"acordes": [{"acorde": "C"}, {"acorde": "Am"}]}   (song catalog export)
    {"chords": ["C", "Am"]}
    ["C", {"symbol": "Am"}, {"name": "G7"}]

Plain text is one symbol per line; blank lines and ``#`` comments are
skipped.
"""

import json
import logging

from ..exceptions import VocabularyFormatError

logger = logging.getLogger(__name__)

# Container keys, in lookup order.
_LIST_KEYS = ("acordes", "chords")

# Keys that can carry the symbol inside an entry object.
_SYMBOL_KEYS = ("acorde", "symbol", "name")


def parse_json_vocabulary(raw: str, location: str) -> list[str]:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise VocabularyFormatError(location, f"invalid JSON ({exc.msg})") from exc

    if isinstance(data, dict):
        entries = next((data[k] for k in _LIST_KEYS if k in data), None)
        if entries is None:
            raise VocabularyFormatError(location, f"expected one of {', '.join(_LIST_KEYS)}")
    else:
        entries = data

    if not isinstance(entries, list):
        raise VocabularyFormatError(location, "chord entries must be a list")

    symbols = [_entry_symbol(entry, location) for entry in entries]
    logger.debug("Parsed %d chord entries from %s", len(symbols), location)
    return symbols


def parse_text_vocabulary(raw: str) -> list[str]:
    symbols = []
    for line in raw.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith("#"):
            symbols.append(stripped)
    return symbols


def _entry_symbol(entry: object, location: str) -> str:
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        for key in _SYMBOL_KEYS:
            value = entry.get(key)
            if isinstance(value, str):
                return value
    raise VocabularyFormatError(location, f"unrecognised chord entry: {entry!r}")
