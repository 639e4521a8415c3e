"""Chord vocabulary: the set of chord symbols the engine will recognise.

Two lookups are offered:

  contains()    : exact, case-insensitive symbol match (``"am"`` ~ ``"Am"``)
  shares_root() : the symbol's ``[A-G][#b]?`` root equals the root of some
                  member, after flat roots are aliased to their sharp
                  spelling (``"Dbmaj7"`` shares a root with ``"C#"``)

A :class:`ChordVocabulary` is immutable.  :class:`VocabularyStore` holds
the current one and swaps in a replacement on refresh; a rendering pass
takes one snapshot up front and uses it throughout.
"""

import logging
from collections.abc import Iterable

from .exceptions import EmptyVocabularyError
from .transpose import ROOT_RE, normalize_root

logger = logging.getLogger(__name__)


def chord_root(symbol: str) -> str | None:
    """Return the sharp-normalised root of *symbol*, or ``None`` if it has none."""
    m = ROOT_RE.match(symbol)
    if not m:
        return None
    return normalize_root(m.group())


class ChordVocabulary:
    """Immutable set of canonical chord symbols."""

    __slots__ = ("_symbols", "_folded", "_roots")

    def __init__(self, symbols: Iterable[str], source: str = ""):
        cleaned: list[str] = []
        seen: set[str] = set()
        for raw in symbols:
            symbol = raw.strip()
            if not symbol or symbol in seen:
                continue
            seen.add(symbol)
            cleaned.append(symbol)

        if not cleaned:
            raise EmptyVocabularyError(source)

        self._symbols = tuple(cleaned)
        self._folded = frozenset(s.casefold() for s in cleaned)
        self._roots = frozenset(r for r in map(chord_root, cleaned) if r is not None)

    @classmethod
    def from_symbols(cls, symbols: Iterable[str], source: str = "") -> "ChordVocabulary":
        return cls(symbols, source=source)

    @property
    def symbols(self) -> tuple[str, ...]:
        return self._symbols

    @property
    def roots(self) -> frozenset[str]:
        return self._roots

    def contains(self, symbol: str) -> bool:
        return symbol.casefold() in self._folded

    def shares_root(self, symbol: str) -> bool:
        root = chord_root(symbol)
        return root is not None and root in self._roots

    def recognizes(self, symbol: str) -> bool:
        """True if *symbol* is an exact member or belongs to a member's root family."""
        return self.contains(symbol) or self.shares_root(symbol)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and self.contains(symbol)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self):
        return iter(self._symbols)

    def __repr__(self) -> str:
        return f"ChordVocabulary({len(self._symbols)} symbols)"


class VocabularyStore:
    """Process-lifetime holder for the current :class:`ChordVocabulary`.

    ``snapshot()`` may return ``None`` before the first successful refresh;
    the engine treats that as the degraded "no chords" mode.
    """

    def __init__(self, vocabulary: ChordVocabulary | None = None):
        self._current = vocabulary

    def snapshot(self) -> ChordVocabulary | None:
        return self._current

    def refresh(self, symbols: Iterable[str], source: str = "") -> ChordVocabulary | None:
        """Rebuild the vocabulary from *symbols* and make it current.

        An empty source keeps the previous vocabulary in place.  Returns
        whichever vocabulary is current afterwards.
        """
        try:
            vocabulary = ChordVocabulary(symbols, source=source)
        except EmptyVocabularyError as exc:
            logger.warning("%s; keeping previous vocabulary", exc)
            return self._current

        # A single attribute assignment; readers see the old or the new snapshot.
        self._current = vocabulary
        logger.info("Loaded %d chord symbols%s", len(vocabulary), f" from {source}" if source else "")
        return vocabulary
