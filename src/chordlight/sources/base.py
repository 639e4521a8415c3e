from abc import ABC, abstractmethod

from ..vocabulary import ChordVocabulary


class VocabularySource(ABC):
    """Abstract base class for every place a chord vocabulary can come from."""

    @classmethod
    @abstractmethod
    def can_handle(cls, location: str) -> bool:
        """Return True if this source can read the given location."""

    @abstractmethod
    def fetch(self, location: str) -> str:
        """Read the raw document at location.

        Raises VocabularySourceError if it cannot be read.
        """

    @abstractmethod
    def extract(self, raw: str, location: str) -> list[str]:
        """Parse the raw document and return its chord symbols in order.

        Raises VocabularyFormatError if the structure is not recognised.
        """

    def load(self, location: str) -> list[str]:
        """Convenience method: fetch + extract."""
        raw = self.fetch(location)
        return self.extract(raw, location)

    def load_vocabulary(self, location: str) -> ChordVocabulary:
        """Fetch, extract and build a vocabulary.

        Raises EmptyVocabularyError if the source lists no symbols.
        """
        return ChordVocabulary(self.load(location), source=location)
