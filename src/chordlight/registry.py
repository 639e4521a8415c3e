import logging

from .exceptions import UnsupportedSourceError
from .sources.base import VocabularySource
from .sources.http import HttpVocabularySource
from .sources.local_file import FileVocabularySource
from .vocabulary import ChordVocabulary

logger = logging.getLogger(__name__)

_SOURCES: list[type[VocabularySource]] = [
    HttpVocabularySource,
    FileVocabularySource,
]


def get_source(location: str) -> VocabularySource:
    """Return an instantiated vocabulary source for the given location.

    Raises UnsupportedSourceError if no source matches.
    """
    for cls in _SOURCES:
        if cls.can_handle(location):
            return cls()
    raise UnsupportedSourceError(location)


def load_vocabulary(location: str) -> ChordVocabulary:
    """Load a :class:`ChordVocabulary` from a path or URL."""
    source = get_source(location)
    logger.debug("Loading vocabulary from %s with %s", location, type(source).__name__)
    return source.load_vocabulary(location)
