class ChordlightError(Exception):
    """Base exception for chordlight."""


class EmptyVocabularyError(ChordlightError):
    """Raised when a chord vocabulary is built from zero usable symbols."""

    def __init__(self, source: str = ""):
        self.source = source
        detail = f" from {source}" if source else ""
        super().__init__(f"Chord vocabulary{detail} has no entries")


class VocabularySourceError(ChordlightError):
    """Raised when a vocabulary source cannot be read."""

    def __init__(self, location: str, status_code: int = 0):
        self.location = location
        self.status_code = status_code
        if status_code:
            super().__init__(f"HTTP {status_code} fetching {location}")
        else:
            super().__init__(f"Could not read vocabulary from {location}")


class VocabularyFormatError(ChordlightError):
    """Raised when a vocabulary source has an unrecognised structure."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Bad vocabulary in {location}: {reason}")


class UnsupportedSourceError(ChordlightError):
    """Raised when no vocabulary source adapter matches the given location."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"No vocabulary source found for: {location}")


class ConfigError(ChordlightError):
    """Raised when a configuration value cannot be parsed."""

    def __init__(self, name: str, value: str, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}={value!r}: {reason}")
