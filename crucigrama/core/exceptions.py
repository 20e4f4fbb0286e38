"""Custom exception hierarchy for crossword generation."""


class CrosswordError(Exception):
    """Base exception for generator failures."""


class EmptyPoolError(CrosswordError):
    """Raised when no eligible words are available for the requested units."""


class SeedPlacementError(CrosswordError):
    """Raised when no word of the pool fits the grid as the opening word."""


class VocabularyLoadError(CrosswordError):
    """Raised when the vocabulary source cannot be read or parsed."""


class VocabularyNotLoadedError(CrosswordError):
    """Raised when a puzzle is requested before the vocabulary is available."""


class NoUnitsSelectedError(CrosswordError):
    """Raised when generation is requested without any lexical unit."""


class NoPuzzleError(CrosswordError):
    """Raised when answers are checked before any puzzle was generated."""
