"""Selection of playable vocabulary entries for a set of lexical units."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from ..core.constants import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH
from ..core.models import WordEntry
from ..utils.logger import get_logger
from .units import UnitCatalog
from .vocabulary import VocabularyRecord


LOGGER = get_logger(__name__)


@dataclass
class FilterConfig:
    """Eligibility bounds for candidate words."""

    min_length: int = DEFAULT_MIN_LENGTH
    max_length: int = DEFAULT_MAX_LENGTH
    catalog: UnitCatalog = field(default_factory=UnitCatalog)


class WordFilter:
    """Turns raw vocabulary records into a deduplicated :class:`WordEntry` pool."""

    def __init__(self, config: FilterConfig | None = None) -> None:
        self.config = config or FilterConfig()

    def is_playable(self, word: str) -> bool:
        if not word:
            return False
        if any(char.isspace() for char in word):
            return False
        # Bounds apply to the placed form; upper() can lengthen a word ("ß" -> "SS").
        length = len(word.upper())
        if length < self.config.min_length or length > self.config.max_length:
            return False
        # Fully uppercase entries are titles or acronyms.
        if word == word.upper() and len(word) > 1:
            return False
        return True

    def select(self, records: Iterable[VocabularyRecord], unit_ids: Sequence[str]) -> List[WordEntry]:
        """Return eligible entries belonging to ``unit_ids``, first occurrence wins."""

        if not unit_ids:
            return []
        prefixes = tuple(self.config.catalog.prefixes_for(unit_ids))
        if not prefixes:
            LOGGER.debug("No known prefixes for units %s", list(unit_ids))
            return []

        unique: Dict[str, WordEntry] = {}
        for record in records:
            location = record.location
            if not location or not location.startswith(prefixes):
                continue
            word = record.word.strip()
            if not self.is_playable(word):
                continue
            key = word.lower()
            if key in unique:
                continue
            unique[key] = WordEntry(
                text=word,
                clue=record.translation.strip() or word,
                location=location,
            )

        LOGGER.debug("Selected %s eligible words for units %s", len(unique), list(unit_ids))
        return list(unique.values())
