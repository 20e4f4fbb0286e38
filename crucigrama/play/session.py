"""Per-user puzzle state: loaded vocabulary, unit selection and current puzzle."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from ..core.exceptions import (
    EmptyPoolError,
    NoPuzzleError,
    NoUnitsSelectedError,
    VocabularyNotLoadedError,
)
from ..core.models import WordEntry
from ..data.units import DEFAULT_SELECTION, UnitCatalog
from ..data.vocabulary import Vocabulary, VocabularyLoader
from ..data.word_filter import FilterConfig, WordFilter
from ..engine.builder import BuilderConfig, CrosswordBuilder, CrosswordResult
from ..utils.logger import get_logger
from .checker import AnswerSheet, CheckReport


LOGGER = get_logger(__name__)


class PuzzleSession:
    """Owns everything one player needs between generate and check."""

    def __init__(
        self,
        builder_config: Optional[BuilderConfig] = None,
        filter_config: Optional[FilterConfig] = None,
        vocabulary: Optional[Vocabulary] = None,
        selected_units: Iterable[str] = DEFAULT_SELECTION,
    ) -> None:
        self.builder_config = builder_config or BuilderConfig()
        self.filter_config = filter_config or FilterConfig()
        self.word_filter = WordFilter(self.filter_config)
        self.builder = CrosswordBuilder(self.builder_config)
        self.vocabulary = vocabulary
        self.selected_units: List[str] = []
        self.puzzle: Optional[CrosswordResult] = None
        self.answers: Optional[AnswerSheet] = None
        self.select_units(selected_units)

    @property
    def catalog(self) -> UnitCatalog:
        return self.filter_config.catalog

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def load_vocabulary(self, source: Path | str, loader: Optional[VocabularyLoader] = None) -> Vocabulary:
        self.vocabulary = (loader or VocabularyLoader()).load(source)
        return self.vocabulary

    def select_units(self, unit_ids: Iterable[str]) -> None:
        selected = []
        for unit_id in unit_ids:
            if unit_id not in self.catalog:
                raise ValueError(f"Unknown unit '{unit_id}'; known units: {', '.join(self.catalog.ids())}")
            if unit_id not in selected:
                selected.append(unit_id)
        self.selected_units = selected

    def select_all_units(self) -> None:
        self.selected_units = self.catalog.ids()

    @property
    def selection_label(self) -> str:
        return self.catalog.selection_label(self.selected_units)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def available_words(self) -> List[WordEntry]:
        if self.vocabulary is None:
            raise VocabularyNotLoadedError("Vocabulary has not been loaded yet")
        return self.word_filter.select(self.vocabulary, self.selected_units)

    def generate(self, target: Optional[int] = None) -> CrosswordResult:
        """Build a new puzzle, replacing the current one and its answers."""

        if self.vocabulary is None:
            raise VocabularyNotLoadedError("Vocabulary has not been loaded yet")
        if not self.selected_units:
            raise NoUnitsSelectedError("Select at least one unit before generating")

        description = self.catalog.describe(self.selected_units)
        pool = self.available_words()
        LOGGER.info("Words available for %s: %s", description, len(pool))
        if not pool:
            raise EmptyPoolError(f"No se encontraron palabras para {description}.")

        self.puzzle = self.builder.build(pool, target)
        self.answers = AnswerSheet(self.puzzle)
        return self.puzzle

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------
    def _require_answers(self) -> AnswerSheet:
        if self.answers is None:
            raise NoPuzzleError("Generate a crossword first")
        return self.answers

    def enter(self, x: int, y: int, letter: str) -> bool:
        return self._require_answers().enter(x, y, letter)

    def clear_answers(self) -> None:
        self._require_answers().clear()

    def check(self) -> CheckReport:
        return self._require_answers().check()
