"""Checking a player's letters against a generated crossword."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from ..core.models import PlacedWord
from ..utils.logger import get_logger

if TYPE_CHECKING:
    from ..engine.builder import CrosswordResult


LOGGER = get_logger(__name__)


@dataclass
class CheckReport:
    correct_letters: int
    total_letters: int
    wrong_cells: List[Tuple[int, int]] = field(default_factory=list)
    completed_words: List[PlacedWord] = field(default_factory=list)
    total_words: int = 0

    @property
    def percentage(self) -> int:
        if not self.total_letters:
            return 0
        # Halves round up: 1 of 8 letters is 13%.
        return int(self.correct_letters * 100 / self.total_letters + 0.5)

    @property
    def is_perfect(self) -> bool:
        return self.total_letters > 0 and self.correct_letters == self.total_letters

    def summary(self) -> str:
        if self.is_perfect:
            return (
                "¡PERFECTO! Has completado el crucigrama correctamente.\n"
                f"{len(self.completed_words)} palabras de {self.total_words}"
            )
        return (
            f"Has acertado {self.correct_letters} de {self.total_letters} letras "
            f"({self.percentage}%)\n"
            f"{len(self.completed_words)} palabras completas de {self.total_words}"
        )


class AnswerSheet:
    """The player's entries for one puzzle, keyed by ``(x, y)``."""

    def __init__(self, result: "CrosswordResult") -> None:
        self.result = result
        self.entries: Dict[Tuple[int, int], str] = {}

    def enter(self, x: int, y: int, letter: str) -> bool:
        """Record ``letter`` at a letter cell; returns ``False`` for other cells."""

        if self.result.grid.get(x, y) is None:
            return False
        value = (letter or "").strip().upper()[:1]
        if value:
            self.entries[(x, y)] = value
        else:
            self.entries.pop((x, y), None)
        return True

    def entry(self, x: int, y: int) -> Optional[str]:
        return self.entries.get((x, y))

    def clear(self) -> None:
        self.entries.clear()

    def is_word_complete(self, word: PlacedWord) -> bool:
        return all(
            self.entries.get(cell) == letter for cell, letter in zip(word.cells, word.text)
        )

    def completed_words(self) -> List[PlacedWord]:
        return [word for word in self.result.words if self.is_word_complete(word)]

    def check(self) -> CheckReport:
        correct = 0
        total = 0
        wrong: List[Tuple[int, int]] = []
        for x, y, solution in self.result.grid.letters():
            total += 1
            guess = self.entries.get((x, y))
            if guess == solution:
                correct += 1
            elif guess:
                wrong.append((x, y))

        report = CheckReport(
            correct_letters=correct,
            total_letters=total,
            wrong_cells=wrong,
            completed_words=self.completed_words(),
            total_words=len(self.result.words),
        )
        LOGGER.info(
            "Checked answers: %s/%s letters, %s/%s words",
            correct,
            total,
            len(report.completed_words),
            report.total_words,
        )
        return report
