"""Data models supporting the crossword builder."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .constants import Orientation


@dataclass(frozen=True)
class WordEntry:
    """An eligible vocabulary entry."""

    text: str
    clue: str
    location: str = ""

    @property
    def key(self) -> str:
        return self.text.lower()

    @property
    def answer(self) -> str:
        return self.text.upper()


@dataclass(frozen=True)
class PlacedWord:
    """A word fixed on the grid at ``(x, y)`` running along ``orientation``."""

    text: str
    x: int
    y: int
    orientation: Orientation
    clue: str
    number: Optional[int] = None

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def start(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def end(self) -> Tuple[int, int]:
        dx, dy = self.orientation.step
        return (self.x + dx * (self.length - 1), self.y + dy * (self.length - 1))

    @property
    def cells(self) -> List[Tuple[int, int]]:
        dx, dy = self.orientation.step
        return [(self.x + dx * i, self.y + dy * i) for i in range(self.length)]

    def letter_at(self, x: int, y: int) -> Optional[str]:
        for index, cell in enumerate(self.cells):
            if cell == (x, y):
                return self.text[index]
        return None
