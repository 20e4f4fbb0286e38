"""Grid representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..core.constants import DEFAULT_GRID_SIZE, Orientation


@dataclass(frozen=True)
class Box:
    """Inclusive rectangle of grid coordinates."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


class Grid:
    """Fixed-size square matrix of letters.

    Reads outside the grid return ``None`` and writes outside it are ignored,
    so callers can read neighbours of edge cells without extra bounds math.
    """

    def __init__(self, size: int = DEFAULT_GRID_SIZE) -> None:
        if size <= 0:
            raise ValueError(f"Grid size must be positive, got {size}")
        self._size = size
        self.cells: List[List[Optional[str]]] = [[None] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def is_in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._size and 0 <= y < self._size

    def get(self, x: int, y: int) -> Optional[str]:
        if not self.is_in_bounds(x, y):
            return None
        return self.cells[y][x]

    def set(self, x: int, y: int, letter: Optional[str]) -> None:
        if self.is_in_bounds(x, y):
            self.cells[y][x] = letter

    # ------------------------------------------------------------------
    # Word helpers
    # ------------------------------------------------------------------
    def place(self, word: str, x: int, y: int, orientation: Orientation) -> None:
        dx, dy = orientation.step
        for index, letter in enumerate(word):
            self.set(x + dx * index, y + dy * index, letter)

    def read(self, x: int, y: int, orientation: Orientation, length: int) -> str:
        """Read ``length`` cells starting at ``(x, y)``; empty cells read as ``.``."""

        dx, dy = orientation.step
        return "".join(
            self.get(x + dx * i, y + dy * i) or "." for i in range(length)
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def letters(self) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(x, y, letter)`` for occupied cells in reading order."""

        for y, row in enumerate(self.cells):
            for x, letter in enumerate(row):
                if letter is not None:
                    yield x, y, letter

    def letter_count(self) -> int:
        return sum(1 for _ in self.letters())

    def occupied_bounds(self, margin: int = 0) -> Optional[Box]:
        """Bounding box of the letters grown by ``margin`` and clamped to the grid."""

        coords = [(x, y) for x, y, _ in self.letters()]
        if not coords:
            return None
        xs = [x for x, _ in coords]
        ys = [y for _, y in coords]
        last = self._size - 1
        return Box(
            min_x=max(0, min(xs) - margin),
            min_y=max(0, min(ys) - margin),
            max_x=min(last, max(xs) + margin),
            max_y=min(last, max(ys) + margin),
        )
