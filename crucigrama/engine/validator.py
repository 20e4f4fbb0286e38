"""Placement legality checks and post-generation puzzle audits."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence, Tuple

from ..core.constants import Orientation
from ..core.models import PlacedWord
from ..utils.logger import get_logger
from .grid import Grid

if TYPE_CHECKING:
    from .builder import CrosswordResult


LOGGER = get_logger(__name__)


class PlacementValidator:
    """Decides whether a word can be written at a position without collisions."""

    def can_place(
        self,
        grid: Grid,
        word: str,
        x: int,
        y: int,
        orientation: Orientation,
        intersection_index: Optional[int] = None,
    ) -> bool:
        dx, dy = orientation.step
        end_x = x + dx * (len(word) - 1)
        end_y = y + dy * (len(word) - 1)
        if not word or not grid.is_in_bounds(x, y) or not grid.is_in_bounds(end_x, end_y):
            LOGGER.debug("Reject %s at (%s,%s): out of bounds", word, x, y)
            return False

        for index, letter in enumerate(word):
            cx, cy = x + dx * index, y + dy * index
            existing = grid.get(cx, cy)
            if existing is not None:
                # Only the declared crossing may reuse an occupied cell.
                if index != intersection_index or existing != letter:
                    LOGGER.debug("Reject %s at (%s,%s): collision at (%s,%s)", word, x, y, cx, cy)
                    return False
                continue
            for ox, oy in orientation.orthogonal_steps:
                if grid.get(cx + ox, cy + oy) is not None:
                    LOGGER.debug("Reject %s at (%s,%s): neighbour of (%s,%s)", word, x, y, cx, cy)
                    return False

        if grid.get(x - dx, y - dy) is not None or grid.get(end_x + dx, end_y + dy) is not None:
            LOGGER.debug("Reject %s at (%s,%s): abuts another word", word, x, y)
            return False
        return True


@dataclass
class AuditResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class PuzzleAuditor:
    """Re-checks a finished puzzle against the grid invariants."""

    def audit(self, result: "CrosswordResult") -> AuditResult:
        messages: List[str] = []
        messages.extend(self._check_read_back(result.grid, result.words))
        messages.extend(self._check_crossings(result.words))
        messages.extend(self._check_ownership(result.grid, result.words))
        messages.extend(self._check_adjacency(result.grid, result.words))
        for message in messages:
            LOGGER.error("Audit failed: %s", message)
        return AuditResult(ok=not messages, messages=messages)

    @staticmethod
    def _check_read_back(grid: Grid, words: Sequence[PlacedWord]) -> List[str]:
        messages = []
        for word in words:
            found = grid.read(word.x, word.y, word.orientation, word.length)
            if found != word.text:
                messages.append(f"{word.text} at {word.start} reads back as {found}")
        return messages

    @staticmethod
    def _check_crossings(words: Sequence[PlacedWord]) -> List[str]:
        messages = []
        for index, word in enumerate(words[1:], start=1):
            crosses = False
            for other_index, other in enumerate(words):
                if other_index == index or other.orientation == word.orientation:
                    continue
                for x, y in word.cells:
                    letter = other.letter_at(x, y)
                    if letter is not None and letter == word.letter_at(x, y):
                        crosses = True
                        break
                if crosses:
                    break
            if not crosses:
                messages.append(f"{word.text} at {word.start} crosses no other word")
        return messages

    @staticmethod
    def _check_ownership(grid: Grid, words: Sequence[PlacedWord]) -> List[str]:
        owners: Dict[Tuple[int, int], int] = {}
        for word in words:
            for cell in word.cells:
                owners[cell] = owners.get(cell, 0) + 1
        messages = []
        for x, y, letter in grid.letters():
            if (x, y) not in owners:
                messages.append(f"Letter {letter} at {(x, y)} belongs to no word")
        for cell, count in owners.items():
            if count > 2:
                messages.append(f"Cell {cell} is shared by {count} words")
        return messages

    @staticmethod
    def _check_adjacency(grid: Grid, words: Sequence[PlacedWord]) -> List[str]:
        """Every pair of adjacent letters must be consecutive in some word."""

        linked = set()
        for word in words:
            cells = word.cells
            for first, second in zip(cells, cells[1:]):
                linked.add((first, second))
        messages = []
        for x, y, _ in grid.letters():
            for nx, ny in ((x + 1, y), (x, y + 1)):
                if grid.get(nx, ny) is not None and ((x, y), (nx, ny)) not in linked:
                    messages.append(f"Cells {(x, y)} and {(nx, ny)} touch outside any word")
        return messages
