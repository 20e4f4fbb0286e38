"""Shared constants and enumerations for the crossword builder."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


DEFAULT_GRID_SIZE = 20
DEFAULT_MAX_RETRIES = 100
DEFAULT_TARGET_WORDS = 10
DEFAULT_MIN_LENGTH = 3
DEFAULT_MAX_LENGTH = 12


class Orientation(str, Enum):
    """Axis a placed word occupies."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def step(self) -> Tuple[int, int]:
        """Unit ``(dx, dy)`` step along the orientation."""

        return (1, 0) if self is Orientation.HORIZONTAL else (0, 1)

    @property
    def perpendicular(self) -> "Orientation":
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL

    @property
    def orthogonal_steps(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Neighbour offsets on either side of a word running along this axis."""

        if self is Orientation.HORIZONTAL:
            return ((0, -1), (0, 1))
        return ((-1, 0), (1, 0))
