"""Cursor movement between letter cells.

Renderers call these helpers from their key handlers instead of walking the
widget tree themselves.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..core.constants import Orientation
from ..engine.grid import Grid

Position = Tuple[int, int]


def next_position(grid: Grid, position: Position, orientation: Orientation) -> Optional[Position]:
    """Letter cell one step forward along ``orientation``, if any."""

    dx, dy = orientation.step
    x, y = position[0] + dx, position[1] + dy
    return (x, y) if grid.get(x, y) is not None else None


def previous_position(grid: Grid, position: Position, orientation: Orientation) -> Optional[Position]:
    dx, dy = orientation.step
    x, y = position[0] - dx, position[1] - dy
    return (x, y) if grid.get(x, y) is not None else None


def reading_order(grid: Grid) -> List[Position]:
    return [(x, y) for x, y, _ in grid.letters()]


def reading_order_next(grid: Grid, position: Position) -> Optional[Position]:
    """Following letter cell in row-major order, as when typing advances focus."""

    cells = reading_order(grid)
    if position not in cells:
        return None
    index = cells.index(position)
    return cells[index + 1] if index + 1 < len(cells) else None


def reading_order_previous(grid: Grid, position: Position) -> Optional[Position]:
    """Preceding letter cell in row-major order, as when backspacing an empty cell."""

    cells = reading_order(grid)
    if position not in cells:
        return None
    index = cells.index(position)
    return cells[index - 1] if index > 0 else None


def move_after_input(
    grid: Grid,
    position: Position,
    orientation: Optional[Orientation] = None,
) -> Optional[Position]:
    """Where focus goes after a letter is typed.

    With a word direction the cursor stays on that word; without one it
    advances in reading order.
    """

    if orientation is None:
        return reading_order_next(grid, position)
    return next_position(grid, position, orientation)
