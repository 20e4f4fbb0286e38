"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List

from ..core.constants import Orientation

if TYPE_CHECKING:
    from ..engine.builder import CrosswordResult
    from ..engine.grid import Grid


BLOCK = "#"
BLANK = "_"

CLUE_HEADINGS = {
    Orientation.HORIZONTAL: "Horizontales",
    Orientation.VERTICAL: "Verticales",
}


def format_grid(grid: Grid, *, solution: bool = True, margin: int = 1) -> str:
    """Render the occupied part of ``grid``; blanks replace letters unless ``solution``."""

    box = grid.occupied_bounds(margin=margin)
    if box is None:
        return "(empty grid)"
    header_cells = [f"{x:>2}" for x in range(box.min_x, box.max_x + 1)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * box.width - 1))
    for y in range(box.min_y, box.max_y + 1):
        symbols = []
        for x in range(box.min_x, box.max_x + 1):
            letter = grid.get(x, y)
            if letter is None:
                symbols.append(BLOCK)
            else:
                symbols.append(letter if solution else BLANK)
        row_render = " ".join(f"{symbol:>2}" for symbol in symbols)
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(result: CrosswordResult) -> str:
    lines: List[str] = []
    for orientation, heading in CLUE_HEADINGS.items():
        words = result.words_by_orientation(orientation)
        if not words:
            continue
        if lines:
            lines.append("")
        lines.append(f"{heading}:")
        for word in words:
            lines.append(f"  {word.number:>2}. {word.clue} ({word.length})")
    return "\n".join(lines)


def format_puzzle(result: CrosswordResult, *, solution: bool = False) -> str:
    parts = [format_grid(result.grid, solution=solution), "", format_clues(result)]
    if result.is_partial:
        parts.extend(["", f"Placed {result.placed_count} of {result.requested} requested words"])
    return "\n".join(parts)


def pretty_print_puzzle(result: CrosswordResult, *, solution: bool = False, stream=None) -> None:
    """Print the crossword grid and clue lists in a human-friendly format."""

    stream = stream or sys.stdout
    print(format_puzzle(result, solution=solution), file=stream)
