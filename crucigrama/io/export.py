"""Renderer-facing payload for generated crosswords."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..core.constants import Orientation
from ..core.models import PlacedWord
from ..engine.builder import CrosswordResult
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def start_numbers(result: CrosswordResult) -> Dict[Tuple[int, int], int]:
    return {word.start: word.number for word in result.words if word.number is not None}


def serialize_word(word: PlacedWord) -> Dict[str, Any]:
    return {
        "number": word.number,
        "text": word.text,
        "clue": word.clue,
        "orientation": word.orientation.value,
        "start": [word.x, word.y],
        "length": word.length,
    }


def clue_list(result: CrosswordResult, orientation: Orientation) -> List[Dict[str, Any]]:
    return [
        {"number": word.number, "clue": word.clue, "length": word.length}
        for word in result.words_by_orientation(orientation)
    ]


def build_payload(result: CrosswordResult, margin: int = 1, include_solution: bool = True) -> Dict[str, Any]:
    """Cropped grid, words and clue lists ready for a renderer.

    Each cell is ``None`` for a blank square or an object holding its
    coordinates, its start ``number`` and, with ``include_solution``, the
    expected ``answer``.
    """

    grid = result.grid
    box = grid.occupied_bounds(margin=margin)
    numbers = start_numbers(result)

    rows: List[List[Optional[Dict[str, Any]]]] = []
    if box is not None:
        for y in range(box.min_y, box.max_y + 1):
            row: List[Optional[Dict[str, Any]]] = []
            for x in range(box.min_x, box.max_x + 1):
                letter = grid.get(x, y)
                if letter is None:
                    row.append(None)
                    continue
                cell: Dict[str, Any] = {"x": x, "y": y, "number": numbers.get((x, y))}
                if include_solution:
                    cell["answer"] = letter
                row.append(cell)
            rows.append(row)

    payload: Dict[str, Any] = {
        "grid_size": grid.size,
        "bounds": None
        if box is None
        else {"min_x": box.min_x, "min_y": box.min_y, "max_x": box.max_x, "max_y": box.max_y},
        "cells": rows,
        "clues": {
            Orientation.HORIZONTAL.value: clue_list(result, Orientation.HORIZONTAL),
            Orientation.VERTICAL.value: clue_list(result, Orientation.VERTICAL),
        },
        "placed": result.placed_count,
        "requested": result.requested,
    }
    if include_solution:
        payload["words"] = [serialize_word(word) for word in result.words]
    return payload


def dump_payload(payload: Dict[str, Any], path: Path | str | None = None) -> str:
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if path is not None:
        Path(path).write_text(text, encoding="utf-8")
        LOGGER.info("Crossword written to %s", path)
    return text
