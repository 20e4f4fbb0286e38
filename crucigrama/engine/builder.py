"""Crossword construction by random-anchor, first-fit intersection search.

The first word is laid horizontally across the middle of the grid. Every
following word is tried against a randomly chosen placed word (the anchor),
perpendicular to it, at the first letter pair that passes
:class:`PlacementValidator`. Generation stops when the target count is met,
the candidate pool runs out, or ``max_retries`` consecutive attempts fail.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from ..core.constants import (
    DEFAULT_GRID_SIZE,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TARGET_WORDS,
    Orientation,
)
from ..core.exceptions import EmptyPoolError, SeedPlacementError
from ..core.models import PlacedWord, WordEntry
from ..utils.logger import get_logger
from .grid import Grid
from .validator import PlacementValidator


LOGGER = get_logger(__name__)


@dataclass
class BuilderConfig:
    """Configuration values driving a generation run."""

    grid_size: int = DEFAULT_GRID_SIZE
    max_retries: int = DEFAULT_MAX_RETRIES
    target_words: int = DEFAULT_TARGET_WORDS
    seed: Optional[int] = None
    rng: Optional[random.Random] = None

    def make_rng(self) -> random.Random:
        """Return the injected generator, or a fresh one seeded with ``seed``.

        A fresh generator per call keeps every seeded build reproducible.
        """

        return self.rng or random.Random(self.seed)

    @property
    def reported_seed(self) -> Optional[int]:
        # An injected generator carries state the seed alone cannot replay.
        return self.seed if self.rng is None else None


@dataclass
class CrosswordResult:
    grid: Grid
    words: List[PlacedWord]
    requested: int
    attempts: int = 0
    seed: Optional[int] = None

    @property
    def placed_count(self) -> int:
        return len(self.words)

    @property
    def is_partial(self) -> bool:
        return self.placed_count < self.requested

    def words_by_orientation(self, orientation: Orientation) -> List[PlacedWord]:
        selected = [word for word in self.words if word.orientation == orientation]
        return sorted(selected, key=lambda word: (word.number or 0, word.y, word.x))


@dataclass
class Intersection:
    x: int
    y: int
    new_index: int
    anchor_index: int


@dataclass
class _BuildState:
    grid: Grid
    pool: List[WordEntry]
    rng: random.Random
    placed: List[PlacedWord] = field(default_factory=list)
    used: Set[str] = field(default_factory=set)

    def next_candidate(self) -> Optional[WordEntry]:
        for entry in self.pool:
            if entry.key not in self.used:
                return entry
        return None


def assign_numbers(words: Iterable[PlacedWord]) -> List[PlacedWord]:
    """Number start cells in (row, column) order; shared starts share a number.

    Returns the words in their input order with ``number`` filled in.
    """

    words = list(words)
    numbers: Dict[Tuple[int, int], int] = {}
    for word in sorted(words, key=lambda item: (item.y, item.x)):
        if word.start not in numbers:
            numbers[word.start] = len(numbers) + 1
    return [replace(word, number=numbers[word.start]) for word in words]


class CrosswordBuilder:
    """Places a pool of words on a fresh :class:`Grid`."""

    def __init__(
        self,
        config: Optional[BuilderConfig] = None,
        validator: Optional[PlacementValidator] = None,
    ) -> None:
        self.config = config or BuilderConfig()
        self.validator = validator or PlacementValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def build(self, pool: Sequence[WordEntry], target: Optional[int] = None) -> CrosswordResult:
        if not pool:
            raise EmptyPoolError("No words available to build a crossword")
        target = self.config.target_words if target is None else target

        rng = self.config.make_rng()
        shuffled = list(pool)
        rng.shuffle(shuffled)
        state = _BuildState(grid=Grid(self.config.grid_size), pool=shuffled, rng=rng)

        self._place_seed(state)
        attempts = self._grow(state, target)

        words = assign_numbers(state.placed)
        result = CrosswordResult(
            grid=state.grid,
            words=words,
            requested=target,
            attempts=attempts,
            seed=self.config.reported_seed,
        )
        if result.is_partial:
            LOGGER.warning("Crossword generated with %s of %s requested words", result.placed_count, target)
        else:
            LOGGER.info("Crossword generated with %s words", result.placed_count)
        return result

    # ------------------------------------------------------------------
    # Placement phases
    # ------------------------------------------------------------------
    def _place_seed(self, state: _BuildState) -> None:
        size = state.grid.size
        for entry in state.pool:
            word = entry.answer
            x = (size - len(word)) // 2
            y = size // 2
            if not self.validator.can_place(state.grid, word, x, y, Orientation.HORIZONTAL):
                LOGGER.warning("Opening word %s does not fit a %sx%s grid", word, size, size)
                # Never retried as a crossing candidate either.
                state.used.add(entry.key)
                continue
            self._commit(state, entry, x, y, Orientation.HORIZONTAL)
            return
        raise SeedPlacementError(f"No word in the pool fits a {size}x{size} grid")

    def _grow(self, state: _BuildState, target: int) -> int:
        failures = 0
        attempts = 0
        while len(state.placed) < target and failures < self.config.max_retries:
            attempts += 1
            anchor = state.rng.choice(state.placed)
            candidate = state.next_candidate()
            if candidate is None:
                LOGGER.debug("Candidate pool exhausted after %s placements", len(state.placed))
                break

            orientation = anchor.orientation.perpendicular
            found = self.find_intersection(state.grid, anchor, candidate.answer, orientation)
            if found is None:
                failures += 1
                LOGGER.debug(
                    "No crossing for %s on %s (failure %s/%s)",
                    candidate.answer,
                    anchor.text,
                    failures,
                    self.config.max_retries,
                )
                continue

            self._commit(state, candidate, found.x, found.y, orientation)
            failures = 0
        return attempts

    def find_intersection(
        self,
        grid: Grid,
        anchor: PlacedWord,
        word: str,
        orientation: Orientation,
    ) -> Optional[Intersection]:
        """Return the first legal crossing of ``word`` over ``anchor``."""

        if orientation == anchor.orientation:
            return None
        for i, letter in enumerate(word):
            for j, anchor_letter in enumerate(anchor.text):
                if letter != anchor_letter:
                    continue
                if anchor.orientation == Orientation.HORIZONTAL:
                    x, y = anchor.x + j, anchor.y - i
                else:
                    x, y = anchor.x - i, anchor.y + j
                if self.validator.can_place(grid, word, x, y, orientation, intersection_index=i):
                    return Intersection(x=x, y=y, new_index=i, anchor_index=j)
        return None

    @staticmethod
    def _commit(state: _BuildState, entry: WordEntry, x: int, y: int, orientation: Orientation) -> None:
        word = entry.answer
        state.grid.place(word, x, y, orientation)
        state.placed.append(
            PlacedWord(text=word, x=x, y=y, orientation=orientation, clue=entry.clue)
        )
        state.used.add(entry.key)
        LOGGER.debug("Placed %s %s at (%s,%s)", word, orientation.value, x, y)
