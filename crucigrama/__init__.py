"""Vocabulary crossword generator.

This package exposes the public API surface via:

- ``crucigrama.engine.builder.CrosswordBuilder``: places words on the grid.
- ``crucigrama.data.word_filter.WordFilter``: selects playable vocabulary.
- ``crucigrama.play.session.PuzzleSession``: loads vocabulary, generates and checks puzzles.
"""

from .engine.builder import BuilderConfig, CrosswordBuilder, CrosswordResult
from .data.word_filter import FilterConfig, WordFilter
from .play.session import PuzzleSession

__all__ = [
    "BuilderConfig",
    "CrosswordBuilder",
    "CrosswordResult",
    "FilterConfig",
    "WordFilter",
    "PuzzleSession",
]

__version__ = "0.1.0"
