"""Logging setup shared by the CLI, the session and the builder."""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "crucigrama"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

# Vocabulary downloads go through requests; its connection chatter stays at
# WARNING even when placement attempts are traced at DEBUG.
QUIET_LOGGERS = ("urllib3", "requests")


def configure_logging(level: int = logging.INFO) -> None:
    """Install a single stderr handler on the root logger.

    The builder performs many cheap placement attempts, so per-attempt detail
    is emitted at DEBUG and only generation summaries reach INFO. Callers may
    reconfigure before creating a :class:`PuzzleSession`.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``crucigrama`` namespace."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ROOT_LOGGER_NAME)


def level_from_name(name: str) -> int:
    """Translate ``"debug"``/``"INFO"``-style names, defaulting to INFO."""

    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO
