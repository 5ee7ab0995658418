"""Logging utilities tailored for word-chain solving."""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union

WORKER_FORMAT = "%(asctime)s | %(levelname)-7s | %(processName)s/%(threadName)s | %(name)s | %(message)s"


def parse_level(level: Union[int, str]) -> int:
    """Map ``"debug"``/``"INFO"``/``10`` to a logging level, defaulting to INFO."""

    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Configure root logging with a sensible formatter.

    Search workers log from several threads or processes at once, so every
    record carries the process and thread that emitted it. Callers may
    reconfigure before invoking :class:`WordChainSolver`.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=WORKER_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(parse_level(level))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordchain")
