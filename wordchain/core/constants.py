"""Shared constants for the word-chain solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


EMPTY = "-"
"""Marker stored in a grid cell whose letter has been consumed."""

DEFAULT_DICTIONARY_PATH = "dict_full.txt"


class ExecutorKind(str, Enum):
    """Pool flavours the scheduler can run workers on."""

    THREAD = "thread"
    PROCESS = "process"


# Fixed enumeration order for path extension: down-right first, up-left last.
COMPASS_STEPS: Tuple[Tuple[int, int], ...] = (
    (1, 1),
    (1, 0),
    (1, -1),
    (0, 1),
    (0, -1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)


@dataclass(frozen=True)
class Bounds:
    """Simple square bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
