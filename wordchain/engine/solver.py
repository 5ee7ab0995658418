"""Top-level word-chain solving orchestration.

Load the dictionary once, validate the puzzle, then hand the first search
stage to the :class:`Scheduler`, which merges the per-worker results.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Union

from ..core.constants import DEFAULT_DICTIONARY_PATH, ExecutorKind
from ..core.models import Puzzle
from ..data.dictionary import DictionaryConfig, DictionaryIndex, DictionarySource
from ..utils.logger import get_logger
from .results import ResultSet
from .scheduler import Scheduler
from .validator import PuzzleValidator, Rows


LOGGER = get_logger(__name__)


@dataclass
class SolverConfig:
    dictionary_source: DictionarySource = DEFAULT_DICTIONARY_PATH
    worker_count: Optional[int] = None
    executor: Union[ExecutorKind, str] = ExecutorKind.THREAD
    interactive: bool = True
    dictionary_encoding: str = "utf-8"
    download_timeout_seconds: float = 30.0

    def __post_init__(self) -> None:
        self.executor = ExecutorKind(self.executor)
        if self.worker_count is not None and self.worker_count < 1:
            raise ValueError(f"worker_count must be positive, got {self.worker_count}")

    def effective_workers(self) -> int:
        """Requested workers, defaulting to and capped at the available CPUs."""

        available = os.cpu_count() or 1
        requested = self.worker_count or available
        return max(1, min(requested, available))

    def to_dictionary_config(self) -> DictionaryConfig:
        return DictionaryConfig(
            source=self.dictionary_source,
            encoding=self.dictionary_encoding,
            timeout_seconds=self.download_timeout_seconds,
        )


@dataclass
class SolveResult:
    puzzle: Puzzle
    sequences: ResultSet
    elapsed_seconds: float
    worker_count: int

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "dimension": self.puzzle.dim,
            "lengths": list(self.puzzle.lengths),
            "grid": self.puzzle.grid.rows(),
            "sequences": [list(sequence) for sequence in self.sequences.sorted()],
            "elapsed_seconds": round(self.elapsed_seconds, 3),
            "worker_count": self.worker_count,
        }


class WordChainSolver:
    """Solve word-chain puzzles against one shared dictionary."""

    def __init__(
        self,
        config: SolverConfig,
        dictionary: Optional[DictionaryIndex] = None,
    ) -> None:
        self.config = config
        if dictionary is None:
            dictionary = DictionaryIndex.from_config(config.to_dictionary_config())
        self.dictionary = dictionary
        self.validator = PuzzleValidator()

    def solve(self, puzzle: Puzzle) -> SolveResult:
        workers = self.config.effective_workers()
        LOGGER.info(
            "Solving %dx%d board for lengths %s with %d worker(s)",
            puzzle.dim,
            puzzle.dim,
            list(puzzle.lengths),
            workers,
        )
        for length in sorted(set(puzzle.lengths)):
            if not self.dictionary.has_length(length):
                LOGGER.warning("Dictionary has no %d-letter words", length)

        start = time.perf_counter()
        scheduler = Scheduler(self.dictionary, worker_count=workers, executor=self.config.executor)
        sequences = scheduler.run(puzzle.grid, puzzle.lengths)
        elapsed = time.perf_counter() - start
        LOGGER.info("Found %d sequence(s) in %.3fs", len(sequences), elapsed)
        return SolveResult(
            puzzle=puzzle,
            sequences=sequences,
            elapsed_seconds=elapsed,
            worker_count=workers,
        )

    def solve_rows(self, rows: Rows, lengths: Sequence[int]) -> SolveResult:
        """Validate ``rows`` and ``lengths`` and solve them."""

        return self.solve(self.validator.validate(rows, list(lengths)))
