"""Word-chain grid puzzle solver.

This package exposes the public API surface via:

- ``wordchain.engine.solver.WordChainSolver``: orchestrates a full solve.
- ``wordchain.data.dictionary.DictionaryIndex``: word and prefix lookups.
- ``wordchain.engine.grid.LetterGrid``: the board and its gravity rule.
- ``wordchain.engine.scheduler.Scheduler``: parallel first-stage search.
"""

from .core.exceptions import DictionaryLoadError, InputShapeError, WordChainError
from .data.dictionary import DictionaryConfig, DictionaryIndex
from .engine.grid import LetterGrid
from .engine.results import ResultSet
from .engine.scheduler import Scheduler, partition
from .engine.solver import SolveResult, SolverConfig, WordChainSolver

__all__ = [
    "DictionaryConfig",
    "DictionaryIndex",
    "DictionaryLoadError",
    "InputShapeError",
    "LetterGrid",
    "ResultSet",
    "Scheduler",
    "SolveResult",
    "SolverConfig",
    "WordChainError",
    "WordChainSolver",
    "partition",
]

__version__ = "0.1.0"
