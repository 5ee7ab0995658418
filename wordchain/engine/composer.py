"""Multi-stage composition of word sequences across gravity steps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from ..core.models import WordSequence
from ..data.dictionary import DictionaryIndex
from ..utils.logger import get_logger
from .grid import LetterGrid
from .results import ResultSet
from .search import PathSearch


LOGGER = get_logger(__name__)

State = Tuple[LetterGrid, WordSequence]


@dataclass
class ComposerStats:
    states_expanded: int = 0
    states_pruned: int = 0
    duplicate_states: int = 0
    candidates: int = 0


class SequenceComposer:
    """Chain one word per target length, settling the board after each word.

    Stages are driven from an explicit work-list of ``(grid, words)`` states;
    the stage index is ``len(words)``. Grids and word tuples are immutable,
    so sibling branches never share mutable state.
    """

    def __init__(self, dictionary: DictionaryIndex, lengths: Sequence[int]) -> None:
        self.dictionary = dictionary
        self.lengths: Tuple[int, ...] = tuple(lengths)
        # Letters still needed from stage k onwards.
        self._remaining: Tuple[int, ...] = tuple(
            sum(self.lengths[stage:]) for stage in range(len(self.lengths) + 1)
        )
        self.stats = ComposerStats()

    def compose(
        self,
        grid: LetterGrid,
        starts: Optional[Iterable[int]] = None,
        results: Optional[ResultSet] = None,
    ) -> ResultSet:
        """Run every stage from the first and collect complete sequences.

        ``starts`` limits the first word's starting cells (row-major indices);
        later words may start anywhere on the settled board.
        """

        if results is None:
            results = ResultSet()
        first_starts = tuple(starts) if starts is not None else None

        pending: List[State] = [(grid, ())]
        seen: Set[State] = set()
        while pending:
            board, words = pending.pop()
            stage = len(words)
            if stage == len(self.lengths):
                results.insert(words)
                continue

            if board.letter_count() < self._remaining[stage]:
                self.stats.states_pruned += 1
                continue

            self.stats.states_expanded += 1
            seeds = first_starts if stage == 0 else None
            search = PathSearch(self.dictionary, board, self.lengths[stage], seeds)
            for path in search.run():
                self.stats.candidates += 1
                state = (board.apply_word(path), words + (path.word,))
                # Distinct paths spelling the same word often leave the same board.
                if state in seen:
                    self.stats.duplicate_states += 1
                    continue
                seen.add(state)
                pending.append(state)

        LOGGER.debug(
            "Composition finished: %d sequences, %d states expanded, %d pruned, %d duplicates",
            len(results),
            self.stats.states_expanded,
            self.stats.states_pruned,
            self.stats.duplicate_states,
        )
        return results
