"""Deduplicated collection of solved word sequences."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Set

from ..core.models import WordSequence


class ResultSet:
    """Set of word sequences compared word for word, in order.

    Sequences are stored as tuples: the tuple hash only picks the bucket and
    tuple equality does the exact ordered comparison, so two sequences that
    merely hash alike are never conflated.
    """

    def __init__(self, sequences: Iterable[Sequence[str]] = ()) -> None:
        self._sequences: Set[WordSequence] = set()
        for sequence in sequences:
            self.insert(sequence)

    def insert(self, sequence: Sequence[str]) -> bool:
        """Add ``sequence``; return ``False`` when an equal one was already present."""

        key = tuple(sequence)
        if key in self._sequences:
            return False
        self._sequences.add(key)
        return True

    def merge(self, other: "ResultSet") -> int:
        """Fold ``other`` into this set and return how many sequences were new."""

        added = 0
        for sequence in other:
            if self.insert(sequence):
                added += 1
        return added

    def enumerate(self) -> Iterator[WordSequence]:
        """Yield the stored sequences in no particular order."""

        return iter(self._sequences)

    def sorted(self) -> List[WordSequence]:
        return sorted(self._sequences)

    def __iter__(self) -> Iterator[WordSequence]:
        return self.enumerate()

    def __len__(self) -> int:
        return len(self._sequences)

    def __contains__(self, sequence: object) -> bool:
        if isinstance(sequence, (list, tuple)):
            return tuple(sequence) in self._sequences
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultSet):
            return NotImplemented
        return self._sequences == other._sequences

    def __repr__(self) -> str:
        return f"ResultSet({self.sorted()!r})"
