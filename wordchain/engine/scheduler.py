"""Fan the first search stage out over a fixed pool of workers."""

from __future__ import annotations

import time
from concurrent.futures import Executor, Future, ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from typing import Dict, List, Optional, Sequence

from ..core.constants import ExecutorKind
from ..data.dictionary import DictionaryIndex
from ..utils.logger import get_logger
from .composer import SequenceComposer
from .grid import LetterGrid
from .results import ResultSet


LOGGER = get_logger(__name__)

# Installed once per worker process by the pool initializer.
_PROCESS_DICTIONARY: Optional[DictionaryIndex] = None


def partition(dim: int, worker_count: int) -> List[range]:
    """Split the row-major cell indices ``[0, dim*dim)`` into contiguous ranges.

    Every range holds ``dim*dim // worker_count`` cells except the last, which
    also takes the remainder. Ranges are empty when workers outnumber cells.
    """

    if worker_count < 1:
        raise ValueError(f"worker_count must be positive, got {worker_count}")
    total = dim * dim
    size = total // worker_count
    ranges = [range(i * size, (i + 1) * size) for i in range(worker_count - 1)]
    ranges.append(range((worker_count - 1) * size, total))
    return ranges


def run_partition(
    dictionary: DictionaryIndex,
    grid: LetterGrid,
    lengths: Sequence[int],
    starts: range,
) -> ResultSet:
    """Search every sequence whose first word starts inside ``starts``."""

    return SequenceComposer(dictionary, lengths).compose(grid, starts)


def _init_process_worker(dictionary: DictionaryIndex) -> None:
    global _PROCESS_DICTIONARY
    _PROCESS_DICTIONARY = dictionary


def _run_partition_in_process(grid: LetterGrid, lengths: Sequence[int], starts: range) -> ResultSet:
    if _PROCESS_DICTIONARY is None:
        raise RuntimeError("Worker process started without a dictionary")
    return run_partition(_PROCESS_DICTIONARY, grid, lengths, starts)


class Scheduler:
    """Run one composer per partition and merge their private result sets.

    Workers never share a sink: each returns its own :class:`ResultSet`, and
    the merge happens sequentially, in partition order, only after the pool
    has joined.
    """

    def __init__(
        self,
        dictionary: DictionaryIndex,
        worker_count: int = 1,
        executor: ExecutorKind = ExecutorKind.THREAD,
    ) -> None:
        if worker_count < 1:
            raise ValueError(f"worker_count must be positive, got {worker_count}")
        self.dictionary = dictionary
        self.worker_count = worker_count
        self.executor = ExecutorKind(executor)

    def run(self, grid: LetterGrid, lengths: Sequence[int]) -> ResultSet:
        ranges = partition(grid.dim, self.worker_count)
        if self.worker_count == 1:
            LOGGER.debug("Single worker: searching inline")
            return run_partition(self.dictionary, grid, lengths, ranges[0])

        LOGGER.info(
            "Searching with %d %s workers over %d cells",
            self.worker_count,
            self.executor.value,
            grid.dim * grid.dim,
        )
        futures: List[Future] = []
        with self._make_pool() as pool:
            started: Dict[Future, float] = {}
            for starts in ranges:
                if self.executor == ExecutorKind.PROCESS:
                    future = pool.submit(_run_partition_in_process, grid, lengths, starts)
                else:
                    future = pool.submit(run_partition, self.dictionary, grid, lengths, starts)
                futures.append(future)
                started[future] = time.perf_counter()

            for future in as_completed(futures):
                worker_id = futures.index(future)
                if future.exception() is None:
                    LOGGER.debug(
                        "Worker %d finished cells [%d, %d): %d sequences in %.3fs",
                        worker_id,
                        ranges[worker_id].start,
                        ranges[worker_id].stop,
                        len(future.result()),
                        time.perf_counter() - started[future],
                    )

        merged = ResultSet()
        for future in futures:
            merged.merge(future.result())
        return merged

    def _make_pool(self) -> Executor:
        if self.executor == ExecutorKind.PROCESS:
            return ProcessPoolExecutor(
                max_workers=self.worker_count,
                initializer=_init_process_worker,
                initargs=(self.dictionary,),
            )
        return ThreadPoolExecutor(max_workers=self.worker_count)
