# core/frequency.py
"""
Frequency table and top-K ranking.

Counting is partition-then-merge: each batch is counted into its own
``Counter`` (possibly in a worker process) and the partial tables are merged
once every batch has finished. Ranking orders by count descending and breaks
ties by ascending value, so the output does not depend on batching or on
the number of workers.
"""
from __future__ import annotations
import heapq
from collections import Counter
from concurrent.futures import Executor
from typing import Iterable, List, Optional, Sequence, Tuple

from core.analysis_types import Corpus, FrequencyEntry
from core.exceptions import InsufficientDataError
from utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TOP_K = 10
DEFAULT_BATCH_SIZE = 10_000


def count_values(values: Iterable[int]) -> Counter:
    """Count table for one partition."""
    return Counter(values)


def partition(corpus: Sequence[int], batch_size: int) -> List[Sequence[int]]:
    if batch_size < 1:
        raise ValueError(f"batch_size must be >= 1, got {batch_size}")
    return [corpus[i:i + batch_size] for i in range(0, len(corpus), batch_size)]


def build_frequency_table(
    corpus: Corpus,
    executor: Optional[Executor] = None,
    batch_size: int = DEFAULT_BATCH_SIZE,
) -> Counter:
    """
    Build the value -> count table for ``corpus``.

    With an executor each batch is counted as a separate task; otherwise the
    batches are counted inline. Either way the merge happens only after all
    batches are counted.
    """
    batches = partition(corpus, batch_size)
    if executor is None:
        partials = [count_values(b) for b in batches]
    else:
        partials = list(executor.map(count_values, batches))

    table: Counter = Counter()
    for partial in partials:
        table.update(partial)
    logger.debug("Frequency table: %d values, %d distinct", len(corpus), len(table))
    return table


def top_k(table: Counter, k: int = DEFAULT_TOP_K, strict: bool = False) -> Tuple[FrequencyEntry, ...]:
    """
    Return the ``k`` most frequent entries of ``table``.

    Entries are ordered by count descending, then value ascending. If the
    table holds fewer than ``k`` distinct values all of them are returned,
    unless ``strict`` is set, in which case InsufficientDataError is raised.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    if len(table) < k:
        if strict:
            raise InsufficientDataError(
                f"Requested top {k} values but the corpus only has {len(table)} distinct values"
            )
        logger.debug("Short ranking: %d distinct values for top %d", len(table), k)

    best = heapq.nsmallest(k, table.items(), key=lambda item: (-item[1], item[0]))
    return tuple(FrequencyEntry(value=v, count=c) for v, c in best)


class FrequencyRanker:
    """Ranks corpus values by occurrence count."""

    def __init__(self, k: int = DEFAULT_TOP_K, batch_size: int = DEFAULT_BATCH_SIZE, strict: bool = False):
        if k < 1:
            raise ValueError(f"k must be >= 1, got {k}")
        self.k = k
        self.batch_size = batch_size
        self.strict = strict

    def count(self, corpus: Corpus, executor: Optional[Executor] = None) -> Counter:
        return build_frequency_table(corpus, executor=executor, batch_size=self.batch_size)

    def select(self, table: Counter) -> Tuple[FrequencyEntry, ...]:
        return top_k(table, self.k, strict=self.strict)

    def rank(self, corpus: Corpus, executor: Optional[Executor] = None) -> Tuple[FrequencyEntry, ...]:
        return self.select(self.count(corpus, executor=executor))
