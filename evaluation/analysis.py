# evaluation/analysis.py
import os
import time
from concurrent.futures import ProcessPoolExecutor
from typing import Optional, Sequence, Tuple

from core.analysis_types import AnalysisResult, Corpus
from core.frequency import DEFAULT_BATCH_SIZE, DEFAULT_TOP_K, FrequencyRanker, partition
from core.narcissism import is_narcissistic
from core.primality import DEFAULT_ROUNDS, is_probable_prime
from inout.config import AnalysisConfig
from utils.logging_config import get_logger

logger = get_logger(__name__)

def classify_batch(batch: Sequence[int], rounds: int) -> Tuple[int, int]:
    """Return (probable primes, narcissistic numbers) counted over one batch."""
    primes = 0
    narcissistic = 0
    for value in batch:
        if is_probable_prime(value, rounds):
            primes += 1
        if is_narcissistic(value):
            narcissistic += 1
    return primes, narcissistic

class AnalysisCoordinator:
    """
    Fans a corpus out over a process pool and assembles an AnalysisResult.

    Classification runs per batch and returns local counts that are summed
    here; the frequency ranking shares the same pool. With a single worker
    everything runs in the calling process.
    """

    def __init__(
        self,
        workers: Optional[int] = None,
        rounds: int = DEFAULT_ROUNDS,
        top_k: int = DEFAULT_TOP_K,
        batch_size: int = DEFAULT_BATCH_SIZE,
        strict: bool = False,
    ):
        if rounds < 1:
            raise ValueError(f"rounds must be >= 1, got {rounds}")
        self.workers = workers or os.cpu_count() or 1
        self.rounds = rounds
        self.batch_size = batch_size
        self.ranker = FrequencyRanker(k=top_k, batch_size=batch_size, strict=strict)

    def analyze(self, corpus: Corpus) -> AnalysisResult:
        values = tuple(corpus)
        batches = partition(values, self.batch_size)
        start_time = time.time()

        if self.workers <= 1 or len(batches) <= 1:
            partials = [classify_batch(b, self.rounds) for b in batches]
            table = self.ranker.count(values)
        else:
            with ProcessPoolExecutor(max_workers=self.workers) as executor:
                futures = [executor.submit(classify_batch, b, self.rounds) for b in batches]
                table = self.ranker.count(values, executor=executor)
                partials = [future.result() for future in futures]

        # Every partial is in; ranking only starts once the table is complete.
        ranking = self.ranker.select(table)
        prime_count = sum(p for p, _ in partials)
        narcissistic_count = sum(n for _, n in partials)
        elapsed = time.time() - start_time

        stats = {
            "corpus_size": len(values),
            "distinct_values": len(table),
            "batches": len(batches),
            "workers": self.workers,
            "elapsed": elapsed,
        }
        logger.info(
            "Analyzed %d values in %.3f s: %d probable primes, %d narcissistic",
            len(values), elapsed, prime_count, narcissistic_count,
        )
        return AnalysisResult(
            prime_count=prime_count,
            narcissistic_count=narcissistic_count,
            top_frequent=ranking,
            stats=stats,
        )

def analyze(corpus: Corpus, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """
    Run the full analysis on ``corpus`` using an AnalysisConfig (defaults if None).
    """
    config = config or AnalysisConfig()
    coordinator = AnalysisCoordinator(
        workers=config.workers,
        rounds=config.rounds,
        top_k=config.top_k,
        batch_size=config.batch_size,
    )
    return coordinator.analyze(corpus)
