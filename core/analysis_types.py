# core/analysis_types.py
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Tuple

# A corpus is any ordered sequence of non-negative ints; analysis freezes it to a tuple.
Corpus = Sequence[int]


def allow_long_int_strings() -> None:
    """Lift the int <-> str digit cap (Python 3.11+); corpus values have no length bound."""
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


allow_long_int_strings()


@dataclass(frozen=True)
class FrequencyEntry:
    """
    One row of the frequency ranking.

    Attributes:
        value: The corpus value.
        count: Number of occurrences of ``value`` in the corpus (always >= 1).
    """
    value: int
    count: int


@dataclass(frozen=True)
class AnalysisResult:
    """
    Aggregate outcome of a single analysis pass over a corpus.

    Attributes:
        prime_count: Number of corpus entries that are probable primes.
        narcissistic_count: Number of corpus entries that are narcissistic numbers.
        top_frequent: Up to K entries ordered by count descending, ties by ascending value.
        stats: Bookkeeping for the pass (corpus size, distinct values, workers, elapsed seconds).
    """
    prime_count: int
    narcissistic_count: int
    top_frequent: Tuple[FrequencyEntry, ...]
    stats: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        # Values are stored as strings; YAML/JSON readers may not round-trip 64-bit ints.
        return {
            "prime_count": self.prime_count,
            "narcissistic_count": self.narcissistic_count,
            "top_frequent": [
                {"value": str(e.value), "count": e.count} for e in self.top_frequent
            ],
            "stats": dict(self.stats),
        }

    def to_dataframe(self):
        import pandas as pd
        rows = [
            {"rank": i + 1, "value": str(e.value), "count": e.count}
            for i, e in enumerate(self.top_frequent)
        ]
        return pd.DataFrame(rows, columns=["rank", "value", "count"])
