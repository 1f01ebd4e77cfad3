# core/generator.py
"""
Random value generation for the corpus.

Values are produced by rejection sampling over bit length: a bit length is
drawn uniformly from 0..64, that many uniform random bits form a candidate,
and zero candidates are discarded (with a fresh bit length) until a nonzero
value appears. The result is uniform *within* each bit length but not over
the whole range [1, 2**64 - 1]; small magnitudes are heavily over-represented
compared to a value-uniform draw.
"""
from __future__ import annotations
from concurrent.futures import Executor, ProcessPoolExecutor
from typing import Iterator, List, Optional, Union

import numpy as np

MAX_BITS = 64
MAX_VALUE = (1 << MAX_BITS) - 1

# Values per independently-seeded chunk; keeps output independent of worker count.
GENERATION_CHUNK = 50_000


def generate_value(rng: np.random.Generator) -> int:
    """Return one nonzero random int with at most 64 bits."""
    while True:
        bits = int(rng.integers(0, MAX_BITS + 1))
        # Keep the top `bits` of a 64-bit word; bits == 0 shifts everything out.
        word = int.from_bytes(rng.bytes(8), "little")
        candidate = word >> (MAX_BITS - bits)
        if candidate != 0:
            return candidate


def iter_values(rng: np.random.Generator) -> Iterator[int]:
    """Endless stream of generated values."""
    while True:
        yield generate_value(rng)


def _generate_chunk(seed_seq: np.random.SeedSequence, count: int) -> List[int]:
    rng = np.random.default_rng(seed_seq)
    return [generate_value(rng) for _ in range(count)]


def generate_values(
    count: int,
    seed: Union[int, np.random.SeedSequence, None] = None,
    workers: int = 1,
    executor: Optional[Executor] = None,
) -> List[int]:
    """
    Generate ``count`` values.

    The work is cut into fixed-size chunks, each drawing from its own child
    stream of ``seed``. For a given seed the output is the same whatever
    ``workers`` is; ``seed=None`` draws fresh OS entropy. Callers generating
    repeatedly pass their own ``executor`` so one pool serves every call.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return []

    sizes = [GENERATION_CHUNK] * (count // GENERATION_CHUNK)
    if count % GENERATION_CHUNK:
        sizes.append(count % GENERATION_CHUNK)
    root = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    children = root.spawn(len(sizes))

    if len(sizes) == 1 or (executor is None and workers <= 1):
        chunks = [_generate_chunk(ss, n) for ss, n in zip(children, sizes)]
    elif executor is not None:
        chunks = list(executor.map(_generate_chunk, children, sizes))
    else:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            chunks = list(pool.map(_generate_chunk, children, sizes))

    values: List[int] = []
    for chunk in chunks:
        values.extend(chunk)
    return values
