# inout/corpus_io.py
"""
Plain-text corpus storage.

A corpus file is a run of decimal tokens, each followed by a single space
(the last token included). The writer stops as soon as the running byte
count reaches the requested size, so files overshoot the target by at most
one token. The reader parses token chunks concurrently and rejects the
whole file on the first malformed token.
"""
import re
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from core.analysis_types import allow_long_int_strings
from core.exceptions import CorpusFormatError, CorpusIOError
from core.generator import generate_values
from utils.logging_config import get_logger

logger = get_logger(__name__)

# Runs again in every worker process that imports this module to parse tokens.
allow_long_int_strings()

SEPARATOR = " "
TOKEN_RE = re.compile(r"[0-9]+")
DEFAULT_CHUNK_SIZE = 100_000

# Upper bound on values generated per round while filling a file.
MAX_ROUND = 200_000

PathLike = Union[str, Path]


@dataclass(frozen=True)
class WriteSummary:
    path: Path
    values_written: int
    bytes_written: int


def format_tokens(values: Iterable[int]) -> Iterable[str]:
    """Serialize values as separator-terminated tokens."""
    for value in values:
        if value < 0:
            raise CorpusFormatError(f"Negative values cannot be stored: {value}")
        yield f"{value}{SEPARATOR}"


def parse_tokens(tokens: Sequence[str], offset: int = 0) -> List[int]:
    """
    Parse decimal tokens into ints.

    ``offset`` is the index of ``tokens[0]`` in the whole file and is only
    used in error messages.
    """
    values = []
    for i, token in enumerate(tokens):
        if not TOKEN_RE.fullmatch(token):
            raise CorpusFormatError(f"Malformed token {token!r} at position {offset + i}")
        values.append(int(token))
    return values


def split_tokens(text: str) -> List[str]:
    """
    Split corpus text into tokens; the trailing separator of each line is dropped.

    Only "\\n" (optionally preceded by "\\r") ends a line; any other control
    character stays inside its token and fails parsing.
    """
    tokens: List[str] = []
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        parts = line.split(SEPARATOR)
        while parts and parts[-1] == "":
            parts.pop()
        tokens.extend(parts)
    return tokens


def write_corpus(
    path: PathLike,
    size_bytes: int,
    seed: Optional[int] = None,
    workers: int = 1,
) -> WriteSummary:
    """
    Fill ``path`` with generated values until at least ``size_bytes`` bytes are written.

    Raises:
        CorpusIOError: If the file cannot be written.
    """
    if size_bytes < 0:
        raise ValueError(f"size_bytes must be non-negative, got {size_bytes}")
    path = Path(path)
    root = np.random.SeedSequence(seed)
    written = 0
    count = 0
    # One pool for every fill round.
    executor = ProcessPoolExecutor(max_workers=workers) if workers > 1 else None

    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            while written < size_bytes:
                # Average token is roughly ten bytes; generate a little more than needed.
                batch = min(MAX_ROUND, (size_bytes - written) // 8 + 1)
                values = generate_values(batch, seed=root.spawn(1)[0], executor=executor)
                for token in format_tokens(values):
                    f.write(token)
                    written += len(token)  # tokens are ASCII
                    count += 1
                    if written >= size_bytes:
                        break
    except OSError as e:
        raise CorpusIOError(f"Failed to write corpus '{path}': {e}")
    finally:
        if executor is not None:
            executor.shutdown()

    logger.info("Wrote %d values (%d bytes) to %s", count, written, path)
    return WriteSummary(path=path, values_written=count, bytes_written=written)


def read_corpus(path: PathLike, workers: int = 1, chunk_size: int = DEFAULT_CHUNK_SIZE) -> List[int]:
    """
    Read a corpus file and return its values.

    Raises:
        CorpusIOError: If the file cannot be read.
        CorpusFormatError: If any token is not a decimal integer.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusIOError(f"Failed to read corpus '{path}': {e}")

    tokens = split_tokens(text)
    chunks: List[Tuple[List[str], int]] = [
        (tokens[i:i + chunk_size], i) for i in range(0, len(tokens), chunk_size)
    ]

    if workers <= 1 or len(chunks) <= 1:
        parsed = [parse_tokens(chunk, offset) for chunk, offset in chunks]
    else:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            parsed = list(executor.map(parse_tokens, *zip(*chunks)))

    values: List[int] = []
    for part in parsed:
        values.extend(part)
    logger.info("Read %d values from %s", len(values), path)
    return values
