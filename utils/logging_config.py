# utils/logging_config.py
import logging
import time
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Set up logging with a console handler and optionally a file handler.

    Args:
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        log_file: Optional path to a file for logging output.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console handler
    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    # Optional file handler
    if log_file:
        fh = logging.FileHandler(log_file)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

def get_logger(name: str, level: int = logging.NOTSET) -> logging.Logger:
    """
    Retrieve a logger with the given name.

    Args:
        name: The name of the logger.
        level: Logging level; NOTSET defers to the root logger set by setup_logging.

    Returns:
        A configured logger.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger

@contextmanager
def log_timing(logger: logging.Logger, label: str, timings: Optional[Dict[str, float]] = None) -> Iterator[None]:
    """
    Log how long the enclosed block took, in milliseconds.

    If ``timings`` is given the elapsed value is also stored under ``label``.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        if timings is not None:
            timings[label] = elapsed_ms
        logger.info("%s took %.1f ms", label, elapsed_ms)
