#!/usr/bin/env python
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from core.exceptions import CorpusIOError, NumericAnalysisError
from evaluation.analysis import analyze
from inout.config import AnalysisConfig, load_config
from inout.corpus_io import read_corpus, write_corpus
from utils.logging_config import get_logger, log_timing, setup_logging
from utils.report import format_report

logger = get_logger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Write a file of random numbers, read it back and analyze it."
    )
    parser.add_argument("file", help="Path of the corpus file to write and analyze.")
    parser.add_argument("-s", "--size", type=int, default=None, help="File size in MB (default 64).")
    parser.add_argument("--config", type=Path, default=None, help="Optional YAML run configuration.")
    parser.add_argument("--top", type=int, default=None, help="Number of most frequent values to report.")
    parser.add_argument("--rounds", type=int, default=None, help="Miller-Rabin rounds for large values.")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes (default: CPU count).")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible corpus generation.")
    parser.add_argument("--no-generate", action="store_true", help="Analyze an existing file without rewriting it.")
    parser.add_argument("--dump", type=Path, default=None, help="Path to dump the analysis result as YAML.")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """
    Generate (unless --no-generate), read and analyze a random-number corpus.

    Returns the process exit status: 0 on success, 1 on a fatal error.
    """
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = load_config(args.config) if args.config else AnalysisConfig()
        config = config.merged(
            size_mb=args.size, top_k=args.top, rounds=args.rounds,
            workers=args.workers, seed=args.seed,
        )
    except NumericAnalysisError as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    if config.log_file:
        setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=config.log_file)
    workers = config.workers or os.cpu_count() or 1
    timings: Dict[str, float] = {}

    try:
        if not args.no_generate:
            write_corpus(args.file, config.size_bytes, seed=config.seed, workers=workers)
        with log_timing(logger, "read the file", timings):
            corpus = read_corpus(args.file, workers=workers)
        with log_timing(logger, "analyze the file", timings):
            result = analyze(corpus, config)
        if args.dump:
            try:
                with open(args.dump, "w") as f:
                    yaml.safe_dump(result.to_dict(), f, sort_keys=False)
            except OSError as e:
                raise CorpusIOError(f"Failed to dump analysis to '{args.dump}': {e}")
            logger.info("Analysis result dumped to %s", args.dump)
    except NumericAnalysisError as e:
        logger.error("Analysis failed: %s", e)
        return 1

    print(format_report(result, timings, k=config.top_k))
    return 0

if __name__ == "__main__":
    sys.exit(main())
