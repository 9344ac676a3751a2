"""
Command-line interface for embedding_distance.

Usage:
    embedding-distance -s 'i love bananas,good morning!,muffins,bananas' \\
        -p openai -e text-embedding-3-small -d l2

Prints every pair of input strings, most similar first.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from embedding_distance import __version__
from embedding_distance.constants import (
    DEFAULT_DISTANCE_METRIC,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_PROVIDER,
    OUTPUT_FORMATS,
    SUPPORTED_PROVIDERS,
)
from embedding_distance.embeddings.openai_client import suppress_http_logging
from embedding_distance.errors import EmbeddingDistanceError
from embedding_distance.logging import setup_structured_logging
from embedding_distance.pipeline import compute_distances
from embedding_distance.similarity.distance import available_metrics
from embedding_distance.similarity.ranking import RankedPair


def parse_strings(values: Sequence[str]) -> List[str]:
    """
    Flatten comma-delimited --strings values into one list.

    Order and duplicates are preserved.
    """
    strings: List[str] = []
    for value in values:
        strings.extend(value.split(","))
    return strings


def format_text(pairs: Sequence[RankedPair]) -> str:
    """Render pairs as "distance: \\n* first\\n* second" blocks, one per pair."""
    return "\n".join(f"{pair.distance}: \n* {pair.first}\n* {pair.second}" for pair in pairs)


def format_json(pairs: Sequence[RankedPair]) -> str:
    """Render pairs as a JSON array of {first, second, distance} objects."""
    return json.dumps(
        [{"first": p.first, "second": p.second, "distance": p.distance} for p in pairs],
        indent=2,
        ensure_ascii=False,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="embedding-distance",
        description="Calculates distance between multiple strings via their embeddings",
    )
    parser.add_argument(
        "-s",
        "--strings",
        action="append",
        required=True,
        help="Comma-separated strings to compare (may be repeated)",
    )
    parser.add_argument(
        "-p",
        "--provider",
        type=str.lower,
        choices=SUPPORTED_PROVIDERS,
        default=DEFAULT_PROVIDER,
        help=f"Embedding provider (default: {DEFAULT_PROVIDER})",
    )
    parser.add_argument(
        "-e",
        "--embedding-model",
        required=True,
        help="Embedding model name, e.g. text-embedding-3-small",
    )
    parser.add_argument(
        "-d",
        "--distance-metric",
        type=str.lower,
        choices=available_metrics(),
        default=DEFAULT_DISTANCE_METRIC,
        help=f"Distance metric (default: {DEFAULT_DISTANCE_METRIC})",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    parser.add_argument(
        "--max-workers",
        type=int,
        default=None,
        help="Concurrent embedding requests (default: EMBEDDING_MAX_WORKERS or 8)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the embedding progress bar",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Also write logs to a timestamped file in this directory",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Write the log file as JSON lines (with --log-dir)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the embedding-distance command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.max_workers is not None and args.max_workers < 1:
        parser.error("--max-workers must be >= 1")

    log = setup_structured_logging(
        "embedding_distance",
        level=logging.DEBUG if args.verbose else logging.INFO,
        log_dir=args.log_dir,
        json_output=args.json_logs,
    )
    suppress_http_logging()

    strings = parse_strings(args.strings)

    try:
        pairs = compute_distances(
            strings,
            provider=args.provider,
            model=args.embedding_model,
            metric=args.distance_metric,
            max_workers=args.max_workers,
            show_progress=not args.no_progress,
        )
    except EmbeddingDistanceError as e:
        log.error(f"✗ {e}")
        return 1

    if args.format == "json":
        print(format_json(pairs))
    elif pairs:
        print(format_text(pairs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
