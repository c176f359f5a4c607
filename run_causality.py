#!/usr/bin/env python3
# run_causality.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# Command-line interface for comparing, merging and auditing version vectors

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from causality import merge_all
from notation import NotationError, format_vector, parse_dot, parse_vector
from causa_utils.history_reader import (
    HistoryFormatError,
    find_conflicts,
    get_declared_replicas,
    validate_history_file,
)
from causa_utils.logger import configure_logging, get_logger

EXIT_OK = 0
EXIT_HISTORY_ERROR = 1
EXIT_NOTATION_ERROR = 2
EXIT_CONFLICTS = 3


def run_compare(left: str, right: str) -> int:
    """Print the causal relation of `left` relative to `right`."""
    v1 = parse_vector(left)
    v2 = parse_vector(right)
    relation = v1.compare(v2)
    get_logger().relation_result(format_vector(v1), format_vector(v2), str(relation))
    print(relation)
    return EXIT_OK


def run_merge(vectors: List[str]) -> int:
    """Print the join of every given vector."""
    merged = merge_all(parse_vector(text) for text in vectors)
    get_logger().merge_result(len(vectors), format_vector(merged))
    print(format_vector(merged))
    return EXIT_OK


def run_seen(vector_text: str, dot_text: str) -> int:
    """Print whether the vector has already observed the dot."""
    vector = parse_vector(vector_text)
    dot = parse_dot(dot_text)
    seen = vector.descends_dot(dot)
    get_logger().dot_check(format_vector(vector), str(dot), seen)
    print("seen" if seen else "unseen")
    return EXIT_OK


def run_history(history: Path, validate_only: bool) -> int:
    """List every concurrent pair of snapshots in a history file.

    Returns:
        EXIT_CONFLICTS if any pair is concurrent, EXIT_OK otherwise
    """
    logger = get_logger()

    logger.info(f"🔍 Validating history file: {history}")
    snapshots = validate_history_file(str(history))

    if validate_only:
        logger.info("✅ History validation successful. Exiting.")
        return EXIT_OK

    declared = get_declared_replicas(str(history))

    if declared:
        undeclared = set().union(*(s.vector.replicas() for s in snapshots)) - set(declared)
        if undeclared:
            logger.warning(f"Replicas missing from directive: {sorted(undeclared)}")

    conflicts = find_conflicts(snapshots)
    for left, right in conflicts:
        logger.conflict_detected(left.name, right.name)
        print(f"{left.name} ‖ {right.name}: {format_vector(left.vector)} {format_vector(right.vector)}")

    logger.info(f"📊 Snapshots: {len(snapshots)}, concurrent pairs: {len(conflicts)}")
    return EXIT_CONFLICTS if conflicts else EXIT_OK


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Causa version vector toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_causality.py compare "{A:2, B:1}" "{A:1, B:2}"
  python run_causality.py merge "{A:2, B:1}" "{A:1, B:2}"
  python run_causality.py seen "{A:2, B:1}" A:3
  python run_causality.py history snapshots.csv -v

History file format:
  # replicas: A|B
  name,vector
  s1,A:2;B:1
  s2,"{A:1, B:2}"
        """,
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    compare = commands.add_parser("compare", help="Classify VECTOR1 relative to VECTOR2")
    compare.add_argument("left", metavar="VECTOR1")
    compare.add_argument("right", metavar="VECTOR2")

    merge = commands.add_parser("merge", help="Join any number of vectors")
    merge.add_argument("vectors", metavar="VECTOR", nargs="+")

    seen = commands.add_parser("seen", help="Check whether VECTOR has observed DOT")
    seen.add_argument("vector", metavar="VECTOR")
    seen.add_argument("dot", metavar="DOT")

    history = commands.add_parser("history", help="Report concurrent snapshots in a CSV file")
    history.add_argument("file", type=Path, help="Path to CSV history file")
    history.add_argument(
        "--validate-only", action="store_true", help="Only validate history file format"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, non-zero for errors or conflicts)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.command == "compare":
            return run_compare(args.left, args.right)
        if args.command == "merge":
            return run_merge(args.vectors)
        if args.command == "seen":
            return run_seen(args.vector, args.dot)
        return run_history(args.file, args.validate_only)

    except HistoryFormatError as e:
        logger.error(f"History file error: {e}")
        return EXIT_HISTORY_ERROR

    except NotationError as e:
        logger.error(f"Notation error: {e}")
        return EXIT_NOTATION_ERROR


if __name__ == "__main__":
    sys.exit(main())
