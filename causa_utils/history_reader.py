# causa_utils/history_reader.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# CSV reader for named version vector snapshots

import csv
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from causality import VersionVector
from notation import NotationError, parse_counter, parse_vector
from causa_utils.logger import get_logger

REPLICAS_DIRECTIVE = "# replicas:"


class HistoryFormatError(Exception):
    """Exception raised when history files contain invalid format or data."""

    pass


@dataclass(frozen=True, slots=True)
class Snapshot:
    """A version vector observed somewhere, under a caller-chosen name."""

    name: str
    vector: VersionVector

    def __str__(self) -> str:
        return f"{self.name}{self.vector}"


def read_history(filepath: str) -> Iterator[Snapshot]:
    """Read snapshots from a CSV history file.

    Expected CSV format:
        # replicas: A|B|C
        name,vector
        s1,A:2;B:1
        s2,"{A:1, B:2}"

    The directive line is optional. Vector cells use either the
    ``A:1;B:2`` shorthand or full vector notation.

    Args:
        filepath: Path to the CSV history file

    Yields:
        Snapshot: Parsed snapshots in file order

    Raises:
        HistoryFormatError: If file format is invalid or a row cannot be parsed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise HistoryFormatError(f"History file not found: {filepath}")

    logger.debug(f"Reading history file: {filepath}")

    try:
        with open(path, "r", newline="", encoding="utf-8") as file:
            first_row = 2
            first_line = file.readline().strip()
            if first_line.startswith(REPLICAS_DIRECTIVE):
                first_row = 3
            else:
                file.seek(0)

            reader = csv.DictReader(file)

            required_headers = {"name", "vector"}
            if not required_headers.issubset(set(reader.fieldnames or [])):
                missing = required_headers - set(reader.fieldnames or [])
                raise HistoryFormatError(f"Missing required headers: {missing}")

            for row_num, row in enumerate(reader, start=first_row):
                try:
                    snapshot = _parse_snapshot_row(row)
                except (NotationError, ValueError) as e:
                    raise HistoryFormatError(f"Error parsing row {row_num}: {e}") from e
                logger.debug(f"Parsed snapshot {snapshot.name} from row {row_num}")
                yield snapshot

    except OSError as e:
        raise HistoryFormatError(f"Cannot open history file: {filepath}") from e
    except csv.Error as e:
        raise HistoryFormatError(f"Error reading history file: {e}") from e


def get_declared_replicas(filepath: str) -> List[str]:
    """Extract the replica list from the optional ``# replicas:`` directive.

    Returns:
        List of replica ids, empty if no directive found
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        return []

    with open(path, "r", encoding="utf-8") as file:
        first_line = file.readline().strip()

    if first_line.startswith(REPLICAS_DIRECTIVE):
        replicas_str = first_line[len(REPLICAS_DIRECTIVE) :].strip()
        replicas = [r.strip() for r in replicas_str.split("|") if r.strip()]
        logger.debug(f"Found replicas directive: {replicas}")
        return replicas

    return []


def validate_history_file(filepath: str) -> List[Snapshot]:
    """Validate a history file by parsing every snapshot in it.

    Failures propagate to the caller, which reports them once.

    Returns:
        Every snapshot in file order

    Raises:
        HistoryFormatError: If validation fails
    """
    logger = get_logger()
    logger.debug(f"Validating history file: {filepath}")

    snapshots = list(read_history(filepath))
    logger.validation_result(f"History validation successful: {len(snapshots)} snapshots")
    return snapshots


def find_conflicts(snapshots: Iterable[Snapshot]) -> List[Tuple[Snapshot, Snapshot]]:
    """Return every pair of snapshots whose vectors are concurrent, in file order."""
    return [
        (left, right)
        for left, right in combinations(list(snapshots), 2)
        if left.vector.concurrent(right.vector)
    ]


def _parse_snapshot_row(row: dict) -> Snapshot:
    name = (row["name"] or "").strip()
    if not name:
        raise ValueError("Empty snapshot name")
    return Snapshot(name=name, vector=_parse_vector_cell(row["vector"] or ""))


def _parse_vector_cell(cell: str) -> VersionVector:
    """Parse a vector cell in either shorthand or full notation.

    Args:
        cell: String like 'A:1;B:2' or '{A:1, B:2}'

    Raises:
        NotationError: If full notation or a shorthand counter is malformed
        ValueError: If a shorthand component is malformed
    """
    cell = cell.strip()
    if cell.startswith("{"):
        return parse_vector(cell)

    counters = {}
    for component in cell.split(";"):
        component = component.strip()
        if not component:
            continue

        replica, sep, count_str = component.rpartition(":")
        replica = replica.strip()
        if not sep or not replica:
            raise ValueError(f"Invalid vector component: {component}")
        if replica in counters:
            raise ValueError(f"Duplicate replica '{replica}' in vector")
        counters[replica] = parse_counter(replica, count_str.strip())

    return VersionVector(counters)
