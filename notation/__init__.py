# notation/__init__.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# Text notation for version vectors and dots

"""Textual notation for version vectors and dots.

The core types define no wire format. This package gives tools, logs and
history files one: a vector is written as a braced list of
``replica:counter`` entries, a dot as a single entry.

Example:
    >>> from notation import parse_vector, parse_dot
    >>> v = parse_vector("{A:2, B:1}")
    >>> v.descends_dot(parse_dot("A:1"))
    True

Replica ids that are not plain identifiers or digit strings are written
in double quotes, e.g. ``{"10.0.0.1:7000":3}``.
"""

from typing import Union

from .exceptions import NotationError
from .grammar import _NotationParser, MAX_COUNTER, parse_counter
from .formatter import format_dot, format_replica, format_vector
from causality import Dot, VersionVector
from causa_utils.logger import get_logger


def parse(source: str) -> Union[VersionVector, Dot]:
    """Parse notation text into a `VersionVector` or a `Dot`.

    Uses a fresh parser instance for each call.

    Raises:
        NotationError: Text is malformed
    """
    return _NotationParser().parse(source)


def parse_vector(source: str) -> VersionVector:
    """Parse text that must denote a version vector.

    Raises:
        NotationError: Text is malformed or denotes a dot
    """
    result = parse(source)
    if not isinstance(result, VersionVector):
        get_logger().debug(f"Expected a vector, got dot {result}")
        raise NotationError(f"Expected a version vector, got dot '{source.strip()}'")
    return result


def parse_dot(source: str) -> Dot:
    """Parse text that must denote a dot.

    Raises:
        NotationError: Text is malformed or denotes a vector
    """
    result = parse(source)
    if not isinstance(result, Dot):
        get_logger().debug(f"Expected a dot, got vector {result}")
        raise NotationError(f"Expected a dot, got vector '{source.strip()}'")
    return result


__all__ = [
    "parse",
    "parse_vector",
    "parse_dot",
    "format_vector",
    "format_dot",
    "format_replica",
    "NotationError",
    "MAX_COUNTER",
    "parse_counter",
]
