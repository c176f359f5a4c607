# notation/formatter.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# Canonical text rendering for vectors and dots

import re

from causality import Dot, VersionVector

_BARE_ID = re.compile(r"[A-Za-z_][A-Za-z0-9_.\-]*|\d+")


def format_replica(replica: str) -> str:
    """Render a replica id, quoting it unless it lexes as a bare ID or NUMBER."""
    if _BARE_ID.fullmatch(replica):
        return replica
    escaped = replica.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_dot(dot: Dot) -> str:
    return f"{format_replica(dot.replica)}:{dot.counter}"


def format_vector(vector: VersionVector) -> str:
    """Canonical notation: replicas sorted, one space after each comma."""
    entries = ", ".join(
        f"{format_replica(r)}:{c}" for r, c in sorted(vector.to_dict().items())
    )
    return f"{{{entries}}}"
