# causality/replica_clock.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# Thread-safe holder for the clock of one local replica

"""Shared clock of a single replica.

Version vectors and dots are immutable values with no internal locking.
When several threads of one process stamp events or merge remote state
into the same clock, they need one place that owns the current vector.
`ReplicaClock` is that place: every update computes the new vector outside
any shared state and only swaps the stored reference while holding a lock,
so readers always see a complete snapshot.
"""

import threading
from typing import Optional

from .dot import Dot
from .version_vector import VersionVector
from causa_utils.logger import get_logger


class ReplicaClock:
    """Copy-on-write clock for the local replica `replica_id`.

    Args:
        replica_id: Identifier stamped into every dot produced by `tick`
        vector: Initial knowledge, empty by default
    """

    def __init__(self, replica_id: str, vector: Optional[VersionVector] = None):
        self.replica_id = replica_id
        self._vector = vector if vector is not None else VersionVector()
        self._lock = threading.Lock()

    @property
    def vector(self) -> VersionVector:
        """Current snapshot; safe to hand out since vectors never change."""
        return self._vector

    def tick(self) -> Dot:
        """Record one local event and return the dot identifying it."""
        with self._lock:
            self._vector = self._vector.increment(self.replica_id)
            dot = self._vector.get_dot(self.replica_id)
        get_logger().debug(f"{self.replica_id} stamped event {dot}")
        return dot

    def observe(self, remote: VersionVector) -> VersionVector:
        """Merge knowledge received from another replica.

        Returns:
            The merged vector now held by this clock
        """
        with self._lock:
            self._vector = self._vector.merge(remote)
            merged = self._vector
        get_logger().debug(f"{self.replica_id} merged {remote} -> {merged}")
        return merged

    def has_seen(self, dot: Dot) -> bool:
        """True if the event `dot` is already part of this replica's history."""
        return self._vector.descends_dot(dot)

    def __repr__(self) -> str:
        return f"ReplicaClock({self.replica_id!r}, {self._vector})"
