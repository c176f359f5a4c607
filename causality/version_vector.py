# causality/version_vector.py

"""
Immutable version vector.

Supports:
  •  Descent (⊒) for happened-before-or-equal checks.
  •  Concurrency detection (‖).
  •  Merge (⊔) to join the knowledge of two replicas.
  •  Dot extraction and dot descent.

A replica that is absent from the vector is indistinguishable from one
whose counter is 0, so zero entries are never stored.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping

from .dot import Dot
from .relation import Causality


@dataclass(frozen=True, slots=True)
class VersionVector:
    counters: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        cleaned: Dict[str, int] = {}
        for replica, count in self.counters.items():
            _check_entry(replica, count)
            if count:
                cleaned[replica] = count
        # private copy behind a read-only view; hash and eq depend on it
        object.__setattr__(self, "counters", MappingProxyType(cleaned))

    @classmethod
    def new(cls) -> VersionVector:
        """Return the empty vector, the starting point of every replica."""
        return cls()

    @classmethod
    def from_dict(cls, data: Mapping[str, int]) -> VersionVector:
        return cls(dict(data))

    def to_dict(self) -> Dict[str, int]:
        """Plain ``replica -> counter`` mapping for serialisation layers."""
        return dict(self.counters)

    def count(self, replica_id: str) -> int:
        """Counter recorded for `replica_id`, 0 if the replica is unknown."""
        return self.counters.get(replica_id, 0)

    def replicas(self) -> FrozenSet[str]:
        return frozenset(self.counters)

    def increment(self, replica_id: str) -> VersionVector:
        """
        Vector after one more local event at `replica_id`.

        Returns a new vector so calls can be chained:
        ``VersionVector().increment("A").increment("B")``.
        """
        counters = dict(self.counters)
        counters[replica_id] = counters.get(replica_id, 0) + 1
        return VersionVector(counters)

    def descends(self, other: VersionVector) -> bool:
        """
        True if self has observed everything `other` has.

        Every replica known to either side is checked; missing entries
        count as 0. Reflexive: ``v.descends(v)`` always holds.
        """
        for replica in _all_replicas(self, other):
            if self.count(replica) < other.count(replica):
                return False
        return True

    def concurrent(self, other: VersionVector) -> bool:
        """
        True if neither vector descends the other.
        """
        return not (self.descends(other) or other.descends(self))

    def compare(self, other: VersionVector) -> Causality:
        """Classify self relative to `other`."""
        ahead = self.descends(other)
        behind = other.descends(self)
        if ahead and behind:
            return Causality.EQUAL
        if ahead:
            return Causality.AFTER
        if behind:
            return Causality.BEFORE
        return Causality.CONCURRENT

    def merge(self, other: VersionVector) -> VersionVector:
        """
        Point-wise maximum (⊔) of two vectors.
        """
        return VersionVector(
            {r: max(self.count(r), other.count(r)) for r in _all_replicas(self, other)}
        )

    def get_dot(self, replica_id: str) -> Dot:
        """Snapshot of the latest event this vector has seen from `replica_id`."""
        return Dot(replica_id, self.count(replica_id))

    def descends_dot(self, dot: Dot) -> bool:
        """True if this vector has already observed `dot` (or a later event of its replica)."""
        return self.count(dot.replica) >= dot.counter

    def __le__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, VersionVector):
            return NotImplemented
        return other.descends(self)

    def __lt__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, VersionVector):
            return NotImplemented
        return other.descends(self) and self.counters != other.counters

    def __ge__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, VersionVector):
            return NotImplemented
        return self.descends(other)

    def __gt__(self, other: object) -> bool:  # type: ignore[override]
        if not isinstance(other, VersionVector):
            return NotImplemented
        return self.descends(other) and self.counters != other.counters

    def __eq__(self, other: object) -> bool:  # type: ignore[override]
        # zero entries are never stored, so equal maps mean equal histories
        if not isinstance(other, VersionVector):
            return NotImplemented
        return self.counters == other.counters

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.counters.items())))

    def __len__(self) -> int:
        return len(self.counters)

    def __str__(self) -> str:
        items = ", ".join(f"{r}:{c}" for r, c in sorted(self.counters.items()))
        return f"{{{items}}}"

    __repr__ = __str__


def merge_all(vectors: Iterable[VersionVector]) -> VersionVector:
    """Join any number of vectors; the empty input yields the empty vector."""
    result = VersionVector()
    for vector in vectors:
        result = result.merge(vector)
    return result


def _all_replicas(*vectors: VersionVector) -> FrozenSet[str]:
    keys = set()
    for vector in vectors:
        keys.update(vector.counters)
    return frozenset(keys)


def _check_entry(replica: object, count: object) -> None:
    if not isinstance(replica, str):
        raise ValueError(f"Replica id must be a string, got {type(replica).__name__}")
    if isinstance(count, bool) or not isinstance(count, int):
        raise ValueError(f"Counter for {replica!r} must be an integer, got {count!r}")
    if count < 0:
        raise ValueError(f"Counter for {replica!r} must be non-negative, got {count}")
