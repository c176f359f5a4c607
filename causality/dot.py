# causality/dot.py

"""
Dot
===

Immutable identifier of one event: "the Nth event originated at replica R".
A dot is a snapshot taken from a version vector, never a live view of it.
Dots are compared against vectors or against dots of the same replica;
only vectors merge.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .version_vector import VersionVector


@dataclass(frozen=True, slots=True)
class Dot:
    replica: str
    counter: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.replica, str):
            raise ValueError(f"Replica id must be a string, got {type(self.replica).__name__}")
        if isinstance(self.counter, bool) or not isinstance(self.counter, int):
            raise ValueError(f"Dot counter must be an integer, got {self.counter!r}")
        if self.counter < 0:
            raise ValueError(f"Dot counter must be non-negative, got {self.counter}")

    def descends_vv(self, vector: VersionVector) -> bool:
        """True if this event is at least as advanced, for its replica, as `vector`."""
        return self.counter >= vector.count(self.replica)

    def descends(self, other: Dot) -> bool:
        """
        True if both dots belong to the same replica and self is not older.

        Dots of different replicas are never comparable; the answer is
        always False for them.
        """
        return self.replica == other.replica and self.counter >= other.counter

    def next(self) -> Dot:
        """Dot of the following event at the same replica."""
        return Dot(self.replica, self.counter + 1)

    def to_vector(self) -> VersionVector:
        from .version_vector import VersionVector

        return VersionVector({self.replica: self.counter})

    # delegate ordering to dot descent
    def __ge__(self, other: object) -> bool:
        return isinstance(other, Dot) and self.descends(other)

    def __le__(self, other: object) -> bool:
        return isinstance(other, Dot) and other.descends(self)

    def __gt__(self, other: object) -> bool:
        return isinstance(other, Dot) and self.descends(other) and self != other

    def __lt__(self, other: object) -> bool:
        return isinstance(other, Dot) and other.descends(self) and self != other

    def __str__(self) -> str:
        return f"{self.replica}:{self.counter}"
