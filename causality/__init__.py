# causality/__init__.py

"""
Causality tracking for replicated, eventually-consistent data:
version vectors, dots, and the causal relation between histories.
These types are pure values; `ReplicaClock` is the only stateful
piece and exists for callers that share one clock between threads.
"""

from .dot import Dot
from .relation import Causality
from .version_vector import VersionVector, merge_all
from .replica_clock import ReplicaClock

__all__ = [
    "Dot",
    "Causality",
    "VersionVector",
    "merge_all",
    "ReplicaClock",
]
