# causality/relation.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# Causal relation between two version vectors

from enum import Enum, auto


class Causality(Enum):
    """Outcome of comparing one causal history against another.

    Every pair of version vectors falls in exactly one of these classes.
    The relation is read from the left operand's point of view:
    ``a.compare(b) is Causality.BEFORE`` means `a` happened before `b`.

    Values:
        EQUAL: Both histories contain exactly the same events
        BEFORE: The left history is strictly contained in the right one
        AFTER: The left history strictly contains the right one
        CONCURRENT: Neither contains the other (divergent updates)
    """

    EQUAL = auto()
    BEFORE = auto()
    AFTER = auto()
    CONCURRENT = auto()

    def __str__(self) -> str:
        return self.name

    def is_conflict(self) -> bool:
        """True only for concurrent histories, the case that needs resolving."""
        return self is Causality.CONCURRENT

    def inverse(self) -> "Causality":
        """Relation seen from the other operand's side."""
        if self is Causality.BEFORE:
            return Causality.AFTER
        if self is Causality.AFTER:
            return Causality.BEFORE
        return self
