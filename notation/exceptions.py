# notation/exceptions.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# Custom exceptions for vector and dot notation parsing

"""Domain-specific exceptions for the textual vector notation."""


class NotationError(RuntimeError):
    """Exception raised when vector or dot text cannot be parsed.

    Covers illegal characters, syntax errors, duplicate replicas inside
    one vector, counters out of the signed 64-bit range, and text of the
    wrong kind (a dot where a vector was expected or the reverse).
    """

    pass
