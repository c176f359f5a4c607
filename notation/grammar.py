# notation/grammar.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# LALR(1) grammar and parser for vector and dot notation using SLY

"""Vector and dot grammar implementation using SLY parser generator.

Grammar:
    start   : vector | entry
    vector  : '{' '}' | '{' entries '}'
    entries : entry | entries ',' entry
    entry   : replica ':' NUMBER
    replica : ID | NUMBER | STRING

A lone entry denotes a dot, a braced list of entries a version vector.
"""

import re

from sly import Parser
from .lexer import NotationLexer
from .exceptions import NotationError
from causality import Dot, VersionVector
from causa_utils.logger import get_logger

#: Largest counter representable as a signed 64-bit integer.
MAX_COUNTER = 2**63 - 1

_COUNTER = re.compile(r"[0-9]+")


def parse_counter(replica: str, text: str) -> int:
    """Convert counter text written for `replica` into an int.

    Only ASCII digits are accepted, so signs, underscores and other
    forms `int()` would take are rejected.

    Raises:
        NotationError: Text is not a decimal counter or exceeds MAX_COUNTER
    """
    if not _COUNTER.fullmatch(text):
        raise NotationError(f"Invalid counter '{text}' for replica '{replica}'")
    counter = int(text)
    if counter > MAX_COUNTER:
        raise NotationError(f"Counter {text} for replica '{replica}' exceeds {MAX_COUNTER}")
    return counter


class _NotationParser(Parser):
    """SLY-based LALR(1) parser producing `VersionVector` or `Dot` values."""

    tokens = NotationLexer.tokens

    @_("vector")
    def start(self, p):
        return p.vector

    @_("entry")
    def start(self, p):
        replica, counter = p.entry
        return Dot(replica, counter)

    @_("LBRACE RBRACE")
    def vector(self, p) -> VersionVector:
        return VersionVector()

    @_("LBRACE entries RBRACE")
    def vector(self, p) -> VersionVector:
        counters = {}
        for replica, counter in p.entries:
            if replica in counters:
                raise NotationError(f"Duplicate replica '{replica}' in vector")
            counters[replica] = counter
        return VersionVector(counters)

    @_("entry")
    def entries(self, p):
        return [p.entry]

    @_("entries COMMA entry")
    def entries(self, p):
        return p.entries + [p.entry]

    @_("replica COLON NUMBER")
    def entry(self, p):
        return (p.replica, parse_counter(p.replica, p.NUMBER))

    @_("ID", "NUMBER", "STRING")
    def replica(self, p) -> str:
        return p[0]

    def parse(self, text: str):
        """Parse notation text into a vector or a dot.

        Args:
            text: Notation string to parse

        Returns:
            `VersionVector` for braced input, `Dot` for a single entry

        Raises:
            NotationError: If text is empty or malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing notation: {text}")

        if not text.strip():
            raise NotationError("Input notation is empty.")

        try:
            result = super().parse(NotationLexer().tokenize(text))

            if result is None:
                raise NotationError("Failed to parse notation (syntax error).")

            logger.debug(f"Successfully parsed {type(result).__name__} {result}")
            return result

        except NotationError:
            logger.debug("Notation error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise NotationError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Raises:
            NotationError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of input"

        raise NotationError(error_msg)
