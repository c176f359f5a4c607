# notation/lexer.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# Lexical analyzer for vector and dot notation using SLY

"""Lexical analyzer for version vector and dot text.

Supported Tokens:
- Punctuation: {, }, :, ,
- STRING: double-quoted replica id with \\" and \\\\ escapes
- ID: bare replica id such as node_1, dc-east.r2
- NUMBER: decimal digits (counters, or numeric replica ids)
- Whitespace: ignored during tokenization
"""

import re

from sly import Lexer
from causa_utils.logger import get_logger

_ESCAPE = re.compile(r"\\(.)")


class NotationLexer(Lexer):
    """SLY-based lexer for vector notation such as ``{A:2, "node 7":1}``."""

    tokens = {
        "STRING",
        "ID",
        "NUMBER",
        "LBRACE",
        "RBRACE",
        "COLON",
        "COMMA",
    }

    ignore = " \t\r\n"

    LBRACE = r"\{"
    RBRACE = r"\}"
    COLON = r":"
    COMMA = r","

    ID = r"[A-Za-z_][A-Za-z0-9_.\-]*"

    # kept as text so numeric replica ids like "007" survive
    NUMBER = r"[0-9]+"

    @_(r'"(?:[^"\\]|\\.)*"')
    def STRING(self, t):
        t.value = _ESCAPE.sub(r"\1", t.value[1:-1])
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
