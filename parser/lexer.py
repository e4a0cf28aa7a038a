# parser/lexer.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Lexical analyzer for logical expression tokenization using SLY

"""Lexical analyzer for propositional logic expressions.

This module implements tokenization of logical expressions, breaking input
strings into tokens for parser consumption. The lexer accepts both symbolic
and textual spellings of every connective; textual keywords and the Boolean
constants are case-insensitive.

Supported Tokens:
- NOT: ! ~ ¬ NOT
- AND: & && ∧ AND
- OR: | || ∨ OR
- XOR: ^ ⊕ XOR
- XNOR: XNOR
- IMPLIES: -> => → IMPLIES
- IFF: <-> <=> ↔ IFF EQUIV
- TRUE, FALSE: true false (any case)
- ID: [A-Za-z_][A-Za-z0-9_]* that is not a keyword
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from .exceptions import UnexpectedToken
from utils.logger import get_logger

# Textual spellings, matched after upper-casing the identifier
KEYWORDS = {
    "NOT": "NOT",
    "AND": "AND",
    "OR": "OR",
    "XOR": "XOR",
    "XNOR": "XNOR",
    "IMPLIES": "IMPLIES",
    "IFF": "IFF",
    "EQUIV": "IFF",
    "TRUE": "TRUE",
    "FALSE": "FALSE",
}


class LogicLexer(Lexer):
    """SLY-based lexer for logical expression tokenization.

    Transforms input strings into token sequences for parsing. Reserved
    words are recognised through the identifier rule so that identifiers
    which merely contain a keyword (``ANDROID``, ``truth``) stay identifiers.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "TRUE",
        "FALSE",
        "ID",
        "NOT",
        "AND",
        "OR",
        "XOR",
        "XNOR",
        "IMPLIES",
        "IFF",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # Longer operators first: '<->' must win over '->'
    IFF = r"<->|<=>|↔"
    IMPLIES = r"->|=>|→"
    AND = r"&&|&|∧"
    OR = r"\|\||\||∨"
    XOR = r"\^|⊕"
    NOT = r"!|~|¬"
    LPAREN = r"\("
    RPAREN = r"\)"

    @_(r"[A-Za-z_][A-Za-z0-9_]*")
    def ID(self, t):
        t.type = KEYWORDS.get(t.value.upper(), "ID")
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            UnexpectedToken: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise UnexpectedToken(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}",
            position=error_pos,
        )
