# parser/__init__.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Expression parsing components for propositional logic

"""Propositional expression parsing for the rewrite engine.

The parsing pipeline converts textual expressions into immutable abstract
syntax trees that the rewrite engine simplifies. Both symbolic (``!``, ``&``,
``|``) and textual (``NOT``, ``AND``, ``OR``) spellings are accepted; the full
token table lives in parser/lexer.py and the grammar in parser/grammar.py.

Core Functions:
    parse: Converts expression strings into Abstract Syntax Trees
    pretty: Renders a tree in logic notation for trace output

Example:
    >>> from parser import parse
    >>> ast = parse("!(A & B)")
    >>> # Returns Not(And(Variable('A'), Variable('B')))
"""

from .exceptions import (
    ParseError,
    UnexpectedToken,
    UnbalancedParen,
    EmptyExpression,
    NestingTooDeep,
)
from .grammar import _LogicParser
from .formatter import pretty
from utils.logger import get_logger


def parse(source: str):
    """Parse expression string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation so that concurrent
    callers never share parser state.

    Args:
        source: Expression string to parse

    Returns:
        Root AST node representing the parsed expression

    Raises:
        ParseError: Expression is empty, unbalanced or malformed

    Example:
        >>> ast = parse("A & true")
        >>> # Returns And(Variable('A'), Literal(True))
    """
    logger = get_logger()

    parser = _LogicParser()

    try:
        result = parser.parse(source)
        logger.debug(
            f"Expression parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except ParseError:
        logger.debug("ParseError encountered during expression parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "pretty",
    "ParseError",
    "UnexpectedToken",
    "UnbalancedParen",
    "EmptyExpression",
    "NestingTooDeep",
]

__version__ = "1.0.0"
__description__ = "Propositional expression parsing components"
