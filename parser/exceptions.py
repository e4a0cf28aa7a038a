# parser/exceptions.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Custom exceptions for expression parsing

"""Domain-specific exceptions for logical expression parsing.

Every failure of the parsing pipeline is reported as a subclass of
ParseError so that callers can handle the whole family at once, or react
to the specific kind when they need to.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when expression parsing fails.

    Attributes:
        position: Character offset of the offending input, when known
    """

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.position = position


class UnexpectedToken(ParseError):
    """A token (or end of input) cannot continue the current production."""

    pass


class UnbalancedParen(ParseError):
    """Opening and closing parentheses do not match."""

    pass


class EmptyExpression(ParseError):
    """The input is empty after trimming whitespace."""

    pass


class NestingTooDeep(ParseError):
    """The expression nests more operators than the parser accepts.

    Attributes:
        limit: Deepest nesting allowed
    """

    def __init__(self, message: str, limit: int):
        super().__init__(message)
        self.limit = limit
