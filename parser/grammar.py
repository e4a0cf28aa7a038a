# parser/grammar.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# LALR(1) grammar and parser for propositional expressions using SLY

"""Propositional logic grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for propositional
logic expressions. The parser constructs Abstract Syntax Trees from token
streams provided by the lexer, handling operator precedence and associativity.

Grammar Reference:
    start : expr
    expr  : NOT expr
          | expr AND expr
          | expr XOR expr
          | expr OR expr
          | expr IMPLIES expr
          | expr IFF expr
          | expr XNOR expr
          | LPAREN expr RPAREN
          | atom
    atom  : ID | TRUE | FALSE

Operator Precedence (lowest to highest):
- IFF, XNOR: left-associative
- IMPLIES: right-associative
- OR: left-associative
- XOR: left-associative
- AND: left-associative
- NOT: right-associative

The token spellings accepted for each terminal are listed in parser/lexer.py.

Error Kinds:
- EmptyExpression: input is blank after trimming
- UnbalancedParen: parentheses in the token stream do not pair up
- UnexpectedToken: illegal character, or a token / end of input that cannot
  continue the current production
- NestingTooDeep: the tree is more than MAX_DEPTH levels deep

Any other failure is wrapped as ParseError by the parser package facade.
"""

from typing import List

from sly import Parser
from .lexer import LogicLexer
from .ast_nodes import Expr, Literal, Variable, Not, And, Or, Implies, Iff, Xor, Xnor, depth
from .exceptions import UnexpectedToken, UnbalancedParen, EmptyExpression, NestingTooDeep
from utils.logger import get_logger

MAX_DEPTH = 200


class _LogicParser(Parser):
    """SLY-based LALR(1) parser for propositional expressions.

    Attributes:
        tokens: Token types from LogicLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = LogicLexer.tokens

    precedence = (
        ("left", "IFF", "XNOR"),
        ("right", "IMPLIES"),
        ("left", "OR"),
        ("left", "XOR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete input is a single expression."""
        return p.expr

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("expr XOR expr")
    def expr(self, p) -> Expr:
        return Xor(p.expr0, p.expr1)

    @_("expr XNOR expr")
    def expr(self, p) -> Expr:
        return Xnor(p.expr0, p.expr1)

    @_("expr IMPLIES expr")
    def expr(self, p) -> Expr:
        return Implies(p.expr0, p.expr1)

    @_("expr IFF expr")
    def expr(self, p) -> Expr:
        return Iff(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("atom")
    def expr(self, p) -> Expr:
        return p.atom

    @_("ID")
    def atom(self, p) -> Expr:
        """Identifier as propositional variable."""
        return Variable(p.ID)

    @_("TRUE")
    def atom(self, p) -> Expr:
        return Literal(True)

    @_("FALSE")
    def atom(self, p) -> Expr:
        return Literal(False)

    def parse(self, text: str) -> Expr:
        """Parse expression text into AST.

        Tokenizes the whole input first so that lexical errors and
        parenthesis mismatches are reported before any grammar error.

        Args:
            text: Expression string to parse

        Returns:
            Root AST node representing the expression

        Raises:
            ParseError: If the expression is empty or malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing expression: {text}")

        if text.strip() == "":
            raise EmptyExpression("Input expression is empty.")

        tokens = list(LogicLexer().tokenize(text))
        _check_parens(tokens)

        ast_result = super().parse(iter(tokens))

        if ast_result is None:
            raise UnexpectedToken("Failed to parse expression (syntax error).")

        # Tree walks elsewhere recurse once per level
        if depth(ast_result) > MAX_DEPTH:
            raise NestingTooDeep(
                f"Expression nests deeper than {MAX_DEPTH} levels", limit=MAX_DEPTH
            )

        logger.debug(f"Successfully parsed expression into {type(ast_result).__name__}")
        return ast_result

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            UnexpectedToken: Always raises with detailed error information
        """
        if token:
            raise UnexpectedToken(
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}",
                position=token.index,
            )

        raise UnexpectedToken("Syntax error: Unexpected end of expression")


def _check_parens(tokens: List) -> None:
    """Raise UnbalancedParen if the parentheses of a token list do not pair up."""
    open_positions = []
    for token in tokens:
        if token.type == "LPAREN":
            open_positions.append(token.index)
        elif token.type == "RPAREN":
            if not open_positions:
                raise UnbalancedParen(
                    f"Unmatched ')' at position {token.index}", position=token.index
                )
            open_positions.pop()

    if open_positions:
        raise UnbalancedParen(
            f"Unclosed '(' at position {open_positions[-1]}",
            position=open_positions[-1],
        )
