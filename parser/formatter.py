# parser/formatter.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Human-readable rendering of expressions for rewrite traces

"""Mathematical notation for expressions used in rewrite step descriptions.

The ASCII ``str()`` of a node is fully parenthesized so the parser can read
it back. Trace lines are meant for people instead, so this module renders
with the usual logic symbols and only the parentheses precedence requires:

    !(A & B)          ->  ¬(A∧B)
    (!A | !B)         ->  ¬A∨¬B
    ((A & B) & C)     ->  A∧B∧C
    (A & (B & C))     ->  A∧(B∧C)

A right-nested chain of the same operator keeps its parentheses so that an
associativity rewrite is visible in the trace.
"""

from . import ast_nodes as ast

SYMBOLS = {
    ast.And: "∧",
    ast.Or: "∨",
    ast.Xor: "⊕",
    ast.Implies: "⇒",
    ast.Iff: "⇔",
    ast.Xnor: "⊙",
}

# Binding strength, higher binds tighter
PRECEDENCE = {
    ast.Iff: 1,
    ast.Xnor: 1,
    ast.Implies: 2,
    ast.Or: 3,
    ast.Xor: 4,
    ast.And: 5,
    ast.Not: 6,
    ast.Literal: 7,
    ast.Variable: 7,
}

RIGHT_ASSOCIATIVE = (ast.Implies,)


class PrettyFormatter(ast.Visitor):
    """Visitor that renders an expression with minimal parentheses."""

    def format(self, node: ast.Expr) -> str:
        return node.accept(self)

    def visit_literal(self, n: ast.Literal) -> str:
        return "true" if n.value else "false"

    def visit_variable(self, n: ast.Variable) -> str:
        return n.name

    def visit_not(self, n: ast.Not) -> str:
        inner = n.operand.accept(self)
        if PRECEDENCE[type(n.operand)] < PRECEDENCE[ast.Not]:
            inner = f"({inner})"
        return f"¬{inner}"

    def _binary(self, n) -> str:
        own = PRECEDENCE[type(n)]
        left_prec = PRECEDENCE[type(n.left)]
        right_prec = PRECEDENCE[type(n.right)]

        if isinstance(n, RIGHT_ASSOCIATIVE):
            wrap_left = left_prec <= own
            wrap_right = right_prec < own
        else:
            wrap_left = left_prec < own
            wrap_right = right_prec <= own

        left = n.left.accept(self)
        right = n.right.accept(self)
        if wrap_left:
            left = f"({left})"
        if wrap_right:
            right = f"({right})"
        return f"{left}{SYMBOLS[type(n)]}{right}"

    visit_and = _binary
    visit_or = _binary
    visit_implies = _binary
    visit_iff = _binary
    visit_xor = _binary
    visit_xnor = _binary


_FORMATTER = PrettyFormatter()


def pretty(node: ast.Expr) -> str:
    """Render node in logic notation, e.g. ``¬A∨¬B``."""
    return _FORMATTER.format(node)
