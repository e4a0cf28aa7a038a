# logic/truth_table.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Truth-value evaluation and truth-table equivalence checking

"""Evaluates expressions under variable assignments.

The batch evaluator uses this module to compute the value of a simplified
expression when the input assigns every variable it mentions
(``A = TRUE`` lines). It also provides the exhaustive equivalence check used
to verify that every law application preserves meaning.
"""

from __future__ import annotations
from itertools import product
from typing import Dict, FrozenSet, Iterator, List, Mapping, Sequence, Tuple

from parser import ast_nodes as ast


class UnboundVariable(KeyError):
    """Raised when an expression mentions a variable with no assigned value."""

    pass


class Evaluator(ast.Visitor):
    """Visitor computing the truth value of a tree under one assignment.

    Attributes:
        env: Mapping from variable name to truth value
    """

    def __init__(self, env: Mapping[str, bool]):
        self.env = env

    def visit_literal(self, n: ast.Literal) -> bool:
        return n.value

    def visit_variable(self, n: ast.Variable) -> bool:
        try:
            return bool(self.env[n.name])
        except KeyError:
            raise UnboundVariable(n.name) from None

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        return n.left.accept(self) and n.right.accept(self)

    def visit_or(self, n: ast.Or) -> bool:
        return n.left.accept(self) or n.right.accept(self)

    def visit_implies(self, n: ast.Implies) -> bool:
        return (not n.left.accept(self)) or n.right.accept(self)

    def visit_iff(self, n: ast.Iff) -> bool:
        return n.left.accept(self) == n.right.accept(self)

    def visit_xor(self, n: ast.Xor) -> bool:
        return n.left.accept(self) != n.right.accept(self)

    def visit_xnor(self, n: ast.Xnor) -> bool:
        return n.left.accept(self) == n.right.accept(self)


def evaluate(node: ast.Expr, env: Mapping[str, bool]) -> bool:
    """Compute the truth value of node.

    Args:
        node: Expression to evaluate
        env: Truth value for every variable in node

    Returns:
        The value of the expression

    Raises:
        UnboundVariable: A variable of node is missing from env
    """
    return node.accept(Evaluator(env))


def variables(node: ast.Expr) -> FrozenSet[str]:
    """Return the names of all variables occurring in node."""
    names = set()
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, ast.Variable):
            names.add(current.name)
        stack.extend(current.children())
    return frozenset(names)


def assignments(names: Sequence[str]) -> Iterator[Dict[str, bool]]:
    """Yield every assignment of the given names, all-false first."""
    for values in product((False, True), repeat=len(names)):
        yield dict(zip(names, values))


def truth_table(node: ast.Expr) -> List[Tuple[Dict[str, bool], bool]]:
    """Return (assignment, value) rows for node over its sorted variables."""
    names = sorted(variables(node))
    return [(env, evaluate(node, env)) for env in assignments(names)]


def equivalent(a: ast.Expr, b: ast.Expr) -> bool:
    """True if a and b agree under every assignment of their variables.

    Exhaustive, so only practical for small variable counts.
    """
    names = sorted(variables(a) | variables(b))
    return all(evaluate(a, env) == evaluate(b, env) for env in assignments(names))
