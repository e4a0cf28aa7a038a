# logic/ordering.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Canonical total order on expression trees

"""Canonical ordering of expressions for commutative normalization.

The Commutative law sorts the operands of an AND/OR chain by the key defined
here. The key is a nested tuple so that ordinary tuple comparison gives a
strict total order on trees:

    constants < variables (by name) < AND nodes < OR nodes < derived connectives

A negation sorts immediately after its operand (``A < ¬A < ¬¬A < B``), which
places ``x`` and ``¬x`` next to each other once a chain is sorted. This is
what lets the chain forms of Complement and Idempotence see them.
"""

from typing import Tuple

from parser import ast_nodes as ast

_RANK_LITERAL = 0
_RANK_VARIABLE = 1
_RANK_AND = 2
_RANK_OR = 3
_RANK_SUGAR = 4


def sort_key(node: ast.Expr) -> Tuple:
    """Return the canonical sort key of node.

    Args:
        node: Expression to rank

    Returns:
        Tuple comparable with the key of any other expression
    """
    if isinstance(node, ast.Not):
        return sort_key(node.operand) + (1,)
    if isinstance(node, ast.Literal):
        return (_RANK_LITERAL, int(node.value))
    if isinstance(node, ast.Variable):
        return (_RANK_VARIABLE, node.name)
    if isinstance(node, ast.And):
        return (_RANK_AND, sort_key(node.left), sort_key(node.right))
    if isinstance(node, ast.Or):
        return (_RANK_OR, sort_key(node.left), sort_key(node.right))
    # Sugar never reaches the catalog; rank it last for completeness
    return (_RANK_SUGAR, type(node).__name__, sort_key(node.left), sort_key(node.right))


def precedes(a: ast.Expr, b: ast.Expr) -> bool:
    """True if a sorts strictly before b."""
    return sort_key(a) < sort_key(b)
