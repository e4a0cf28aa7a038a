# logic/desugar.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Elimination of derived connectives

"""Laws that rewrite derived connectives into NOT/AND/OR.

The law catalog is defined only over the core connectives, so the rewrite
engine runs these laws to fixpoint first. They are ordinary ``Law`` objects
and their applications are recorded in the trace like any other rewrite.

    Implication      x⇒y → ¬x∨y
    Biconditional    x⇔y → (x⇒y)∧(y⇒x)
    Exclusive Or     x⊕y → (x∧¬y)∨(¬x∧y)
    Exclusive Nor    x⊙y → (x∧y)∨(¬x∧¬y)

Biconditional deliberately produces implications; the next pass of the
Implication law removes them, so the trace shows both steps.
"""

from typing import Optional, Tuple

from parser import ast_nodes as ast
from .laws import Law


def implication(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.Implies):
        return ast.Or(ast.Not(n.left), n.right)
    return None


def biconditional(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.Iff):
        return ast.And(
            ast.Implies(n.left, n.right),
            ast.Implies(ast.clone(n.right), ast.clone(n.left)),
        )
    return None


def exclusive_or(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.Xor):
        x, y = n.left, n.right
        return ast.Or(
            ast.And(x, ast.Not(y)),
            ast.And(ast.Not(ast.clone(x)), ast.clone(y)),
        )
    return None


def exclusive_nor(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.Xnor):
        x, y = n.left, n.right
        return ast.Or(
            ast.And(x, y),
            ast.And(ast.Not(ast.clone(x)), ast.Not(ast.clone(y))),
        )
    return None


IMPLICATION = Law("Implication", implication)
BICONDITIONAL = Law("Biconditional", biconditional)
EXCLUSIVE_OR = Law("Exclusive Or", exclusive_or)
EXCLUSIVE_NOR = Law("Exclusive Nor", exclusive_nor)

DESUGAR_LAWS: Tuple[Law, ...] = (
    IMPLICATION,
    BICONDITIONAL,
    EXCLUSIVE_OR,
    EXCLUSIVE_NOR,
)
