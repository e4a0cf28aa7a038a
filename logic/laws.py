# logic/laws.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Fixed catalog of logical equivalence laws

"""Catalog of rewrite laws over the core connectives.

Each law is a stateless matcher: given one node of a tree it either returns
the equivalent replacement for that node or ``None``. Laws only look at the
node they are handed and its descendants; locating the node inside the whole
tree is the rewrite engine's job.

The order of ``DEFAULT_CATALOG`` is the tie-break policy of the engine. The
simplifying laws come first, Distribution after Absorption so that
``x∧(x∨y)`` is absorbed instead of expanded, and the two normalization laws
(Associative, Commutative) last so they only reorder what nothing else can
shrink.

Catalog:
    Double Negation     ¬¬x → x
    De Morgan (AND)     ¬(x∧y) → ¬x∨¬y
    De Morgan (OR)      ¬(x∨y) → ¬x∧¬y
    Identity (AND)      x∧true → x
    Identity (OR)       x∨false → x
    Domination (AND)    x∧false → false
    Domination (OR)     x∨true → true
    Constant Negation   ¬true → false, ¬false → true
    Idempotence         x∧x → x, x∨x → x, x∧(x∧z) → x∧z
    Complement          x∧¬x → false, x∨¬x → true, x∧(¬x∧z) → false
    Absorption          x∧(x∨y) → x, x∨(x∧y) → x
    Distribution        x∧(y∨z) → (x∧y)∨(x∧z)
    Associative         (x∧y)∧z → x∧(y∧z)
    Commutative         y∧x → x∧y when x sorts before y

Identity, Domination, Complement and Absorption match their patterns with
the operands in either order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, Tuple

from parser import ast_nodes as ast
from parser.formatter import pretty
from .ordering import precedes

RuleFunc = Callable[[ast.Expr], Optional[ast.Expr]]


@dataclass(frozen=True)
class Rewrite:
    """One successful application of a law at one node.

    Attributes:
        law: The law that matched
        before: The matched sub-expression
        after: Its replacement
    """

    law: Law
    before: ast.Expr
    after: ast.Expr

    def describe(self) -> str:
        """Render the trace line, e.g. ``Identity (AND): A∧true → A``."""
        return f"{self.law.name}: {pretty(self.before)} → {pretty(self.after)}"


@dataclass(frozen=True)
class Law:
    """A named rewrite rule expressing a logical equivalence.

    Attributes:
        name: Name used in trace descriptions
        rule: Matcher returning the replacement node or None
    """

    name: str
    rule: RuleFunc

    def apply(self, node: ast.Expr) -> Optional[Rewrite]:
        """Try this law at node.

        Args:
            node: Candidate position

        Returns:
            Rewrite describing the replacement, or None if the law does not match
        """
        replacement = self.rule(node)
        if replacement is None:
            return None
        return Rewrite(self, node, replacement)

    def __str__(self) -> str:
        return self.name


def _is_const(node: ast.Expr, value: bool) -> bool:
    return isinstance(node, ast.Literal) and node.value is value


def _is_negation_of(node: ast.Expr, other: ast.Expr) -> bool:
    return isinstance(node, ast.Not) and node.operand == other


# --- Negation laws ----------------------------------------------------------


def double_negation(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.Not) and isinstance(n.operand, ast.Not):
        return n.operand.operand
    return None


def de_morgan_and(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.Not) and isinstance(n.operand, ast.And):
        inner = n.operand
        return ast.Or(ast.Not(inner.left), ast.Not(inner.right))
    return None


def de_morgan_or(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.Not) and isinstance(n.operand, ast.Or):
        inner = n.operand
        return ast.And(ast.Not(inner.left), ast.Not(inner.right))
    return None


def constant_negation(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.Not) and isinstance(n.operand, ast.Literal):
        return ast.Literal(not n.operand.value)
    return None


# --- Constant laws ----------------------------------------------------------


def identity_and(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.And):
        if _is_const(n.right, True):
            return n.left
        if _is_const(n.left, True):
            return n.right
    return None


def identity_or(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.Or):
        if _is_const(n.right, False):
            return n.left
        if _is_const(n.left, False):
            return n.right
    return None


def domination_and(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.And) and (_is_const(n.left, False) or _is_const(n.right, False)):
        return ast.Literal(False)
    return None


def domination_or(n: ast.Expr) -> Optional[ast.Expr]:
    if isinstance(n, ast.Or) and (_is_const(n.left, True) or _is_const(n.right, True)):
        return ast.Literal(True)
    return None


# --- Laws over repeated operands --------------------------------------------


def idempotence(n: ast.Expr) -> Optional[ast.Expr]:
    """x∘x → x, and inside a right-nested chain x∘(x∘z) → x∘z."""
    if not isinstance(n, (ast.And, ast.Or)):
        return None
    if n.left == n.right:
        return n.left
    rest = n.right
    if type(rest) is type(n) and rest.left == n.left:
        return rest
    return None


def complement(n: ast.Expr) -> Optional[ast.Expr]:
    """x∧¬x → false and x∨¬x → true, also one level into a chain."""
    if not isinstance(n, (ast.And, ast.Or)):
        return None
    absorbing = ast.Literal(isinstance(n, ast.Or))
    left, right = n.left, n.right
    if _is_negation_of(right, left) or _is_negation_of(left, right):
        return absorbing
    if type(right) is type(n):
        if _is_negation_of(right.left, left) or _is_negation_of(left, right.left):
            return absorbing
    return None


def absorption(n: ast.Expr) -> Optional[ast.Expr]:
    """x∧(x∨y) → x and x∨(x∧y) → x in every operand order."""
    if isinstance(n, ast.And):
        inner_type = ast.Or
    elif isinstance(n, ast.Or):
        inner_type = ast.And
    else:
        return None

    for kept, other in ((n.left, n.right), (n.right, n.left)):
        if isinstance(other, inner_type) and kept in (other.left, other.right):
            return kept
    return None


# --- Structural laws ---------------------------------------------------------


def distribution(n: ast.Expr) -> Optional[ast.Expr]:
    """Distribute AND over OR, with the OR on either side.

    The distributed operand is cloned so the result shares no node
    between two parents.
    """
    if not isinstance(n, ast.And):
        return None
    if isinstance(n.right, ast.Or):
        x, (y, z) = n.left, (n.right.left, n.right.right)
        return ast.Or(ast.And(x, y), ast.And(ast.clone(x), z))
    if isinstance(n.left, ast.Or):
        (y, z), x = (n.left.left, n.left.right), n.right
        return ast.Or(ast.And(y, x), ast.And(z, ast.clone(x)))
    return None


def associative(n: ast.Expr) -> Optional[ast.Expr]:
    """Re-associate a left-nested chain to the right: (x∘y)∘z → x∘(y∘z)."""
    if isinstance(n, (ast.And, ast.Or)) and type(n.left) is type(n):
        op = type(n)
        return op(n.left.left, op(n.left.right, n.right))
    return None


def commutative(n: ast.Expr) -> Optional[ast.Expr]:
    """Bubble one operand of a right-nested chain into canonical order."""
    if not isinstance(n, (ast.And, ast.Or)):
        return None
    op = type(n)
    first, rest = n.left, n.right
    if type(first) is op:
        return None
    if type(rest) is op:
        if precedes(rest.left, first):
            return op(rest.left, op(first, rest.right))
        return None
    if precedes(rest, first):
        return op(rest, first)
    return None


DOUBLE_NEGATION = Law("Double Negation", double_negation)
DE_MORGAN_AND = Law("De Morgan (AND)", de_morgan_and)
DE_MORGAN_OR = Law("De Morgan (OR)", de_morgan_or)
IDENTITY_AND = Law("Identity (AND)", identity_and)
IDENTITY_OR = Law("Identity (OR)", identity_or)
DOMINATION_AND = Law("Domination (AND)", domination_and)
DOMINATION_OR = Law("Domination (OR)", domination_or)
CONSTANT_NEGATION = Law("Constant Negation", constant_negation)
IDEMPOTENCE = Law("Idempotence", idempotence)
COMPLEMENT = Law("Complement", complement)
ABSORPTION = Law("Absorption", absorption)
DISTRIBUTION = Law("Distribution", distribution)
ASSOCIATIVE = Law("Associative", associative)
COMMUTATIVE = Law("Commutative", commutative)

DEFAULT_CATALOG: Tuple[Law, ...] = (
    DOUBLE_NEGATION,
    DE_MORGAN_AND,
    DE_MORGAN_OR,
    IDENTITY_AND,
    IDENTITY_OR,
    DOMINATION_AND,
    DOMINATION_OR,
    CONSTANT_NEGATION,
    IDEMPOTENCE,
    COMPLEMENT,
    ABSORPTION,
    DISTRIBUTION,
    ASSOCIATIVE,
    COMMUTATIVE,
)

LAWS_BY_NAME: Dict[str, Law] = {law.name: law for law in DEFAULT_CATALOG}


def catalog_names(catalog: Sequence[Law] = DEFAULT_CATALOG) -> Tuple[str, ...]:
    """Return the law names of a catalog in priority order."""
    return tuple(law.name for law in catalog)
