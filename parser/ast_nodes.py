# parser/ast_nodes.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Abstract Syntax Tree node classes for propositional logic expressions

"""AST node classes for representing parsed propositional expressions.

This module defines immutable and hashable node classes used to construct tree
representations of propositional logic expressions. The core node set
(Literal, Variable, Not, And, Or) is the one the law catalog rewrites; the
sugar nodes (Implies, Iff, Xor, Xnor) are eliminated by the desugar phase
before any other law runs.

Node Types:
    Literal: Boolean constants true and false
    Variable: Named atomic propositions
    Not, And, Or: Core Boolean connectives
    Implies, Iff, Xor, Xnor: Derived connectives

All nodes support the visitor design pattern for traversal and transformation.
The string form of every node is fully parenthesized ASCII that the parser
reads back to an equal tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Tuple


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_literal(self, n: Literal): ...

    def visit_variable(self, n: Variable): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...

    def visit_iff(self, n: Iff): ...

    def visit_xor(self, n: Xor): ...

    def visit_xnor(self, n: Xnor): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional expressions.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def children(self) -> Tuple[Expr, ...]:
        """Return the direct sub-expressions in storage order (left first)."""
        return ()

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Literal(Expr):
    """Boolean constant in an expression.

    Attributes:
        value: The truth value this constant denotes
    """

    value: bool

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_literal method.

        Args:
            v: Visitor instance to process this literal

        Returns:
            Result of visitor's visit_literal method
        """
        return v.visit_literal(self)

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Atomic proposition identified by name.

    Two variables are equal iff their names are equal (case-sensitive).

    Attributes:
        name: The identifier string for this proposition
    """

    name: str

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_variable method.

        Args:
            v: Visitor instance to process this variable

        Returns:
            Result of visitor's visit_variable method
        """
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation operator for Boolean expressions.

    Represents the unary negation operation that inverts the truth value
    of its operand expression.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_not method.

        Args:
            v: Visitor instance to process this negation

        Returns:
            Result of visitor's visit_not method
        """
        return v.visit_not(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def __str__(self) -> str:
        """Return string representation of negation.

        Returns:
            Formatted string with negation operator and operand
        """
        return f"!{self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction operator for Boolean expressions.

    Represents the binary AND operation that is true when both
    operands are true. Operand order is preserved exactly as parsed
    or rewritten, since trace descriptions depend on it.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_and method.

        Args:
            v: Visitor instance to process this conjunction

        Returns:
            Result of visitor's visit_and method
        """
        return v.visit_and(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        """Return string representation of conjunction.

        Returns:
            Formatted string with both operands and AND operator
        """
        return f"({self.left} & {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction operator for Boolean expressions.

    Represents the binary OR operation that is true when at least
    one operand is true.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        """Accept visitor and dispatch to visit_or method.

        Args:
            v: Visitor instance to process this disjunction

        Returns:
            Result of visitor's visit_or method
        """
        return v.visit_or(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        """Return string representation of disjunction.

        Returns:
            Formatted string with both operands and OR operator
        """
        return f"({self.left} | {self.right})"


@dataclass(frozen=True, slots=True)
class Implies(Expr):
    """Material implication, left implies right."""

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_implies(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"({self.left} -> {self.right})"


@dataclass(frozen=True, slots=True)
class Iff(Expr):
    """Biconditional, true when both operands have the same value."""

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_iff(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"({self.left} <-> {self.right})"


@dataclass(frozen=True, slots=True)
class Xor(Expr):
    """Exclusive or."""

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_xor(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"({self.left} ^ {self.right})"


@dataclass(frozen=True, slots=True)
class Xnor(Expr):
    """Negated exclusive or."""

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_xnor(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"({self.left} XNOR {self.right})"


TRUE = Literal(True)
FALSE = Literal(False)

BINARY_NODES = (And, Or, Implies, Iff, Xor, Xnor)
SUGAR_NODES = (Implies, Iff, Xor, Xnor)


def clone(node: Expr) -> Expr:
    """Return a structurally equal copy that shares no node objects with node.

    Args:
        node: Root of the tree to copy

    Returns:
        Fresh tree equal to node
    """
    if isinstance(node, Literal):
        return Literal(node.value)
    if isinstance(node, Variable):
        return Variable(node.name)
    if isinstance(node, Not):
        return Not(clone(node.operand))
    if isinstance(node, BINARY_NODES):
        return type(node)(clone(node.left), clone(node.right))
    raise TypeError(f"Cannot clone {type(node).__name__}")


def with_children(node: Expr, children: Tuple[Expr, ...]) -> Expr:
    """Rebuild node with replaced children, keeping its type.

    Args:
        node: Template node
        children: New children in storage order

    Returns:
        New node of the same type as node
    """
    if isinstance(node, Not):
        (operand,) = children
        return Not(operand)
    if isinstance(node, BINARY_NODES):
        left, right = children
        return type(node)(left, right)
    return node


def is_core(node: Expr) -> bool:
    """Return True if the tree contains no sugar connectives."""
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, SUGAR_NODES):
            return False
        stack.extend(current.children())
    return True


def size(node: Expr) -> int:
    """Count the nodes of a tree."""
    count = 0
    stack = [node]
    while stack:
        count += 1
        stack.extend(stack.pop().children())
    return count


def depth(node: Expr) -> int:
    """Height of a tree; a leaf has depth 1.

    Walks the tree with an explicit stack so it also measures trees nested
    deeper than the interpreter's recursion limit.
    """
    height = 0
    stack = [(node, 1)]
    while stack:
        current, level = stack.pop()
        height = max(height, level)
        stack.extend((child, level + 1) for child in current.children())
    return height
