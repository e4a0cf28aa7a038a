# core/engine.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Fixpoint rewrite engine applying the law catalog

"""Rewrite engine that simplifies an expression tree to a fixpoint.

The engine repeatedly locates one place where a law applies, records the
law's description in the step recorder, replaces that sub-tree and starts
over from the new root. It stops when a full scan finds nothing to rewrite,
or raises RewriteLimitExceeded once its rewrite budget is used up. Distribution
and the desugar laws can grow a tree quickly, so the engine also stops with
TreeSizeExceeded when the tree passes a node or depth bound.

Simplification runs in two phases over the same budget:
1. The desugar laws, until no Implies/Iff/Xor/Xnor node remains
2. The law catalog, until fixpoint

Tie-break policy. Positions are visited in pre-order (root before children,
left child before right child). Which of the two loops is outer is chosen by
the strategy:

    LAW_FIRST       for each law in catalog order, scan every position;
                    the first law with any match wins (default)
    POSITION_FIRST  for each position in pre-order, try every law;
                    the first position with any match wins

Both are deterministic, so the same input always yields the same trace.

The engine holds no per-call state and one instance may be shared by
several threads.
"""

from enum import Enum
from typing import Iterator, Optional, Sequence, Tuple, Union

from parser import ast_nodes as ast
from parser import parse, pretty
from parser.grammar import MAX_DEPTH
from logic.laws import DEFAULT_CATALOG, Law, Rewrite
from logic.desugar import DESUGAR_LAWS
from logic.truth_table import variables
from .steps import StepRecorder
from .exceptions import RewriteLimitExceeded, TreeSizeExceeded
from utils.logger import get_logger

DEFAULT_MAX_REWRITES = 10_000
DEFAULT_MAX_NODES = 500
DEFAULT_MAX_DEPTH = MAX_DEPTH

Path = Tuple[int, ...]


class Strategy(Enum):
    """Order in which laws and positions are tried."""

    LAW_FIRST = "law-first"
    POSITION_FIRST = "position-first"

    def __str__(self) -> str:
        return self.value


def positions(root: ast.Expr) -> Iterator[Tuple[Path, ast.Expr]]:
    """Yield (path, node) for every node of root in pre-order.

    A path is the sequence of child indices leading from root to the node;
    the root itself has the empty path.
    """
    stack = [((), root)]
    while stack:
        path, node = stack.pop()
        yield path, node
        children = node.children()
        for index in range(len(children) - 1, -1, -1):
            stack.append((path + (index,), children[index]))


def replace_at(root: ast.Expr, path: Path, replacement: ast.Expr) -> ast.Expr:
    """Return a copy of root with the node at path replaced.

    Only the nodes along the path are rebuilt; every other sub-tree is
    carried over unchanged.
    """
    if not path:
        return replacement
    head, rest = path[0], path[1:]
    children = list(root.children())
    children[head] = replace_at(children[head], rest, replacement)
    return ast.with_children(root, tuple(children))


class RewriteEngine:
    """Applies a law catalog to expression trees until fixpoint.

    Attributes:
        catalog: Laws over the core connectives, in priority order
        desugar_laws: Laws eliminating derived connectives, run first
        strategy: Tie-break policy between laws and positions
        max_rewrites: Rewrite budget per simplify() call
        max_nodes: Largest tree, in nodes, the engine will work on
        max_depth: Deepest tree, in levels, the engine will work on
    """

    def __init__(
        self,
        catalog: Sequence[Law] = DEFAULT_CATALOG,
        strategy: Strategy = Strategy.LAW_FIRST,
        max_rewrites: int = DEFAULT_MAX_REWRITES,
        desugar_laws: Sequence[Law] = DESUGAR_LAWS,
        max_nodes: int = DEFAULT_MAX_NODES,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        if max_rewrites < 0:
            raise ValueError("max_rewrites must be non-negative")
        if max_nodes < 1 or max_depth < 1:
            raise ValueError("max_nodes and max_depth must be positive")
        self.catalog = tuple(catalog)
        self.desugar_laws = tuple(desugar_laws)
        self.strategy = Strategy(strategy)
        self.max_rewrites = max_rewrites
        self.max_nodes = max_nodes
        self.max_depth = max_depth

    def simplify(self, root: ast.Expr, steps: StepRecorder) -> ast.Expr:
        """Rewrite root to a fixpoint, recording one step per rewrite.

        Args:
            root: Expression to simplify
            steps: Recorder receiving the trace, in application order

        Returns:
            The simplified expression

        Raises:
            RewriteLimitExceeded: The budget ran out before a fixpoint; the
                steps recorded so far are left in steps
            TreeSizeExceeded: The tree outgrew max_nodes or max_depth
        """
        logger = get_logger()

        self._check_bounds(root)
        tree, applied = self._run(root, self.desugar_laws, steps, 0)
        assert ast.is_core(tree), f"Desugaring left derived connectives: {tree}"

        tree, applied = self._run(tree, self.catalog, steps, applied)

        logger.fixpoint_reached(pretty(tree), applied)
        return tree

    def find_rewrite(
        self, tree: ast.Expr, laws: Optional[Sequence[Law]] = None
    ) -> Optional[Tuple[Path, Rewrite]]:
        """Locate the rewrite the engine would perform next.

        Args:
            tree: Current tree
            laws: Laws to consider, defaults to the catalog

        Returns:
            (path, rewrite) of the winning match, or None at fixpoint
        """
        laws = self.catalog if laws is None else laws

        if self.strategy is Strategy.LAW_FIRST:
            for law in laws:
                for path, node in positions(tree):
                    rewrite = law.apply(node)
                    if rewrite is not None:
                        return path, rewrite
            return None

        for path, node in positions(tree):
            for law in laws:
                rewrite = law.apply(node)
                if rewrite is not None:
                    return path, rewrite
        return None

    def _run(
        self,
        tree: ast.Expr,
        laws: Sequence[Law],
        steps: StepRecorder,
        applied: int,
    ) -> Tuple[ast.Expr, int]:
        """Rewrite with laws until none applies, continuing the step count."""
        logger = get_logger()

        while True:
            found = self.find_rewrite(tree, laws)
            if found is None:
                return tree, applied

            if applied >= self.max_rewrites:
                raise RewriteLimitExceeded(self.max_rewrites)

            path, rewrite = found
            _check_rewrite(rewrite)

            description = rewrite.describe()
            steps.append(description)
            applied += 1
            logger.law_applied(applied, description)

            tree = replace_at(tree, path, rewrite.after)
            self._check_bounds(tree)

    def _check_bounds(self, tree: ast.Expr) -> None:
        if ast.size(tree) > self.max_nodes:
            raise TreeSizeExceeded(self.max_nodes, "nodes")
        if ast.depth(tree) > self.max_depth:
            raise TreeSizeExceeded(self.max_depth, "levels")


def _check_rewrite(rewrite: Rewrite) -> None:
    """Fail loudly on a law producing an invalid tree."""
    assert isinstance(rewrite.after, ast.Expr), (
        f"{rewrite.law.name} produced {type(rewrite.after).__name__}, not an expression"
    )
    assert variables(rewrite.after) <= variables(rewrite.before), (
        f"{rewrite.law.name} introduced variables into {pretty(rewrite.after)}"
    )


def simplify_expression(
    expression: Union[str, ast.Expr], engine: Optional[RewriteEngine] = None
) -> Tuple[ast.Expr, StepRecorder]:
    """Parse (if needed) and simplify one expression.

    Args:
        expression: Expression text or an already parsed tree
        engine: Engine to use, defaults to one with the standard catalog

    Returns:
        (simplified tree, its step recorder)

    Raises:
        ParseError: The text cannot be parsed
        RewriteLimitExceeded: No fixpoint within the engine's budget
    """
    engine = engine or RewriteEngine()
    tree = parse(expression) if isinstance(expression, str) else expression
    steps = StepRecorder()
    get_logger().expression_start(str(expression))
    return engine.simplify(tree, steps), steps
