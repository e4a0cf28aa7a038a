# core/batch.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Batch evaluation of several expressions from one input

"""Evaluates every expression of a multi-expression input independently.

Input format:
    - One expression per line; ``;`` also separates expressions on a line
    - Blank pieces and lines starting with ``#`` are skipped
    - ``NAME = TRUE`` / ``NAME = FALSE`` (any case, or 1/0) assigns a value

Example:
    # inputs
    A = TRUE
    B = false
    A & true
    B | false; !(A & B)

Assignments are collected from the whole input before any expression is
evaluated, last assignment winning. They produce no entry of their own,
except a malformed one which becomes an error entry at its position.

Each expression gets its own tree, step recorder and error slot. A parse,
rewrite-limit or recursion-depth failure is stored in that expression's
entry and never stops the rest of the batch. When the assignments bind every
variable of a simplified expression, its truth value is stored as well.
"""

from __future__ import annotations
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from parser import ast_nodes as ast
from parser import parse, ParseError, UnexpectedToken
from logic.truth_table import evaluate, variables
from .engine import RewriteEngine
from .exceptions import RewriteLimitExceeded
from .steps import StepRecorder
from utils.logger import get_logger

SEPARATOR = ";"
COMMENT_PREFIX = "#"

# NAME = VALUE, but not '=>' (implication) or '=='
_ASSIGNMENT = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)\s*=(?![=>])\s*(.*)$")

_TRUTH_VALUES = {"TRUE": True, "1": True, "FALSE": False, "0": False}


@dataclass
class BatchEntry:
    """Outcome of one expression of a batch.

    Attributes:
        index: Position among the batch entries, starting at 0
        line: 1-based input line the expression came from
        source: The expression text as written
        steps: Trace of the rewrites performed, possibly partial on error
        tree: Simplified expression, None if evaluation failed
        error: Parse or rewrite error for this expression, if any
        value: Truth value under the batch assignments, if fully bound
    """

    index: int
    line: int
    source: str
    steps: StepRecorder = field(default_factory=StepRecorder)
    tree: Optional[ast.Expr] = None
    error: Optional[Exception] = None
    value: Optional[bool] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __iter__(self) -> Iterator:
        """Unpack as (tree, steps)."""
        return iter((self.tree, self.steps))


@dataclass(frozen=True)
class _Piece:
    line: int
    source: str
    error: Optional[Exception] = None


def split_input(text: str) -> Tuple[List[_Piece], Dict[str, bool]]:
    """Split raw input into expression pieces and collect assignments.

    Args:
        text: Multi-expression input

    Returns:
        (pieces in input order, assignment table)
    """
    pieces: List[_Piece] = []
    env: Dict[str, bool] = {}

    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        if raw_line.strip().startswith(COMMENT_PREFIX):
            continue

        for raw_piece in raw_line.split(SEPARATOR):
            source = raw_piece.strip()
            if not source:
                continue

            match = _ASSIGNMENT.match(source)
            if match is None:
                pieces.append(_Piece(line_number, source))
                continue

            name, value = match.group(1), match.group(2).strip()
            truth = _TRUTH_VALUES.get(value.upper())
            if truth is None:
                error = UnexpectedToken(
                    f"Invalid value '{value}' assigned to '{name}' (expected TRUE or FALSE)"
                )
                pieces.append(_Piece(line_number, source, error))
            else:
                env[name] = truth

    return pieces, env


class BatchEvaluator:
    """Runs the parse/simplify pipeline over every expression of an input.

    Attributes:
        engine: Rewrite engine shared by all entries
        max_workers: Threads used for evaluation; 1 evaluates sequentially
    """

    def __init__(self, engine: Optional[RewriteEngine] = None, max_workers: int = 1):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.engine = engine or RewriteEngine()
        self.max_workers = max_workers

    def evaluate_many(self, text: str) -> List[BatchEntry]:
        """Evaluate each expression of text independently.

        Args:
            text: Multi-expression input

        Returns:
            One entry per expression (or malformed assignment), in input order
        """
        logger = get_logger()

        pieces, env = split_input(text)
        logger.debug(f"Batch of {len(pieces)} expression(s), {len(env)} assignment(s)")

        jobs = [(index, piece, env) for index, piece in enumerate(pieces)]
        if self.max_workers > 1 and len(jobs) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                # map() yields in submission order, not completion order
                entries = list(executor.map(lambda job: self._evaluate(*job), jobs))
        else:
            entries = [self._evaluate(*job) for job in jobs]

        failed = sum(1 for entry in entries if not entry.ok)
        logger.batch_summary(len(entries), failed)
        return entries

    def _evaluate(self, index: int, piece: _Piece, env: Dict[str, bool]) -> BatchEntry:
        logger = get_logger()
        entry = BatchEntry(index=index, line=piece.line, source=piece.source)

        if piece.error is not None:
            entry.error = piece.error
            logger.entry_failed(piece.line, piece.source, str(piece.error))
            return entry

        logger.expression_start(piece.source, index)
        try:
            tree = parse(piece.source)
            entry.tree = self.engine.simplify(tree, entry.steps)
        # RecursionError: a tree too deep for the recursive walks, kept per entry
        except (ParseError, RewriteLimitExceeded, RecursionError) as exc:
            entry.error = exc
            logger.entry_failed(piece.line, piece.source, str(exc))
            return entry

        if variables(entry.tree).issubset(env):
            entry.value = evaluate(entry.tree, env)

        return entry


def evaluate_many(text: str, engine: Optional[RewriteEngine] = None) -> List[BatchEntry]:
    """Evaluate a multi-expression input with a sequential evaluator."""
    return BatchEvaluator(engine).evaluate_many(text)
