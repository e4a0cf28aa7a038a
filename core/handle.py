# core/handle.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Host-facing step handle API

"""Step handles returned to host programs.

A host (such as run_simplifier.py) only needs an ordered list of lines to
write out. These functions run the engine and package its output as a
StepHandle with read-only, bounds-checked access:

    >>> handle = evaluate_expression("!(A & B)")
    >>> step_count(handle)
    1
    >>> step_at(handle, 0)
    'De Morgan (AND): ¬(A∧B) → ¬A∨¬B'
    >>> free_steps(handle)

For a batch the per-expression traces stay separate inside the engine; the
handle lays them out one after another under an ``Expression:`` header.
"""

from __future__ import annotations
from typing import Iterator, List, Optional, Sequence

from parser import ast_nodes as ast
from parser import pretty
from .batch import BatchEntry, BatchEvaluator
from .engine import RewriteEngine, simplify_expression
from .exceptions import IndexOutOfRange

INDENT = "  "


class StepHandle:
    """Ordered lines of output owned by a host caller.

    Attributes:
        entries: Batch entries behind a multi-expression handle, else empty
        tree: Simplified tree of a single-expression handle, else None
    """

    def __init__(
        self,
        lines: Sequence[str],
        tree: Optional[ast.Expr] = None,
        entries: Sequence[BatchEntry] = (),
    ):
        self._lines: List[str] = list(lines)
        self.tree = tree
        self.entries: List[BatchEntry] = list(entries)
        self._closed = False

    def count(self) -> int:
        return len(self._lines)

    def at(self, index: int) -> str:
        """Return line index.

        Raises:
            IndexOutOfRange: If index is not in ``0 <= index < count()``
        """
        if not 0 <= index < len(self._lines):
            raise IndexOutOfRange(index, len(self._lines))
        return self._lines[index]

    def close(self) -> None:
        """Release the lines and any per-expression recorders."""
        if self._closed:
            return
        for entry in self.entries:
            entry.steps.dispose()
        self._lines.clear()
        self.entries.clear()
        self.tree = None
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))

    def __enter__(self) -> StepHandle:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def format_entry(entry: BatchEntry) -> List[str]:
    """Lay out one batch entry as output lines."""
    lines = [f"Expression: {entry.source}"]
    lines.extend(f"{INDENT}{step}" for step in entry.steps)
    if entry.error is not None:
        lines.append(f"{INDENT}Error: {entry.error}")
        return lines
    lines.append(f"{INDENT}Simplified: {pretty(entry.tree)}")
    if entry.value is not None:
        lines.append(f"{INDENT}Result: {'true' if entry.value else 'false'}")
    return lines


def evaluate_expression(text: str, engine: Optional[RewriteEngine] = None) -> StepHandle:
    """Simplify a single expression; the handle holds exactly its steps.

    Raises:
        ParseError: The text cannot be parsed
        RewriteLimitExceeded: No fixpoint within the engine's budget
    """
    tree, steps = simplify_expression(text.strip(), engine)
    handle = StepHandle(steps.as_tuple(), tree=tree)
    steps.dispose()
    return handle


def evaluate_multiple_expressions(
    text: str, engine: Optional[RewriteEngine] = None, max_workers: int = 1
) -> StepHandle:
    """Evaluate a batch; failures appear as ``Error:`` lines, never raise."""
    entries = BatchEvaluator(engine, max_workers).evaluate_many(text)
    lines: List[str] = []
    for entry in entries:
        lines.extend(format_entry(entry))
    return StepHandle(lines, entries=entries)


def step_count(handle: StepHandle) -> int:
    return handle.count()


def step_at(handle: StepHandle, index: int) -> str:
    return handle.at(index)


def free_steps(handle: StepHandle) -> None:
    handle.close()
