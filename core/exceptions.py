# core/exceptions.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Exceptions raised by the rewrite engine and step recorder

from typing import Optional


class RewriteLimitExceeded(RuntimeError):
    """Simplification did not reach a fixpoint within the rewrite budget.

    Fatal for the expression being simplified only; the batch evaluator
    records it in that expression's slot and carries on.

    Attributes:
        limit: The budget that was exhausted
    """

    def __init__(self, limit: int, message: Optional[str] = None):
        super().__init__(message or f"No fixpoint reached after {limit} rewrites")
        self.limit = limit


class TreeSizeExceeded(RewriteLimitExceeded):
    """The tree being rewritten exceeds the engine's node or depth bound.

    Attributes:
        limit: The bound that was crossed
        measure: "nodes" or "levels"
    """

    def __init__(self, limit: int, measure: str):
        super().__init__(limit, f"Expression exceeds {limit} {measure} before reaching a fixpoint")
        self.measure = measure


class IndexOutOfRange(IndexError):
    """A step index outside ``0 <= index < count`` was requested."""

    def __init__(self, index: int, count: int):
        super().__init__(f"Step index {index} out of range for {count} step(s)")
        self.index = index
        self.count = count
