# core/__init__.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Core rewriting components for logical expression simplification

"""
Core components of the LEC rewrite engine.

This package contains the fixpoint rewrite engine, the per-expression step
recorder, the batch evaluator and the step-handle API offered to host
programs.

Example:
    >>> from core import simplify_expression
    >>> tree, steps = simplify_expression("A & true")
    >>> steps.at(0)
    'Identity (AND): A∧true → A'
"""

from .engine import (
    RewriteEngine,
    Strategy,
    DEFAULT_MAX_REWRITES,
    DEFAULT_MAX_NODES,
    positions,
    replace_at,
    simplify_expression,
)
from .steps import StepRecorder
from .batch import BatchEntry, BatchEvaluator, evaluate_many, split_input
from .handle import (
    StepHandle,
    evaluate_expression,
    evaluate_multiple_expressions,
    step_count,
    step_at,
    free_steps,
)
from .exceptions import RewriteLimitExceeded, TreeSizeExceeded, IndexOutOfRange

__all__ = [
    "RewriteEngine",
    "Strategy",
    "DEFAULT_MAX_REWRITES",
    "DEFAULT_MAX_NODES",
    "positions",
    "replace_at",
    "simplify_expression",
    "StepRecorder",
    "BatchEntry",
    "BatchEvaluator",
    "evaluate_many",
    "split_input",
    "StepHandle",
    "evaluate_expression",
    "evaluate_multiple_expressions",
    "step_count",
    "step_at",
    "free_steps",
    "RewriteLimitExceeded",
    "TreeSizeExceeded",
    "IndexOutOfRange",
]
