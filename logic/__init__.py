# logic/__init__.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Law catalog, desugaring and truth-table utilities

from .laws import Law, Rewrite, DEFAULT_CATALOG, LAWS_BY_NAME, catalog_names
from .desugar import DESUGAR_LAWS
from .ordering import sort_key
from .truth_table import UnboundVariable, evaluate, variables, equivalent, truth_table

__all__ = [
    "Law",
    "Rewrite",
    "DEFAULT_CATALOG",
    "DESUGAR_LAWS",
    "LAWS_BY_NAME",
    "catalog_names",
    "sort_key",
    "UnboundVariable",
    "evaluate",
    "variables",
    "equivalent",
    "truth_table",
]
