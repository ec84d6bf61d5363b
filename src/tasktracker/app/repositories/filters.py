"""Composable query expressions compiled to MongoDB filter documents.

Queries are built as a small tree instead of by mutating a dict, so every
``AnyOf`` keeps its own ``$or`` key and two disjunctions can never be merged
into one by accident.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class FieldEquals:
    field: str
    value: Any


@dataclass(frozen=True, slots=True)
class FieldContains:
    """Case-insensitive literal substring match."""

    field: str
    text: str


@dataclass(frozen=True, slots=True, init=False)
class AllOf:
    clauses: tuple["Expression", ...]

    def __init__(self, *clauses: "Expression") -> None:
        object.__setattr__(self, "clauses", tuple(clauses))


@dataclass(frozen=True, slots=True, init=False)
class AnyOf:
    clauses: tuple["Expression", ...]

    def __init__(self, *clauses: "Expression") -> None:
        if not clauses:
            raise ValueError("AnyOf requires at least one clause.")
        object.__setattr__(self, "clauses", tuple(clauses))


Expression = Union[FieldEquals, FieldContains, AllOf, AnyOf]

MATCH_ALL = AllOf()


def compile_filter(expression: Expression) -> dict[str, Any]:
    """Translate an expression tree into a MongoDB query document."""

    if isinstance(expression, FieldEquals):
        return {expression.field: expression.value}
    if isinstance(expression, FieldContains):
        return {expression.field: {"$regex": re.escape(expression.text), "$options": "i"}}
    if isinstance(expression, AllOf):
        if not expression.clauses:
            return {}
        if len(expression.clauses) == 1:
            return compile_filter(expression.clauses[0])
        return {"$and": [compile_filter(clause) for clause in expression.clauses]}
    if isinstance(expression, AnyOf):
        return {"$or": [compile_filter(clause) for clause in expression.clauses]}
    raise TypeError(f"Unsupported filter expression: {expression!r}")


__all__ = [
    "AllOf",
    "AnyOf",
    "Expression",
    "FieldContains",
    "FieldEquals",
    "MATCH_ALL",
    "compile_filter",
]
