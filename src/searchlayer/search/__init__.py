"""Search abstraction — Conditions, requests, builder and results."""

from searchlayer.search.condition import (
    Condition,
    EqualCondition,
    FieldCondition,
    FilterValue,
    GreaterThanCondition,
    GreaterThanEqualCondition,
    IdentifierCondition,
    LessThanCondition,
    LessThanEqualCondition,
    NotEqualCondition,
    SearchCondition,
)
from searchlayer.search.result import Document, Result
from searchlayer.search.search import Search, SearchBuilder, SortDirection

__all__ = [
    "Condition",
    "Document",
    "EqualCondition",
    "FieldCondition",
    "FilterValue",
    "GreaterThanCondition",
    "GreaterThanEqualCondition",
    "IdentifierCondition",
    "LessThanCondition",
    "LessThanEqualCondition",
    "NotEqualCondition",
    "Result",
    "Search",
    "SearchBuilder",
    "SearchCondition",
    "SortDirection",
]
