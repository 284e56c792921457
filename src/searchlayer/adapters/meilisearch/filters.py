"""Filter compilation — Translates conditions into Meilisearch filter syntax.

Conditions are compiled one by one and joined with ``AND``::

    compile_conditions(index, [
        EqualCondition(field="is_online", value=True),
        GreaterThanCondition(field="rating", value=3),
    ]).filter
    # 'is_online = true AND rating > 3'

Values of ``=``/``!=`` clauses are escaped according to the indexed field's
type. Quotes embedded in text values are not escaped, and values of range
comparisons are inserted as-is; callers are expected to pass numbers there.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from searchlayer.adapters.base.exceptions import ConditionNotImplementedError
from searchlayer.schema.exceptions import FieldByPathNotFoundError
from searchlayer.schema.field import BooleanField, IdentifierField, TextField
from searchlayer.schema.index import Index
from searchlayer.search.condition import (
    EqualCondition,
    FilterValue,
    GreaterThanCondition,
    GreaterThanEqualCondition,
    IdentifierCondition,
    LessThanCondition,
    LessThanEqualCondition,
    NotEqualCondition,
    SearchCondition,
)


class CompiledConditions(BaseModel):
    """Free-text query and filter expression produced from a condition list."""

    model_config = {"frozen": True}

    query: str | None = None
    filter: str | None = None


def escape_field_value(index: Index, field_path: str, value: FilterValue) -> FilterValue:
    """Render ``value`` as a literal suitable for the field at ``field_path``.

    Returns the value unchanged when the path is unknown to the index.
    """
    # Instead of guessing the type of the value, use the type of the indexed field.
    try:
        field = index.get_field_by_path(field_path)
    except FieldByPathNotFoundError:
        return value

    if isinstance(field, TextField | IdentifierField):
        return f'"{value}"'
    if isinstance(field, BooleanField):
        return "true" if value else "false"
    return value


def _literal(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def compile_conditions(index: Index, conditions: Sequence[Any]) -> CompiledConditions:
    """Compile ``conditions`` for a search on ``index``.

    A ``SearchCondition`` sets the free-text query (a later one replaces an
    earlier one); every other condition becomes a filter clause. An empty
    clause list yields ``filter=None``.

    Raises:
        ConditionNotImplementedError: For any object that is not a known
            condition variant. Nothing is returned in that case.
    """
    query: str | None = None
    clauses: list[str] = []
    identifier_name = index.identifier_field.name

    for condition in conditions:
        match condition:
            case IdentifierCondition(identifier=identifier):
                escaped = escape_field_value(index, identifier_name, identifier)
                clauses.append(f"{identifier_name} = {_literal(escaped)}")
            case SearchCondition(query=text):
                query = text
            case EqualCondition(field=field, value=value):
                clauses.append(f"{field} = {_literal(escape_field_value(index, field, value))}")
            case NotEqualCondition(field=field, value=value):
                clauses.append(f"{field} != {_literal(escape_field_value(index, field, value))}")
            case GreaterThanCondition(field=field, value=value):
                clauses.append(f"{field} > {_literal(value)}")
            case GreaterThanEqualCondition(field=field, value=value):
                clauses.append(f"{field} >= {_literal(value)}")
            case LessThanCondition(field=field, value=value):
                clauses.append(f"{field} < {_literal(value)}")
            case LessThanEqualCondition(field=field, value=value):
                clauses.append(f"{field} <= {_literal(value)}")
            case _:
                raise ConditionNotImplementedError(condition)

    return CompiledConditions(query=query, filter=" AND ".join(clauses) if clauses else None)
