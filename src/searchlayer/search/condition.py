"""Filter conditions — Closed set of condition variants.

Each condition is a frozen model tagged by ``kind``. ``Condition`` is the
discriminated union of all variants; adapters dispatch over it exhaustively
and must reject anything else.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

FilterValue = bool | int | float | str


class _BaseCondition(BaseModel):
    model_config = {"frozen": True}


class IdentifierCondition(_BaseCondition):
    """Match the document whose identifier equals ``identifier``."""

    kind: Literal["identifier"] = "identifier"
    identifier: str


class SearchCondition(_BaseCondition):
    """Free-text query; not a filter clause."""

    kind: Literal["search"] = "search"
    query: str


class FieldCondition(_BaseCondition):
    """Base of the conditions comparing one field to a value."""

    field: str = Field(description="Dotted field path")
    value: FilterValue


class EqualCondition(FieldCondition):
    kind: Literal["equal"] = "equal"


class NotEqualCondition(FieldCondition):
    kind: Literal["not_equal"] = "not_equal"


class GreaterThanCondition(FieldCondition):
    kind: Literal["greater_than"] = "greater_than"


class GreaterThanEqualCondition(FieldCondition):
    kind: Literal["greater_than_equal"] = "greater_than_equal"


class LessThanCondition(FieldCondition):
    kind: Literal["less_than"] = "less_than"


class LessThanEqualCondition(FieldCondition):
    kind: Literal["less_than_equal"] = "less_than_equal"


Condition = Annotated[
    IdentifierCondition
    | SearchCondition
    | EqualCondition
    | NotEqualCondition
    | GreaterThanCondition
    | GreaterThanEqualCondition
    | LessThanCondition
    | LessThanEqualCondition,
    Field(discriminator="kind"),
]
