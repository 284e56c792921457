"""Field definitions — Typed fields that make up an index.

Every field carries a ``type`` tag which drives both how documents are
marshalled for the engine and how filter values are escaped. Fields are
immutable once constructed.

Example::

    fields = [
        IdentifierField(name="id"),
        TextField(name="title", sortable=True),
        BooleanField(name="is_online", filterable=True),
        ObjectField(name="footer", fields=[TextField(name="text")]),
    ]
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator


class BaseField(BaseModel):
    """Common attributes shared by all field types."""

    model_config = {"frozen": True}

    name: str = Field(description="Field name as stored in the document", min_length=1)
    multiple: bool = Field(default=False, description="Whether the field holds a list of values")
    searchable: bool = Field(default=True, description="Included in free-text search")
    filterable: bool = Field(default=False, description="Usable in filter conditions")
    sortable: bool = Field(default=False, description="Usable as a sort key")


class IdentifierField(BaseField):
    """The unique document identifier; exactly one per index."""

    type: Literal["identifier"] = "identifier"
    searchable: bool = False
    filterable: bool = True
    sortable: bool = True

    @model_validator(mode="after")
    def _check_single_value(self) -> IdentifierField:
        if self.multiple:
            raise ValueError(f'Identifier field "{self.name}" cannot be multiple.')
        return self


class TextField(BaseField):
    type: Literal["text"] = "text"


class BooleanField(BaseField):
    type: Literal["boolean"] = "boolean"
    searchable: bool = False


class IntegerField(BaseField):
    type: Literal["integer"] = "integer"
    searchable: bool = False


class FloatField(BaseField):
    type: Literal["float"] = "float"
    searchable: bool = False


class DateTimeField(BaseField):
    """Date/time value, exchanged as ISO-8601 strings."""

    type: Literal["datetime"] = "datetime"
    searchable: bool = False


class ObjectField(BaseField):
    """Nested object with its own field definitions.

    Nested fields are addressed by dotted path, e.g. ``"footer.text"``.
    """

    type: Literal["object"] = "object"
    fields: list[AnyField] = Field(default_factory=list, description="Nested field definitions")


AnyField = Annotated[
    IdentifierField | TextField | BooleanField | IntegerField | FloatField | DateTimeField | ObjectField,
    Field(discriminator="type"),
]

ObjectField.model_rebuild()
