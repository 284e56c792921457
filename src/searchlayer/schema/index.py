"""Index and Schema models.

An ``Index`` is a named, ordered collection of field definitions with exactly
one top-level identifier field. A ``Schema`` groups indexes by name. Both are
immutable and are only referenced (never owned) by adapters.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, model_validator

from searchlayer.schema.exceptions import FieldByPathNotFoundError, IndexNotFoundError
from searchlayer.schema.field import AnyField, IdentifierField, ObjectField


def _walk(fields: Sequence[Any], prefix: str = "") -> Iterator[tuple[str, Any]]:
    for field in fields:
        path = f"{prefix}{field.name}"
        yield path, field
        if isinstance(field, ObjectField):
            yield from _walk(field.fields, prefix=f"{path}.")


class Index(BaseModel):
    """A search index definition."""

    model_config = {"frozen": True}

    name: str = Field(description="Index name (engine UID)", min_length=1)
    fields: list[AnyField] = Field(description="Ordered field definitions")

    _fields_by_path: dict[str, Any] = PrivateAttr(default_factory=dict)

    @model_validator(mode="after")
    def _check_fields(self) -> Index:
        identifiers = [f for f in self.fields if isinstance(f, IdentifierField)]
        if len(identifiers) != 1:
            raise ValueError(
                f'Index "{self.name}" must define exactly one identifier field, found {len(identifiers)}.'
            )

        names = [f.name for f in self.fields]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f'Index "{self.name}" has duplicate fields: {duplicates}')
        return self

    def model_post_init(self, context: Any, /) -> None:
        self._fields_by_path = dict(_walk(self.fields))

    @property
    def identifier_field(self) -> IdentifierField:
        return next(f for f in self.fields if isinstance(f, IdentifierField))

    def get_field_by_path(self, path: str) -> AnyField:
        """Resolve a dotted field path, e.g. ``"footer.text"``.

        Raises:
            FieldByPathNotFoundError: If no field exists at ``path``.
        """
        try:
            return self._fields_by_path[path]
        except KeyError:
            raise FieldByPathNotFoundError(self.name, path) from None

    def _leaf_paths(self, flag: str) -> list[str]:
        return [
            path
            for path, field in self._fields_by_path.items()
            if not isinstance(field, ObjectField) and getattr(field, flag)
        ]

    @property
    def searchable_fields(self) -> list[str]:
        return self._leaf_paths("searchable")

    @property
    def filterable_fields(self) -> list[str]:
        return self._leaf_paths("filterable")

    @property
    def sortable_fields(self) -> list[str]:
        return self._leaf_paths("sortable")


class Schema(BaseModel):
    """Collection of indexes addressed by name."""

    model_config = {"frozen": True}

    indexes: dict[str, Index] = Field(default_factory=dict)

    @classmethod
    def from_indexes(cls, *indexes: Index) -> Schema:
        return cls(indexes={index.name: index for index in indexes})

    def get_index(self, name: str) -> Index:
        """Look up an index by name.

        Raises:
            IndexNotFoundError: If the schema has no such index.
        """
        try:
            return self.indexes[name]
        except KeyError:
            raise IndexNotFoundError(name) from None
