"""Schema model — Indexes and their typed field definitions."""

from searchlayer.schema.exceptions import FieldByPathNotFoundError, IndexNotFoundError, SchemaError
from searchlayer.schema.field import (
    AnyField,
    BooleanField,
    DateTimeField,
    FloatField,
    IdentifierField,
    IntegerField,
    ObjectField,
    TextField,
)
from searchlayer.schema.index import Index, Schema

__all__ = [
    "AnyField",
    "BooleanField",
    "DateTimeField",
    "FieldByPathNotFoundError",
    "FloatField",
    "IdentifierField",
    "Index",
    "IndexNotFoundError",
    "IntegerField",
    "ObjectField",
    "Schema",
    "SchemaError",
    "TextField",
]
