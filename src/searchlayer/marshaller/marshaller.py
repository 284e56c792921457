"""Marshaller — Converts documents to engine records and back.

The index's field definitions decide how each value is coerced. Keys that
are not declared on the index are dropped, which also strips engine
metadata such as ``_formatted`` or ``_rankingScore`` from hits.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from searchlayer.schema.field import (
    BooleanField,
    DateTimeField,
    FloatField,
    IdentifierField,
    IntegerField,
    ObjectField,
    TextField,
)


class Marshaller:
    """Schema-driven document conversion.

    Args:
        date_as_integer: Store date/time fields as UNIX timestamps. Engines
            that can only range-filter numbers (Meilisearch) need this.
    """

    def __init__(self, *, date_as_integer: bool = False) -> None:
        self.date_as_integer = date_as_integer

    def marshall(self, fields: Sequence[Any], document: Mapping[str, Any]) -> dict[str, Any]:
        """Convert a document into the record sent to the engine."""
        return self._convert(fields, document, self.marshall_value)

    def unmarshall(self, fields: Sequence[Any], raw: Mapping[str, Any]) -> dict[str, Any]:
        """Convert an engine record back into a document."""
        return self._convert(fields, raw, self._unmarshall_value)

    def _convert(
        self,
        fields: Sequence[Any],
        data: Mapping[str, Any],
        convert: Callable[[Any, Any], Any],
    ) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for field in fields:
            if field.name not in data:
                continue

            value = data[field.name]
            if value is None:
                result[field.name] = None
            elif field.multiple:
                values = value if isinstance(value, list | tuple) else [value]
                result[field.name] = [convert(field, v) for v in values if v is not None]
            else:
                result[field.name] = convert(field, value)
        return result

    def marshall_value(self, field: Any, value: Any) -> Any:
        """Convert one value of ``field`` into the form stored by the engine."""
        if isinstance(field, ObjectField):
            return self.marshall(field.fields, value)
        if isinstance(field, DateTimeField):
            moment = _parse_datetime(value)
            return int(moment.timestamp()) if self.date_as_integer else moment.isoformat()
        return _coerce_scalar(field, value)

    def _unmarshall_value(self, field: Any, value: Any) -> Any:
        if isinstance(field, ObjectField):
            return self.unmarshall(field.fields, value)
        if isinstance(field, DateTimeField):
            if isinstance(value, int | float) and not isinstance(value, bool):
                return datetime.fromtimestamp(value, UTC).isoformat()
            return str(value)
        return _coerce_scalar(field, value)


def _coerce_scalar(field: Any, value: Any) -> Any:
    if isinstance(field, IdentifierField | TextField):
        return str(value)
    if isinstance(field, BooleanField):
        return _coerce_bool(value)
    if isinstance(field, IntegerField):
        return int(value)
    if isinstance(field, FloatField):
        return float(value)
    return value


_BOOLEAN_STRINGS = {"true": True, "1": True, "false": False, "0": False}


def _coerce_bool(value: Any) -> bool:
    """Accept real booleans, 0/1 and their string spellings; reject anything else."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in _BOOLEAN_STRINGS:
        return _BOOLEAN_STRINGS[value.strip().lower()]
    raise ValueError(f"Cannot interpret {value!r} as a boolean.")


def _parse_datetime(value: Any) -> datetime:
    """Parse a datetime, ISO string or UNIX timestamp; naive values are UTC."""
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, int | float) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, UTC)
    else:
        moment = datetime.fromisoformat(str(value).replace("Z", "+00:00"))

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment
