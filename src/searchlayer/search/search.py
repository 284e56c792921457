"""Search request model and its fluent builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field

from searchlayer.schema.index import Index, Schema
from searchlayer.search.condition import Condition
from searchlayer.search.result import Result

if TYPE_CHECKING:
    from searchlayer.adapters.base.adapter import Searcher

SortDirection = Literal["asc", "desc"]


class Search(BaseModel):
    """A search request against one or more indexes.

    Filters are ANDed together. ``sort_bys`` is insertion ordered; the first
    entry has the highest sort precedence. A ``limit`` or ``offset`` of ``0``
    means the same as unset (engine default).

    Values compared against date/time fields may be given as ISO-8601 strings
    or UNIX timestamps; the adapter converts them to the stored form.
    """

    indexes: dict[str, Index] = Field(description="Target indexes keyed by name")
    filters: list[Condition] = Field(default_factory=list, description="Conditions, ANDed together")
    sort_bys: dict[str, SortDirection] = Field(default_factory=dict, description="Field path -> direction")
    limit: int | None = Field(default=None, ge=0, description="Maximum number of hits")
    offset: int | None = Field(default=None, ge=0, description="Number of hits to skip")


class SearchBuilder:
    """Fluent builder that assembles a ``Search`` and runs it.

    Example::

        result = await (
            SearchBuilder(schema, searcher)
            .add_index("blog")
            .add_filter(EqualCondition(field="is_online", value=True))
            .add_sort_by("published", "desc")
            .limit(10)
            .get_result()
        )
    """

    def __init__(self, schema: Schema, searcher: Searcher) -> None:
        self._schema = schema
        self._searcher = searcher
        self._indexes: dict[str, Index] = {}
        self._filters: list[Condition] = []
        self._sort_bys: dict[str, SortDirection] = {}
        self._limit: int | None = None
        self._offset: int | None = None

    def add_index(self, name: str) -> SearchBuilder:
        self._indexes[name] = self._schema.get_index(name)
        return self

    def add_filter(self, condition: Condition) -> SearchBuilder:
        self._filters.append(condition)
        return self

    def add_sort_by(self, field: str, direction: SortDirection = "asc") -> SearchBuilder:
        if direction not in ("asc", "desc"):
            raise ValueError(f'Sort direction must be "asc" or "desc", got "{direction}".')
        self._sort_bys[field] = direction
        return self

    def limit(self, limit: int) -> SearchBuilder:
        if limit < 1:
            raise ValueError(f"Limit must be a positive integer, got {limit}.")
        self._limit = limit
        return self

    def offset(self, offset: int) -> SearchBuilder:
        if offset < 0:
            raise ValueError(f"Offset must not be negative, got {offset}.")
        self._offset = offset
        return self

    def get_search(self) -> Search:
        return Search(
            indexes=dict(self._indexes),
            filters=list(self._filters),
            sort_bys=dict(self._sort_bys),
            limit=self._limit,
            offset=self._offset,
        )

    async def get_result(self) -> Result:
        return await self._searcher.search(self.get_search())
