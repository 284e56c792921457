"""Meilisearch searcher — Runs ``Search`` requests against Meilisearch."""

from __future__ import annotations

import logging
from functools import partial
from typing import Any

from searchlayer.adapters.base.adapter import Searcher
from searchlayer.adapters.base.exceptions import UnsupportedOperationError
from searchlayer.adapters.meilisearch.client import ApiError, MeilisearchClient
from searchlayer.adapters.meilisearch.filters import compile_conditions
from searchlayer.marshaller.marshaller import Marshaller
from searchlayer.schema.exceptions import FieldByPathNotFoundError
from searchlayer.schema.field import DateTimeField
from searchlayer.schema.index import Index
from searchlayer.search.condition import FieldCondition, IdentifierCondition
from searchlayer.search.result import Result
from searchlayer.search.search import Search

logger = logging.getLogger(__name__)


class MeilisearchSearcher(Searcher):
    """Searcher for Meilisearch.

    A request for a single document by identifier is answered with a direct
    document fetch instead of a filtered search. Everything else goes
    through ``/indexes/{index}/search``.

    Args:
        client: Meilisearch REST client.
        marshaller: Converts hits back into documents.
        strict_fast_path: Only take the direct-fetch path when the limit is
            unset or exactly 1. When ``False`` any positive limit qualifies.
    """

    def __init__(
        self,
        client: MeilisearchClient,
        marshaller: Marshaller | None = None,
        *,
        strict_fast_path: bool = True,
    ) -> None:
        self._client = client
        self._marshaller = marshaller or Marshaller(date_as_integer=True)
        self._strict_fast_path = strict_fast_path

    def is_single_document_lookup(self, search: Search) -> bool:
        if len(search.indexes) != 1 or len(search.filters) != 1:
            return False
        if not isinstance(search.filters[0], IdentifierCondition):
            return False
        if search.offset not in (None, 0):
            return False
        if self._strict_fast_path:
            return search.limit in (None, 1)
        return search.limit is None or search.limit > 0

    async def search(self, search: Search) -> Result:
        if not search.indexes:
            raise ValueError("A search needs at least one index.")

        # optimized single document query
        if self.is_single_document_lookup(search):
            return await self._get_single_document(search)

        if len(search.indexes) != 1:
            raise UnsupportedOperationError(
                "Meilisearch does not support searching multiple indexes in one query: "
                f"{list(search.indexes)}"
            )

        index = next(iter(search.indexes.values()))
        compiled = compile_conditions(index, [self._to_stored_form(index, c) for c in search.filters])

        params: dict[str, Any] = {}
        if compiled.filter is not None:
            params["filter"] = compiled.filter
        if search.offset:
            params["offset"] = search.offset
        if search.limit:
            params["limit"] = search.limit
        if search.sort_bys:
            params["sort"] = [f"{field}:{direction}" for field, direction in search.sort_bys.items()]

        logger.debug("Searching index %s with query=%r params=%s", index.name, compiled.query, params)
        data = await self._client.search(index.name, compiled.query, params)

        total = data.get("totalHits")
        if total is None:
            total = data.get("estimatedTotalHits")
        return self._to_result(index, data.get("hits", []), total)

    async def _get_single_document(self, search: Search) -> Result:
        index = next(iter(search.indexes.values()))
        identifier = search.filters[0].identifier

        try:
            data = await self._client.get_document(index.name, identifier)
        except ApiError as e:
            if e.http_status != 404:
                raise
            logger.debug("Document %s not found in index %s", identifier, index.name)
            return self._to_result(index, [], 0)

        return self._to_result(index, [data], 1)

    def _to_stored_form(self, index: Index, condition: Any) -> Any:
        """Rewrite the value of a date/time condition the way documents store it.

        With ``date_as_integer`` on, ``published > "2024-01-01T00:00:00Z"`` is
        compiled as ``published > 1704067200``. Other conditions are returned
        unchanged.
        """
        if not isinstance(condition, FieldCondition) or isinstance(condition.value, bool):
            return condition
        try:
            field = index.get_field_by_path(condition.field)
        except FieldByPathNotFoundError:
            return condition
        if not isinstance(field, DateTimeField):
            return condition
        return condition.model_copy(update={"value": self._marshaller.marshall_value(field, condition.value)})

    def _to_result(self, index: Index, hits: list[dict[str, Any]], total: int | None) -> Result:
        return Result(hits, total, transform=partial(self._marshaller.unmarshall, index.fields))
