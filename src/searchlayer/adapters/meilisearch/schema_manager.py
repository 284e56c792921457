"""Meilisearch schema manager — Creates, drops and checks indexes."""

from __future__ import annotations

import logging

from searchlayer.adapters.base.adapter import SchemaManager
from searchlayer.adapters.base.exceptions import UnexpectedStatusError
from searchlayer.adapters.meilisearch.client import ApiError, MeilisearchClient
from searchlayer.adapters.meilisearch.indexer import ENQUEUED, task_for
from searchlayer.schema.index import Index
from searchlayer.task.task import AsyncTask, TaskInterface

logger = logging.getLogger(__name__)


class MeilisearchSchemaManager(SchemaManager):
    """Index lifecycle for Meilisearch.

    Creating an index also pushes its searchable, filterable and sortable
    attributes so that filters and sorts on those fields are accepted.
    """

    def __init__(self, client: MeilisearchClient) -> None:
        self._client = client

    async def exists_index(self, index: Index) -> bool:
        try:
            await self._client.get_index(index.name)
        except ApiError as e:
            if e.http_status != 404:
                raise
            return False
        return True

    async def create_index(
        self,
        index: Index,
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None:
        created = await self._client.create_index(index.name, primary_key=index.identifier_field.name)
        if created.get("status") != ENQUEUED:
            raise UnexpectedStatusError("creating", index.name, created.get("status"))

        settings = {
            "searchableAttributes": index.searchable_fields or ["*"],
            "filterableAttributes": index.filterable_fields,
            "sortableAttributes": index.sortable_fields,
        }
        updated = await self._client.update_settings(index.name, settings)
        if updated.get("status") != ENQUEUED:
            raise UnexpectedStatusError("configuring", index.name, updated.get("status"))

        logger.info("Enqueued creation of index %s", index.name)
        if not return_slow_promise_result:
            return None

        async def _wait() -> None:
            await self._client.wait_for_task(created["taskUid"])
            await self._client.wait_for_task(updated["taskUid"])

        return AsyncTask(_wait)

    async def drop_index(
        self,
        index: Index,
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None:
        response = await self._client.delete_index(index.name)
        if response.get("status") != ENQUEUED:
            raise UnexpectedStatusError("dropping", index.name, response.get("status"))

        logger.info("Enqueued drop of index %s", index.name)
        return task_for(self._client, response, return_slow_promise_result)
