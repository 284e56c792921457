"""Meilisearch indexer — Document upserts and deletes."""

from __future__ import annotations

import logging
from typing import Any

from searchlayer.adapters.base.adapter import Indexer
from searchlayer.adapters.base.exceptions import UnexpectedStatusError
from searchlayer.adapters.meilisearch.client import MeilisearchClient
from searchlayer.marshaller.marshaller import Marshaller
from searchlayer.schema.index import Index
from searchlayer.task.task import AsyncTask, TaskInterface

logger = logging.getLogger(__name__)

ENQUEUED = "enqueued"


def task_for(
    client: MeilisearchClient,
    response: dict[str, Any],
    return_slow_promise_result: bool,
) -> TaskInterface | None:
    """Wrap an enqueued task summary into a handle, if one was requested."""
    if not return_slow_promise_result:
        return None

    task_uid = response["taskUid"]
    return AsyncTask(lambda: client.wait_for_task(task_uid))


class MeilisearchIndexer(Indexer):
    """Indexer for Meilisearch.

    Meilisearch applies writes asynchronously: every request is answered
    with an ``enqueued`` task summary. Anything else is treated as a failure.
    """

    def __init__(self, client: MeilisearchClient, marshaller: Marshaller | None = None) -> None:
        self._client = client
        self._marshaller = marshaller or Marshaller(date_as_integer=True)

    async def save(
        self,
        index: Index,
        document: dict[str, Any],
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None:
        identifier_name = index.identifier_field.name
        if document.get(identifier_name) is None:
            raise ValueError(f'Document has no value for identifier field "{identifier_name}".')
        identifier = str(document[identifier_name])

        record = self._marshaller.marshall(index.fields, document)
        response = await self._client.add_documents(index.name, [record], primary_key=identifier_name)

        if response.get("status") != ENQUEUED:
            raise UnexpectedStatusError("saving", index.name, response.get("status"), identifier=identifier)

        logger.debug("Enqueued save of %s into %s (task %s)", identifier, index.name, response.get("taskUid"))
        return task_for(self._client, response, return_slow_promise_result)

    async def delete(
        self,
        index: Index,
        identifier: str,
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None:
        response = await self._client.delete_document(index.name, identifier)

        if response.get("status") != ENQUEUED:
            raise UnexpectedStatusError("deleting", index.name, response.get("status"), identifier=identifier)

        logger.debug("Enqueued delete of %s from %s (task %s)", identifier, index.name, response.get("taskUid"))
        return task_for(self._client, response, return_slow_promise_result)
