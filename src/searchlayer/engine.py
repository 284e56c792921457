"""Engine — Entry point tying a schema to a search adapter.

The engine resolves index names against the schema and delegates to the
adapter's indexer, searcher and schema manager::

    engine = Engine.from_settings(schema, Settings())

    await engine.save_document("blog", {"id": "1", "title": "Hello"})
    doc = await engine.get_document("blog", "1")

    result = await (
        engine.create_search_builder()
        .add_index("blog")
        .add_filter(SearchCondition(query="hello"))
        .get_result()
    )
"""

from __future__ import annotations

import logging
from typing import Any

from searchlayer.adapters.base.adapter import Adapter
from searchlayer.adapters.base.registry import AdapterRegistry, default_registry
from searchlayer.config.settings import Settings
from searchlayer.exceptions import DocumentNotFoundError
from searchlayer.observability.logging import setup_logging
from searchlayer.schema.index import Schema
from searchlayer.search.condition import IdentifierCondition
from searchlayer.search.result import Document
from searchlayer.search.search import SearchBuilder
from searchlayer.task.task import AsyncTask, TaskHelper, TaskInterface

logger = logging.getLogger(__name__)


class Engine:
    """Search engine facade.

    Attributes:
        adapter: The backend adapter.
        schema: Index definitions, addressed by name.
    """

    def __init__(self, adapter: Adapter, schema: Schema) -> None:
        self.adapter = adapter
        self.schema = schema

    @classmethod
    def from_settings(
        cls,
        schema: Schema,
        settings: Settings | None = None,
        registry: AdapterRegistry | None = None,
    ) -> Engine:
        """Build an engine with the adapter named in ``settings.search.adapter``.

        Also configures the ``searchlayer`` logger from ``settings.observability``.
        """
        settings = settings or Settings()
        setup_logging(settings.observability)
        registry = registry or default_registry()
        return cls(registry.create(settings.search.adapter, settings), schema)

    # ── Documents ────────────────────────────────────────────────────────

    async def save_document(
        self,
        index_name: str,
        document: dict[str, Any],
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None:
        return await self.adapter.indexer.save(
            self.schema.get_index(index_name),
            document,
            return_slow_promise_result=return_slow_promise_result,
        )

    async def delete_document(
        self,
        index_name: str,
        identifier: str,
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None:
        return await self.adapter.indexer.delete(
            self.schema.get_index(index_name),
            identifier,
            return_slow_promise_result=return_slow_promise_result,
        )

    async def get_document(self, index_name: str, identifier: str) -> Document:
        """Fetch one document by identifier.

        Raises:
            DocumentNotFoundError: If the index holds no such document.
        """
        result = await (
            self.create_search_builder()
            .add_index(index_name)
            .add_filter(IdentifierCondition(identifier=identifier))
            .limit(1)
            .get_result()
        )
        for document in result:
            return document
        raise DocumentNotFoundError(index_name, identifier)

    def create_search_builder(self) -> SearchBuilder:
        return SearchBuilder(self.schema, self.adapter.searcher)

    # ── Indexes ──────────────────────────────────────────────────────────

    async def exists_index(self, index_name: str) -> bool:
        return await self.adapter.schema_manager.exists_index(self.schema.get_index(index_name))

    async def create_index(
        self,
        index_name: str,
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None:
        return await self.adapter.schema_manager.create_index(
            self.schema.get_index(index_name),
            return_slow_promise_result=return_slow_promise_result,
        )

    async def drop_index(
        self,
        index_name: str,
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None:
        return await self.adapter.schema_manager.drop_index(
            self.schema.get_index(index_name),
            return_slow_promise_result=return_slow_promise_result,
        )

    async def create_schema(self, *, return_slow_promise_result: bool = False) -> TaskInterface | None:
        """Create every index of the schema."""
        helper = TaskHelper()
        for name in self.schema.indexes:
            helper.add(await self.create_index(name, return_slow_promise_result=return_slow_promise_result))
        logger.info("Enqueued creation of %d indexes", len(self.schema.indexes))
        return AsyncTask(helper.wait_for_all) if return_slow_promise_result else None

    async def drop_schema(self, *, return_slow_promise_result: bool = False) -> TaskInterface | None:
        """Drop every index of the schema."""
        helper = TaskHelper()
        for name in self.schema.indexes:
            helper.add(await self.drop_index(name, return_slow_promise_result=return_slow_promise_result))
        logger.info("Enqueued drop of %d indexes", len(self.schema.indexes))
        return AsyncTask(helper.wait_for_all) if return_slow_promise_result else None
