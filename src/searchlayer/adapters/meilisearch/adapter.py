"""Meilisearch adapter — Bundles indexer, searcher and schema manager.

Communicates with Meilisearch via its REST API using ``httpx``.

Usage::

    adapter = MeilisearchAdapter(
        MeilisearchClient("http://localhost:7700", api_key="masterKey"),
    )
    engine = Engine(adapter, schema)
"""

from __future__ import annotations

import time
from datetime import UTC, datetime

from searchlayer.adapters.base.adapter import Adapter, AdapterHealth
from searchlayer.adapters.meilisearch.client import MeilisearchClient
from searchlayer.adapters.meilisearch.indexer import MeilisearchIndexer
from searchlayer.adapters.meilisearch.schema_manager import MeilisearchSchemaManager
from searchlayer.adapters.meilisearch.searcher import MeilisearchSearcher
from searchlayer.config.settings import Settings
from searchlayer.marshaller.marshaller import Marshaller


class MeilisearchAdapter(Adapter):
    """Search adapter for Meilisearch.

    Args:
        client: Meilisearch REST client; closed by ``shutdown()``.
        strict_fast_path: See ``MeilisearchSearcher``.
        date_as_integer: Store date/time fields as UNIX timestamps, which
            Meilisearch needs to range-filter and sort them. Filter values on
            date/time fields are converted the same way before a search.
    """

    def __init__(
        self,
        client: MeilisearchClient,
        *,
        strict_fast_path: bool = True,
        date_as_integer: bool = True,
    ) -> None:
        self._client = client
        marshaller = Marshaller(date_as_integer=date_as_integer)
        self._indexer = MeilisearchIndexer(client, marshaller)
        self._searcher = MeilisearchSearcher(client, marshaller, strict_fast_path=strict_fast_path)
        self._schema_manager = MeilisearchSchemaManager(client)

    @classmethod
    def from_settings(cls, settings: Settings) -> MeilisearchAdapter:
        meili = settings.meilisearch
        client = MeilisearchClient(
            meili.host,
            api_key=meili.api_key,
            timeout=meili.timeout,
            task_timeout_ms=meili.task_timeout_ms,
            task_interval_ms=meili.task_interval_ms,
        )
        return cls(
            client,
            strict_fast_path=settings.search.strict_fast_path,
            date_as_integer=settings.search.date_as_integer,
        )

    @property
    def name(self) -> str:
        return "meilisearch"

    @property
    def indexer(self) -> MeilisearchIndexer:
        return self._indexer

    @property
    def searcher(self) -> MeilisearchSearcher:
        return self._searcher

    @property
    def schema_manager(self) -> MeilisearchSchemaManager:
        return self._schema_manager

    async def health_check(self) -> AdapterHealth:
        """Check Meilisearch health."""
        try:
            start = time.monotonic()
            data = await self._client.health()
            latency_ms = int((time.monotonic() - start) * 1000)
        except Exception as e:
            return AdapterHealth(status="unhealthy", message=str(e))

        status = data.get("status", "unknown")
        return AdapterHealth(
            status="healthy" if status == "available" else "degraded",
            latency_ms=latency_ms,
            last_check=datetime.now(UTC).isoformat(),
            message=f"Meilisearch status: {status}",
        )

    async def shutdown(self) -> None:
        await self._client.close()
