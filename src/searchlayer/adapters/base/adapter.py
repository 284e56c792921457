"""Base adapter — Abstract interfaces for search engine connectors.

Every backend is split into three collaborators that an ``Adapter`` bundles:
  1. ``Indexer`` — saves and deletes documents
  2. ``Searcher`` — runs ``Search`` requests and returns ``Result`` objects
  3. ``SchemaManager`` — creates, drops and checks indexes

Writes return an optional ``TaskInterface``; ``None`` means the caller did
not ask to wait for the engine to apply the write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from searchlayer.schema.index import Index
from searchlayer.search.result import Result
from searchlayer.search.search import Search
from searchlayer.task.task import TaskInterface


class AdapterHealth(BaseModel):
    """Health status of a search adapter."""

    status: str = Field(description="Health status: healthy, degraded, unhealthy")
    latency_ms: int = Field(default=0, description="Latency of last health check in ms")
    last_check: str | None = Field(default=None, description="ISO timestamp of last health check")
    message: str | None = Field(default=None, description="Additional health message")


class Indexer(ABC):
    """Writes documents into an index."""

    @abstractmethod
    async def save(
        self,
        index: Index,
        document: dict[str, Any],
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None:
        """Create or replace a single document.

        Args:
            index: Target index definition.
            document: The document; must contain the identifier field.
            return_slow_promise_result: Return a task that waits until the
                engine has applied the write.

        Returns:
            A task handle if requested, otherwise ``None``.
        """

    @abstractmethod
    async def delete(
        self,
        index: Index,
        identifier: str,
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None:
        """Delete a single document by identifier."""


class Searcher(ABC):
    """Executes search requests."""

    @abstractmethod
    async def search(self, search: Search) -> Result:
        """Run ``search`` and return its result.

        Raises:
            UnsupportedOperationError: If the request needs a capability
                the backend lacks (e.g. searching several indexes at once).
        """


class SchemaManager(ABC):
    """Manages index lifecycle on the backend."""

    @abstractmethod
    async def exists_index(self, index: Index) -> bool: ...

    @abstractmethod
    async def create_index(
        self,
        index: Index,
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None: ...

    @abstractmethod
    async def drop_index(
        self,
        index: Index,
        *,
        return_slow_promise_result: bool = False,
    ) -> TaskInterface | None: ...


class Adapter(ABC):
    """A search backend: indexer, searcher and schema manager together."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name (e.g., 'meilisearch')."""

    @property
    @abstractmethod
    def indexer(self) -> Indexer: ...

    @property
    @abstractmethod
    def searcher(self) -> Searcher: ...

    @property
    @abstractmethod
    def schema_manager(self) -> SchemaManager: ...

    @abstractmethod
    async def health_check(self) -> AdapterHealth:
        """Check the health of the search backend."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Release connections held by the adapter."""
