"""Meilisearch REST client — Thin async wrapper over the HTTP API.

Only the endpoints the adapter needs are covered. Every non-2xx response is
raised as ``ApiError`` carrying the HTTP status and Meilisearch error code,
so callers can tell "document not found" apart from real failures.

Usage::

    async with MeilisearchClient("http://localhost:7700", api_key="masterKey") as client:
        task = await client.add_documents("blog", [{"id": "1"}], primary_key="id")
        await client.wait_for_task(task["taskUid"])
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, cast
from urllib.parse import quote

import httpx

from searchlayer.adapters.base.exceptions import AdapterError, ConnectionError

logger = logging.getLogger(__name__)

FINISHED_TASK_STATUSES = frozenset({"succeeded", "failed", "canceled"})


class ApiError(AdapterError):
    """An error reported by the Meilisearch server."""

    def __init__(
        self,
        http_status: int,
        message: str,
        code: str | None = None,
        error_type: str | None = None,
    ) -> None:
        super().__init__(f"Meilisearch API error {http_status} ({code or 'unknown'}): {message}")
        self.http_status = http_status
        self.code = code
        self.error_type = error_type

    @classmethod
    def from_response(cls, response: httpx.Response) -> ApiError:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}
        return cls(
            http_status=response.status_code,
            message=body.get("message") or response.reason_phrase or "",
            code=body.get("code"),
            error_type=body.get("type"),
        )


class TaskTimeoutError(AdapterError):
    """Raised when a task does not finish before the wait deadline."""

    def __init__(self, task_uid: int, timeout_ms: int) -> None:
        super().__init__(f"Task {task_uid} did not finish within {timeout_ms} ms.")
        self.task_uid = task_uid


class TaskFailedError(AdapterError):
    """Raised when a waited-on task ends as failed or canceled."""

    def __init__(self, task: dict[str, Any]) -> None:
        error = task.get("error") or {}
        super().__init__(
            f"Task {task.get('uid')} on index \"{task.get('indexUid')}\" ended "
            f"with status \"{task.get('status')}\": {error.get('message', 'no error details')}"
        )
        self.task = task


class MeilisearchClient:
    """Async client for the Meilisearch REST API.

    Args:
        base_url: Meilisearch instance URL, e.g. ``"http://localhost:7700"``.
        api_key: Master key or API key for authentication.
        timeout: HTTP request timeout in seconds.
        task_timeout_ms: Default deadline for ``wait_for_task``.
        task_interval_ms: Default polling interval for ``wait_for_task``.
        **httpx_kwargs: Additional keyword arguments passed to ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:7700",
        *,
        api_key: str | None = None,
        timeout: float = 30.0,
        task_timeout_ms: int = 5000,
        task_interval_ms: int = 50,
        **httpx_kwargs: Any,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.task_timeout_ms = task_timeout_ms
        self.task_interval_ms = task_interval_ms

        headers: dict[str, str] = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            headers=headers,
            **httpx_kwargs,
        )

    async def __aenter__(self) -> MeilisearchClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.TransportError as e:
            raise ConnectionError(f"Failed to reach Meilisearch at {self.base_url}: {e}") from e

        if resp.is_error:
            raise ApiError.from_response(resp)
        if not resp.content:
            return None
        return resp.json()

    # ── Documents ────────────────────────────────────────────────────────

    async def get_document(self, index_uid: str, document_id: str) -> dict[str, Any]:
        """Fetch a document by primary key; raises ``ApiError`` (404) if missing."""
        data = await self._request("GET", f"/indexes/{index_uid}/documents/{quote(str(document_id), safe='')}")
        return cast(dict[str, Any], data)

    async def add_documents(
        self,
        index_uid: str,
        documents: list[dict[str, Any]],
        primary_key: str | None = None,
    ) -> dict[str, Any]:
        """Create or replace documents. Returns the enqueued task summary."""
        params = {"primaryKey": primary_key} if primary_key else None
        data = await self._request("POST", f"/indexes/{index_uid}/documents", json=documents, params=params)
        return cast(dict[str, Any], data)

    async def delete_document(self, index_uid: str, document_id: str) -> dict[str, Any]:
        """Delete a document by primary key. Returns the enqueued task summary."""
        data = await self._request("DELETE", f"/indexes/{index_uid}/documents/{quote(str(document_id), safe='')}")
        return cast(dict[str, Any], data)

    # ── Search ───────────────────────────────────────────────────────────

    async def search(
        self,
        index_uid: str,
        query: str | None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Run a search on ``/indexes/{index}/search``."""
        payload: dict[str, Any] = {"q": query, **(params or {})}
        data = await self._request("POST", f"/indexes/{index_uid}/search", json=payload)
        return cast(dict[str, Any], data)

    # ── Indexes ──────────────────────────────────────────────────────────

    async def get_index(self, index_uid: str) -> dict[str, Any]:
        data = await self._request("GET", f"/indexes/{index_uid}")
        return cast(dict[str, Any], data)

    async def create_index(self, index_uid: str, primary_key: str | None = None) -> dict[str, Any]:
        payload: dict[str, Any] = {"uid": index_uid}
        if primary_key:
            payload["primaryKey"] = primary_key
        data = await self._request("POST", "/indexes", json=payload)
        return cast(dict[str, Any], data)

    async def delete_index(self, index_uid: str) -> dict[str, Any]:
        data = await self._request("DELETE", f"/indexes/{index_uid}")
        return cast(dict[str, Any], data)

    async def update_settings(self, index_uid: str, settings: dict[str, Any]) -> dict[str, Any]:
        data = await self._request("PATCH", f"/indexes/{index_uid}/settings", json=settings)
        return cast(dict[str, Any], data)

    # ── Tasks ────────────────────────────────────────────────────────────

    async def get_task(self, task_uid: int) -> dict[str, Any]:
        data = await self._request("GET", f"/tasks/{task_uid}")
        return cast(dict[str, Any], data)

    async def wait_for_task(
        self,
        task_uid: int,
        timeout_ms: int | None = None,
        interval_ms: int | None = None,
    ) -> dict[str, Any]:
        """Poll a task until it finishes.

        Returns:
            The finished task object.

        Raises:
            TaskTimeoutError: If the task is still pending after ``timeout_ms``.
            TaskFailedError: If the task finished as failed or canceled.
        """
        timeout_ms = self.task_timeout_ms if timeout_ms is None else timeout_ms
        interval_ms = self.task_interval_ms if interval_ms is None else interval_ms
        deadline = time.monotonic() + timeout_ms / 1000

        while True:
            task = await self.get_task(task_uid)
            status = task.get("status")
            if status in FINISHED_TASK_STATUSES:
                logger.debug("Task %s finished with status %s", task_uid, status)
                if status != "succeeded":
                    raise TaskFailedError(task)
                return task
            if time.monotonic() >= deadline:
                raise TaskTimeoutError(task_uid, timeout_ms)
            await asyncio.sleep(interval_ms / 1000)

    # ── Health ───────────────────────────────────────────────────────────

    async def health(self) -> dict[str, Any]:
        data = await self._request("GET", "/health")
        return cast(dict[str, Any], data)
