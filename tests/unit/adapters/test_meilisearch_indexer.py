"""Tests for the Meilisearch indexer."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from searchlayer.adapters.base.exceptions import UnexpectedStatusError
from searchlayer.adapters.meilisearch.indexer import MeilisearchIndexer
from searchlayer.schema import Index
from searchlayer.task import AsyncTask


@pytest.fixture
def indexer(mock_client: AsyncMock) -> MeilisearchIndexer:
    return MeilisearchIndexer(mock_client)


def _enqueued(task_uid: int = 7) -> dict:
    return {"taskUid": task_uid, "indexUid": "simple", "status": "enqueued", "type": "documentAdditionOrUpdate"}


class TestSave:
    @pytest.mark.asyncio
    async def test_fire_and_forget(self, indexer: MeilisearchIndexer, mock_client: AsyncMock, simple_index: Index) -> None:
        mock_client.add_documents.return_value = _enqueued()

        task = await indexer.save(simple_index, {"id": 1, "title": "Simple Title"})

        assert task is None
        mock_client.add_documents.assert_awaited_once_with(
            "simple", [{"id": "1", "title": "Simple Title"}], primary_key="id"
        )
        mock_client.wait_for_task.assert_not_called()

    @pytest.mark.asyncio
    async def test_slow_promise_waits_for_task(
        self, indexer: MeilisearchIndexer, mock_client: AsyncMock, simple_index: Index
    ) -> None:
        mock_client.add_documents.return_value = _enqueued(7)
        mock_client.wait_for_task.return_value = {"uid": 7, "status": "succeeded"}

        task = await indexer.save(simple_index, {"id": "1"}, return_slow_promise_result=True)

        assert isinstance(task, AsyncTask)
        mock_client.wait_for_task.assert_not_called()
        assert await task.wait() == {"uid": 7, "status": "succeeded"}
        mock_client.wait_for_task.assert_awaited_once_with(7)

    @pytest.mark.asyncio
    async def test_custom_identifier_field(
        self, indexer: MeilisearchIndexer, mock_client: AsyncMock, complex_index: Index
    ) -> None:
        mock_client.add_documents.return_value = _enqueued()

        await indexer.save(complex_index, {"uuid": "u-1", "tags": ["a"]})

        mock_client.add_documents.assert_awaited_once_with("complex", [{"uuid": "u-1", "tags": ["a"]}], primary_key="uuid")

    @pytest.mark.asyncio
    async def test_unexpected_status(self, indexer: MeilisearchIndexer, mock_client: AsyncMock, simple_index: Index) -> None:
        mock_client.add_documents.return_value = {"taskUid": 7, "status": "failed"}

        with pytest.raises(UnexpectedStatusError, match='identifier "42" in index "simple"') as exc_info:
            await indexer.save(simple_index, {"id": 42}, return_slow_promise_result=True)
        assert exc_info.value.identifier == "42"
        assert exc_info.value.index == "simple"

    @pytest.mark.asyncio
    async def test_missing_identifier(self, indexer: MeilisearchIndexer, mock_client: AsyncMock, simple_index: Index) -> None:
        with pytest.raises(ValueError, match='identifier field "id"'):
            await indexer.save(simple_index, {"title": "No id"})
        mock_client.add_documents.assert_not_called()


class TestDelete:
    @pytest.mark.asyncio
    async def test_fire_and_forget(self, indexer: MeilisearchIndexer, mock_client: AsyncMock, simple_index: Index) -> None:
        mock_client.delete_document.return_value = _enqueued(9)

        assert await indexer.delete(simple_index, "1") is None
        mock_client.delete_document.assert_awaited_once_with("simple", "1")

    @pytest.mark.asyncio
    async def test_slow_promise_waits_for_task(
        self, indexer: MeilisearchIndexer, mock_client: AsyncMock, simple_index: Index
    ) -> None:
        mock_client.delete_document.return_value = _enqueued(9)

        task = await indexer.delete(simple_index, "1", return_slow_promise_result=True)

        assert task is not None
        await task.wait()
        mock_client.wait_for_task.assert_awaited_once_with(9)

    @pytest.mark.asyncio
    async def test_unexpected_status(self, indexer: MeilisearchIndexer, mock_client: AsyncMock, simple_index: Index) -> None:
        mock_client.delete_document.return_value = {"status": "processing"}

        with pytest.raises(UnexpectedStatusError, match="deleting"):
            await indexer.delete(simple_index, "1")

    @pytest.mark.asyncio
    async def test_wait_failure_propagates(
        self, indexer: MeilisearchIndexer, mock_client: AsyncMock, simple_index: Index
    ) -> None:
        mock_client.delete_document.return_value = _enqueued(9)
        mock_client.wait_for_task.side_effect = RuntimeError("boom")

        task = await indexer.delete(simple_index, "1", return_slow_promise_result=True)

        assert task is not None
        with pytest.raises(RuntimeError, match="boom"):
            await task.wait()
