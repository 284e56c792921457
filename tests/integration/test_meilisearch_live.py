"""Integration tests against a real Meilisearch instance."""

from __future__ import annotations

import pytest

from searchlayer import DocumentNotFoundError
from searchlayer.adapters.base.exceptions import UnsupportedOperationError
from searchlayer.search import EqualCondition, NotEqualCondition, SearchCondition

pytestmark = [pytest.mark.integration, pytest.mark.asyncio, pytest.mark.meilisearch]

INDEX_SIMPLE = "searchlayer_simple"


class TestFilters:
    async def test_boolean_true(self, engine):
        result = await (
            engine.create_search_builder()
            .add_index(INDEX_SIMPLE)
            .add_filter(EqualCondition(field="is_online", value=True))
            .get_result()
        )
        assert result.total == 2

    async def test_boolean_false(self, engine):
        result = await (
            engine.create_search_builder()
            .add_index(INDEX_SIMPLE)
            .add_filter(EqualCondition(field="is_online", value=False))
            .get_result()
        )
        assert result.total == 1

    async def test_author(self, engine):
        for author in ("Jane Doe", "A."):
            result = await (
                engine.create_search_builder()
                .add_index(INDEX_SIMPLE)
                .add_filter(EqualCondition(field="author", value=author))
                .get_result()
            )
            assert result.total == 1

    async def test_not_equal_with_query(self, engine):
        result = await (
            engine.create_search_builder()
            .add_index(INDEX_SIMPLE)
            .add_filter(SearchCondition(query="Simple"))
            .add_filter(NotEqualCondition(field="author", value="John Doe"))
            .get_result()
        )
        ids = sorted(doc["id"] for doc in result)
        assert "4" not in ids
        assert "6" in ids


class TestDocuments:
    async def test_get_document(self, engine):
        doc = await engine.get_document(INDEX_SIMPLE, "6")
        assert doc == {"id": "6", "title": "Simple Title", "is_online": True, "author": "Jane Doe"}

    async def test_get_missing_document(self, engine):
        with pytest.raises(DocumentNotFoundError):
            await engine.get_document(INDEX_SIMPLE, "999")

    async def test_delete_document(self, engine):
        task = await engine.delete_document(INDEX_SIMPLE, "6", return_slow_promise_result=True)
        await task.wait()

        with pytest.raises(DocumentNotFoundError):
            await engine.get_document(INDEX_SIMPLE, "6")

    async def test_sort_and_limit(self, engine):
        result = await (
            engine.create_search_builder()
            .add_index(INDEX_SIMPLE)
            .add_filter(SearchCondition(query="Title"))
            .add_sort_by("title", "asc")
            .limit(2)
            .get_result()
        )
        titles = [doc["title"] for doc in result]
        assert titles == ["Other Title", "Other Title"]


class TestUnsupported:
    async def test_multiple_indexes(self, engine):
        search = engine.create_search_builder().add_index(INDEX_SIMPLE).get_search()
        search.indexes["other"] = search.indexes[INDEX_SIMPLE]

        with pytest.raises(UnsupportedOperationError):
            await engine.adapter.searcher.search(search)
