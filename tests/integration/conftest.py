"""Integration test fixtures — Meilisearch backend with seeded fixtures.

Expects Meilisearch to be running, e.g.:
    docker run -p 7700:7700 -e MEILI_MASTER_KEY=test-master-key getmeili/meilisearch:v1.8

Host and key can be overridden via SEARCHLAYER_MEILISEARCH__HOST and
SEARCHLAYER_MEILISEARCH__API_KEY.
"""

from __future__ import annotations

import os
import time
from typing import Any

import httpx
import pytest
import pytest_asyncio

from searchlayer import Engine
from searchlayer.config.settings import Settings
from searchlayer.schema import BooleanField, IdentifierField, Index, Schema, TextField
from searchlayer.task import TaskHelper

INDEX_SIMPLE = "searchlayer_simple"

SIMPLE_FIXTURES: list[dict[str, Any]] = [
    {"id": "1", "title": "Simple Title"},
    {"id": "2", "title": "Other Title"},
    {"id": "3"},
    {"id": "4", "title": "Simple Title", "is_online": True, "author": "John Doe"},
    {"id": "5", "title": "Other Title", "is_online": False},
    {"id": "6", "title": "Simple Title", "is_online": True, "author": "Jane Doe"},
    {"id": "7", "title": "Simple Title", "author": "A."},
]


def _wait_for_service(url: str, timeout: float = 10.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=2)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(1)
    return False


@pytest.fixture(scope="session")
def meilisearch_settings() -> Settings:
    """Ensure Meilisearch is running."""
    host = os.environ.get("SEARCHLAYER_MEILISEARCH__HOST", "http://localhost:7700")
    if not _wait_for_service(f"{host.rstrip('/')}/health"):
        pytest.skip(f"Meilisearch not available at {host}")
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        meilisearch={
            "host": host,
            "api_key": os.environ.get("SEARCHLAYER_MEILISEARCH__API_KEY", "test-master-key"),
            "task_timeout_ms": 20000,
        },
    )


@pytest.fixture
def live_schema() -> Schema:
    return Schema.from_indexes(
        Index(
            name=INDEX_SIMPLE,
            fields=[
                IdentifierField(name="id"),
                TextField(name="title", sortable=True),
                TextField(name="author", filterable=True),
                BooleanField(name="is_online", filterable=True),
            ],
        )
    )


@pytest_asyncio.fixture
async def engine(meilisearch_settings: Settings, live_schema: Schema):
    """Engine against a freshly created and seeded index."""
    engine = Engine.from_settings(live_schema, meilisearch_settings)

    if await engine.exists_index(INDEX_SIMPLE):
        task = await engine.drop_index(INDEX_SIMPLE, return_slow_promise_result=True)
        assert task is not None
        await task.wait()

    task = await engine.create_schema(return_slow_promise_result=True)
    assert task is not None
    await task.wait()

    helper = TaskHelper()
    for document in SIMPLE_FIXTURES:
        helper.add(await engine.save_document(INDEX_SIMPLE, document, return_slow_promise_result=True))
    await helper.wait_for_all()

    yield engine

    await engine.drop_schema()
    await engine.adapter.shutdown()
