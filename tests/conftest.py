"""Shared test fixtures and configuration."""

from __future__ import annotations

import logging
from unittest.mock import AsyncMock

import pytest
import structlog

from searchlayer.adapters.meilisearch.client import MeilisearchClient
from searchlayer.config.settings import Settings
from searchlayer.observability.logging import HANDLER_NAME, LOGGER_NAME
from searchlayer.schema import (
    BooleanField,
    DateTimeField,
    FloatField,
    IdentifierField,
    Index,
    IntegerField,
    ObjectField,
    Schema,
    TextField,
)

INDEX_SIMPLE = "simple"
INDEX_COMPLEX = "complex"


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any handler or level installed by ``setup_logging`` during a test."""
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler.get_name() == HANDLER_NAME:
            logger.removeHandler(handler)
    logger.setLevel(level)
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def simple_index() -> Index:
    """Flat index with one field of most types."""
    return Index(
        name=INDEX_SIMPLE,
        fields=[
            IdentifierField(name="id"),
            TextField(name="title", sortable=True),
            TextField(name="author", filterable=True),
            BooleanField(name="is_online", filterable=True),
            IntegerField(name="rating", filterable=True, sortable=True),
            DateTimeField(name="published", filterable=True, sortable=True),
        ],
    )


@pytest.fixture
def complex_index() -> Index:
    """Index with a custom identifier name, list values and a nested object."""
    return Index(
        name=INDEX_COMPLEX,
        fields=[
            IdentifierField(name="uuid"),
            TextField(name="title"),
            TextField(name="tags", multiple=True, filterable=True),
            ObjectField(
                name="footer",
                fields=[
                    TextField(name="text", filterable=True),
                    BooleanField(name="visible", filterable=True),
                ],
            ),
            FloatField(name="price", filterable=True, sortable=True),
        ],
    )


@pytest.fixture
def schema(simple_index: Index, complex_index: Index) -> Schema:
    return Schema.from_indexes(simple_index, complex_index)


@pytest.fixture
def mock_client() -> AsyncMock:
    """Meilisearch client double; configure return values per test."""
    return AsyncMock(spec=MeilisearchClient)
