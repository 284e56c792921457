"""Meilisearch adapter."""

from searchlayer.adapters.meilisearch.adapter import MeilisearchAdapter
from searchlayer.adapters.meilisearch.client import ApiError, MeilisearchClient, TaskFailedError, TaskTimeoutError
from searchlayer.adapters.meilisearch.filters import CompiledConditions, compile_conditions, escape_field_value
from searchlayer.adapters.meilisearch.indexer import MeilisearchIndexer
from searchlayer.adapters.meilisearch.schema_manager import MeilisearchSchemaManager
from searchlayer.adapters.meilisearch.searcher import MeilisearchSearcher

__all__ = [
    "ApiError",
    "CompiledConditions",
    "MeilisearchAdapter",
    "MeilisearchClient",
    "MeilisearchIndexer",
    "MeilisearchSchemaManager",
    "MeilisearchSearcher",
    "TaskFailedError",
    "TaskTimeoutError",
    "compile_conditions",
    "escape_field_value",
]
