"""Base adapter interface — Abstract classes for search engine connectors."""

from searchlayer.adapters.base.adapter import Adapter, AdapterHealth, Indexer, SchemaManager, Searcher
from searchlayer.adapters.base.registry import AdapterRegistry, default_registry

__all__ = [
    "Adapter",
    "AdapterHealth",
    "AdapterRegistry",
    "Indexer",
    "SchemaManager",
    "Searcher",
    "default_registry",
]
