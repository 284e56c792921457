"""Search adapter layer — Pluggable connectors for search backends.

Built-in adapters:
  - meilisearch: Meilisearch v1+ (REST API over ``httpx``)

Implement ``Adapter`` (with its ``Indexer``, ``Searcher`` and
``SchemaManager``) to connect your own search backend.
"""
