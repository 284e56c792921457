"""Adapter Registry — Maps adapter names to adapter factories.

Lets configuration pick a backend by name::

    registry = AdapterRegistry()
    registry.register("meilisearch", MeilisearchAdapter.from_settings)
    adapter = registry.create("meilisearch", settings)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from searchlayer.adapters.base.adapter import Adapter
from searchlayer.adapters.base.exceptions import ConfigurationError

if TYPE_CHECKING:
    from searchlayer.config.settings import Settings

logger = logging.getLogger(__name__)

AdapterFactory = Callable[["Settings"], Adapter]


class AdapterNotFoundError(ConfigurationError):
    """Raised when a requested adapter is not registered."""


class AdapterRegistry:
    """Registry of adapter factories keyed by name."""

    def __init__(self) -> None:
        self._factories: dict[str, AdapterFactory] = {}

    def register(self, name: str, factory: AdapterFactory) -> None:
        """Register an adapter factory.

        Args:
            name: Unique name for this adapter type.
            factory: Callable building the adapter from ``Settings``.
        """
        if name in self._factories:
            logger.warning("Overwriting existing adapter registration: %s", name)
        self._factories[name] = factory
        logger.debug("Registered adapter: %s", name)

    def create(self, name: str, settings: Settings) -> Adapter:
        """Build an adapter instance.

        Raises:
            AdapterNotFoundError: If no adapter is registered under this name.
        """
        if name not in self._factories:
            raise AdapterNotFoundError(
                f"No adapter registered with name '{name}'. "
                f"Available adapters: {list(self._factories.keys())}"
            )
        adapter = self._factories[name](settings)
        logger.info("Created adapter: %s", name)
        return adapter

    @property
    def registered_adapters(self) -> list[str]:
        """List all registered adapter names."""
        return list(self._factories.keys())


def default_registry() -> AdapterRegistry:
    """Registry with all built-in adapters registered."""
    from searchlayer.adapters.meilisearch.adapter import MeilisearchAdapter

    registry = AdapterRegistry()
    registry.register("meilisearch", MeilisearchAdapter.from_settings)
    return registry
