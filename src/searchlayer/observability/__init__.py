"""Observability — logging setup."""

from searchlayer.observability.logging import setup_logging

__all__ = ["setup_logging"]
