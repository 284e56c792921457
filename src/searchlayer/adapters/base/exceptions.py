"""Adapter-specific exceptions."""

from __future__ import annotations


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the adapter cannot reach the search backend."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""


class UnsupportedOperationError(AdapterError):
    """Raised when a request needs a capability the backend does not have."""


class ConditionNotImplementedError(AdapterError, TypeError):
    """Raised when a filter condition variant has no translation.

    This is a programming error: the condition set is closed and every
    adapter must handle all of it.
    """

    def __init__(self, condition: object) -> None:
        super().__init__(f"{type(condition).__name__} filter not implemented.")
        self.condition = condition


class UnexpectedStatusError(AdapterError):
    """Raised when a write is not acknowledged as enqueued."""

    def __init__(self, action: str, index: str, status: object, identifier: str | None = None) -> None:
        target = f'document with identifier "{identifier}" in index' if identifier is not None else "index"
        super().__init__(f'Unexpected error while {action} {target} "{index}": status "{status}".')
        self.identifier = identifier
        self.index = index
        self.status = status
