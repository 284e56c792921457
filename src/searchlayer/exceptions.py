"""Engine-level exceptions."""

from __future__ import annotations


class DocumentNotFoundError(Exception):
    """Raised when a document requested by identifier does not exist."""

    def __init__(self, index: str, identifier: str) -> None:
        super().__init__(f'Document with identifier "{identifier}" not found in index "{index}".')
        self.index = index
        self.identifier = identifier
