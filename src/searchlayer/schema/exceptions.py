"""Schema-specific exceptions."""


class SchemaError(Exception):
    """Base exception for schema errors."""


class IndexNotFoundError(SchemaError, KeyError):
    """Raised when an index name is not part of the schema."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Index "{name}" is not defined in the schema.')
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


class FieldByPathNotFoundError(SchemaError, KeyError):
    """Raised when a dotted field path cannot be resolved on an index."""

    def __init__(self, index_name: str, path: str) -> None:
        super().__init__(f'Field path "{path}" not found in index "{index_name}".')
        self.index_name = index_name
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])
