class BarberbookError(Exception):
    """Base class for ledger errors."""
    pass


class ValidationError(BarberbookError):
    """Raised (or returned by the builder) when input is incomplete or invalid."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(BarberbookError):
    """Raised when an operation targets a record id that does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} {entity_id!r} not found")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateIdError(BarberbookError):
    """Raised when an insert collides with an existing record id."""

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} {entity_id!r} already exists")
        self.entity = entity
        self.entity_id = entity_id


class StorageError(BarberbookError):
    """Raised when a persisted slot cannot be read back."""
    pass
