# core/errors.py


class LivresLieuxError(Exception):
    """Base class for all errors raised by the core services."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(LivresLieuxError, ValueError):
    """Malformed or missing required parameters. Never retried."""


class NotFound(LivresLieuxError):
    """The referenced record does not exist in the requested scope."""

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity} '{entity_id}' not found")
        self.entity = entity
        self.entity_id = entity_id


class Conflict(LivresLieuxError, ValueError):
    """A unique identifier (e.g. an ISBN) is already in use."""


class StoreUnavailable(LivresLieuxError):
    """The backing store could not complete the operation."""
