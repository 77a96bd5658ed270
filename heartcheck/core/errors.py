"""Exceptions raised at the edges of the risk-scoring core."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """A form value is missing, not a number, or outside its allowed range."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class PersistenceError(RuntimeError):
    """Saving, listing or deleting health records failed."""

    def __init__(self, operation: str, cause: Exception | None = None):
        detail = f"Health record {operation} failed"
        if cause is not None:
            detail = f"{detail}: {cause}"
        super().__init__(detail)
        self.operation = operation
        self.cause = cause
