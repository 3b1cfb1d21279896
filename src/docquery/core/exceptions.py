# docquery/core/exceptions.py
"""Exceptions raised while building and rendering query templates."""
from __future__ import annotations

from typing import Any


class QueryTemplateError(Exception):
    """Base exception for all query template errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return self.message


class QueryConstructionError(QueryTemplateError, ValueError):
    """Raised when a query template cannot be built from its method definition."""


class ParameterCountError(QueryTemplateError, IndexError):
    """Raised when a binding refers to an argument the caller did not supply.

    Attributes:
        index: The parameter index that could not be resolved.
        available: Number of arguments the accessor holds, when known.
    """

    def __init__(self, index: int, available: int | None = None):
        if available is None:
            message = f"No argument supplied for parameter ?{index}"
        else:
            message = (
                f"No argument supplied for parameter ?{index}: "
                f"{available} argument(s) available"
            )
        super().__init__(message, details={"index": index, "available": available})
        self.index = index
        self.available = available


class TemplateConsistencyError(QueryTemplateError):
    """Raised when a binding has no matching placeholder left in its template."""


class ValueSerializationError(QueryTemplateError, TypeError):
    """Raised when a value has no structured-document literal form."""
