"""Exceptions shared by the catalog services."""

from collections.abc import Mapping
from typing import Any


class CatalogError(Exception):
    """Base exception for catalog errors."""


class DataAccessError(CatalogError):
    """Raised when the store cannot be reached or a query fails."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class MappingError(CatalogError):
    """Raised when a fetched row cannot be turned into an entity.

    Scoped to a single row; loaders drop the row and keep going.
    """

    def __init__(self, message: str, row: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.row = dict(row) if row is not None else None


class NotFoundError(CatalogError):
    """Raised when a requested entity does not exist."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)
