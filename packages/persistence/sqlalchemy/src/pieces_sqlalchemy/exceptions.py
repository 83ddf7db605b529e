"""Exceptions for the SQLAlchemy persistence layer."""

from __future__ import annotations

from pieces_core.primitives.exceptions import PersistenceError


class SQLAlchemyPersistenceError(PersistenceError):
    """Base exception for all SQLAlchemy-specific persistence errors."""


class ConnectionCheckError(SQLAlchemyPersistenceError):
    """Raised when a test connection to the database fails."""


class MappingError(SQLAlchemyPersistenceError):
    """Raised when a condition field has no column on the mapped model."""


class RepositoryError(SQLAlchemyPersistenceError):
    """Raised when repository operations fail."""


__all__: list[str] = [
    "ConnectionCheckError",
    "MappingError",
    "RepositoryError",
    "SQLAlchemyPersistenceError",
]
