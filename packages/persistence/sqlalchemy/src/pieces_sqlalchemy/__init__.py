"""pieces-sqlalchemy — SQLAlchemy adapters for filter conditions and PostgreSQL connections."""

from __future__ import annotations

from .compiler import apply_query_options, build_sqla_filter
from .connection import (
    PostgresConnectionConfig,
    check_connection,
    create_engine,
    session_scope,
)
from .exceptions import (
    ConnectionCheckError,
    MappingError,
    RepositoryError,
    SQLAlchemyPersistenceError,
)
from .operators import DEFAULT_SQLA_REGISTRY, build_default_sqla_registry
from .repository import SQLAlchemyFilterRepository
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "ConnectionCheckError",
    "MappingError",
    "PostgresConnectionConfig",
    "RepositoryError",
    "SQLAlchemyFilterRepository",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "SQLAlchemyPersistenceError",
    "apply_query_options",
    "build_default_sqla_registry",
    "build_sqla_filter",
    "check_connection",
    "create_engine",
    "session_scope",
]
