"""
Core infrastructure layer for Student Records.

Contains the storage error type and the database plumbing used by the
database-backed store.
"""

from .exceptions import StorageError
from .database import (
    create_database_engine,
    create_session_factory,
    session_scope,
    health_check,
)

__all__ = [
    "StorageError",
    "create_database_engine",
    "create_session_factory",
    "session_scope",
    "health_check",
]
