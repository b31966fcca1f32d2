"""Concrete storage providers."""

from .sqlite_storage import SqliteStorage, SqliteHandle

__all__ = ["SqliteStorage", "SqliteHandle"]
