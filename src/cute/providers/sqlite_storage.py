"""SQLite-backed storage for saved keys and commands."""

import logging
import sqlite3
from pathlib import Path

from ..interfaces import Storage, StorageError, StorageHandle

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS commands (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    command TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
CREATE TABLE IF NOT EXISTS keys (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    key TEXT NOT NULL,
    created_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
);
"""


class SqliteHandle(StorageHandle):
    """An open SQLite connection."""

    def __init__(self, connection: sqlite3.Connection):
        self._conn = connection

    def get_commands(self) -> list[str]:
        return self._column("SELECT command FROM commands ORDER BY id")

    def get_keys(self) -> list[str]:
        return self._column("SELECT key FROM keys ORDER BY id")

    def add_key(self, key: str) -> None:
        self._write("INSERT INTO keys (key) VALUES (?)", (key,))

    def add_command(self, command: str) -> None:
        self._write("INSERT INTO commands (command) VALUES (?)", (command,))

    def close(self) -> None:
        self._conn.close()

    def _column(self, query: str) -> list[str]:
        try:
            return [row[0] for row in self._conn.execute(query)]
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read from database: {e}")

    def _write(self, query: str, params: tuple) -> None:
        try:
            with self._conn:
                self._conn.execute(query, params)
        except sqlite3.Error as e:
            raise StorageError(f"Failed to write to database: {e}")


class SqliteStorage(Storage):
    """Storage in a single SQLite database file.

    The file and its parent directories are created on first open.
    """

    def __init__(self, path: str | Path):
        """
        Initialize with the database path.

        Args:
            path: Database file path, or ":memory:".
        """
        self.path = str(path) if str(path) == ":memory:" else Path(path).expanduser()

    def open(self) -> SqliteHandle:
        """
        Open the database, creating the schema if needed.

        Raises:
            StorageError: If the database cannot be opened.
        """
        try:
            if isinstance(self.path, Path):
                self.path.parent.mkdir(parents=True, exist_ok=True)
            connection = sqlite3.connect(self.path)
            connection.executescript(SCHEMA)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Failed to open database {self.path}: {e}")

        logger.info(f"Opened database {self.path}")
        return SqliteHandle(connection)
