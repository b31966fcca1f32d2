"""Abstract interface for persisted keys and commands."""

from abc import ABC, abstractmethod


class StorageError(RuntimeError):
    """Raised when the store cannot be opened, read or written."""


class StorageHandle(ABC):
    """An open connection to the store."""

    @abstractmethod
    def get_commands(self) -> list[str]:
        """Get all saved commands, oldest first."""
        pass

    @abstractmethod
    def get_keys(self) -> list[str]:
        """Get all saved keys, oldest first."""
        pass

    @abstractmethod
    def add_key(self, key: str) -> None:
        """Save a key."""
        pass

    @abstractmethod
    def add_command(self, command: str) -> None:
        """Save a command string."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Close the connection."""
        pass


class Storage(ABC):
    """Factory for store connections."""

    @abstractmethod
    def open(self) -> StorageHandle:
        """Open a connection.

        Raises:
            StorageError: If the store cannot be opened.
        """
        pass
