"""Abstract interface for command builders."""

from abc import ABC, abstractmethod
from typing import Iterable

from .storage import StorageHandle


class ExecutionError(RuntimeError):
    """Raised when a command fails to run or its output cannot be written."""


class CommandBuilder(ABC):
    """Accumulates configuration for one curl or wget invocation."""

    family: str = ""

    @abstractmethod
    def set_url(self, url: str) -> None:
        pass

    @abstractmethod
    def add_headers(self, headers: list[str]) -> None:
        """Append headers already encoded as "key:value"."""
        pass

    @abstractmethod
    def set_outfile(self, path: str) -> None:
        pass

    @abstractmethod
    def set_auth(self, kind, credential: str, provider: str | None = None) -> None:
        """Set the authentication scheme and credential."""
        pass

    @abstractmethod
    def set_verbose(self, enabled: bool) -> None:
        pass

    @abstractmethod
    def save_command(self, enabled: bool) -> None:
        """Mark the command to be persisted after a successful run."""
        pass

    @abstractmethod
    def save_token(self, enabled: bool = True) -> None:
        """Mark the auth credential to be persisted after a successful run."""
        pass

    @abstractmethod
    def apply_options(self, options: Iterable) -> None:
        """Replace the extra command-line options with those in options."""
        pass

    @abstractmethod
    def needs_storage(self) -> bool:
        """Check if execute() will write to the store."""
        pass

    @abstractmethod
    def execute(self, storage: StorageHandle | None = None) -> None:
        """Run the command and capture its response.

        Raises:
            ExecutionError: If the command fails.
        """
        pass

    @abstractmethod
    def get_response(self) -> str | None:
        pass

    @abstractmethod
    def write_output(self) -> None:
        """Write the captured response to the output file.

        Raises:
            ExecutionError: If there is nothing to write or nowhere to write it.
        """
        pass

    @abstractmethod
    def get_command_string(self) -> str:
        """Shell-quoted command line that reproduces this command."""
        pass

    @abstractmethod
    def blank(self) -> "CommandBuilder":
        """A fresh builder of the same kind with no options set."""
        pass
