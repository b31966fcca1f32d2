"""Bridge between the option set and the active command builder."""

import logging
from typing import Iterable

from ..interfaces import CommandBuilder
from ..request.response import Response
from .lazy_storage import LazyStorage

logger = logging.getLogger(__name__)

NO_HEADERS = "No headers found"


class NoCommandError(RuntimeError):
    """Raised when an option is applied before a command family is chosen."""


class CommandAdapter:
    """Owns the active command and the last captured response."""

    def __init__(self, storage: LazyStorage):
        self.storage = storage
        self.command: CommandBuilder | None = None
        self.response: str | None = None

    def set_command(self, command: CommandBuilder) -> None:
        """Make a new command active, discarding the previous response."""
        logger.debug(f"Active command is now {command.family}")
        self.command = command
        self.response = None

    def reset(self) -> None:
        """Replace the active command with a blank one of the same kind."""
        self.set_command(self._require().blank())

    def _require(self) -> CommandBuilder:
        if self.command is None:
            raise NoCommandError("No command chosen yet")
        return self.command

    def set_url(self, url: str) -> None:
        self._require().set_url(url)

    def set_outfile(self, path: str) -> None:
        self._require().set_outfile(path)

    def add_headers(self, headers: list[str]) -> None:
        self._require().add_headers(headers)

    def set_auth(self, kind, credential: str, provider: str | None = None) -> None:
        self._require().set_auth(kind, credential, provider)

    def set_verbose(self, enabled: bool) -> None:
        self._require().set_verbose(enabled)

    def save_command(self, enabled: bool) -> None:
        self._require().save_command(enabled)

    def save_token(self, enabled: bool = True) -> None:
        self._require().save_token(enabled)

    def get_command_string(self, options: Iterable = ()) -> str:
        """Command line for the active command with options applied."""
        command = self._require()
        command.apply_options(options)
        return command.get_command_string()

    def execute(self, options: Iterable = ()) -> str:
        """
        Run the active command and capture its response.

        The storage connection is opened first, and only, when the command
        has to persist something.

        Args:
            options: The current options, consumed by the builder for the
                command-line flags they map to.

        Returns:
            The raw response text (empty if the command produced none).

        Raises:
            NoCommandError: If no command is active.
            ExecutionError: If the command fails.
            StorageError: If the store is needed but cannot be opened, or
                the run succeeded but saving it failed. In the latter case
                the captured response is still kept.
        """
        command = self._require()
        command.apply_options(options)
        self.response = None

        handle = self.storage.get() if command.needs_storage() else None
        try:
            command.execute(handle)
        finally:
            # The request may already have been sent when saving fails
            self.response = command.get_response()
        return self.response or ""

    def write_output(self) -> None:
        self._require().write_output()

    def parsed_response(self) -> Response | None:
        """The captured response parsed, or None if absent or malformed."""
        if not self.response:
            return None
        try:
            return Response.from_raw_string(self.response)
        except ValueError as e:
            logger.debug(f"Response not parseable: {e}")
            return None

    def get_response_headers(self) -> str:
        """Headers of the captured response, or a placeholder."""
        response = self.parsed_response()
        if response is None or not response.headers:
            return NO_HEADERS
        return response.get_headers()

    def get_response_body(self) -> str:
        """Body of the captured response, falling back to the raw text."""
        response = self.parsed_response()
        if response is None:
            return self.response or ""
        return response.body
