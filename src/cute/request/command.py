"""State and process handling shared by the curl and wget builders."""

import logging
import shlex
import subprocess
from abc import abstractmethod
from typing import Callable

from ..interfaces import CommandBuilder, ExecutionError

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


class BaseCommand(CommandBuilder):
    """Common configuration for an external command line tool.

    Subclasses build the argument vector; this class runs it.
    """

    def __init__(self, executable: str, runner: Runner | None = None):
        """
        Initialize the builder.

        Args:
            executable: Name or path of the program to run.
            runner: Function used to run the program, subprocess.run by
                default. Receives the argument vector and run() keywords.
        """
        self.executable = executable
        self.url: str | None = None
        self.headers: list[str] = []
        self.outfile: str | None = None
        self.verbose = False
        self.will_save_command = False
        self.will_save_token = False
        self.response: str | None = None
        self._runner = runner

    def set_url(self, url: str) -> None:
        self.url = url

    def add_headers(self, headers: list[str]) -> None:
        self.headers.extend(headers)

    def set_outfile(self, path: str) -> None:
        self.outfile = path

    def set_verbose(self, enabled: bool) -> None:
        self.verbose = enabled

    def save_command(self, enabled: bool) -> None:
        self.will_save_command = enabled

    def save_token(self, enabled: bool = True) -> None:
        self.will_save_token = enabled

    def get_response(self) -> str | None:
        return self.response

    @abstractmethod
    def build_args(self) -> list[str]:
        """The full argument vector, program name first."""
        pass

    def get_command_string(self) -> str:
        return shlex.join(self.build_args())

    def _run(self) -> subprocess.CompletedProcess:
        """
        Run the command and return the finished process.

        Raises:
            ExecutionError: If the program is missing or exits non-zero.
        """
        args = self.build_args()
        logger.info(f"Running: {shlex.join(args)}")

        try:
            runner = self._runner or subprocess.run
            result = runner(args, capture_output=True, text=True, check=False)
        except FileNotFoundError:
            raise ExecutionError(f"{self.executable} not found; is it installed?")

        if result.returncode != 0:
            detail = (result.stderr or "").strip()
            logger.warning(f"{self.executable} exited with status {result.returncode}")
            raise ExecutionError(detail or f"{self.executable} exited with status {result.returncode}")

        return result
