"""wget command builder for file downloads."""

import logging
from typing import Iterable

from ..core.options import OptionKind
from ..interfaces import ExecutionError, StorageHandle
from .command import BaseCommand, Runner

logger = logging.getLogger(__name__)


class Wget(BaseCommand):
    """Builds and runs a wget invocation.

    wget writes the download itself, so the captured response is its log.
    """

    family = "wget"

    def __init__(self, executable: str = "wget", runner: Runner | None = None):
        super().__init__(executable, runner)
        self.recursion_depth: int | None = None
        self.user: str | None = None

    def set_auth(self, kind, credential: str, provider: str | None = None) -> None:
        self.user = credential

    def apply_options(self, options: Iterable) -> None:
        self.recursion_depth = None
        for option in options:
            if option.kind is OptionKind.RECURSION_DEPTH:
                self.recursion_depth = int(option.payload)

    def needs_storage(self) -> bool:
        return False

    def build_args(self) -> list[str]:
        args = [self.executable]

        if self.verbose:
            args.append("--verbose")

        if self.recursion_depth is not None:
            args.extend(["-r", "-l", str(self.recursion_depth)])

        for header in self.headers:
            args.append(f"--header={header}")

        if self.user:
            name, _, password = self.user.partition(":")
            args.append(f"--user={name}")
            if password:
                args.append(f"--password={password}")

        if self.outfile:
            args.extend(["-O", self.outfile])

        if self.url:
            args.append(self.url)
        return args

    def execute(self, storage: StorageHandle | None = None) -> None:
        """
        Run wget; its log output becomes the response.

        Raises:
            ExecutionError: If wget fails.
        """
        self.response = None
        result = self._run()
        self.response = (result.stderr or "") + (result.stdout or "")
        logger.info(f"Download finished: {self.url}")

    def write_output(self) -> None:
        raise ExecutionError("Downloads output is written by default")

    def blank(self) -> "Wget":
        return Wget(executable=self.executable, runner=self._runner)
