"""curl command builder for HTTP transfers."""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable

from ..core.options import OptionKind
from ..interfaces import ExecutionError, StorageHandle
from .command import BaseCommand, Runner
from .response import Response

logger = logging.getLogger(__name__)


class AuthKind(Enum):
    """Authentication schemes curl understands."""

    BASIC = "basic"
    BEARER = "bearer"
    DIGEST = "digest"
    AWS_SIGV4 = "aws-sigv4"
    SPNEGO = "negotiate"
    NTLM = "ntlm"


# Options taking a value, and the curl flag each maps to
VALUE_FLAGS: dict[OptionKind, str] = {
    OptionKind.UNIX_SOCKET: "--unix-socket",
    OptionKind.COOKIE: "--cookie",
    OptionKind.CA_PATH: "--capath",
    OptionKind.USER_AGENT: "--user-agent",
    OptionKind.REFERRER: "--referer",
    OptionKind.MAX_REDIRECTS: "--max-redirs",
    OptionKind.UPLOAD_FILE: "--upload-file",
    OptionKind.REQUEST_BODY: "--data",
}

SWITCH_FLAGS: dict[OptionKind, str] = {
    OptionKind.FOLLOW_REDIRECTS: "--location",
    OptionKind.FAIL_ON_ERROR: "--fail",
    OptionKind.PROGRESS_BAR: "--progress-bar",
    OptionKind.PROXY_TUNNEL: "--proxytunnel",
    OptionKind.UNRESTRICTED_AUTH: "--location-trusted",
}


class Curl(BaseCommand):
    """Builds and runs a curl invocation.

    Responses are always captured with headers (-i) so they can be
    inspected afterwards.
    """

    family = "curl"

    def __init__(self, method: str = "GET", executable: str = "curl", runner: Runner | None = None):
        super().__init__(executable, runner)
        self.method = method.upper()
        self.auth: AuthKind | None = None
        self.credential = ""
        self.provider: str | None = None
        self.extras: list[tuple[OptionKind, object]] = []

    def set_auth(self, kind: AuthKind, credential: str, provider: str | None = None) -> None:
        self.auth = kind
        self.credential = credential
        self.provider = provider

    def apply_options(self, options: Iterable) -> None:
        self.extras = [
            (option.kind, option.payload)
            for option in options
            if option.kind in VALUE_FLAGS or option.kind in SWITCH_FLAGS
        ]

    def needs_storage(self) -> bool:
        return self.will_save_command or (self.will_save_token and bool(self.credential))

    def build_args(self) -> list[str]:
        args = [self.executable, "-i"]

        if self.method == "HEAD":
            args.append("--head")
        elif self.method != "GET":
            args.extend(["-X", self.method])

        if self.verbose:
            args.append("-v")

        for header in self.headers:
            args.extend(["-H", header])

        args.extend(self._auth_args())

        for kind, payload in self.extras:
            if kind in SWITCH_FLAGS:
                args.append(SWITCH_FLAGS[kind])
            else:
                args.extend([VALUE_FLAGS[kind], str(payload)])

        if self.url:
            args.append(self.url)
        return args

    def _auth_args(self) -> list[str]:
        if self.auth is AuthKind.BASIC:
            return ["-u", self.credential]
        if self.auth is AuthKind.BEARER:
            return ["--oauth2-bearer", self.credential]
        if self.auth is AuthKind.DIGEST:
            return ["--digest", "-u", self.credential]
        if self.auth is AuthKind.AWS_SIGV4:
            return ["--aws-sigv4", self.provider or "aws:amz", "-u", self.credential]
        if self.auth is AuthKind.SPNEGO:
            return ["--negotiate", "-u", self.credential or ":"]
        if self.auth is AuthKind.NTLM:
            return ["--ntlm", "-u", self.credential or ":"]
        return []

    def execute(self, storage: StorageHandle | None = None) -> None:
        """
        Run curl and capture the raw response.

        Saves the command and/or the auth credential to storage when
        requested and the run succeeded.

        Raises:
            ExecutionError: If curl fails.
            StorageError: If saving fails. The response is captured first.
        """
        self.response = None
        result = self._run()
        self.response = result.stdout
        logger.info(f"Captured {len(self.response)} bytes of response")

        if storage is None:
            return
        if self.will_save_command:
            storage.add_command(self.get_command_string())
            logger.info("Command saved")
        if self.will_save_token and self.credential:
            storage.add_key(self.credential)
            logger.info("Auth token saved")

    def write_output(self) -> None:
        if self.response is None:
            raise ExecutionError("No response to write")
        if not self.outfile:
            raise ExecutionError("No output file set")

        try:
            content = Response.from_raw_string(self.response).body
        except ValueError:
            content = self.response

        try:
            Path(self.outfile).expanduser().write_text(content)
        except OSError as e:
            raise ExecutionError(f"Failed to write {self.outfile}: {e}")
        logger.info(f"Response written to {self.outfile}")

    def blank(self) -> "Curl":
        return Curl(method=self.method, executable=self.executable, runner=self._runner)
