"""Display options and the per-kind merge policy."""

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterator

logger = logging.getLogger(__name__)


class OptionKind(Enum):
    """The closed set of option kinds."""

    URL = "url"
    HEADER = "header"
    OUTFILE = "outfile"
    VERBOSE = "verbose"
    SAVE_COMMAND = "save_command"
    RESPONSE = "response"
    RECURSION_DEPTH = "recursion_depth"
    AUTH = "auth"
    SAVE_TOKEN = "save_token"
    UNIX_SOCKET = "unix_socket"
    FOLLOW_REDIRECTS = "follow_redirects"
    COOKIE = "cookie"
    FAIL_ON_ERROR = "fail_on_error"
    PROGRESS_BAR = "progress_bar"
    PROXY_TUNNEL = "proxy_tunnel"
    CA_PATH = "ca_path"
    USER_AGENT = "user_agent"
    REFERRER = "referrer"
    UNRESTRICTED_AUTH = "unrestricted_auth"
    MAX_REDIRECTS = "max_redirects"
    UPLOAD_FILE = "upload_file"
    REQUEST_BODY = "request_body"


class Policy(Enum):
    """How a newly chosen option merges with the existing set."""

    TOGGLE = "toggle"
    ACCUMULATE = "accumulate"
    REPLACE = "replace"


# Kinds missing from this table are replaced.
POLICIES: dict[OptionKind, Policy] = {
    OptionKind.VERBOSE: Policy.TOGGLE,
    OptionKind.SAVE_COMMAND: Policy.TOGGLE,
    OptionKind.SAVE_TOKEN: Policy.TOGGLE,
    OptionKind.HEADER: Policy.ACCUMULATE,
}


def policy_for(kind: OptionKind) -> Policy:
    """Get the merge policy for an option kind."""
    return POLICIES.get(kind, Policy.REPLACE)


LABELS: dict[OptionKind, str] = {
    OptionKind.URL: "URL: ",
    OptionKind.HEADER: "Header: ",
    OptionKind.OUTFILE: "Outfile: ",
    OptionKind.VERBOSE: "Verbose output enabled",
    OptionKind.SAVE_COMMAND: "Command will be saved",
    OptionKind.RESPONSE: "Response: ",
    OptionKind.RECURSION_DEPTH: "Recursion depth: ",
    OptionKind.AUTH: "Auth: ",
    OptionKind.SAVE_TOKEN: "Token will be saved",
    OptionKind.UNIX_SOCKET: "Unix socket: ",
    OptionKind.FOLLOW_REDIRECTS: "Follow redirects",
    OptionKind.COOKIE: "Cookie: ",
    OptionKind.FAIL_ON_ERROR: "Fail on error",
    OptionKind.PROGRESS_BAR: "Progress bar",
    OptionKind.PROXY_TUNNEL: "Proxy tunnel",
    OptionKind.CA_PATH: "CA path: ",
    OptionKind.USER_AGENT: "User agent: ",
    OptionKind.REFERRER: "Referrer: ",
    OptionKind.UNRESTRICTED_AUTH: "Unrestricted auth",
    OptionKind.MAX_REDIRECTS: "Max redirects: ",
    OptionKind.UPLOAD_FILE: "Upload file: ",
    OptionKind.REQUEST_BODY: "Request body: ",
}


@dataclass(frozen=True)
class Option:
    """One piece of user-chosen configuration.

    The payload is text, a count, a (key, value) pair for headers, or None
    for options whose presence is all that matters.
    """

    kind: OptionKind
    payload: str | int | tuple[str, str] | None = None

    def label(self) -> str:
        """Human-readable text shown beneath the menu."""
        prefix = LABELS[self.kind]
        if self.payload is None:
            return prefix
        if self.kind is OptionKind.HEADER:
            key, value = self.payload
            return f"{prefix}{key}: {value}"
        if self.kind is OptionKind.RESPONSE:
            # Only the status line of a captured response
            lines = str(self.payload).splitlines()
            return f"{prefix}{lines[0] if lines else ''}"
        return f"{prefix}{self.payload}"


def format_header(payload: tuple[str, str]) -> str:
    """Encode a header pair the way the command line expects it."""
    key, value = payload
    return f"{key}:{value}"


class OptionSet:
    """Ordered collection of the options currently active in a session.

    Every mutation is mirrored into the command adapter so the options on
    screen and the command that will run never disagree.
    """

    def __init__(self, adapter):
        """
        Initialize an empty option set.

        Args:
            adapter: The CommandAdapter that receives side effects.
        """
        self._adapter = adapter
        self._options: list[Option] = []

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def has(self, kind: OptionKind) -> bool:
        """Check if any option of this kind is present."""
        return any(option.kind is kind for option in self._options)

    def get(self, kind: OptionKind) -> Option | None:
        """Get the first option of a kind, or None."""
        for option in self._options:
            if option.kind is kind:
                return option
        return None

    def of_kind(self, kind: OptionKind) -> list[Option]:
        """Get every option of a kind, in insertion order."""
        return [option for option in self._options if option.kind is kind]

    def add(self, option: Option) -> None:
        """
        Merge a newly chosen option into the set.

        Toggle kinds flip the command's flag and add or remove their marker,
        accumulate kinds are always appended, and replace kinds overwrite the
        payload of the existing element in place.

        Args:
            option: The option the user just chose.
        """
        policy = policy_for(option.kind)

        if policy is Policy.TOGGLE:
            self._toggle(option)
            return

        if policy is Policy.ACCUMULATE or not self.has(option.kind):
            logger.debug(f"Adding option {option.kind.value}")
            self._options.append(option)
        else:
            logger.debug(f"Replacing option {option.kind.value}")
            index = next(i for i, o in enumerate(self._options) if o.kind is option.kind)
            self._options[index] = replace(self._options[index], payload=option.payload)

        self._apply(option)

    def remove(self, kind: OptionKind) -> None:
        """Remove every option of a kind."""
        self._options = [option for option in self._options if option.kind is not kind]

    def clear(self) -> None:
        """Remove all options."""
        self._options.clear()

    def labels(self) -> list[str]:
        """Display text for every option, in order."""
        return [option.label() for option in self._options]

    def _toggle(self, option: Option) -> None:
        enabled = not self.has(option.kind)
        logger.debug(f"Toggling {option.kind.value} -> {enabled}")

        if option.kind is OptionKind.VERBOSE:
            self._adapter.set_verbose(enabled)
        elif option.kind is OptionKind.SAVE_COMMAND:
            self._adapter.save_command(enabled)
        elif option.kind is OptionKind.SAVE_TOKEN:
            self._adapter.save_token(enabled)

        if enabled:
            self._options.append(Option(option.kind))
        else:
            self.remove(option.kind)

    def _apply(self, option: Option) -> None:
        """Push the command-level side effect of an added option."""
        if option.kind is OptionKind.URL:
            self._adapter.set_url(option.payload)
        elif option.kind is OptionKind.HEADER:
            self._adapter.add_headers([format_header(option.payload)])
        elif option.kind is OptionKind.OUTFILE:
            self._adapter.set_outfile(option.payload)
