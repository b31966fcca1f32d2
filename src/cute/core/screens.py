"""Screens of the menu hierarchy and their static item lists."""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class CommandFamily(Enum):
    """Which kind of command an input prompt feeds."""

    TRANSFER = "curl"
    DOWNLOAD = "wget"


class AuthType(Enum):
    """Authentication schemes offered on the authentication screen."""

    BASIC = "Basic"
    BEARER = "Bearer"
    DIGEST = "Digest"
    AWS_SIGV4 = "AWS Signature V4"
    SPNEGO = "SPNEGO"
    NTLM = "NTLM"


class InputKind(Enum):
    """What an input prompt captures."""

    URL = "url"
    HEADERS = "headers"
    OUTPUT = "output"
    RECURSION_DEPTH = "recursion_depth"
    AUTH = "auth"
    API_KEY = "api_key"
    UNIX_SOCKET = "unix_socket"
    COOKIE = "cookie"
    REFERRER = "referrer"
    CA_PATH = "ca_path"
    USER_AGENT = "user_agent"
    MAX_REDIRECTS = "max_redirects"
    UPLOAD_FILE = "upload_file"
    REQUEST_BODY = "request_body"
    WRITE_RESPONSE = "write_response"


PROMPTS: dict[InputKind, str] = {
    InputKind.URL: "Enter a URL for your {family} and press Enter",
    InputKind.HEADERS: "Enter a header in the form key:value and press Enter",
    InputKind.OUTPUT: "Enter the name of the output file and press Enter",
    InputKind.RECURSION_DEPTH: "Enter the recursion depth (a number) and press Enter",
    InputKind.API_KEY: "Enter the key you would like to store and press Enter",
    InputKind.UNIX_SOCKET: "Enter the path of the unix socket and press Enter",
    InputKind.COOKIE: "Enter a cookie (name=value or a cookie file) and press Enter",
    InputKind.REFERRER: "Enter the referrer URL and press Enter",
    InputKind.CA_PATH: "Enter the path to your CA certificates and press Enter",
    InputKind.USER_AGENT: "Enter the user agent and press Enter",
    InputKind.MAX_REDIRECTS: "Enter the maximum number of redirects and press Enter",
    InputKind.UPLOAD_FILE: "Enter the path of the file to upload and press Enter",
    InputKind.REQUEST_BODY: "Enter the request body and press Enter",
    InputKind.WRITE_RESPONSE: "Enter the file to write the response to and press Enter",
}

AUTH_PROMPTS: dict[AuthType, str] = {
    AuthType.BASIC: "Enter username:password and press Enter",
    AuthType.BEARER: "Enter your bearer token and press Enter",
}
DEFAULT_AUTH_PROMPT = "Enter your credentials and press Enter"


class HomeItem(Enum):
    REQUEST = "Build and send an HTTP request"
    DOWNLOAD = "Download a remote file or directory"
    SAVED_KEYS = "View my stored API keys"
    SAVED_COMMANDS = "View my saved commands"


class MethodItem(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"


class RequestItem(Enum):
    ADD_URL = "Add a URL"
    UNIX_SOCKET = "Add a unix socket address"
    AUTHENTICATION = "Authentication"
    HEADER = "Add a header"
    COOKIE = "Add a cookie"
    REQUEST_BODY = "Add a request body"
    UPLOAD_FILE = "Upload a file"
    FOLLOW_REDIRECTS = "Follow redirects"
    MAX_REDIRECTS = "Set max redirects"
    USER_AGENT = "Set the user agent"
    REFERRER = "Set the referrer"
    CA_PATH = "Set a CA certificate path"
    FAIL_ON_ERROR = "Fail on HTTP errors"
    PROGRESS_BAR = "Show a progress bar"
    PROXY_TUNNEL = "Tunnel through the proxy"
    UNRESTRICTED_AUTH = "Send credentials on redirects"
    VERBOSE = "Toggle verbose output"
    SAVE_COMMAND = "Save this command"
    SAVE_TOKEN = "Save the auth token"
    CLEAR = "Clear all options"
    EXECUTE = "Execute"


class DownloadItem(Enum):
    RECURSIVE = "Specify a recursive download (depth)"
    ADD_URL = "Add a URL"
    OUTFILE = "Specify the output filename"
    EXECUTE = "Begin download"


class ResponseItem(Enum):
    WRITE = "Write the response to a file"
    HEADERS = "View the response headers"
    BODY = "View the response body"
    COPY_COMMAND = "Copy the command to the clipboard"


ADD_KEY_ITEM = "Add a new key"


class Screen(ABC):
    """Base class for all screens.

    Screens are immutable values; a new one is produced on every transition.
    Transient screens are one-shot prompts skipped by backward navigation.
    """

    title: ClassVar[str] = ""
    transient: ClassVar[bool] = False
    menu: ClassVar[type[Enum] | None] = None

    def static_items(self) -> list[str]:
        """The fixed item list of this screen."""
        if self.menu is None:
            return []
        return [item.value for item in self.menu]

    def text(self) -> str | None:
        """Body text shown beneath the items, if any."""
        return None


@dataclass(frozen=True)
class Home(Screen):
    title: ClassVar[str] = "CuTE"
    menu: ClassVar[type[Enum]] = HomeItem


@dataclass(frozen=True)
class Method(Screen):
    title: ClassVar[str] = "Choose a request method"
    menu: ClassVar[type[Enum]] = MethodItem


@dataclass(frozen=True)
class RequestMenu(Screen):
    """The HTTP request builder; message carries an optional alert."""

    message: str = ""

    title: ClassVar[str] = "Build an HTTP request"
    menu: ClassVar[type[Enum]] = RequestItem

    def text(self) -> str | None:
        return self.message or None


@dataclass(frozen=True)
class Downloads(Screen):
    message: str = ""

    title: ClassVar[str] = "Download a file"
    menu: ClassVar[type[Enum]] = DownloadItem

    def text(self) -> str | None:
        return self.message or None


@dataclass(frozen=True)
class Authentication(Screen):
    title: ClassVar[str] = "Choose an authentication scheme"
    menu: ClassVar[type[Enum]] = AuthType


@dataclass(frozen=True)
class InputMenu(Screen):
    """A text-capture prompt."""

    kind: InputKind
    family: CommandFamily | None = None
    auth: AuthType | None = None

    title: ClassVar[str] = "Input"
    transient: ClassVar[bool] = True

    def prompt(self) -> str:
        """The prompt shown above the input line."""
        if self.kind is InputKind.AUTH:
            return AUTH_PROMPTS.get(self.auth, DEFAULT_AUTH_PROMPT)
        family = self.family.value if self.family else "request"
        return PROMPTS[self.kind].format(family=family)


@dataclass(frozen=True)
class Response(Screen):
    """A captured response; message carries an optional alert."""

    raw: str = ""
    message: str = ""

    title: ClassVar[str] = "Response"
    menu: ClassVar[type[Enum]] = ResponseItem

    def text(self) -> str | None:
        return self.message or None


@dataclass(frozen=True)
class ViewHeaders(Screen):
    headers: str = ""

    title: ClassVar[str] = "Response headers"

    def text(self) -> str | None:
        return self.headers


@dataclass(frozen=True)
class ViewBody(Screen):
    body: str = ""

    title: ClassVar[str] = "Response body"

    def text(self) -> str | None:
        return self.body


@dataclass(frozen=True)
class SavedCommands(Screen):
    title: ClassVar[str] = "Saved commands"


@dataclass(frozen=True)
class SavedKeys(Screen):
    title: ClassVar[str] = "Saved keys"


@dataclass(frozen=True)
class Success(Screen):
    message: str = "Success!"

    title: ClassVar[str] = "Success"

    def text(self) -> str | None:
        return self.message


@dataclass(frozen=True)
class Error(Screen):
    message: str = ""

    title: ClassVar[str] = "Error"

    def text(self) -> str | None:
        return self.message
