"""CuteApp - Main orchestrator for the CuTE terminal front-end."""

import logging
import os
from typing import Callable, Mapping

from .clipboard import ClipboardError, copy_to_clipboard
from .config import Config
from .core import InputParser, InvalidInput, KeyParser, LazyStorage, MenuRenderer, Session
from .core.key_parser import (
    BackAction,
    CancelAction,
    ConfirmAction,
    DeleteAction,
    IgnoredAction,
    MoveDownAction,
    MoveUpAction,
    QuitAction,
    SubmitAction,
    TypeAction,
)
from .core.options import Option, OptionKind
from .core.screens import (
    Authentication,
    AuthType,
    CommandFamily,
    DownloadItem,
    Downloads,
    Error,
    Home,
    HomeItem,
    InputKind,
    InputMenu,
    Method,
    MethodItem,
    RequestItem,
    RequestMenu,
    Response,
    ResponseItem,
    SavedCommands,
    SavedKeys,
    Screen,
    Success,
    ViewBody,
    ViewHeaders,
)
from .interfaces import CommandBuilder, ExecutionError, Frame, Storage, StorageError, Terminal
from .request import AuthKind, Curl, Wget

logger = logging.getLogger(__name__)

URL_REQUIRED_MSG = "Alert: add a URL first"
AWS_AUTH_MSG = "Alert: AWS Signature V4 auth enabled"
AWS_AUTH_ERROR_MSG = (
    "Alert: AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY and AWS_DEFAULT_REGION must be set"
)
NTLM_AUTH_MSG = "Alert: NTLM auth enabled"
RESPONSE_PARSE_ERROR_MSG = "Error: unable to parse the response"
SAVE_FAILED_MSG = "Alert: request sent, but saving failed"
AWS_ENV_VARS = ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_DEFAULT_REGION")

# Request menu items that open an input prompt
REQUEST_PROMPTS: dict[RequestItem, InputKind] = {
    RequestItem.ADD_URL: InputKind.URL,
    RequestItem.UNIX_SOCKET: InputKind.UNIX_SOCKET,
    RequestItem.HEADER: InputKind.HEADERS,
    RequestItem.COOKIE: InputKind.COOKIE,
    RequestItem.REQUEST_BODY: InputKind.REQUEST_BODY,
    RequestItem.UPLOAD_FILE: InputKind.UPLOAD_FILE,
    RequestItem.MAX_REDIRECTS: InputKind.MAX_REDIRECTS,
    RequestItem.USER_AGENT: InputKind.USER_AGENT,
    RequestItem.REFERRER: InputKind.REFERRER,
    RequestItem.CA_PATH: InputKind.CA_PATH,
}

# Request menu items that set or unset a flag
REQUEST_FLAGS: dict[RequestItem, OptionKind] = {
    RequestItem.FOLLOW_REDIRECTS: OptionKind.FOLLOW_REDIRECTS,
    RequestItem.FAIL_ON_ERROR: OptionKind.FAIL_ON_ERROR,
    RequestItem.PROGRESS_BAR: OptionKind.PROGRESS_BAR,
    RequestItem.PROXY_TUNNEL: OptionKind.PROXY_TUNNEL,
    RequestItem.UNRESTRICTED_AUTH: OptionKind.UNRESTRICTED_AUTH,
}

REQUEST_TOGGLES: dict[RequestItem, OptionKind] = {
    RequestItem.VERBOSE: OptionKind.VERBOSE,
    RequestItem.SAVE_COMMAND: OptionKind.SAVE_COMMAND,
    RequestItem.SAVE_TOKEN: OptionKind.SAVE_TOKEN,
}

DOWNLOAD_PROMPTS: dict[DownloadItem, InputKind] = {
    DownloadItem.RECURSIVE: InputKind.RECURSION_DEPTH,
    DownloadItem.ADD_URL: InputKind.URL,
    DownloadItem.OUTFILE: InputKind.OUTPUT,
}

# Prompts whose input becomes a request option as-is
INPUT_OPTIONS: dict[InputKind, OptionKind] = {
    InputKind.UNIX_SOCKET: OptionKind.UNIX_SOCKET,
    InputKind.COOKIE: OptionKind.COOKIE,
    InputKind.REFERRER: OptionKind.REFERRER,
    InputKind.CA_PATH: OptionKind.CA_PATH,
    InputKind.USER_AGENT: OptionKind.USER_AGENT,
    InputKind.MAX_REDIRECTS: OptionKind.MAX_REDIRECTS,
    InputKind.UPLOAD_FILE: OptionKind.UPLOAD_FILE,
    InputKind.REQUEST_BODY: OptionKind.REQUEST_BODY,
    InputKind.HEADERS: OptionKind.HEADER,
}

AUTH_KINDS: dict[AuthType, AuthKind] = {
    AuthType.BASIC: AuthKind.BASIC,
    AuthType.BEARER: AuthKind.BEARER,
    AuthType.DIGEST: AuthKind.DIGEST,
    AuthType.AWS_SIGV4: AuthKind.AWS_SIGV4,
    AuthType.SPNEGO: AuthKind.SPNEGO,
    AuthType.NTLM: AuthKind.NTLM,
}


class CuteApp:
    """Main application orchestrating all components.

    Receives key events from the terminal, drives the session and
    dispatches confirmed selections to the handler of the current screen.
    Uses dependency injection for the terminal, storage and clipboard.
    """

    def __init__(
        self,
        terminal: Terminal,
        storage: Storage,
        config: Config | None = None,
        clipboard: Callable[[str], None] = copy_to_clipboard,
        environ: Mapping[str, str] | None = None,
    ):
        """
        Initialize the application.

        Args:
            terminal: Terminal to draw on and receive keys from.
            storage: Store for saved keys and commands, opened lazily.
            config: Configuration (uses defaults if None).
            clipboard: Function copying text to the clipboard.
            environ: Environment used for AWS credentials (os.environ if None).
        """
        self.terminal = terminal
        self.config = config or Config()
        self.storage = LazyStorage(storage)
        self.session = Session(self.storage)
        self.key_parser = KeyParser()
        self.input_parser = InputParser()
        self.renderer = MenuRenderer()
        self._copy = clipboard
        self._environ = os.environ if environ is None else environ
        self.running = False

        # Register key handler
        self.terminal.on_key(self._handle_key)

    def run(self) -> None:
        """Run until the user quits, then close the store."""
        logger.info("Starting CuTE...")
        self.running = True
        try:
            self.terminal.run(self.render_frame)
        finally:
            self.running = False
            self.storage.close()
            logger.info("CuTE stopped")

    def stop(self) -> None:
        self.running = False
        self.terminal.stop()

    def render_frame(self) -> Frame:
        return self.renderer.render(self.session, max_items=self.config.max_visible_items)

    def _handle_key(self, key) -> None:
        """
        Handle a key event from the terminal.

        Args:
            key: Raw key, a character or a curses key code.
        """
        try:
            action = self.key_parser.parse(key, editing=self.session.input.editing)
            self._process_action(action)
        except Exception as e:
            logger.error(f"Error handling {key!r} on {self.session.current_screen!r}: {e}")
            self._show_error(str(e))

    def _process_action(self, action) -> None:
        session = self.session

        if isinstance(action, QuitAction):
            logger.debug("Quit requested")
            self.stop()
        elif isinstance(action, MoveDownAction):
            session.move_down()
        elif isinstance(action, MoveUpAction):
            session.move_up()
        elif isinstance(action, (BackAction, CancelAction)):
            self._back()
        elif isinstance(action, ConfirmAction):
            session.confirm()
            self._dispatch_selection()
        elif isinstance(action, TypeAction):
            session.input.type(action.char)
        elif isinstance(action, DeleteAction):
            session.input.delete()
        elif isinstance(action, SubmitAction):
            self._submit_input()
        elif isinstance(action, IgnoredAction):
            logger.debug(f"Ignoring key {action.key!r}")

    def _dispatch_selection(self) -> None:
        """Run the current screen's handler for the confirmed selection."""
        index = self.session.cursor.take_selection()
        if index is None:
            return

        screen = self.session.current_screen
        logger.debug(f"Selected [{index}] on {screen.title}")

        if isinstance(screen, Home):
            self._handle_home(list(HomeItem)[index])
        elif isinstance(screen, Method):
            self._handle_method(list(MethodItem)[index])
        elif isinstance(screen, RequestMenu):
            self._handle_request(list(RequestItem)[index])
        elif isinstance(screen, Downloads):
            self._handle_downloads(list(DownloadItem)[index])
        elif isinstance(screen, Authentication):
            self._handle_authentication(list(AuthType)[index])
        elif isinstance(screen, Response):
            self._handle_response(list(ResponseItem)[index])
        elif isinstance(screen, SavedKeys):
            self._handle_saved_key(index)
        elif isinstance(screen, SavedCommands):
            self._copy_text(self.session.cursor.items[index])

    # Screen handlers

    def _handle_home(self, item: HomeItem) -> None:
        if item is HomeItem.REQUEST:
            self._goto(Method())
        elif item is HomeItem.DOWNLOAD:
            self._start_command(Wget(executable=self.config.wget_path))
            self._goto(Downloads())
        elif item is HomeItem.SAVED_KEYS:
            self._goto(SavedKeys())
        elif item is HomeItem.SAVED_COMMANDS:
            self._goto(SavedCommands())

    def _handle_method(self, item: MethodItem) -> None:
        self._start_command(Curl(method=item.value, executable=self.config.curl_path))
        self._goto(RequestMenu())

    def _handle_request(self, item: RequestItem) -> None:
        options = self.session.options

        if item in REQUEST_PROMPTS:
            self._goto(InputMenu(REQUEST_PROMPTS[item], CommandFamily.TRANSFER))
        elif item is RequestItem.AUTHENTICATION:
            self._goto(Authentication())
        elif item in REQUEST_FLAGS:
            kind = REQUEST_FLAGS[item]
            if options.has(kind):
                options.remove(kind)
            else:
                options.add(Option(kind))
        elif item in REQUEST_TOGGLES:
            options.add(Option(REQUEST_TOGGLES[item]))
        elif item is RequestItem.CLEAR:
            logger.info("Clearing all request options")
            options.clear()
            self.session.adapter.reset()
        elif item is RequestItem.EXECUTE:
            self._execute(RequestMenu)

    def _handle_downloads(self, item: DownloadItem) -> None:
        if item is DownloadItem.EXECUTE:
            self._execute(Downloads)
        else:
            self._goto(InputMenu(DOWNLOAD_PROMPTS[item], CommandFamily.DOWNLOAD))

    def _handle_authentication(self, auth: AuthType) -> None:
        if auth in (AuthType.BASIC, AuthType.BEARER, AuthType.DIGEST):
            self._goto(InputMenu(InputKind.AUTH, CommandFamily.TRANSFER, auth=auth))
            return

        if auth is AuthType.AWS_SIGV4:
            if not all(self._environ.get(name) for name in AWS_ENV_VARS):
                logger.warning("AWS credentials missing from environment")
                self._goto(RequestMenu(AWS_AUTH_ERROR_MSG))
                return
            key_id, secret, region = (self._environ[name] for name in AWS_ENV_VARS)
            self.session.adapter.set_auth(
                AuthKind.AWS_SIGV4, f"{key_id}:{secret}", provider=f"aws:amz:{region}"
            )
            self.session.options.add(Option(OptionKind.AUTH, auth.value))
            self._goto(RequestMenu(AWS_AUTH_MSG))
            return

        # SPNEGO and NTLM take their credentials from the system
        self.session.adapter.set_auth(AUTH_KINDS[auth], "")
        self.session.options.add(Option(OptionKind.AUTH, auth.value))
        self._goto(RequestMenu(NTLM_AUTH_MSG if auth is AuthType.NTLM else ""))

    def _handle_response(self, item: ResponseItem) -> None:
        adapter = self.session.adapter

        if item is ResponseItem.WRITE:
            self._goto(InputMenu(InputKind.WRITE_RESPONSE, CommandFamily.TRANSFER))
        elif item is ResponseItem.HEADERS:
            self._goto(ViewHeaders(adapter.get_response_headers()))
        elif item is ResponseItem.BODY:
            if adapter.parsed_response() is None:
                logger.warning("Captured response could not be parsed")
                self._show_error(RESPONSE_PARSE_ERROR_MSG)
                return
            self._goto(ViewBody(adapter.get_response_body()))
        elif item is ResponseItem.COPY_COMMAND:
            self._copy_text(adapter.get_command_string(self.session.options))

    def _handle_saved_key(self, index: int) -> None:
        if index == 0:
            self._goto(InputMenu(InputKind.API_KEY))
        else:
            self._copy_text(self.session.cursor.items[index])

    def _submit_input(self) -> None:
        """Validate the input line and apply it for the current prompt."""
        screen = self.session.current_screen
        if not isinstance(screen, InputMenu):
            return

        result = self.input_parser.parse(screen.kind, self.session.input.text)
        if isinstance(result, InvalidInput):
            logger.info(f"Rejected input for {screen.kind.value}: {result.reason}")
            self.session.input.error = result.reason
            return

        value = result.value
        options = self.session.options
        kind = screen.kind

        if kind is InputKind.URL:
            options.add(Option(OptionKind.URL, value))
            if screen.family is CommandFamily.DOWNLOAD:
                self._goto(Downloads())
            else:
                self._goto(RequestMenu())
        elif kind is InputKind.OUTPUT:
            options.add(Option(OptionKind.OUTFILE, value))
            self._goto(Downloads())
        elif kind is InputKind.RECURSION_DEPTH:
            options.add(Option(OptionKind.RECURSION_DEPTH, value))
            self._goto(Downloads())
        elif kind is InputKind.AUTH:
            self.session.adapter.set_auth(AUTH_KINDS[screen.auth], value)
            options.add(Option(OptionKind.AUTH, screen.auth.value))
            self._goto(RequestMenu())
        elif kind is InputKind.API_KEY:
            self._save_key(value)
        elif kind is InputKind.WRITE_RESPONSE:
            self._write_response(value)
        elif kind in INPUT_OPTIONS:
            options.add(Option(INPUT_OPTIONS[kind], value))
            self._goto(RequestMenu())

    # Helpers

    def _goto(self, screen: Screen) -> None:
        """Navigate, routing storage failures to the error screen."""
        try:
            self.session.goto(screen)
        except StorageError as e:
            logger.error(f"Storage error opening {screen.title}: {e}")
            self._show_error(str(e))

    def _back(self) -> None:
        """Navigate back, routing storage failures to the error screen."""
        try:
            self.session.back()
        except StorageError as e:
            logger.error(f"Storage error going back from {self.session.current_screen.title}: {e}")
            self._show_error(str(e))

    def _show_error(self, message: str) -> None:
        self.session.goto(Error(message))

    def _start_command(self, command: CommandBuilder) -> None:
        """Make a new command active with a clean option set."""
        logger.info(f"Starting a new {command.family} command")
        self.session.options.clear()
        self.session.adapter.set_command(command)

    def _execute(self, menu: type[Screen]) -> None:
        """
        Run the active command.

        Args:
            menu: Menu screen class to return to with an alert when no URL
                has been added.
        """
        session = self.session
        if not session.options.has(OptionKind.URL):
            self._goto(menu(URL_REQUIRED_MSG))
            return

        alert = ""
        try:
            response = session.adapter.execute(session.options)
        except ExecutionError as e:
            logger.error(f"Execution failed: {e}")
            self._show_error(str(e))
            return
        except StorageError as e:
            if session.adapter.response is None:
                logger.error(f"Storage unavailable, request not sent: {e}")
                self._show_error(str(e))
                return
            # curl ran; only saving failed
            logger.error(f"Request sent but saving failed: {e}")
            response = session.adapter.response
            alert = f"{SAVE_FAILED_MSG}: {e}"

        if menu is Downloads:
            self._goto(Success("Download complete"))
            return

        session.options.add(Option(OptionKind.RESPONSE, response))
        self._goto(Response(response, alert))

    def _write_response(self, path: str) -> None:
        self.session.options.add(Option(OptionKind.OUTFILE, path))
        try:
            self.session.adapter.write_output()
        except ExecutionError as e:
            logger.error(f"Write failed: {e}")
            self._show_error(str(e))
            return
        self._goto(Success(f"Response written to {path}"))

    def _save_key(self, key: str) -> None:
        try:
            self.storage.get().add_key(key)
        except StorageError as e:
            logger.error(f"Failed to save key: {e}")
            self._show_error(str(e))
            return
        logger.info("Key saved")
        self._goto(SavedKeys())

    def _copy_text(self, text: str) -> None:
        try:
            self._copy(text)
        except ClipboardError as e:
            logger.error(str(e))
            self._show_error(str(e))
            return
        self._goto(Success("Copied to clipboard"))
