"""Interaction state for one run of the application."""

import logging

from .adapter import CommandAdapter
from .lazy_storage import LazyStorage
from .navigation import Cursor, NavigationStack
from .options import OptionSet
from .screens import ADD_KEY_ITEM, Home, InputMenu, SavedCommands, SavedKeys, Screen

logger = logging.getLogger(__name__)


class InputLine:
    """Text being typed into an input prompt."""

    def __init__(self):
        self.text = ""
        self.editing = False
        self.error: str | None = None

    def start(self) -> None:
        self.text = ""
        self.editing = True
        self.error = None

    def stop(self) -> None:
        self.text = ""
        self.editing = False
        self.error = None

    def type(self, char: str) -> None:
        self.text += char

    def delete(self) -> None:
        self.text = self.text[:-1]


class Session:
    """Everything the user has chosen so far.

    Created with the home screen on the stack; mutated only by the
    application's handlers.
    """

    def __init__(self, storage: LazyStorage):
        """
        Initialize a session at the home screen.

        Args:
            storage: Lazily opened store backing the saved keys and
                saved commands screens.
        """
        self.storage = storage
        self.adapter = CommandAdapter(storage)
        self.options = OptionSet(self.adapter)
        self.stack = NavigationStack(Home())
        self.cursor = Cursor(self.load_items(Home()))
        self.input = InputLine()

    @property
    def current_screen(self) -> Screen:
        return self.stack.current

    def goto(self, screen: Screen) -> None:
        """
        Push a screen and make it current.

        Items are loaded before the push, so a storage failure leaves the
        session where it was.

        Raises:
            StorageError: If the screen's items come from a store that
                cannot be read.
        """
        items = self.load_items(screen)
        logger.debug(f"goto {screen!r}")
        self.stack.push(screen)
        self.cursor.reset(items)
        if isinstance(screen, InputMenu):
            self.input.start()
        else:
            self.input.stop()

    def back(self) -> None:
        """
        Return to the previous screen, skipping input prompts.

        Backing out of the home screen does nothing. Items are loaded
        before the pop, so a storage failure leaves the session where it was.

        Raises:
            StorageError: If the landing screen's items come from a store
                that cannot be read.
        """
        screen = self.stack.landing()
        if screen is None:
            return

        items = self.load_items(screen)
        popped = self.stack.pop()
        self.input.stop()
        logger.debug(f"back to {screen!r}")

        if popped.transient:
            # Position and selection were already cleared by goto()
            self.cursor.items = items
            return

        self.cursor.reset(items)

    def load_items(self, screen: Screen) -> list[str]:
        """The item list for a screen: static, or fetched from storage."""
        if isinstance(screen, SavedKeys):
            return [ADD_KEY_ITEM] + self.storage.get().get_keys()
        if isinstance(screen, SavedCommands):
            return self.storage.get().get_commands()
        return screen.static_items()

    # Cursor shortcuts

    def move_down(self) -> None:
        self.cursor.move_down()

    def move_up(self) -> None:
        self.cursor.move_up()

    def confirm(self, highlighted: int | None = None) -> None:
        self.cursor.confirm(highlighted)
