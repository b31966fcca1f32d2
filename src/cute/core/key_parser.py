"""Key parser for interpreting terminal key events."""

import curses
from abc import ABC
from dataclasses import dataclass


class Action(ABC):
    """Base class for all key actions."""

    pass


@dataclass(frozen=True)
class MoveUpAction(Action):
    pass


@dataclass(frozen=True)
class MoveDownAction(Action):
    pass


@dataclass(frozen=True)
class ConfirmAction(Action):
    """Confirm the highlighted item."""

    pass


@dataclass(frozen=True)
class BackAction(Action):
    """Go back to the previous screen."""

    pass


@dataclass(frozen=True)
class QuitAction(Action):
    pass


@dataclass(frozen=True)
class TypeAction(Action):
    """Append a character to the input line."""

    char: str


@dataclass(frozen=True)
class DeleteAction(Action):
    """Delete the last character of the input line."""

    pass


@dataclass(frozen=True)
class SubmitAction(Action):
    """Submit the input line."""

    pass


@dataclass(frozen=True)
class CancelAction(Action):
    """Leave the input prompt without submitting."""

    pass


@dataclass(frozen=True)
class IgnoredAction(Action):
    """A key with no meaning in the current mode."""

    key: int | str


class KeyParser:
    """Parses raw key events into Action objects.

    Keys are either single-character strings or curses key codes.
    """

    UP_KEYS = {"k", curses.KEY_UP}
    DOWN_KEYS = {"j", curses.KEY_DOWN}
    CONFIRM_KEYS = {"\n", "\r", "l", curses.KEY_ENTER, curses.KEY_RIGHT}
    BACK_KEYS = {"h", curses.KEY_LEFT, curses.KEY_BACKSPACE, "\x7f", "\b"}
    QUIT_KEYS = {"q"}

    SUBMIT_KEYS = {"\n", "\r", curses.KEY_ENTER}
    DELETE_KEYS = {curses.KEY_BACKSPACE, "\x7f", "\b"}
    CANCEL_KEYS = {"\x1b"}

    def parse(self, key: int | str, editing: bool = False) -> Action:
        """
        Parse a key event into an Action.

        Args:
            key: The raw key from the terminal.
            editing: True while an input prompt is capturing text.

        Returns:
            An Action for the key.
        """
        if editing:
            return self._parse_editing(key)

        if key in self.UP_KEYS:
            return MoveUpAction()

        if key in self.DOWN_KEYS:
            return MoveDownAction()

        if key in self.CONFIRM_KEYS:
            return ConfirmAction()

        if key in self.BACK_KEYS:
            return BackAction()

        if key in self.QUIT_KEYS:
            return QuitAction()

        return IgnoredAction(key=key)

    def _parse_editing(self, key: int | str) -> Action:
        if key in self.SUBMIT_KEYS:
            return SubmitAction()

        if key in self.DELETE_KEYS:
            return DeleteAction()

        if key in self.CANCEL_KEYS:
            return CancelAction()

        if isinstance(key, str) and len(key) == 1 and key.isprintable():
            return TypeAction(char=key)

        return IgnoredAction(key=key)
