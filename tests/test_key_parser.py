"""Tests for the KeyParser module."""

import curses

import pytest
from cute.core.key_parser import (
    BackAction,
    CancelAction,
    ConfirmAction,
    DeleteAction,
    IgnoredAction,
    KeyParser,
    MoveDownAction,
    MoveUpAction,
    QuitAction,
    SubmitAction,
    TypeAction,
)


class TestKeyParser:
    """Tests for KeyParser in navigation mode."""

    @pytest.fixture
    def parser(self):
        """Create a KeyParser instance."""
        return KeyParser()

    @pytest.mark.parametrize("key", ["k", curses.KEY_UP])
    def test_move_up(self, parser, key):
        """k and the up arrow move up."""
        assert parser.parse(key) == MoveUpAction()

    @pytest.mark.parametrize("key", ["j", curses.KEY_DOWN])
    def test_move_down(self, parser, key):
        """j and the down arrow move down."""
        assert parser.parse(key) == MoveDownAction()

    @pytest.mark.parametrize("key", ["\n", "l", curses.KEY_ENTER, curses.KEY_RIGHT])
    def test_confirm(self, parser, key):
        """Enter, l and right arrow confirm."""
        assert parser.parse(key) == ConfirmAction()

    @pytest.mark.parametrize("key", ["h", curses.KEY_LEFT, curses.KEY_BACKSPACE, "\x7f"])
    def test_back(self, parser, key):
        """h, left arrow and backspace go back."""
        assert parser.parse(key) == BackAction()

    def test_quit(self, parser):
        """q quits."""
        assert parser.parse("q") == QuitAction()

    def test_unknown_key_ignored(self, parser):
        """Unbound keys are ignored."""
        assert parser.parse("z") == IgnoredAction(key="z")


class TestKeyParserEditing:
    """Tests for KeyParser while a prompt is open."""

    @pytest.fixture
    def parser(self):
        """Create a KeyParser instance."""
        return KeyParser()

    def test_letters_are_typed(self, parser):
        """Navigation letters type while editing."""
        assert parser.parse("q", editing=True) == TypeAction(char="q")
        assert parser.parse("j", editing=True) == TypeAction(char="j")

    def test_enter_submits(self, parser):
        """Enter submits the line."""
        assert parser.parse("\n", editing=True) == SubmitAction()

    def test_backspace_deletes(self, parser):
        """Backspace deletes instead of going back."""
        assert parser.parse(curses.KEY_BACKSPACE, editing=True) == DeleteAction()

    def test_escape_cancels(self, parser):
        """Escape leaves the prompt."""
        assert parser.parse("\x1b", editing=True) == CancelAction()

    def test_arrow_ignored(self, parser):
        """Arrows do nothing while typing."""
        assert parser.parse(curses.KEY_UP, editing=True) == IgnoredAction(key=curses.KEY_UP)

    def test_control_char_ignored(self, parser):
        """Non-printable characters are not typed."""
        assert isinstance(parser.parse("\x01", editing=True), IgnoredAction)
