"""Tests for the MenuRenderer module."""

import pytest
from unittest.mock import Mock

from cute.core.lazy_storage import LazyStorage
from cute.core.menu_renderer import EDITING_HINTS, NAVIGATION_HINTS, MenuRenderer
from cute.core.options import Option, OptionKind
from cute.core.screens import CommandFamily, InputKind, InputMenu, RequestMenu, ViewBody
from cute.core.session import Session


class TestMenuRenderer:
    """Tests for MenuRenderer."""

    @pytest.fixture
    def renderer(self):
        """Create a MenuRenderer instance."""
        return MenuRenderer()

    @pytest.fixture
    def session(self):
        """A session whose storage is never opened."""
        return Session(LazyStorage(Mock()))

    def test_render_home(self, renderer, session):
        """Home shows its title, items and navigation hints."""
        frame = renderer.render(session)
        assert frame.title == "CuTE"
        assert frame.items[0] == "Build and send an HTTP request"
        assert frame.cursor == 0
        assert frame.prompt is None
        assert frame.editing is False
        assert frame.hints == NAVIGATION_HINTS

    def test_render_options(self, renderer, session):
        """Option labels are listed in order."""
        session.adapter.command = Mock()
        session.options.add(Option(OptionKind.URL, "http://x"))
        session.options.add(Option(OptionKind.VERBOSE))
        frame = renderer.render(session)
        assert frame.options == ("URL: http://x", "Verbose output enabled")

    def test_render_prompt(self, renderer, session):
        """Prompts show their text, input line and editing hints."""
        session.goto(InputMenu(InputKind.URL, CommandFamily.DOWNLOAD))
        session.input.type("h")
        frame = renderer.render(session)
        assert frame.prompt == "Enter a URL for your wget and press Enter"
        assert frame.input_text == "h"
        assert frame.editing is True
        assert frame.hints == EDITING_HINTS

    def test_render_input_error(self, renderer, session):
        """A rejected input shows its reason."""
        session.goto(InputMenu(InputKind.RECURSION_DEPTH))
        session.input.error = "Not a number: abc"
        assert renderer.render(session).message == "Not a number: abc"

    def test_render_alert_body(self, renderer, session):
        """Menu alerts are shown as body text."""
        session.goto(RequestMenu("Alert: add a URL first"))
        assert renderer.render(session).body == "Alert: add a URL first"

    def test_render_view_body(self, renderer, session):
        """Viewer screens carry their text and no items."""
        session.goto(ViewBody("hello"))
        frame = renderer.render(session)
        assert frame.body == "hello"
        assert frame.items == ()

    def test_window_scrolls_with_cursor(self, renderer, session):
        """The cursor stays visible when items are cut."""
        session.goto(RequestMenu())
        for _ in range(6):
            session.move_down()
        frame = renderer.render(session, max_items=4)
        assert len(frame.items) == 4
        assert frame.items[frame.cursor] == session.cursor.items[6]
        assert frame.cursor == 3

    def test_window_at_top(self, renderer, session):
        """No scrolling while the cursor is inside the first window."""
        session.goto(RequestMenu())
        session.move_down()
        frame = renderer.render(session, max_items=4)
        assert frame.items == tuple(session.cursor.items[:4])
        assert frame.cursor == 1

    def test_short_list_not_cut(self, renderer, session):
        """Lists shorter than the window are shown whole."""
        frame = renderer.render(session, max_items=20)
        assert len(frame.items) == 4
