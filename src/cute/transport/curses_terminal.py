"""curses-based terminal."""

import curses
import logging
from typing import Callable

from pubsub import pub

from ..interfaces import Frame, Terminal

logger = logging.getLogger(__name__)

KEY_TOPIC = "cute.input.key"


class CursesTerminal(Terminal):
    """Terminal drawn with curses.

    Key presses are published on the "cute.input.key" topic and relayed
    to the registered callbacks.
    """

    def __init__(self):
        self._callbacks: list[Callable[[int | str], None]] = []
        self._stdscr = None
        self._running = False

    def on_key(self, callback: Callable[[int | str], None]) -> None:
        """
        Register a callback for key events.

        Args:
            callback: Function called with each raw key.
        """
        self._callbacks.append(callback)

    def run(self, frame_source: Callable[[], Frame]) -> None:
        """
        Take over the terminal and loop until stop() is called.

        The terminal is restored on exit, including on errors.
        """
        pub.subscribe(self._handle_key, KEY_TOPIC)
        try:
            curses.wrapper(self._loop, frame_source)
        finally:
            if pub.isSubscribed(self._handle_key, KEY_TOPIC):
                pub.unsubscribe(self._handle_key, KEY_TOPIC)
            self._stdscr = None

    def stop(self) -> None:
        self._running = False

    def _loop(self, stdscr, frame_source: Callable[[], Frame]) -> None:
        self._stdscr = stdscr
        stdscr.keypad(True)
        self._init_colors()
        self._running = True
        logger.info("Terminal started")

        while self._running:
            self.draw(frame_source())
            key = stdscr.get_wch()
            if key == curses.KEY_RESIZE:
                continue
            pub.sendMessage(KEY_TOPIC, key=key)

        logger.info("Terminal stopped")

    def _init_colors(self) -> None:
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(1, curses.COLOR_RED, -1)    # Error
            curses.init_pair(2, curses.COLOR_CYAN, -1)   # Options

    def _handle_key(self, key) -> None:
        """Relay a published key to the callbacks."""
        for callback in self._callbacks:
            callback(key)

    def draw(self, frame: Frame) -> None:
        """Paint a frame onto the screen."""
        stdscr = self._stdscr
        if stdscr is None:
            return

        height, width = stdscr.getmaxyx()
        stdscr.erase()

        self._addstr(0, 0, frame.title, curses.A_BOLD)
        self._addstr(1, 0, frame.hints, curses.A_DIM)
        row = 3

        if frame.prompt is not None:
            self._addstr(row, 0, frame.prompt)
            self._addstr(row + 1, 0, f"> {frame.input_text}", curses.A_UNDERLINE)
            row += 3

        if frame.message:
            self._addstr(row, 0, frame.message, self._color(1, curses.A_BOLD))
            row += 2

        for index, item in enumerate(frame.items):
            attr = curses.A_REVERSE if index == frame.cursor else curses.A_NORMAL
            self._addstr(row, 2, item, attr)
            row += 1

        if frame.body:
            row += 1
            for line in frame.body.splitlines():
                if row >= height - 1:
                    break
                self._addstr(row, 0, line)
                row += 1

        if frame.options:
            row += 1
            for label in frame.options:
                if row >= height - 1:
                    break
                self._addstr(row, 0, f"* {label}", self._color(2, curses.A_NORMAL))
                row += 1

        if frame.editing:
            try:
                curses.curs_set(1)
            except curses.error:
                logger.debug("Terminal cannot show a cursor")
            stdscr.move(min(4, height - 1), min(2 + len(frame.input_text), width - 1))
        else:
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("Terminal cannot hide the cursor")

        stdscr.refresh()

    def _color(self, pair: int, fallback: int) -> int:
        return curses.color_pair(pair) if curses.has_colors() else fallback

    def _addstr(self, row: int, col: int, text: str, attr: int = curses.A_NORMAL) -> None:
        """Write text clipped to the screen; writes off-screen are dropped."""
        height, width = self._stdscr.getmaxyx()
        if row >= height or col >= width:
            return
        try:
            self._stdscr.addstr(row, col, text[:width - col - 1], attr)
        except curses.error:
            logger.debug(f"Could not draw at row {row}")
