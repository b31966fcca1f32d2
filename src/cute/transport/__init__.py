"""Terminal implementations."""

from .curses_terminal import CursesTerminal, KEY_TOPIC

__all__ = ["CursesTerminal", "KEY_TOPIC"]
