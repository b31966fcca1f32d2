"""Abstract interface for the terminal the menus are drawn on."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable


@dataclass(frozen=True)
class Frame:
    """Everything the terminal needs to draw one screen."""

    title: str
    items: tuple[str, ...] = field(default_factory=tuple)
    cursor: int = 0
    options: tuple[str, ...] = field(default_factory=tuple)
    prompt: str | None = None
    input_text: str = ""
    editing: bool = False
    message: str | None = None
    body: str | None = None
    hints: str = ""


class Terminal(ABC):
    """Abstract interface for drawing frames and receiving key events."""

    @abstractmethod
    def on_key(self, callback: Callable[[int | str], None]) -> None:
        """Register a callback for key events.

        The callback receives the raw key: a character, or an integer
        key code for special keys.
        """
        pass

    @abstractmethod
    def run(self, frame_source: Callable[[], Frame]) -> None:
        """Draw, wait for a key, dispatch it, until stopped.

        Args:
            frame_source: Called before every draw for the frame to show.
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop the loop after the current key is handled."""
        pass
