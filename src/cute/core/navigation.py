"""Screen stack and cursor state."""

from dataclasses import dataclass

from .screens import Screen


@dataclass(frozen=True)
class StackEntry:
    """A screen on the navigation stack, tagged durable or transient."""

    screen: Screen
    transient: bool = False


class NavigationStack:
    """Push-down stack of screens.

    The bottom entry is the home screen and is never popped. Transient
    entries (input prompts) are skipped when navigating back.
    """

    def __init__(self, home: Screen):
        self._entries: list[StackEntry] = [StackEntry(home)]

    @property
    def current(self) -> Screen:
        """The screen on top of the stack."""
        return self._entries[-1].screen

    def landing(self) -> Screen | None:
        """The screen pop() would make current, or None if only home remains."""
        if len(self._entries) <= 1:
            return None
        index = len(self._entries) - 2
        while index > 0 and self._entries[index].transient:
            index -= 1
        return self._entries[index].screen

    def push(self, screen: Screen) -> None:
        """Push a screen and make it current."""
        self._entries.append(StackEntry(screen, transient=screen.transient))

    def pop(self) -> StackEntry | None:
        """
        Pop the current screen, then any transient screens beneath it.

        Returns:
            The entry that was current, or None if only home remains.
        """
        if len(self._entries) <= 1:
            return None

        popped = self._entries.pop()
        while len(self._entries) > 1 and self._entries[-1].transient:
            self._entries.pop()
        return popped


class Cursor:
    """Highlighted item and confirmed selection for the current screen."""

    def __init__(self, items: list[str] | None = None):
        self.items: list[str] = list(items) if items else []
        self.position = 0
        self.selected: int | None = None

    def reset(self, items: list[str]) -> None:
        """Load a new item list, clearing position and selection."""
        self.items = list(items)
        self.position = 0
        self.selected = None

    def move_down(self) -> None:
        """Move down one item, stopping at the last."""
        if not self.items or self.position >= len(self.items) - 1:
            return
        self.position += 1

    def move_up(self) -> None:
        """Move up one item, stopping at the first."""
        if not self.items or self.position == 0:
            return
        self.position -= 1

    def confirm(self, highlighted: int | None = None) -> None:
        """
        Confirm the highlighted item.

        Args:
            highlighted: Index reported by the list widget. Defaults to the
                cursor position, which is the row the renderer highlights.
        """
        if not self.items:
            return
        index = self.position if highlighted is None else highlighted
        if 0 <= index < len(self.items):
            self.selected = index

    def take_selection(self) -> int | None:
        """Return and clear the confirmed selection."""
        selected, self.selected = self.selected, None
        return selected
