"""Menu renderer for session state."""

from ..interfaces import Frame
from .screens import InputMenu

NAVIGATION_HINTS = "j/k=move enter=select h=back q=quit"
EDITING_HINTS = "enter=submit esc=cancel"


class MenuRenderer:
    """Renders the current screen of a session as a Frame."""

    def render(self, session, max_items: int | None = None) -> Frame:
        """
        Describe what to draw for the session's current screen.

        Args:
            session: The Session to render.
            max_items: Maximum items to show (None for all). The window
                scrolls so the cursor stays visible.

        Returns:
            Frame for the terminal to draw.
        """
        screen = session.current_screen
        items = list(session.cursor.items)
        cursor = session.cursor.position

        # Scroll the window so the cursor stays visible
        if max_items is not None and len(items) > max_items:
            start = min(max(cursor - max_items + 1, 0), len(items) - max_items)
            items = items[start:start + max_items]
            cursor -= start

        prompt = screen.prompt() if isinstance(screen, InputMenu) else None
        editing = session.input.editing

        return Frame(
            title=screen.title,
            items=tuple(items),
            cursor=cursor,
            options=tuple(session.options.labels()),
            prompt=prompt,
            input_text=session.input.text,
            editing=editing,
            message=session.input.error,
            body=screen.text(),
            hints=EDITING_HINTS if editing else NAVIGATION_HINTS,
        )
