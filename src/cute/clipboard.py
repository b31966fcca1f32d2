"""Clipboard access."""

import logging

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """Raised when text cannot be copied to the clipboard."""


def copy_to_clipboard(text: str) -> None:
    """
    Copy text to the system clipboard.

    Raises:
        ClipboardError: If no clipboard mechanism is available.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        raise ClipboardError(f"Failed to copy to clipboard: {e}")
    logger.debug(f"Copied {len(text)} characters to clipboard")
