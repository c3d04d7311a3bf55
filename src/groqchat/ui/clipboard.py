"""Clipboard access for copy buttons and copy actions.

Tries the system clipboard through pyperclip, then falls back to the
terminal's OSC 52 escape sequence via Textual.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textual.app import App


def copy_text(app: "App", text: str) -> bool:
    """Copy text to the clipboard.

    Args:
        app: Running Textual app, used for the OSC 52 fallback
        text: Exact text to copy

    Returns:
        True if the system clipboard was used, False if the terminal
        fallback was used
    """
    try:
        import pyperclip
        pyperclip.copy(text)
        return True
    except Exception:
        app.copy_to_clipboard(text)
        return False
