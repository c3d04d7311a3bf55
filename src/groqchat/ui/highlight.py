"""Syntax highlighting for code blocks.

Highlighting is optional and purely additive: the widgets receive a
``Highlighter`` and fall back to plain text if it is missing or fails.
"""

from typing import Protocol

from rich.console import RenderableType
from rich.syntax import Syntax
from rich.text import Text

from .config import SYNTAX_THEME


class Highlighter(Protocol):
    """Turns source code into a renderable for display."""

    def highlight(self, code: str, language: str) -> RenderableType:
        ...


class NullHighlighter:
    """No-op highlighter: code is shown as plain text."""

    def highlight(self, code: str, language: str) -> RenderableType:
        return Text(code)


class SyntaxHighlighter:
    """Pygments-backed highlighting via Rich's Syntax renderable.

    Unknown languages (including "plaintext") render without colouring.
    """

    def __init__(self, theme: str = SYNTAX_THEME, line_numbers: bool = False):
        self._theme = theme
        self._line_numbers = line_numbers

    def highlight(self, code: str, language: str) -> RenderableType:
        return Syntax(
            code,
            language,
            theme=self._theme,
            line_numbers=self._line_numbers,
            word_wrap=True,
        )


def highlight_code(highlighter: Highlighter | None, code: str, language: str) -> RenderableType:
    """Highlight code, degrading to plain text on any highlighter failure."""
    if highlighter is None:
        return Text(code)
    try:
        return highlighter.highlight(code, language)
    except Exception:
        return Text(code)
