"""Terminal UI module for groqchat.

Provides a Textual-based TUI and a Rich console view for the chat.

Module structure (each module hides a design decision):
- render.py: Pure history -> view description mapping
- highlight.py: Optional code highlighting
- clipboard.py: Clipboard access with terminal fallback
- widgets.py: Custom widgets (message bubbles, copy buttons, input bar, log)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette and theme configuration
- screens.py: Modal dialogs (confirmation screen)
- console.py: Line-mode Rich rendering
- app.py: Application orchestration (user interaction flow)
"""

from ..debug import LogLevel
from .app import ChatApp, run_chat_tui
from .console import ConsoleChatView
from .highlight import Highlighter, NullHighlighter, SyntaxHighlighter
from .render import CodeBlock, MessageView, TextBlock, render_history, render_message
from .widgets import ChatHistoryWidget, ChatInputBar, CopyButton, DebugPanel

__all__ = [
    "ChatApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "CodeBlock",
    "ConsoleChatView",
    "CopyButton",
    "DebugPanel",
    "Highlighter",
    "LogLevel",
    "MessageView",
    "NullHighlighter",
    "SyntaxHighlighter",
    "TextBlock",
    "render_history",
    "render_message",
    "run_chat_tui",
]
