"""Chat core: message model, content parsing, completion and control flow."""

from .completion import ERROR_MESSAGE, CompletionClient
from .controller import CLEAR_PROMPT, ChatController, ChatView
from .models import ChatState, CodeSegment, ContentSegment, Message, Role, TextSegment
from .parser import parse_message_content, reassemble

__all__ = [
    "CLEAR_PROMPT",
    "ERROR_MESSAGE",
    "ChatController",
    "ChatState",
    "ChatView",
    "CodeSegment",
    "CompletionClient",
    "ContentSegment",
    "Message",
    "Role",
    "TextSegment",
    "parse_message_content",
    "reassemble",
]
