"""Pure rendering of chat history into a view description.

No widgets are created here. The Textual widgets and the console view both
consume the same ``MessageView`` objects, so everything about how a
message is laid out can be tested without a terminal.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from ..chat.models import CodeSegment, Message
from ..chat.parser import parse_message_content


@dataclass(frozen=True)
class TextBlock:
    """Literal text, displayed as-is (never interpreted as markup)."""

    text: str


@dataclass(frozen=True)
class CodeBlock:
    """Preformatted code with the language used for highlighting."""

    code: str
    language: str

    @property
    def css_class(self) -> str:
        return f"language-{self.language}"


Block = TextBlock | CodeBlock


@dataclass(frozen=True)
class MessageView:
    """Everything needed to display one message."""

    message_id: str
    role: str
    align: str  # "right" for the user, "left" otherwise
    blocks: tuple[Block, ...]
    copy_text: str  # full raw content including fence markers

    @property
    def is_user(self) -> bool:
        return self.align == "right"

    @property
    def css_classes(self) -> str:
        side = "user-message" if self.is_user else "assistant-message"
        return f"chat-message {side} align-{self.align}"


def render_message(message: Message) -> MessageView:
    """Describe how a single message is displayed."""
    blocks: list[Block] = []
    for segment in parse_message_content(message.content):
        if isinstance(segment, CodeSegment):
            blocks.append(CodeBlock(code=segment.content, language=segment.language))
        else:
            blocks.append(TextBlock(text=segment.content))

    return MessageView(
        message_id=message.id,
        role=message.role,
        align="right" if message.is_user else "left",
        blocks=tuple(blocks),
        copy_text=message.content,
    )


def render_history(history: Sequence[Message]) -> list[MessageView]:
    """Describe the whole conversation, oldest first."""
    return [render_message(message) for message in history]
