"""Splitting of message text into text and fenced-code segments.

A fence opens with three backticks, an optional word-character language
tag and a newline, and closes at the next three backticks. Fences do not
nest: the first closing marker ends the block.
"""

import re

from .models import CodeSegment, ContentSegment, TextSegment

FENCE = "```"

CODE_BLOCK_PATTERN = re.compile(r"```(\w+)?\n(.*?)```", re.DOTALL)


def parse_message_content(content: str) -> list[ContentSegment]:
    """Parse raw message text into an ordered list of segments.

    Args:
        content: Raw message text

    Returns:
        Segments in source order. Text between two fences is always emitted,
        even when empty; leading and trailing text only when non-empty.

    Examples:
        >>> parse_message_content("Show ```js\\nconsole.log(1)```")
        [TextSegment(content='Show '), CodeSegment(content='console.log(1)', tag='js')]
    """
    segments: list[ContentSegment] = []
    last_index = 0

    for match in CODE_BLOCK_PATTERN.finditer(content):
        # An empty span between two adjacent fences is still emitted
        if match.start() > last_index or segments:
            segments.append(TextSegment(content[last_index:match.start()]))
        segments.append(CodeSegment(content=match.group(2), tag=match.group(1) or ""))
        last_index = match.end()

    if last_index < len(content):
        segments.append(TextSegment(content[last_index:]))

    return segments


def reassemble(segments: list[ContentSegment]) -> str:
    """Rebuild raw text from parsed segments, restoring the code fences."""
    parts = []
    for segment in segments:
        if isinstance(segment, CodeSegment):
            parts.append(f"{FENCE}{segment.tag}\n{segment.content}{FENCE}")
        else:
            parts.append(segment.content)
    return "".join(parts)

