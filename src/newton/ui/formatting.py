"""Text formatting utilities for the TUI and CLI.

Hides how render nodes become Rich renderables.
"""

from rich.console import Group
from rich.text import Text

from ..rendering import (
    BoxedAnswer,
    Heading,
    ListItem,
    Paragraph,
    RenderNode,
    render_answer,
)
from ..subjects import Subject
from .themes import (
    BOXED_STYLE,
    BULLET_STYLE,
    HEADING_STYLE,
    MATH_STYLE,
    PARAGRAPH_STYLE,
    PHYSICS_STYLE,
)


def node_to_text(node: RenderNode) -> Text:
    """Convert one render node to styled Rich text."""
    if isinstance(node, Heading):
        return Text(node.text, style=HEADING_STYLE)

    if isinstance(node, BoxedAnswer):
        text = Text(overflow="fold")
        for segment in node.segments:
            if segment.boxed:
                # Padding stands in for the box border
                text.append(f" {segment.text} ", style=BOXED_STYLE)
            else:
                text.append(segment.text, style=PARAGRAPH_STYLE)
        return text

    if isinstance(node, ListItem):
        text = Text("  • ", style=BULLET_STYLE)
        text.append(node.text, style=PARAGRAPH_STYLE)
        return text

    if isinstance(node, Paragraph):
        return Text(node.text, style=PARAGRAPH_STYLE, overflow="fold")

    raise TypeError(f"Unknown render node: {type(node).__name__}")


def render_answer_text(answer: str) -> Group:
    """Render a full answer as a group of lines.

    Headings get a blank line above them, except at the very top.
    """
    lines: list[Text] = []
    for node in render_answer(answer):
        if isinstance(node, Heading) and lines:
            lines.append(Text(""))
        lines.append(node_to_text(node))
    return Group(*lines)


def subject_label(subject: Subject) -> Text:
    """Small colored subject tag used in history and headers."""
    style = PHYSICS_STYLE if subject is Subject.PHYSICS else MATH_STYLE
    icon = "⚛" if subject is Subject.PHYSICS else "∑"
    return Text(f"{icon} {subject.value.upper()}", style=f"bold {style}")
