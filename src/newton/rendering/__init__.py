"""Answer rendering.

Hides how raw answer text is cut into lines and how the supported LaTeX
subset is turned into display text.
"""

from .formatter import SUBSTITUTIONS, format_line, substitute_latex
from .models import (
    BoxedAnswer,
    Heading,
    ListItem,
    NodeKind,
    Paragraph,
    RenderNode,
    Segment,
)
from .renderer import render_answer

__all__ = [
    "BoxedAnswer",
    "Heading",
    "ListItem",
    "NodeKind",
    "Paragraph",
    "RenderNode",
    "SUBSTITUTIONS",
    "Segment",
    "format_line",
    "render_answer",
    "substitute_latex",
]
