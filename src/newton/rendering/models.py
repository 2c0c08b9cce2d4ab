"""Render nodes produced from answer text.

Each node is a frozen value carrying a ``kind`` discriminator, so a list of
nodes can be matched on by any front end (TUI, CLI, tests).
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    """Kind of a rendered line."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list_item"
    BOXED_ANSWER = "boxed_answer"


class Heading(BaseModel):
    """A section heading such as "Given" or "Steps"."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[NodeKind.HEADING] = NodeKind.HEADING
    text: str


class Paragraph(BaseModel):
    """A plain line of text."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[NodeKind.PARAGRAPH] = NodeKind.PARAGRAPH
    text: str


class ListItem(BaseModel):
    """A bulleted or numbered line with its bullet removed."""

    model_config = ConfigDict(frozen=True)

    kind: Literal[NodeKind.LIST_ITEM] = NodeKind.LIST_ITEM
    text: str


class Segment(BaseModel):
    """Part of a line holding a boxed answer."""

    model_config = ConfigDict(frozen=True)

    text: str
    boxed: bool = Field(default=False, description="True for \\boxed{} content")


class BoxedAnswer(BaseModel):
    """A line containing one or more boxed answers.

    Plain and boxed segments alternate in their original order.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal[NodeKind.BOXED_ANSWER] = NodeKind.BOXED_ANSWER
    segments: tuple[Segment, ...]

    @property
    def boxed_texts(self) -> list[str]:
        """Contents of the boxed segments only."""
        return [s.text for s in self.segments if s.boxed]

    @property
    def plain_texts(self) -> list[str]:
        """Contents of the plain segments only."""
        return [s.text for s in self.segments if not s.boxed]


RenderNode = Heading | Paragraph | ListItem | BoxedAnswer
