"""Data models for the tutoring session.

These models define the structure of session state and history entries,
independent of the front end that displays them.
"""

from datetime import datetime
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from ..subjects import Subject

DISPLAY_TIME_FORMAT = "%H:%M:%S"


class SubmissionStatus(str, Enum):
    """Where the session is in the submit cycle."""

    IDLE = "idle"
    PENDING = "pending"


class HistoryEntry(BaseModel):
    """A solved problem.

    Entries are immutable snapshots: clearing the session does not affect
    entries already handed out.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    subject: Subject
    query: str = Field(description="The problem as submitted")
    answer: str = Field(description="Raw answer text from the API")
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def display_time(self) -> str:
        """Creation time formatted for display."""
        return self.created_at.strftime(DISPLAY_TIME_FORMAT)

    def preview(self, limit: int = 80) -> str:
        """Single-line preview of the query."""
        flat = " ".join(self.query.split())
        return flat[:limit] + "..." if len(flat) > limit else flat


class SessionState(BaseModel):
    """Complete state of one tutoring session."""

    query: str = ""
    subject: Subject = Subject.PHYSICS
    result: HistoryEntry | None = None
    error_message: str | None = None
    history: list[HistoryEntry] = Field(
        default_factory=list, description="Solved problems, newest first"
    )
    status: SubmissionStatus = SubmissionStatus.IDLE
