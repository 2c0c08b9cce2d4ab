"""Tutoring session state.

Provides the in-memory store behind the UI: current query, subject, result,
error and the history of solved problems.
"""

from .models import HistoryEntry, SessionState, SubmissionStatus
from .store import SessionStore

__all__ = [
    "HistoryEntry",
    "SessionState",
    "SessionStore",
    "SubmissionStatus",
]
