"""
Newton: a step-by-step math and physics tutor for the terminal.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "1.1.0"

from .errors import (
    ApiError,
    EmptyQueryError,
    EmptyResponseError,
    NewtonError,
    SessionBusyError,
    SolveError,
    TransportError,
)
from .rendering import format_line, render_answer
from .session import HistoryEntry, SessionState, SessionStore
from .solver import SolverClient, create_solver_client
from .subjects import Subject

__all__ = [
    "ApiError",
    "EmptyQueryError",
    "EmptyResponseError",
    "HistoryEntry",
    "NewtonError",
    "SessionBusyError",
    "SessionState",
    "SessionStore",
    "SolveError",
    "SolverClient",
    "Subject",
    "TransportError",
    "create_solver_client",
    "format_line",
    "render_answer",
]
