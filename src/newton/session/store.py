"""Session store.

Holds the state of a tutoring session and defines every transition on it.
Front ends read ``state`` and call the command methods; they never mutate the
state directly.
"""

from typing import Any

from ..errors import SessionBusyError, SolveError
from ..solver.base import SolverClient
from ..subjects import Subject
from .models import HistoryEntry, SessionState, SubmissionStatus


class SessionStore:
    """In-memory session state with submit/select/clear commands.

    Data lives for the lifetime of the store. At most one submission is in
    flight at a time; the state is only changed on the event loop thread,
    before and after the awaited solver call.
    """

    def __init__(
        self,
        solver: SolverClient,
        subject: Subject = Subject.PHYSICS,
    ) -> None:
        self._solver = solver
        self._state = SessionState(subject=subject)
        self._debug_callback: Any | None = None

    @property
    def state(self) -> SessionState:
        """Current session state."""
        return self._state

    @property
    def is_pending(self) -> bool:
        """True while a submission awaits its answer."""
        return self._state.status is SubmissionStatus.PENDING

    def set_debug_callback(self, callback: Any) -> None:
        """Set debug callback for logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        """Send debug message if callback is set."""
        if self._debug_callback:
            self._debug_callback(level, component, message)

    def set_query(self, query: str) -> None:
        """Update the query being edited."""
        self._state.query = query

    def set_subject(self, subject: Subject) -> None:
        """Select the subject for the next submission."""
        self._state.subject = subject

    async def submit(self, query: str, subject: Subject) -> HistoryEntry | None:
        """Solve a problem and record the outcome.

        On success the new entry becomes the result and is prepended to the
        history. On failure the error message is stored and the result is
        cleared. Solver errors never propagate out of this method.

        Args:
            query: The problem text
            subject: Subject of the problem

        Returns:
            The new history entry, or None if solving failed

        Raises:
            SessionBusyError: If another submission is still pending
        """
        if self.is_pending:
            self._debug("warning", "Session", "Submission rejected: request pending")
            raise SessionBusyError()

        state = self._state
        state.query = query
        state.subject = subject
        state.result = None
        state.error_message = None
        state.status = SubmissionStatus.PENDING
        self._debug("info", "Session", f"Submitting {subject.value} problem")

        try:
            answer = await self._solver.solve(query, subject)
        except SolveError as e:
            state.error_message = str(e)
            state.result = None
            self._debug("error", "Session", f"Solve failed: {e}")
            return None
        finally:
            state.status = SubmissionStatus.IDLE

        entry = HistoryEntry(subject=subject, query=query, answer=answer)
        state.result = entry
        state.history.insert(0, entry)
        state.error_message = None
        self._debug("info", "Session", f"Solved; {len(state.history)} problem(s) in history")
        return entry

    def select_from_history(self, entry: HistoryEntry) -> None:
        """Show a previous entry again without issuing a request."""
        state = self._state
        state.query = entry.query
        state.subject = entry.subject
        state.result = entry
        state.error_message = None
        self._debug("debug", "Session", f"Selected history entry {entry.id}")

    def clear(self) -> None:
        """Forget history, result and query. The subject is kept."""
        state = self._state
        state.history = []
        state.result = None
        state.query = ""
        self._debug("info", "Session", "History cleared")
