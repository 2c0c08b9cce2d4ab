"""Main Textual TUI application.

Orchestrates the UI components and routes user actions to the SessionStore.
"""

import asyncio
from collections.abc import Callable

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Footer, Header

from ..errors import SessionBusyError
from ..session import SessionStore
from ..solver import SolverClient
from ..subjects import Subject
from .clipboard import copy_text
from .config import APP_VERSION_BADGE, LogLevel
from .styles import APP_CSS
from .themes import NEWTON_SLATE
from .widgets import (
    DebugPanel,
    EmptyState,
    ErrorBanner,
    HistorySidebar,
    QueryInputBar,
    SolutionPanel,
    SubjectBar,
)

Clipboard = Callable[[str, Callable[[str], None] | None], object]


class NewtonApp(App):
    """Textual TUI for the Newton math/physics tutor."""

    CSS = APP_CSS
    TITLE = "Newton.ai"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+t", "toggle_subject", "Subject"),
        Binding("ctrl+r", "copy_solution", "Copy Solution"),
        Binding("ctrl+k", "clear_history", "Clear History"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(
        self,
        solver: SolverClient,
        subject: Subject = Subject.PHYSICS,
        log_level: str | None = None,
        clipboard: Clipboard | None = None,
    ) -> None:
        super().__init__()
        self._solver = solver
        self._store = SessionStore(solver, subject=subject)
        self._log_level = log_level
        self._clipboard = clipboard or copy_text

    @property
    def store(self) -> SessionStore:
        """The session store behind this app."""
        return self._store

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        yield HistorySidebar(id="history")

        with Vertical(id="body"):
            with VerticalScroll(id="main"):
                yield SubjectBar(id="subject-bar")
                yield QueryInputBar(id="query-bar")
                yield ErrorBanner(id="error-banner")
                yield SolutionPanel(id="solution")
                yield EmptyState(id="empty-state")
            yield DebugPanel(id="debug-panel")

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(NEWTON_SLATE)
        self.theme = "newton-slate"
        self.sub_title = f"AI Powered Solver | {self._solver.model} | {APP_VERSION_BADGE}"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.handle("info", "TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._store.set_debug_callback(log_panel.handle)
        self._solver.set_debug_callback(log_panel.handle)

        self._sync_view()
        self.query_one("#query-bar", QueryInputBar).focus_input()

    def _trace(self, level: str, message: str) -> None:
        self.query_one("#debug-panel", DebugPanel).handle(level, "TUI", message)

    def _sync_view(self) -> None:
        """Bring every widget in line with the session state."""
        state = self._store.state
        pending = self._store.is_pending

        subject_bar = self.query_one("#subject-bar", SubjectBar)
        subject_bar.set_subject(state.subject)
        subject_bar.set_locked(pending)

        query_bar = self.query_one("#query-bar", QueryInputBar)
        query_bar.set_prompt(state.subject)
        query_bar.set_pending(pending)

        self.query_one("#error-banner", ErrorBanner).show_error(state.error_message)
        self.query_one("#solution", SolutionPanel).show_entry(state.result)
        self.query_one("#empty-state", EmptyState).display = (
            state.result is None and not pending
        )
        self.query_one("#history", HistorySidebar).show_history(state.history)

    def on_subject_bar_changed(self, event: SubjectBar.Changed) -> None:
        """Handle subject selection."""
        if self._store.is_pending:
            return
        self._store.set_subject(event.subject)
        self._sync_view()

    def on_query_input_bar_edited(self, event: QueryInputBar.Edited) -> None:
        """Keep the store's query in step with the input."""
        self._store.set_query(event.value)

    def on_query_input_bar_submitted(self, event: QueryInputBar.Submitted) -> None:
        """Handle problem submission."""
        if self._store.is_pending:
            self.notify("A problem is already being solved", severity="warning", timeout=2)
            return

        subject = self._store.state.subject
        self._trace("info", f"Submitting: '{event.value[:50]}'")

        # Reflect the pending state before the worker starts
        self.query_one("#query-bar", QueryInputBar).set_pending(True)
        self.query_one("#subject-bar", SubjectBar).set_locked(True)
        self.query_one("#empty-state", EmptyState).display = False

        self._run_solve(event.value, subject)

    @work(exclusive=False, group="solve")
    async def _run_solve(self, query: str, subject: Subject) -> None:
        """Run one submission as a background async worker.

        Not exclusive: a running request is never cancelled by the app.
        """
        try:
            entry = await self._store.submit(query, subject)
        except SessionBusyError as e:
            self.notify(str(e), severity="warning", timeout=2)
            return
        finally:
            self._sync_view()

        if entry is None:
            self.notify("Failed to solve the problem", severity="error", timeout=3)
            return

        solution = self.query_one("#solution", SolutionPanel)
        solution.scroll_visible(animate=True)
        self.notify("Solution generated", severity="information", timeout=2)

    def on_history_sidebar_selected(self, event: HistorySidebar.Selected) -> None:
        """Show a previous problem again."""
        if self._store.is_pending:
            return
        self._store.select_from_history(event.entry)
        self.query_one("#query-bar", QueryInputBar).set_text(event.entry.query)
        self._sync_view()
        self.query_one("#solution", SolutionPanel).scroll_visible(animate=True)

    def on_solution_panel_copy_requested(self, event: SolutionPanel.CopyRequested) -> None:
        self.action_copy_solution()

    def action_copy_solution(self) -> None:
        """Copy the raw answer text to the clipboard."""
        result = self._store.state.result
        if result is None:
            self.notify("No solution to copy", severity="warning", timeout=2)
            return
        self._clipboard(result.answer, self.copy_to_clipboard)
        self.query_one("#solution", SolutionPanel).mark_copied()

    def action_toggle_subject(self) -> None:
        """Switch between physics and math."""
        if self._store.is_pending:
            return
        self._store.set_subject(self._store.state.subject.toggled())
        self._sync_view()

    def action_clear_history(self) -> None:
        """Clear history, result and query."""
        if self._store.is_pending:
            self.notify("Wait for the current problem to finish", severity="warning", timeout=2)
            return
        self._store.clear()
        self.query_one("#query-bar", QueryInputBar).set_text("")
        self._sync_view()
        self.notify("History cleared", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)


async def run_newton_tui(
    solver: SolverClient,
    subject: Subject = Subject.PHYSICS,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        solver: Solver client instance
        subject: Initially selected subject
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = NewtonApp(solver=solver, subject=subject, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
