"""Headless tests for the Textual app."""
import pytest
from textual.widgets import Button

from newton.errors import ApiError
from newton.subjects import Subject
from newton.ui import HistorySidebar, NewtonApp, QueryInputBar, SolutionPanel
from newton.ui.widgets import ErrorBanner, HistoryItem


class RecordingClipboard:
    """Clipboard stand-in that remembers what was copied."""

    def __init__(self):
        self.copied: list[str] = []

    def __call__(self, text, fallback=None):
        self.copied.append(text)
        return True


async def _submit(app: NewtonApp, pilot, query: str) -> None:
    query_bar = app.query_one(QueryInputBar)
    query_bar.set_text(query)
    query_bar.post_message(QueryInputBar.Submitted(query))
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestNewtonApp:
    """Tests for NewtonApp driven through the Textual pilot."""

    @pytest.mark.asyncio
    async def test_initial_state(self, fake_solver):
        """Test the app before anything is solved."""
        app = NewtonApp(solver=fake_solver)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()

            assert app.query_one("#solve-btn", Button).disabled
            assert not app.query_one(SolutionPanel).display
            assert app.query_one("#empty-state").display
            assert len(app.query(".history-empty")) == 1
            assert fake_solver.model in app.sub_title

    @pytest.mark.asyncio
    async def test_submit_shows_solution(self, fake_solver):
        """Test that a submission fills the solution panel and history."""
        app = NewtonApp(solver=fake_solver)
        async with app.run_test(size=(120, 40)) as pilot:
            await _submit(app, pilot, "A ball is dropped")

            state = app.store.state
            assert len(state.history) == 1
            assert app.query_one(SolutionPanel).display
            assert app.query_one(SolutionPanel).entry is state.result
            assert not app.query_one("#empty-state").display
            assert len(app.query(HistoryItem)) == 1
            assert app.query_one(QueryInputBar).text == "A ball is dropped"

    @pytest.mark.asyncio
    async def test_error_banner(self, solver_factory):
        """Test that a failure shows the error banner."""
        app = NewtonApp(solver=solver_factory(error=ApiError(503)))
        async with app.run_test(size=(120, 40)) as pilot:
            await _submit(app, pilot, "anything")

            assert app.store.state.error_message == "API Error: 503"
            assert app.query_one(ErrorBanner).display
            assert not app.query_one(SolutionPanel).display

    @pytest.mark.asyncio
    async def test_history_selection(self, fake_solver):
        """Test that selecting a history entry restores it."""
        app = NewtonApp(solver=fake_solver)
        async with app.run_test(size=(120, 40)) as pilot:
            await _submit(app, pilot, "first problem")
            await _submit(app, pilot, "second problem")
            old = app.store.state.history[1]

            app.query_one(HistorySidebar).post_message(HistorySidebar.Selected(old))
            await pilot.pause()

            assert app.store.state.result is old
            assert app.query_one(QueryInputBar).text == "first problem"
            assert len(fake_solver.calls) == 2

    @pytest.mark.asyncio
    async def test_copy_solution(self, fake_solver, sample_answer):
        """Test that copying hands the raw answer to the clipboard."""
        clipboard = RecordingClipboard()
        app = NewtonApp(solver=fake_solver, clipboard=clipboard)
        async with app.run_test(size=(120, 40)) as pilot:
            app.action_copy_solution()
            assert clipboard.copied == []

            await _submit(app, pilot, "q")
            app.action_copy_solution()
            await pilot.pause()

            assert clipboard.copied == [sample_answer]
            assert str(app.query_one("#copy-btn", Button).label) == "Copied ✓"

    @pytest.mark.asyncio
    async def test_toggle_subject_and_clear(self, fake_solver):
        """Test subject switching and clearing history."""
        app = NewtonApp(solver=fake_solver)
        async with app.run_test(size=(120, 40)) as pilot:
            app.action_toggle_subject()
            await pilot.pause()
            assert app.store.state.subject == Subject.MATH
            assert app.query_one("#subject-math", Button).has_class("-selected")

            await _submit(app, pilot, "integrate x")
            assert fake_solver.calls == [("integrate x", Subject.MATH)]

            app.action_clear_history()
            await pilot.pause()

            assert app.store.state.history == []
            assert app.store.state.subject == Subject.MATH
            assert app.query_one(QueryInputBar).text == ""
            assert len(app.query(HistoryItem)) == 0
            assert len(app.query(".history-empty")) == 1
