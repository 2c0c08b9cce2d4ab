"""Unit tests for the session module."""
import asyncio
import re

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from newton.errors import ApiError, SessionBusyError, TransportError
from newton.session import HistoryEntry, SessionState, SessionStore, SubmissionStatus
from newton.subjects import Subject


class TestHistoryEntry:
    """Tests for HistoryEntry model."""

    def test_create_entry(self):
        """Test creating an entry with generated id and time."""
        entry = HistoryEntry(subject=Subject.MATH, query="1 + 1", answer="2")

        assert entry.subject == Subject.MATH
        assert entry.query == "1 + 1"
        assert entry.answer == "2"
        assert entry.id
        assert re.fullmatch(r"\d{2}:\d{2}:\d{2}", entry.display_time)

    def test_entry_is_frozen(self):
        """Test that entries cannot be modified."""
        entry = HistoryEntry(subject=Subject.MATH, query="1 + 1", answer="2")

        with pytest.raises(ValidationError):
            entry.answer = "3"  # type: ignore

    def test_ids_are_unique(self):
        """Test that every entry gets its own id."""
        entries = [
            HistoryEntry(subject=Subject.PHYSICS, query="q", answer="a")
            for _ in range(50)
        ]

        assert len({entry.id for entry in entries}) == 50

    @given(st.text(), st.integers(min_value=1, max_value=200))
    def test_preview_is_single_line_and_bounded(self, query: str, limit: int):
        """Property test: previews fit on one line within the limit."""
        entry = HistoryEntry(subject=Subject.PHYSICS, query=query, answer="a")

        preview = entry.preview(limit)
        assert "\n" not in preview
        assert len(preview) <= limit + len("...")


class TestSessionState:
    """Tests for SessionState defaults."""

    def test_defaults(self):
        """Test the initial session state."""
        state = SessionState()

        assert state.query == ""
        assert state.subject == Subject.PHYSICS
        assert state.result is None
        assert state.error_message is None
        assert state.history == []
        assert state.status == SubmissionStatus.IDLE


class TestSessionStoreSubmit:
    """Tests for SessionStore.submit."""

    @pytest.mark.asyncio
    async def test_submit_success(self, fake_solver, sample_answer):
        """Test that a successful submit records the result."""
        store = SessionStore(fake_solver)

        entry = await store.submit("A ball is dropped", Subject.PHYSICS)

        assert entry is not None
        assert entry.answer == sample_answer
        assert entry.query == "A ball is dropped"
        assert store.state.result is entry
        assert store.state.history == [entry]
        assert store.state.error_message is None
        assert not store.is_pending
        assert fake_solver.calls == [("A ball is dropped", Subject.PHYSICS)]

    @pytest.mark.asyncio
    async def test_submit_prepends_one_entry(self, fake_solver):
        """Test that history grows at the front and keeps prior order."""
        store = SessionStore(fake_solver)
        for query in ("first", "second", "third"):
            await store.submit(query, Subject.MATH)
        prior = list(store.state.history)

        entry = await store.submit("fourth", Subject.PHYSICS)

        history = store.state.history
        assert len(history) == len(prior) + 1
        assert history[0] is entry
        assert history[1:] == prior
        assert [e.query for e in history] == ["fourth", "third", "second", "first"]

    @pytest.mark.asyncio
    async def test_submit_records_query_and_subject(self, fake_solver):
        """Test that submit updates the query and subject."""
        store = SessionStore(fake_solver, subject=Subject.PHYSICS)

        await store.submit("integrate x", Subject.MATH)

        assert store.state.query == "integrate x"
        assert store.state.subject == Subject.MATH

    @pytest.mark.asyncio
    async def test_submit_failure(self, solver_factory):
        """Test that a failure stores the message and clears the result."""
        solver = solver_factory()
        store = SessionStore(solver)
        first = await store.submit("works", Subject.PHYSICS)

        solver.error = ApiError(500)
        entry = await store.submit("fails", Subject.PHYSICS)

        assert entry is None
        assert store.state.result is None
        assert store.state.error_message == "API Error: 500"
        assert store.state.history == [first]
        assert not store.is_pending

    @pytest.mark.asyncio
    async def test_success_after_failure_clears_error(self, solver_factory):
        """Test that result and error are mutually exclusive."""
        solver = solver_factory(error=TransportError("timed out"))
        store = SessionStore(solver)
        await store.submit("fails", Subject.MATH)
        assert store.state.error_message == "Network error: timed out"

        solver.error = None
        entry = await store.submit("works", Subject.MATH)

        assert store.state.result is entry
        assert store.state.error_message is None

    @pytest.mark.asyncio
    async def test_blank_query_becomes_error_message(self, gemini_solver, genai_client):
        """Test that an empty query is reported without a request."""
        store = SessionStore(gemini_solver)

        entry = await store.submit("   ", Subject.MATH)

        assert entry is None
        assert store.state.error_message == "Please describe a problem to solve."
        assert store.state.history == []
        genai_client.aio.models.generate_content.assert_not_called()

    @pytest.mark.asyncio
    async def test_submit_while_pending_is_rejected(self, solver_factory):
        """Test that a second submission fails while the first is in flight."""
        gate = asyncio.Event()
        solver = solver_factory(gate=gate)
        store = SessionStore(solver)

        first = asyncio.create_task(store.submit("first", Subject.PHYSICS))
        await asyncio.sleep(0)
        assert store.is_pending
        assert store.state.status == SubmissionStatus.PENDING

        with pytest.raises(SessionBusyError):
            await store.submit("second", Subject.MATH)
        assert store.state.query == "first"
        assert store.state.subject == Subject.PHYSICS

        gate.set()
        entry = await first

        assert entry is not None
        assert store.state.history == [entry]
        assert solver.calls == [("first", Subject.PHYSICS)]
        assert not store.is_pending

    @pytest.mark.asyncio
    async def test_debug_messages(self, fake_solver):
        """Test that the store reports its transitions."""
        messages: list[tuple[str, str, str]] = []
        store = SessionStore(fake_solver)
        store.set_debug_callback(lambda *args: messages.append(args))

        await store.submit("q", Subject.PHYSICS)
        store.clear()

        assert messages
        assert {component for _, component, _ in messages} == {"Session"}


class TestSessionStoreHistory:
    """Tests for select_from_history and clear."""

    @pytest.mark.asyncio
    async def test_select_from_history(self, fake_solver):
        """Test restoring an older entry without a request."""
        store = SessionStore(fake_solver)
        old = await store.submit("old problem", Subject.MATH)
        await store.submit("new problem", Subject.PHYSICS)
        calls = len(fake_solver.calls)

        store.select_from_history(old)

        assert store.state.result is old
        assert store.state.query == "old problem"
        assert store.state.subject == Subject.MATH
        assert store.state.error_message is None
        assert len(fake_solver.calls) == calls
        assert [e.query for e in store.state.history] == ["new problem", "old problem"]

    @pytest.mark.asyncio
    async def test_select_clears_error(self, solver_factory):
        """Test that selecting an entry hides a previous error."""
        solver = solver_factory()
        store = SessionStore(solver)
        old = await store.submit("ok", Subject.PHYSICS)
        solver.error = ApiError(429)
        await store.submit("rate limited", Subject.PHYSICS)

        store.select_from_history(old)

        assert store.state.error_message is None
        assert store.state.result is old

    @pytest.mark.asyncio
    async def test_clear(self, fake_solver):
        """Test that clear empties history, result and query."""
        store = SessionStore(fake_solver)
        await store.submit("q", Subject.MATH)

        store.clear()

        assert store.state.history == []
        assert store.state.result is None
        assert store.state.query == ""
        assert store.state.subject == Subject.MATH

    @pytest.mark.asyncio
    async def test_clear_then_select_old_entry(self, fake_solver):
        """Test that a cleared entry can still be displayed again."""
        store = SessionStore(fake_solver)
        old = await store.submit("kept elsewhere", Subject.PHYSICS)

        store.clear()
        store.select_from_history(old)

        assert store.state.result == old
        assert store.state.query == old.query
        assert store.state.subject == old.subject
        assert store.state.history == []

    def test_input_bindings(self, fake_solver):
        """Test set_query and set_subject."""
        store = SessionStore(fake_solver)

        store.set_query("draft")
        store.set_subject(Subject.MATH)

        assert store.state.query == "draft"
        assert store.state.subject == Subject.MATH
