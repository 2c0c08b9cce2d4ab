"""Pytest configuration and shared fixtures."""
import asyncio
import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from newton.solver import GeminiSolverClient, SolverClient
from newton.subjects import Subject

SAMPLE_ANSWER = """**Given:**
- Initial velocity $v_0 = 20$ m/s
- Launch angle $\\theta = 45\\deg$

**Concept:** Projectile motion

**Steps:**
1. Horizontal range $R = \\frac{v_0^2}{g}$
2. $R = \\frac{400}{9.8} \\approx 40.8$ m

**Solution:**
The range is \\boxed{40.8 \\text{ m}}
"""


def make_response(text: str | None):
    """Build an object shaped like a generateContent response."""
    if text is None:
        return SimpleNamespace(candidates=[])
    part = SimpleNamespace(text=text)
    return SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=[part]))]
    )


class FakeSolver(SolverClient):
    """In-memory solver that records its calls.

    When ``gate`` is set, solve() waits on it before answering, which keeps
    a submission pending for as long as a test needs.
    """

    def __init__(
        self,
        answer: str = SAMPLE_ANSWER,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ):
        super().__init__()
        self.answer = answer
        self.error = error
        self.gate = gate
        self.calls: list[tuple[str, Subject]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def solve(self, query: str, subject: Subject) -> str:
        self.calls.append((query, subject))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.answer

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "gemini": os.getenv("GEMINI_API_KEY"),
    }


@pytest.fixture
def sample_answer():
    """Return a typical tutor answer."""
    return SAMPLE_ANSWER


@pytest.fixture
def genai_client():
    """Mock google-genai client answering with SAMPLE_ANSWER."""
    client = Mock()
    client.aio.models.generate_content = AsyncMock(
        return_value=make_response(SAMPLE_ANSWER)
    )
    return client


@pytest.fixture
def gemini_solver(genai_client):
    """Gemini solver client wired to the mock SDK client."""
    return GeminiSolverClient(api_key="test-secret-key", client=genai_client)


@pytest.fixture
def fake_solver():
    """Solver that always answers SAMPLE_ANSWER."""
    return FakeSolver()


@pytest.fixture
def response_factory():
    """Return a builder for generateContent-shaped responses."""
    return make_response


@pytest.fixture
def solver_factory():
    """Return the FakeSolver class for tests that need custom behaviour."""
    return FakeSolver
