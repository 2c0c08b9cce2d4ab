from abc import ABC, abstractmethod
from typing import Any

from ..subjects import Subject


class SolverClient(ABC):
    """Abstract base class for solver clients.

    This module hides the design decision of which generative-language
    provider answers the problems. Implementations must handle:
    - API client setup and authentication
    - Request construction (instruction and query as separate fields)
    - Mapping provider failures onto the SolveError taxonomy

    A client issues exactly one request per solve() call. There are no
    retries and no caching.

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            answer = await client.solve(query, Subject.PHYSICS)
    """

    def __init__(self) -> None:
        self._debug_callback: Any | None = None

    def set_debug_callback(self, callback: Any) -> None:
        """Set the debug callback for request logging.

        Args:
            callback: Callable(level: str, component: str, message: str)
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        """Send a debug log message if callback is set."""
        if self._debug_callback:
            self._debug_callback(level, component, message)

    @property
    @abstractmethod
    def model(self) -> str:
        """Get the model name."""

    @abstractmethod
    async def solve(self, query: str, subject: Subject) -> str:
        """Solve a problem and return the raw answer text.

        Args:
            query: The problem as typed by the user
            subject: Subject selecting the instruction

        Returns:
            Raw Markdown/LaTeX answer text

        Raises:
            EmptyQueryError: If the query is blank (no request is sent)
            ApiError: If the API returns a non-success status
            EmptyResponseError: If the response carries no text
            TransportError: If the request fails at the network level
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "SolverClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
