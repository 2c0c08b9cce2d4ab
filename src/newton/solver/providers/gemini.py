"""Google Gemini solver client.

Uses the official Google GenAI SDK for async content generation.
Reference: https://github.com/googleapis/python-genai

The instruction travels as the request's systemInstruction and the user's
query as the single user content part.
"""

from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from ...errors import ApiError, EmptyQueryError, EmptyResponseError, TransportError
from ...prompts import build_instruction
from ...subjects import Subject
from ..base import SolverClient

DEFAULT_MODEL = "gemini-2.5-flash-preview-09-2025"


class GeminiSolverClient(SolverClient):
    """Gemini implementation of SolverClient.

    Hidden design decisions:
    - Google GenAI client initialization
    - Request layout (systemInstruction + contents)
    - Extraction of the first candidate's first text part
    - Translation of SDK and transport exceptions into SolveError
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: Any | None = None,
        **client_kwargs: Any
    ):
        """Initialize Gemini solver client.

        Args:
            api_key: Google AI API key
            model: Model to query
            client: Pre-built genai.Client (mainly for tests)
            **client_kwargs: Additional kwargs for Client
        """
        super().__init__()
        self._model = model
        self._client = client if client is not None else genai.Client(
            api_key=api_key, **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    def _build_request(
        self, query: str, subject: Subject
    ) -> tuple[list[types.Content], types.GenerateContentConfig]:
        """Build contents and config for a generateContent call.

        Args:
            query: Raw user query
            subject: Subject selecting the instruction

        Returns:
            Tuple of (contents, config)
        """
        contents = [types.Content(role="user", parts=[types.Part(text=query)])]
        config = types.GenerateContentConfig(
            system_instruction=build_instruction(subject),
        )
        return contents, config

    @staticmethod
    def _extract_text(response: Any) -> str:
        """Return candidates[0].content.parts[0].text, or "" when absent."""
        candidates = getattr(response, "candidates", None)
        if not candidates:
            return ""
        content = getattr(candidates[0], "content", None)
        parts = getattr(content, "parts", None) if content else None
        if not parts:
            return ""
        return getattr(parts[0], "text", None) or ""

    async def solve(self, query: str, subject: Subject) -> str:
        """Solve a problem with one generateContent request.

        Args:
            query: The problem as typed by the user
            subject: Subject selecting the instruction

        Returns:
            Raw answer text from the first candidate
        """
        if not query.strip():
            raise EmptyQueryError()

        contents, config = self._build_request(query, subject)
        self._debug(
            "info", "Solver",
            f"Requesting {self._model} ({subject.value}, {len(query)} chars)"
        )

        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=contents,
                config=config,
            )
        except errors.APIError as e:
            self._debug("error", "Solver", f"API returned status {e.code}")
            raise ApiError(e.code, getattr(e, "message", None)) from e
        except (httpx.HTTPError, ConnectionError) as e:
            self._debug("error", "Solver", f"Transport failure: {e}")
            raise TransportError(str(e) or type(e).__name__) from e

        text = self._extract_text(response)
        if not text:
            self._debug("warning", "Solver", "Response had no candidate text")
            raise EmptyResponseError()

        self._debug("debug", "Solver", f"Received {len(text)} chars")
        return text

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
