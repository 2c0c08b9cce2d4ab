"""Error types raised by Newton.

Solver failures share the SolveError base so callers can recover from all of
them at one boundary and show a single message to the user.
"""


class NewtonError(Exception):
    """Base class for Newton errors."""


class SolveError(NewtonError):
    """A problem could not be solved.

    The string form of every subclass is the message shown to the user.
    """


class EmptyQueryError(SolveError):
    """The query was empty; no request was sent."""

    def __init__(self) -> None:
        super().__init__("Please describe a problem to solve.")


class ApiError(SolveError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status: int, detail: str | None = None):
        super().__init__(f"API Error: {status}")
        self.status = status
        self.detail = detail


class EmptyResponseError(SolveError):
    """The API answered, but without any candidate text."""

    def __init__(self) -> None:
        super().__init__("No solution generated.")


class TransportError(SolveError):
    """The request never completed (network failure, timeout)."""

    def __init__(self, message: str):
        super().__init__(f"Network error: {message}")
        self.reason = message


class SessionBusyError(NewtonError):
    """A submission was attempted while another one is still pending."""

    def __init__(self) -> None:
        super().__init__("A problem is already being solved. Please wait.")
