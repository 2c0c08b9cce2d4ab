"""Solver clients that send problems to a generative-language API."""

from .base import SolverClient
from .factory import create_solver_client
from .providers import GeminiSolverClient

__all__ = [
    "SolverClient",
    "GeminiSolverClient",
    "create_solver_client",
]
