"""Provider factory functions for CLI.

Creates the solver client from environment variables.
Hides configuration details from command implementations.
"""

import os

import typer
from rich.console import Console

from ..solver import SolverClient, create_solver_client

# Default console for output
_console = Console()


def get_solver(console: Console | None = None) -> SolverClient:
    """Create the solver client from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        Gemini solver client instance

    Raises:
        typer.Exit: If GEMINI_API_KEY is not set

    Environment variables:
        GEMINI_API_KEY: Gemini API key (required)
        GEMINI_MODEL: Gemini model (default: gemini-2.5-flash-preview-09-2025)
    """
    con = console or _console
    api_key = os.getenv("GEMINI_API_KEY")
    if not api_key:
        con.print("[red]Error: GEMINI_API_KEY not set in environment[/red]")
        raise typer.Exit(code=1)

    config = {"api_key": api_key}
    model = os.getenv("GEMINI_MODEL")
    if model:
        config["model"] = model
    return create_solver_client("gemini", **config)
