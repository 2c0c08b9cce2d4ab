"""Main CLI application using Typer."""
import asyncio
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..errors import SolveError
from ..subjects import Subject
from ..ui.config import DISCLAIMER, LogLevel
from ..ui.formatting import render_answer_text
from .providers import get_solver

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="newton",
    help="Step-by-step math and physics tutor powered by Gemini",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

LEVEL_COLORS = {
    LogLevel.DEBUG: "dim white",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}


def console_debug_callback(log_level: str):
    """Build a debug callback that prints to the console.

    Args:
        log_level: Minimum level to print (debug, info, warning, error)

    Returns:
        Callable(level: str, component: str, message: str)
    """
    threshold = LogLevel.from_string(log_level)

    def _callback(level: str, component: str, message: str) -> None:
        level_num = LogLevel.from_string(level)
        if level_num < threshold:
            return
        console.print(Text.assemble(
            (f"{LogLevel.name(level_num):<7}", LEVEL_COLORS.get(level_num, "white")),
            (f"[{component}] ", "dim"),
            message,
        ))

    return _callback


def _print_answer(answer: str, subject: Subject) -> None:
    console.print(Panel(
        render_answer_text(answer),
        title="✦ Solution Generated",
        title_align="left",
        subtitle=subject.display_name,
        subtitle_align="right",
        border_style="blue",
        padding=(1, 2),
    ))
    console.print(f"[dim italic]{DISCLAIMER}[/dim italic]")


@app.command()
def solve(
    query: str = typer.Argument(
        ...,
        help="Problem to solve, in natural language or LaTeX"
    ),
    subject: Subject = typer.Option(
        Subject.PHYSICS,
        "--subject",
        "-s",
        help="Subject of the problem"
    ),
    raw: bool = typer.Option(
        False,
        "--raw",
        "-r",
        help="Print the answer text exactly as returned by the API"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Print request log with level: debug (all), info, warning, or error"
    ),
):
    """Solve a single problem and print the step-by-step answer."""
    async def _solve():
        solver = get_solver(console)
        if log_level:
            solver.set_debug_callback(console_debug_callback(log_level))

        async with solver:
            if raw:
                return await solver.solve(query, subject)
            with console.status(f"[dim]Solving with {solver.model}...[/dim]"):
                return await solver.solve(query, subject)

    try:
        answer = asyncio.run(_solve())
    except SolveError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    if raw:
        typer.echo(answer)
        return
    _print_answer(answer, subject)


@app.command()
def render(
    file: Path | None = typer.Argument(
        None,
        exists=True,
        file_okay=True,
        dir_okay=False,
        help="File holding answer text (reads stdin when omitted)"
    ),
):
    """Render saved answer text offline, without calling the API."""
    if file is None:
        answer = sys.stdin.read()
    else:
        answer = file.read_text(encoding="utf-8")

    if not answer.strip():
        console.print("[yellow]Nothing to render[/yellow]")
        raise typer.Exit(code=1)

    console.print(render_answer_text(answer))


@app.command(name="tui")
def tui_command(
    subject: Subject = typer.Option(
        Subject.PHYSICS,
        "--subject",
        "-s",
        help="Initially selected subject"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive TUI."""
    async def _tui():
        from ..ui import run_newton_tui

        solver = get_solver(console)
        try:
            await run_newton_tui(
                solver=solver,
                subject=subject,
                log_level=log_level,
            )
        finally:
            await solver.close()
            console.print("\n[dim]Goodbye![/dim]")

    try:
        asyncio.run(_tui())
    except KeyboardInterrupt:
        pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
