"""Terminal UI module for newton.

Provides a Textual-based TUI around the SessionStore.

Module structure (each module hides a design decision):
- config.py: Constants and log levels
- themes.py: Color palette and text styles
- styles.py: CSS styling (layout decisions)
- formatting.py: Render nodes to Rich text
- clipboard.py: System clipboard access
- widgets.py: Custom widgets (subject toggle, input, solution, history, log)
- app.py: Application orchestration (user interaction flow)
"""

from .app import NewtonApp, run_newton_tui
from .config import LogLevel
from .formatting import node_to_text, render_answer_text
from .widgets import (
    DebugPanel,
    HistorySidebar,
    QueryInputBar,
    SolutionPanel,
    SubjectBar,
)

__all__ = [
    "DebugPanel",
    "HistorySidebar",
    "LogLevel",
    "NewtonApp",
    "QueryInputBar",
    "SolutionPanel",
    "SubjectBar",
    "node_to_text",
    "render_answer_text",
    "run_newton_tui",
]
