"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Subject selection buttons
- Query input and submit state
- Solution rendering and copy feedback
- History list rendering
- Log rendering and level filtering
"""

from datetime import datetime

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, RichLog, Static, TextArea

from ..session import HistoryEntry
from ..subjects import Subject
from .config import (
    COPIED_RESET_SECONDS,
    DISCLAIMER,
    EMPTY_HISTORY_TEXT,
    HISTORY_PREVIEW_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    LogLevel,
)
from .formatting import render_answer_text, subject_label


class SubjectBar(Horizontal):
    """Physics / Math toggle."""

    class Changed(Message):
        """Message sent when the user picks a subject."""

        def __init__(self, subject: Subject) -> None:
            super().__init__()
            self.subject = subject

    def compose(self) -> ComposeResult:
        yield Button("⚛ Physics", id="subject-physics", classes="subject-btn")
        yield Button("∑ Math", id="subject-math", classes="subject-btn")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "subject-physics":
            self.post_message(self.Changed(Subject.PHYSICS))
        elif event.button.id == "subject-math":
            self.post_message(self.Changed(Subject.MATH))

    def set_subject(self, subject: Subject) -> None:
        """Highlight the selected subject."""
        physics = self.query_one("#subject-physics", Button)
        math = self.query_one("#subject-math", Button)
        physics.set_class(subject is Subject.PHYSICS, "-selected")
        math.set_class(subject is Subject.MATH, "-selected")

    def set_locked(self, locked: bool) -> None:
        """Disable switching while a problem is being solved."""
        for button in self.query(Button):
            button.disabled = locked


class QueryInputBar(Horizontal):
    """Problem input with a Solve button.

    The button is disabled while the input is blank or a problem is pending.
    """

    class Submitted(Message):
        """Message sent when user submits a problem."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Edited(Message):
        """Message sent when the problem text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._pending = False

    def compose(self) -> ComposeResult:
        text_area = TextArea(id="query-input", show_line_numbers=False)
        text_area.cursor_blink = False
        text_area.border_subtitle = "Supports LaTeX and natural language · Ctrl+J to solve"
        yield text_area
        yield Button("Solve ➤", id="solve-btn", variant="primary", disabled=True)

    def on_mount(self) -> None:
        text_area = self.query_one("#query-input", TextArea)
        text_area.highlight_cursor_line = False
        text_area.focus()

    @property
    def text(self) -> str:
        """Current problem text."""
        return self.query_one("#query-input", TextArea).text

    def set_text(self, value: str) -> None:
        """Replace the problem text."""
        self.query_one("#query-input", TextArea).text = value
        self._update_button()

    def set_prompt(self, subject: Subject) -> None:
        """Show a subject-specific hint above the input."""
        text_area = self.query_one("#query-input", TextArea)
        text_area.border_title = (
            f"Describe your {subject.value} problem · e.g. {subject.example_problem}"
        )

    def set_pending(self, pending: bool) -> None:
        """Reflect whether a problem is being solved."""
        self._pending = pending
        button = self.query_one("#solve-btn", Button)
        button.label = "⟳ Thinking..." if pending else "Solve ➤"
        self._update_button()

    def _update_button(self) -> None:
        button = self.query_one("#solve-btn", Button)
        button.disabled = self._pending or not self.text.strip()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        event.stop()
        self._update_button()
        self.post_message(self.Edited(self.text))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "solve-btn":
            event.stop()
            self._submit()

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()

    def _submit(self) -> None:
        value = self.text
        if value.strip() and not self._pending:
            self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#query-input", TextArea).focus()


class ErrorBanner(Static):
    """Red banner showing the last error message."""

    def on_mount(self) -> None:
        self.display = False

    def show_error(self, message: str | None) -> None:
        """Show the message, or hide the banner when it is None."""
        if message:
            self.update(Text(f"⟲ {message}"))
            self.display = True
        else:
            self.update("")
            self.display = False


class SolutionPanel(Vertical):
    """The rendered answer with a copy button."""

    BORDER_TITLE = "✦ Solution Generated"

    class CopyRequested(Message):
        """Message sent when the copy button is pressed."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._entry: HistoryEntry | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id="solution-header"):
            yield Static("", id="solution-meta")
            yield Button("Copy", id="copy-btn", variant="default").with_tooltip(
                "Copy Solution (Ctrl+R)"
            )
        yield Static("", id="solution-body")
        yield Static(DISCLAIMER, id="solution-disclaimer")

    def on_mount(self) -> None:
        self.display = False

    @property
    def entry(self) -> HistoryEntry | None:
        """The entry currently shown."""
        return self._entry

    def show_entry(self, entry: HistoryEntry | None) -> None:
        """Render an entry, or hide the panel when it is None."""
        if entry is self._entry:
            return
        self._entry = entry
        if entry is None:
            self.display = False
            return

        meta = subject_label(entry.subject)
        meta.append(f"  {entry.display_time}", style="dim")
        self.query_one("#solution-meta", Static).update(meta)
        self.query_one("#solution-body", Static).update(render_answer_text(entry.answer))
        self.display = True

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "copy-btn":
            event.stop()
            self.post_message(self.CopyRequested())

    def mark_copied(self) -> None:
        """Show copy feedback on the button for a short while."""
        button = self.query_one("#copy-btn", Button)
        button.label = "Copied ✓"
        self.set_timer(COPIED_RESET_SECONDS, self._reset_copy_label)

    def _reset_copy_label(self) -> None:
        self.query_one("#copy-btn", Button).label = "Copy"


class EmptyState(Horizontal):
    """Example problems shown before anything is solved."""

    def compose(self) -> ComposeResult:
        physics = Text("⚛ Kinematics\n", style="bold")
        physics.append(
            '"A car accelerates from 0 to 60mph in 5 seconds. '
            'What is the acceleration?"',
            style="dim",
        )
        calculus = Text("∑ Calculus\n", style="bold")
        calculus.append('"Find the derivative of f(x) = x^2 * sin(x)"', style="dim")
        yield Static(physics, classes="example-card")
        yield Static(calculus, classes="example-card")


class HistoryItem(Vertical):
    """One solved problem in the sidebar; clicking selects it."""

    def __init__(self, entry: HistoryEntry, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.entry = entry

    def compose(self) -> ComposeResult:
        header = subject_label(self.entry.subject)
        header.append(f"  {self.entry.display_time}", style="dim")
        yield Static(header, classes="history-item-header")
        yield Static(
            self.entry.preview(HISTORY_PREVIEW_LENGTH), classes="history-item-query"
        )

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(HistorySidebar.Selected(self.entry))


class HistorySidebar(VerticalScroll):
    """Most-recent-first list of solved problems."""

    BORDER_TITLE = "Newton.ai"
    BORDER_SUBTITLE = "History"

    class Selected(Message):
        """Message sent when a history entry is clicked."""

        def __init__(self, entry: HistoryEntry) -> None:
            super().__init__()
            self.entry = entry

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._shown_ids: list[str] = []

    def on_mount(self) -> None:
        self.mount(Static(EMPTY_HISTORY_TEXT, classes="history-empty"))

    def show_history(self, history: list[HistoryEntry]) -> None:
        """Re-render the list if the history changed."""
        ids = [entry.id for entry in history]
        if ids == self._shown_ids:
            return
        self._shown_ids = ids

        self.remove_children()
        if not history:
            self.mount(Static(EMPTY_HISTORY_TEXT, classes="history-empty"))
            self.border_subtitle = "History"
            return

        self.mount(*(HistoryItem(entry, classes="history-item") for entry in history))
        self.border_subtitle = f"{len(history)} solved · Ctrl+K clears"
        self.scroll_home(animate=False)


class DebugPanel(RichLog):
    """Log panel for request tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Solver": "magenta",
        "Session": "bright_green",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        """Set log level threshold."""
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        """Update subtitle to show current log level."""
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Solver, Session)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        line = Text.assemble(
            (timestamp, "dim"),
            " ",
            (f"{LogLevel.name(level):<5}", level_color),
            " ",
            (f"[{component}]", comp_color),
            " ",
            message,
        )
        self.write(line)

    def handle(self, level: str, component: str, message: str) -> None:
        """Debug callback entry point: Callable(level, component, message)."""
        self.add_entry(component, message, LogLevel.from_string(level))

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
