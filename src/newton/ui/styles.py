"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
Screen {
    layout: horizontal;
    background: $background;
}

/* ============================================
   History Sidebar
   ============================================ */
#history {
    width: 36;
    height: 100%;
    background: $panel;
    border: round $border;
    border-title-color: $primary;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;
}

.history-empty {
    width: 100%;
    margin-top: 2;
    text-align: center;
    color: $text-muted;
}

.history-item {
    height: auto;
    margin-bottom: 1;
    padding: 0 1;
    background: $surface;
    border: round $border;

    &:hover {
        border: round $primary 60%;
        background: $boost;
    }
}

.history-item-header {
    height: auto;
}

.history-item-query {
    height: auto;
    color: $foreground 80%;
}

/* ============================================
   Main Column
   ============================================ */
#body {
    width: 1fr;
    height: 100%;
}

#main {
    height: 1fr;
    padding: 1 2;
    scrollbar-gutter: stable;
}

/* Subject toggle */
SubjectBar {
    height: 3;
    align: center middle;
    margin-bottom: 1;
}

.subject-btn {
    margin: 0 1;
    min-width: 16;
    background: $surface;
    color: $text-muted;
    border: round $border;

    &.-selected {
        color: $accent;
        border: round $accent;
        text-style: bold;
    }
}

#subject-math.-selected {
    color: $secondary;
    border: round $secondary;
}

/* Query input */
QueryInputBar {
    height: 9;
    margin-bottom: 1;
}

#query-input {
    width: 1fr;
    height: 100%;
    background: $panel;
    border: round $primary 50%;
    border-title-color: $text-muted;
    border-subtitle-color: $text-muted;

    &:focus {
        border: round $primary;
    }
}

#solve-btn {
    width: 16;
    height: 3;
    margin-left: 1;
}

/* Error banner */
ErrorBanner {
    height: auto;
    padding: 1 2;
    margin-bottom: 1;
    color: $error;
    background: $error 10%;
    border: round $error 40%;
}

/* Solution */
SolutionPanel {
    height: auto;
    background: $surface;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    padding: 0 2;
}

#solution-header {
    height: 3;
    align: left middle;
}

#solution-meta {
    width: 1fr;
    content-align: left middle;
}

#copy-btn {
    min-width: 12;
}

#solution-body {
    height: auto;
    padding: 1 0;
}

#solution-disclaimer {
    height: auto;
    text-align: center;
    text-style: italic;
    color: $text-muted;
    padding-bottom: 1;
}

/* Empty state */
EmptyState {
    height: auto;
    margin-top: 2;
}

.example-card {
    width: 1fr;
    height: auto;
    margin: 0 1;
    padding: 1 2;
    border: dashed $border;
    color: $text-muted;
}

/* ============================================
   Log Panel
   ============================================ */
#debug-panel {
    height: 12;
    background: $panel;
    border: round $border;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}
"""
