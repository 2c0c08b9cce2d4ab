"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Slate background with indigo accents; emerald marks boxed answers.
NEWTON_SLATE = Theme(
    name="newton-slate",
    primary="#818cf8",      # Indigo 400 - main accent
    secondary="#60a5fa",    # Blue 400 - math
    accent="#34d399",       # Emerald 400 - physics, boxed answers
    foreground="#e2e8f0",   # Slate 200
    background="#0f172a",   # Slate 900
    success="#34d399",
    warning="#fbbf24",
    error="#f87171",        # Red 400 - error banner
    surface="#1e293b",      # Slate 800
    panel="#020617",        # Slate 950 - sidebar
    dark=True,
    variables={
        "border": "#334155",
        "border-blurred": "#1e293b",

        "scrollbar": "#1e293b",
        "scrollbar-hover": "#334155",
        "scrollbar-active": "#818cf8",
        "scrollbar-background": "#0f172a",

        "footer-foreground": "#94a3b8",
        "footer-background": "#020617",
        "footer-key-foreground": "#a5b4fc",

        "text-muted": "#64748b",

        "input-selection-background": "#818cf8 30%",
        "button-focus-text-style": "bold",
    },
)

# Styles used when rendering answers with Rich.
HEADING_STYLE = "bold #a5b4fc"
PARAGRAPH_STYLE = "#cbd5e1"
BULLET_STYLE = "#475569"
BOXED_STYLE = "bold #6ee7b7 on #064e3b"
PHYSICS_STYLE = "#34d399"
MATH_STYLE = "#60a5fa"
