"""Line formatting for tutor answers.

Turns one line of Markdown/LaTeX-flavoured answer text into a RenderNode.
Only a small, fixed subset of LaTeX is converted to Unicode; anything else is
left as typed.
"""

import re

from .models import BoxedAnswer, Heading, ListItem, Paragraph, RenderNode, Segment

SECTION_LABELS = ("Given", "Concept", "Steps", "Solution")

_HEADING_RE = re.compile(
    r"^(?:#|\*+(?:" + "|".join(SECTION_LABELS) + r"))"
)
_HEADING_MARKS_RE = re.compile(r"[#*]")

# Applied once each, top to bottom. Order matters: a rule sees the output of
# every rule above it (e.g. \le also matches the start of \left and \leq).
SUBSTITUTIONS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\\sqrt\{([^}]+)\}"), r"√\1"),
    (re.compile(r"\\frac\{([^}]+)\}\{([^}]+)\}"), r"(\1/\2)"),
    (re.compile(r"\\times"), " × "),
    (re.compile(r"\\cdot"), " ⋅ "),
    (re.compile(r"\\approx"), " ≈ "),
    (re.compile(r"\\le"), " ≤ "),
    (re.compile(r"\\ge"), " ≥ "),
    (re.compile(r"\\theta"), "θ"),
    (re.compile(r"\\pi"), "π"),
    (re.compile(r"\\infty"), "∞"),
    (re.compile(r"\\deg"), "°"),
    (re.compile(r"\^2"), "²"),
    (re.compile(r"\^3"), "³"),
    (re.compile(r"\\text\{([^}]+)\}"), r"\1"),
    (re.compile(r"\$\$"), ""),
    (re.compile(r"\$"), ""),
]

_BOXED_RE = re.compile(r"\\boxed\{([^}]+)\}")
_BOXED_SPLIT_RE = re.compile(r"(\\boxed\{[^}]+\})")
_BULLET_RE = re.compile(r"^(?:[-*]|\d+\.)\s+")


def is_heading(line: str) -> bool:
    """Check whether a raw line is a section heading."""
    return bool(_HEADING_RE.match(line.strip()))


def substitute_latex(text: str) -> str:
    """Apply every rule in SUBSTITUTIONS, in order."""
    for pattern, replacement in SUBSTITUTIONS:
        text = pattern.sub(replacement, text)
    return text


def split_boxed(text: str) -> BoxedAnswer | None:
    """Split a line around its \\boxed{...} answers.

    Returns None when the line holds no complete boxed answer, so an
    unterminated ``\\boxed{`` is left to be rendered as plain text.
    """
    if not _BOXED_RE.search(text):
        return None

    segments = []
    for part in _BOXED_SPLIT_RE.split(text):
        if not part:
            continue
        match = _BOXED_RE.fullmatch(part)
        if match:
            segments.append(Segment(text=match.group(1), boxed=True))
        else:
            segments.append(Segment(text=part))
    return BoxedAnswer(segments=tuple(segments))


def format_line(line: str) -> RenderNode:
    """Format one non-empty line of answer text.

    Args:
        line: Raw line; callers filter out blank lines beforehand

    Returns:
        Heading, BoxedAnswer, ListItem or Paragraph node
    """
    if is_heading(line):
        return Heading(text=_HEADING_MARKS_RE.sub("", line).strip())

    processed = substitute_latex(line)

    boxed = split_boxed(processed)
    if boxed is not None:
        return boxed

    stripped = processed.strip()
    if _BULLET_RE.match(stripped):
        return ListItem(text=_BULLET_RE.sub("", stripped, count=1))

    return Paragraph(text=stripped)
