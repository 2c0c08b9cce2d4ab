from .formatter import format_line
from .models import RenderNode


def render_answer(answer: str) -> list[RenderNode]:
    """Render a full answer into nodes, one per non-blank line, in order.

    Lines are split on ``\\n`` only; a trailing ``\\r`` is dropped so CRLF
    text renders the same as LF text.
    """
    lines = (line.removesuffix("\r") for line in answer.split("\n"))
    return [format_line(line) for line in lines if line.strip()]
