"""Clipboard access.

Copying is best effort: failures fall back to the terminal's OSC 52 escape
sequence and are never reported as errors.
"""

from collections.abc import Callable

import pyperclip


def copy_text(text: str, fallback: Callable[[str], None] | None = None) -> bool:
    """Copy text to the system clipboard.

    Args:
        text: Text to copy
        fallback: Called with the text when the system clipboard is
            unavailable (typically ``App.copy_to_clipboard``)

    Returns:
        True if the system clipboard accepted the text
    """
    try:
        pyperclip.copy(text)
        return True
    except pyperclip.PyperclipException:
        if fallback is not None:
            fallback(text)
        return False
