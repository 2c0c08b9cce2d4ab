"""Unit tests for clipboard access."""
import pyperclip

from newton.ui.clipboard import copy_text


class TestCopyText:
    """Tests for copy_text."""

    def test_system_clipboard(self, monkeypatch):
        """Test that pyperclip receives the text and no fallback runs."""
        copied: list[str] = []
        fallback: list[str] = []
        monkeypatch.setattr(pyperclip, "copy", copied.append)

        assert copy_text("E = mc^2", fallback.append) is True
        assert copied == ["E = mc^2"]
        assert fallback == []

    def test_falls_back_when_unavailable(self, monkeypatch):
        """Test that the terminal fallback gets the text when pyperclip fails."""
        def _unavailable(text):
            raise pyperclip.PyperclipException("no clipboard mechanism")

        fallback: list[str] = []
        monkeypatch.setattr(pyperclip, "copy", _unavailable)

        assert copy_text("\\boxed{42}", fallback.append) is False
        assert fallback == ["\\boxed{42}"]

    def test_failure_without_fallback(self, monkeypatch):
        """Test that a failed copy is not raised when there is no fallback."""
        def _unavailable(text):
            raise pyperclip.PyperclipException("no clipboard mechanism")

        monkeypatch.setattr(pyperclip, "copy", _unavailable)

        assert copy_text("x") is False
