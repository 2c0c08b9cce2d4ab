"""Command-line interface for newton."""
