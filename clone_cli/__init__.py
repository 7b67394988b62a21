"""Command-line interface for clone."""
