"""Command-line interface for rollexpr."""
