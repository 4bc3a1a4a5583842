"""Command-line interface for transchat."""
