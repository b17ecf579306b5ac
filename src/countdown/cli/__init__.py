"""Command-line interface for countdown."""
