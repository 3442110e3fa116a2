"""Command-line interface for row-transform."""
