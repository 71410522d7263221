"""Command-line interface for pathtree."""
