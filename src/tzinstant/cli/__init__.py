"""Command-line interface for tzinstant."""
