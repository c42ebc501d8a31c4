"""Command-line interface for note generation."""
