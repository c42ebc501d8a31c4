"""API layer: use cases and the command-line interface."""
