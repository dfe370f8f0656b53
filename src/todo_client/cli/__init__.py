"""Command-line entrypoint and wiring."""
