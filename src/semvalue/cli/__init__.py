"""Command-line interface for semvalue."""
