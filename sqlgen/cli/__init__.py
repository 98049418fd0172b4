"""Command-line interfaces for SQLGen."""
