"""Command-line helpers for working with Canvas courses."""
