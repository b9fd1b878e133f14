"""Command-line interface for s2coding."""
