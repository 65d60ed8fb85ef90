"""Command-line interface for the cluster dashboard."""
