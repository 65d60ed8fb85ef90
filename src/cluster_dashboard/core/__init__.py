"""Core configuration for the dashboard."""
