"""Logging configuration for cluster_dashboard."""

from cluster_dashboard.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
