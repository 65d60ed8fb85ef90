"""Configuration management with Pydantic validation."""

from cluster_dashboard.core.config.models import (
    CONFIG_FILE,
    DashboardConfig,
    load_config,
)

__all__ = [
    "CONFIG_FILE",
    "DashboardConfig",
    "load_config",
]
