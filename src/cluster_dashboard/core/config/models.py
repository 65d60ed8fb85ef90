"""Dashboard configuration models and loaders.

Configuration is read from ``~/.config/kdash/config.yaml`` (optional) and
then overridden by ``KDASH_*`` environment variables:

    KDASH_CONTEXT: kubeconfig context or named cluster to use
    KDASH_NAMESPACE: namespace to browse
    KDASH_KUBECONFIG: kubeconfig path
    KDASH_REFRESH_INTERVAL: auto-refresh interval in seconds (0 disables)
    KDASH_RESOURCE: resource kind shown at startup
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from cluster_dashboard.integrations.kubernetes.config import KubernetesConfig

logger = structlog.get_logger()

CONFIG_DIR = Path.home() / ".config" / "kdash"
CONFIG_FILE = CONFIG_DIR / "config.yaml"


class DashboardConfig(BaseModel):
    """Top-level dashboard configuration."""

    model_config = ConfigDict(extra="forbid")

    kubernetes: KubernetesConfig = Field(default_factory=KubernetesConfig)
    namespace: str | None = Field(
        default=None, description="Namespace to browse; falls back to the cluster default"
    )
    resource: str = Field(default="pods", description="Resource kind shown at startup")
    refresh_interval: float = Field(
        default=5.0, description="Seconds between automatic refreshes, 0 disables"
    )

    @field_validator("refresh_interval")
    @classmethod
    def validate_refresh_interval(cls, v: float) -> float:
        """Validate refresh_interval is non-negative."""
        if v < 0:
            raise ValueError("refresh_interval must be non-negative")
        return v

    @field_validator("resource")
    @classmethod
    def normalize_resource(cls, v: str) -> str:
        """Normalize the resource kind name to lower case."""
        return v.strip().lower()

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> DashboardConfig:
        """Build a config from ``base_config`` with ``KDASH_*`` overrides applied."""
        config_dict = dict(base_config) if base_config else {}
        kube = dict(config_dict.get("kubernetes") or {})

        if context := os.environ.get("KDASH_CONTEXT"):
            kube["active_cluster"] = context
        if kubeconfig := os.environ.get("KDASH_KUBECONFIG"):
            kube["kubeconfig"] = str(Path(kubeconfig).expanduser())
        if namespace := os.environ.get("KDASH_NAMESPACE"):
            config_dict["namespace"] = namespace
        if interval := os.environ.get("KDASH_REFRESH_INTERVAL"):
            config_dict["refresh_interval"] = float(interval)
        if resource := os.environ.get("KDASH_RESOURCE"):
            config_dict["resource"] = resource

        config_dict["kubernetes"] = kube
        return cls.model_validate(config_dict)

    def resolve_namespace(self) -> str:
        """Namespace to browse: explicit override or the active cluster default."""
        return self.namespace or self.kubernetes.get_active_namespace()


def load_config(path: Path | None = None) -> DashboardConfig:
    """Load the dashboard config from YAML and the environment.

    A missing file yields defaults (plus environment overrides).

    Raises:
        ValueError: If the file exists but is not valid YAML, or a value
            fails validation.
    """
    config_path = path or CONFIG_FILE
    base: dict[str, Any] = {}
    if config_path.exists():
        try:
            data = yaml.safe_load(config_path.read_text())
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {config_path}: {e}") from e
        if isinstance(data, dict):
            base = data
    config = DashboardConfig.from_env(base)
    logger.debug("config_loaded", path=str(config_path), resource=config.resource)
    return config
