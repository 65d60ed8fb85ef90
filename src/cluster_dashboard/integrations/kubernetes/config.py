"""Kubernetes integration configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class ClusterConfig(BaseModel):
    """Configuration for a single named Kubernetes cluster."""

    model_config = ConfigDict(extra="forbid")

    context: str = ""
    kubeconfig: str | None = None
    namespace: str = "default"
    timeout: int = 30

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("kubeconfig")
    @classmethod
    def validate_kubeconfig(cls, v: str | None) -> str | None:
        """Expand ~ in kubeconfig path."""
        return str(Path(v).expanduser()) if v else None


class KubernetesDefaultsConfig(BaseModel):
    """Default settings for Kubernetes API calls."""

    model_config = ConfigDict(extra="forbid")

    timeout: int = 30
    retry_attempts: int = 3

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("retry_attempts")
    @classmethod
    def validate_retry_attempts(cls, v: int) -> int:
        """Validate retry_attempts is at least one."""
        if v < 1:
            raise ValueError("retry_attempts must be at least 1")
        return v


class KubernetesConfig(BaseModel):
    """Cluster selection and API defaults used by the dashboard."""

    model_config = ConfigDict(extra="forbid")

    clusters: dict[str, ClusterConfig] = {}
    active_cluster: str | None = None
    kubeconfig: str | None = None
    defaults: KubernetesDefaultsConfig = KubernetesDefaultsConfig()

    def _active(self) -> ClusterConfig | None:
        if self.active_cluster and self.active_cluster in self.clusters:
            return self.clusters[self.active_cluster]
        if not self.active_cluster and self.clusters:
            return next(iter(self.clusters.values()))
        return None

    def get_active_context(self) -> str | None:
        """Get the kubeconfig context to load.

        A named cluster resolves to its ``context``; any other
        ``active_cluster`` value is treated as a raw context name.
        ``None`` means the kubeconfig's current context.
        """
        if cluster := self._active():
            return cluster.context or None
        return self.active_cluster

    def get_active_kubeconfig(self) -> str | None:
        """Get the kubeconfig path for the active cluster, if overridden."""
        cluster = self._active()
        if cluster and cluster.kubeconfig:
            return cluster.kubeconfig
        return self.kubeconfig

    def get_active_namespace(self) -> str:
        """Get the default namespace for the active cluster."""
        if cluster := self._active():
            return cluster.namespace
        return "default"

    def get_active_timeout(self) -> int:
        """Get the API request timeout for the active cluster."""
        if cluster := self._active():
            return cluster.timeout
        return self.defaults.timeout
