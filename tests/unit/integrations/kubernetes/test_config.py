"""Unit tests for Kubernetes configuration models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from cluster_dashboard.integrations.kubernetes.config import (
    ClusterConfig,
    KubernetesConfig,
    KubernetesDefaultsConfig,
)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestClusterConfig:
    """Test ClusterConfig model."""

    def test_defaults(self) -> None:
        cfg = ClusterConfig()
        assert cfg.context == ""
        assert cfg.kubeconfig is None
        assert cfg.namespace == "default"
        assert cfg.timeout == 30

    def test_kubeconfig_expands_home(self) -> None:
        cfg = ClusterConfig(kubeconfig="~/.kube/config")
        assert cfg.kubeconfig == str(Path.home() / ".kube" / "config")

    @pytest.mark.parametrize("timeout", [0, -5])
    def test_timeout_must_be_positive(self, timeout: int) -> None:
        with pytest.raises(ValidationError, match="timeout must be positive"):
            ClusterConfig(timeout=timeout)

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ClusterConfig(context="a", unknown="b")  # type: ignore[call-arg]


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesDefaultsConfig:
    """Test KubernetesDefaultsConfig model."""

    def test_defaults(self) -> None:
        cfg = KubernetesDefaultsConfig()
        assert cfg.timeout == 30
        assert cfg.retry_attempts == 3

    def test_retry_attempts_at_least_one(self) -> None:
        with pytest.raises(ValidationError, match="retry_attempts must be at least 1"):
            KubernetesDefaultsConfig(retry_attempts=0)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestKubernetesConfig:
    """Test active cluster resolution."""

    def test_no_clusters(self) -> None:
        cfg = KubernetesConfig()
        assert cfg.get_active_context() is None
        assert cfg.get_active_kubeconfig() is None
        assert cfg.get_active_namespace() == "default"
        assert cfg.get_active_timeout() == 30

    def test_named_active_cluster(self) -> None:
        cfg = KubernetesConfig(
            clusters={
                "dev": ClusterConfig(context="dev-ctx", namespace="dev"),
                "prod": ClusterConfig(
                    context="prod-ctx", namespace="prod", kubeconfig="/etc/prod", timeout=60
                ),
            },
            active_cluster="prod",
        )

        assert cfg.get_active_context() == "prod-ctx"
        assert cfg.get_active_kubeconfig() == "/etc/prod"
        assert cfg.get_active_namespace() == "prod"
        assert cfg.get_active_timeout() == 60

    def test_first_cluster_when_none_active(self) -> None:
        cfg = KubernetesConfig(clusters={"dev": ClusterConfig(context="dev-ctx", namespace="dev")})
        assert cfg.get_active_context() == "dev-ctx"
        assert cfg.get_active_namespace() == "dev"

    def test_unknown_active_cluster_is_a_context_name(self) -> None:
        cfg = KubernetesConfig(
            clusters={"dev": ClusterConfig(context="dev-ctx")}, active_cluster="kind-local"
        )
        assert cfg.get_active_context() == "kind-local"
        assert cfg.get_active_namespace() == "default"

    def test_empty_cluster_context_uses_kubeconfig_current(self) -> None:
        cfg = KubernetesConfig(clusters={"local": ClusterConfig()}, active_cluster="local")
        assert cfg.get_active_context() is None

    def test_top_level_kubeconfig_fallback(self) -> None:
        cfg = KubernetesConfig(
            kubeconfig="/etc/kubeconfig",
            clusters={"dev": ClusterConfig(context="dev-ctx")},
        )
        assert cfg.get_active_kubeconfig() == "/etc/kubeconfig"

    def test_defaults_timeout_without_cluster(self) -> None:
        cfg = KubernetesConfig(defaults=KubernetesDefaultsConfig(timeout=90))
        assert cfg.get_active_timeout() == 90
