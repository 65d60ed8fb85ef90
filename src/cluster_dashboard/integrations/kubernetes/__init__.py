"""Kubernetes integration - API client, configuration and exceptions."""

from cluster_dashboard.integrations.kubernetes.client import KubernetesClient
from cluster_dashboard.integrations.kubernetes.config import (
    ClusterConfig,
    KubernetesConfig,
    KubernetesDefaultsConfig,
)
from cluster_dashboard.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesValidationError,
)

__all__ = [
    "ClusterConfig",
    "KubernetesAuthError",
    "KubernetesClient",
    "KubernetesConfig",
    "KubernetesConflictError",
    "KubernetesConnectionError",
    "KubernetesDefaultsConfig",
    "KubernetesError",
    "KubernetesNotFoundError",
    "KubernetesValidationError",
]
