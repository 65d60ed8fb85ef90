"""Kubernetes resource display models."""

from cluster_dashboard.integrations.kubernetes.models.base import K8sEntityBase
from cluster_dashboard.integrations.kubernetes.models.networking import (
    ServicePort,
    ServiceSummary,
)
from cluster_dashboard.integrations.kubernetes.models.workloads import (
    DeploymentSummary,
    PodSummary,
    ReplicationControllerSummary,
)

__all__ = [
    "DeploymentSummary",
    "K8sEntityBase",
    "PodSummary",
    "ReplicationControllerSummary",
    "ServicePort",
    "ServiceSummary",
]
