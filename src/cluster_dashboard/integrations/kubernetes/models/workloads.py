"""Kubernetes workload resource display models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field

from cluster_dashboard.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _metadata_fields,
    _safe_get,
)


class PodSummary(K8sEntityBase):
    """Pod display model."""

    _entity_name: ClassVar[str] = "pod"

    phase: str = Field(default="Unknown", description="Pod phase")
    node_name: str | None = Field(default=None, description="Node the pod is running on")
    pod_ip: str | None = Field(default=None, description="Pod IP address")
    restarts: int = Field(default=0, description="Total container restarts")
    ready_count: int = Field(default=0, description="Number of ready containers")
    total_count: int = Field(default=0, description="Total number of containers")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> PodSummary:
        """Create from a kubernetes V1Pod object."""
        statuses = _safe_get(obj, "status", "container_statuses") or []
        spec_containers = _safe_get(obj, "spec", "containers") or []
        return cls(
            **_metadata_fields(obj),
            phase=_safe_get(obj, "status", "phase", default="Unknown"),
            node_name=_safe_get(obj, "spec", "node_name"),
            pod_ip=_safe_get(obj, "status", "pod_ip"),
            restarts=sum(getattr(cs, "restart_count", 0) or 0 for cs in statuses),
            ready_count=sum(1 for cs in statuses if getattr(cs, "ready", False)),
            total_count=len(spec_containers),
        )


class ReplicationControllerSummary(K8sEntityBase):
    """ReplicationController display model."""

    _entity_name: ClassVar[str] = "replicationcontroller"

    replicas: int = Field(default=0, description="Desired replicas")
    current_replicas: int = Field(default=0, description="Observed replicas")
    ready_replicas: int = Field(default=0, description="Ready replicas")
    selector: dict[str, str] | None = Field(default=None, description="Pod selector")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> ReplicationControllerSummary:
        """Create from a kubernetes V1ReplicationController object."""
        selector = _safe_get(obj, "spec", "selector")
        return cls(
            **_metadata_fields(obj),
            replicas=_safe_get(obj, "spec", "replicas", default=0) or 0,
            current_replicas=_safe_get(obj, "status", "replicas", default=0) or 0,
            ready_replicas=_safe_get(obj, "status", "ready_replicas", default=0) or 0,
            selector=dict(selector) if selector else None,
        )


class DeploymentSummary(K8sEntityBase):
    """Deployment display model."""

    _entity_name: ClassVar[str] = "deployment"

    replicas: int = Field(default=0, description="Desired replicas")
    ready_replicas: int = Field(default=0, description="Ready replicas")
    available_replicas: int = Field(default=0, description="Available replicas")
    updated_replicas: int = Field(default=0, description="Updated replicas")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> DeploymentSummary:
        """Create from a kubernetes V1Deployment object."""
        return cls(
            **_metadata_fields(obj),
            replicas=_safe_get(obj, "spec", "replicas", default=0) or 0,
            ready_replicas=_safe_get(obj, "status", "ready_replicas", default=0) or 0,
            available_replicas=_safe_get(obj, "status", "available_replicas", default=0) or 0,
            updated_replicas=_safe_get(obj, "status", "updated_replicas", default=0) or 0,
        )
