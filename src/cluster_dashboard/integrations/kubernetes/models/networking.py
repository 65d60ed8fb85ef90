"""Kubernetes networking resource display models."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from cluster_dashboard.integrations.kubernetes.models.base import (
    K8sEntityBase,
    _metadata_fields,
    _safe_get,
)


class ServicePort(BaseModel):
    """Service port definition."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    port: int = Field(description="Service port number")
    protocol: str = Field(default="TCP", description="Protocol")
    node_port: int | None = Field(default=None, description="Node port")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> ServicePort:
        """Create from a kubernetes V1ServicePort object."""
        return cls(
            name=getattr(obj, "name", "") or "",
            port=getattr(obj, "port", 0) or 0,
            protocol=getattr(obj, "protocol", "TCP") or "TCP",
            node_port=getattr(obj, "node_port", None),
        )


class ServiceSummary(K8sEntityBase):
    """Service display model."""

    _entity_name: ClassVar[str] = "service"

    type: str = Field(default="ClusterIP", description="Service type")
    cluster_ip: str | None = Field(default=None, description="Cluster IP")
    external_ip: str | None = Field(default=None, description="External IP")
    ports: list[ServicePort] = Field(default_factory=list, description="Service ports")

    @classmethod
    def from_k8s_object(cls, obj: Any) -> ServiceSummary:
        """Create from a kubernetes V1Service object."""
        external_ips = _safe_get(obj, "spec", "external_i_ps") or []
        lb_ingress = _safe_get(obj, "status", "load_balancer", "ingress") or []
        external_ip = None
        if external_ips:
            external_ip = external_ips[0]
        elif lb_ingress:
            external_ip = getattr(lb_ingress[0], "ip", None) or getattr(
                lb_ingress[0], "hostname", None
            )
        ports = _safe_get(obj, "spec", "ports") or []
        return cls(
            **_metadata_fields(obj),
            type=_safe_get(obj, "spec", "type", default="ClusterIP"),
            cluster_ip=_safe_get(obj, "spec", "cluster_ip"),
            external_ip=external_ip,
            ports=[ServicePort.from_k8s_object(p) for p in ports],
        )
