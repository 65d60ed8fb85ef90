"""Transformers from raw Kubernetes list responses to table rows.

Each transformer accepts the object returned by a ``list_*`` call (anything
with ``.items``), a plain sequence of API objects, or None, and returns
``ResourceRow``s in API order. Transformers are pure.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from cluster_dashboard.integrations.kubernetes.models import (
    DeploymentSummary,
    PodSummary,
    ReplicationControllerSummary,
    ServiceSummary,
)
from cluster_dashboard.tui.components.resource_table import ResourceRow
from cluster_dashboard.tui.theme import PHASE_COLORS

MAX_PORTS_SHOWN = 3


def _items(raw: Any) -> list[Any]:
    if raw is None:
        return []
    if isinstance(raw, Sequence) and not isinstance(raw, str):
        return list(raw)
    return list(getattr(raw, "items", None) or [])


def _pod_row(pod: PodSummary) -> ResourceRow:
    color = PHASE_COLORS.get(pod.phase, "dim")
    return ResourceRow(
        name=pod.name,
        namespace=pod.namespace,
        cells=(
            pod.name,
            f"[{color}]{pod.phase}[/{color}]",
            f"{pod.ready_count}/{pod.total_count}",
            str(pod.restarts),
            pod.node_name or "",
            pod.age,
        ),
    )


def transform_pod_data(raw: Any) -> list[ResourceRow]:
    """Rows for a V1PodList."""
    return [_pod_row(PodSummary.from_k8s_object(obj)) for obj in _items(raw)]


def transform_replication_controller_data(raw: Any) -> list[ResourceRow]:
    """Rows for a V1ReplicationControllerList."""
    rows = []
    for obj in _items(raw):
        rc = ReplicationControllerSummary.from_k8s_object(obj)
        rows.append(
            ResourceRow(
                name=rc.name,
                namespace=rc.namespace,
                cells=(
                    rc.name,
                    str(rc.replicas),
                    str(rc.current_replicas),
                    str(rc.ready_replicas),
                    rc.age,
                ),
            )
        )
    return rows


def transform_deployment_data(raw: Any) -> list[ResourceRow]:
    """Rows for a V1DeploymentList."""
    rows = []
    for obj in _items(raw):
        deploy = DeploymentSummary.from_k8s_object(obj)
        rows.append(
            ResourceRow(
                name=deploy.name,
                namespace=deploy.namespace,
                cells=(
                    deploy.name,
                    f"{deploy.ready_replicas}/{deploy.replicas}",
                    str(deploy.updated_replicas),
                    str(deploy.available_replicas),
                    deploy.age,
                ),
            )
        )
    return rows


def _format_ports(svc: ServiceSummary) -> str:
    ports = ", ".join(
        f"{p.port}:{p.node_port}/{p.protocol}" if p.node_port else f"{p.port}/{p.protocol}"
        for p in svc.ports[:MAX_PORTS_SHOWN]
    )
    if len(svc.ports) > MAX_PORTS_SHOWN:
        ports += f" (+{len(svc.ports) - MAX_PORTS_SHOWN})"
    return ports


def transform_service_data(raw: Any) -> list[ResourceRow]:
    """Rows for a V1ServiceList."""
    rows = []
    for obj in _items(raw):
        svc = ServiceSummary.from_k8s_object(obj)
        rows.append(
            ResourceRow(
                name=svc.name,
                namespace=svc.namespace,
                cells=(
                    svc.name,
                    svc.type,
                    svc.cluster_ip or "",
                    svc.external_ip or "<none>",
                    _format_ports(svc),
                    svc.age,
                ),
            )
        )
    return rows
