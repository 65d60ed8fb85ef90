"""Resource kinds browsable in the dashboard.

Each kind binds together the API group and listing call used to refresh it,
the transformer producing its rows, its table columns, and its action
executor.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from cluster_dashboard.tui.apps.dashboard.actions import (
    DeploymentActions,
    PodActions,
    ReplicationControllerActions,
    ResourceActions,
    ServiceActions,
)
from cluster_dashboard.tui.apps.dashboard.transformers import (
    transform_deployment_data,
    transform_pod_data,
    transform_replication_controller_data,
    transform_service_data,
)
from cluster_dashboard.tui.components.resource_table import Columns, ResourceRow


class ResourceKind(Enum):
    """Resource kinds, valued by their plural kubectl name."""

    PODS = "pods"
    REPLICATION_CONTROLLERS = "replicationcontrollers"
    DEPLOYMENTS = "deployments"
    SERVICES = "services"

    @classmethod
    def from_name(cls, name: str) -> ResourceKind:
        """Resolve a kind from its plural, singular or short kubectl name.

        Raises:
            ValueError: If ``name`` is not a known kind.
        """
        normalized = name.strip().lower()
        for kind in cls:
            if normalized == kind.value or normalized in KIND_ALIASES[kind]:
                return kind
        valid = ", ".join(kind.value for kind in cls)
        raise ValueError(f"Unknown resource kind '{name}' (expected one of: {valid})")


KIND_ALIASES: dict[ResourceKind, frozenset[str]] = {
    ResourceKind.PODS: frozenset({"pod", "po"}),
    ResourceKind.REPLICATION_CONTROLLERS: frozenset({"replicationcontroller", "rc"}),
    ResourceKind.DEPLOYMENTS: frozenset({"deployment", "deploy"}),
    ResourceKind.SERVICES: frozenset({"service", "svc"}),
}

# Ordered list for cycling through kinds
KIND_ORDER = list(ResourceKind)


@dataclass(frozen=True)
class ResourceKindSpec:
    """How to fetch, display and act on one resource kind."""

    title: str
    api_group: str
    refresh_fn: str
    transformer: Callable[[Any], list[ResourceRow]]
    columns: Columns
    executor_cls: type[ResourceActions]
    is_namespaced: bool = True


RESOURCE_KINDS: dict[ResourceKind, ResourceKindSpec] = {
    ResourceKind.PODS: ResourceKindSpec(
        title="Pods",
        api_group="core_v1",
        refresh_fn="list_namespaced_pod",
        transformer=transform_pod_data,
        columns=(
            ("Name", 40),
            ("Status", 12),
            ("Ready", 8),
            ("Restarts", 10),
            ("Node", 20),
            ("Age", 8),
        ),
        executor_cls=PodActions,
    ),
    ResourceKind.REPLICATION_CONTROLLERS: ResourceKindSpec(
        title="Replication Controllers",
        api_group="core_v1",
        refresh_fn="list_namespaced_replication_controller",
        transformer=transform_replication_controller_data,
        columns=(
            ("Name", 40),
            ("Desired", 10),
            ("Current", 10),
            ("Ready", 8),
            ("Age", 8),
        ),
        executor_cls=ReplicationControllerActions,
    ),
    ResourceKind.DEPLOYMENTS: ResourceKindSpec(
        title="Deployments",
        api_group="apps_v1",
        refresh_fn="list_namespaced_deployment",
        transformer=transform_deployment_data,
        columns=(
            ("Name", 40),
            ("Ready", 10),
            ("Up-to-date", 12),
            ("Available", 10),
            ("Age", 8),
        ),
        executor_cls=DeploymentActions,
    ),
    ResourceKind.SERVICES: ResourceKindSpec(
        title="Services",
        api_group="core_v1",
        refresh_fn="list_namespaced_service",
        transformer=transform_service_data,
        columns=(
            ("Name", 40),
            ("Type", 12),
            ("Cluster-IP", 16),
            ("External-IP", 16),
            ("Ports", 24),
            ("Age", 8),
        ),
        executor_cls=ServiceActions,
    ),
}


def cycle_kind(kind: ResourceKind, step: int = 1) -> ResourceKind:
    """Kind ``step`` positions after ``kind`` in KIND_ORDER, wrapping around."""
    index = KIND_ORDER.index(kind)
    return KIND_ORDER[(index + step) % len(KIND_ORDER)]
