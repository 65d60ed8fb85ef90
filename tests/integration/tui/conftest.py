"""Shared fixtures for dashboard integration tests.

The Kubernetes client is mocked; everything from key presses through the
action bar, table and container down to the executor runs for real.
"""

from __future__ import annotations

from typing import Protocol
from unittest.mock import MagicMock

import pytest

from cluster_dashboard.core.config import DashboardConfig
from cluster_dashboard.tui.apps.dashboard import DashboardApp
from tests.unit.tui.apps.dashboard.factories import list_response, make_pod, make_service


class AppFactory(Protocol):
    """Protocol for the app_factory fixture."""

    def __call__(self, resource: str = "pods", namespace: str | None = None) -> DashboardApp: ...


@pytest.fixture
def cluster_client() -> MagicMock:
    """Mock client serving two pods and one service."""
    client = MagicMock()
    client.default_namespace = "default"
    client.timeout = 30
    client.core_v1.list_namespaced_pod.return_value = list_response(
        make_pod("some-pod-name", namespace="some-name"),
        make_pod("other-pod", namespace="some-name"),
    )
    client.core_v1.list_namespaced_service.return_value = list_response(make_service("db"))
    return client


@pytest.fixture
def app_factory(cluster_client: MagicMock) -> AppFactory:
    """Build a DashboardApp over the mock client with auto-refresh disabled."""

    def factory(resource: str = "pods", namespace: str | None = "some-name") -> DashboardApp:
        config = DashboardConfig(resource=resource, namespace=namespace, refresh_interval=0)
        return DashboardApp(client=cluster_client, config=config)

    return factory
