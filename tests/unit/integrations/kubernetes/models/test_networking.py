"""Unit tests for Kubernetes networking resource models."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from cluster_dashboard.integrations.kubernetes.models.networking import (
    ServicePort,
    ServiceSummary,
)


def make_service_obj(**spec: object) -> MagicMock:
    obj = MagicMock()
    obj.metadata.name = "web"
    obj.metadata.namespace = "default"
    obj.metadata.uid = "uid-web"
    obj.metadata.creation_timestamp = None
    obj.metadata.labels = None
    obj.spec.type = spec.get("type", "ClusterIP")
    obj.spec.cluster_ip = "10.96.0.1"
    obj.spec.external_i_ps = spec.get("external_ips")
    obj.spec.ports = spec.get("ports", [])
    obj.status.load_balancer.ingress = spec.get("ingress")
    return obj


@pytest.mark.unit
@pytest.mark.kubernetes
class TestServicePort:
    """Test ServicePort model."""

    def test_from_k8s_object(self) -> None:
        port = ServicePort.from_k8s_object(
            SimpleNamespace(name="http", port=80, protocol="TCP", node_port=30080)
        )
        assert port == ServicePort(name="http", port=80, protocol="TCP", node_port=30080)

    def test_from_k8s_object_defaults(self) -> None:
        port = ServicePort.from_k8s_object(
            SimpleNamespace(name=None, port=53, protocol=None, node_port=None)
        )
        assert port.name == ""
        assert port.protocol == "TCP"
        assert port.node_port is None


@pytest.mark.unit
@pytest.mark.kubernetes
class TestServiceSummary:
    """Test ServiceSummary model."""

    def test_cluster_ip_service(self) -> None:
        svc = ServiceSummary.from_k8s_object(
            make_service_obj(
                ports=[SimpleNamespace(name="http", port=80, protocol="TCP", node_port=None)]
            )
        )

        assert svc.type == "ClusterIP"
        assert svc.cluster_ip == "10.96.0.1"
        assert svc.external_ip is None
        assert [p.port for p in svc.ports] == [80]
        assert svc.age == "Unknown"

    def test_external_ips_win(self) -> None:
        svc = ServiceSummary.from_k8s_object(
            make_service_obj(
                external_ips=["198.51.100.1"],
                ingress=[SimpleNamespace(ip="203.0.113.7", hostname=None)],
            )
        )
        assert svc.external_ip == "198.51.100.1"

    def test_load_balancer_hostname(self) -> None:
        svc = ServiceSummary.from_k8s_object(
            make_service_obj(
                type="LoadBalancer",
                ingress=[SimpleNamespace(ip=None, hostname="lb.example.com")],
            )
        )
        assert svc.type == "LoadBalancer"
        assert svc.external_ip == "lb.example.com"
