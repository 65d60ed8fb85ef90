"""Kubernetes API client used by the dashboard.

Loads kubeconfig (or in-cluster config) once, hands out the API groups the
dashboard lists and deletes through, and maps ``ApiException`` onto the
``KubernetesError`` hierarchy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from cluster_dashboard.integrations.kubernetes.exceptions import (
    KubernetesAuthError,
    KubernetesConflictError,
    KubernetesConnectionError,
    KubernetesError,
    KubernetesNotFoundError,
    KubernetesValidationError,
)

if TYPE_CHECKING:
    from kubernetes.client import AppsV1Api, CoreV1Api

    from cluster_dashboard.integrations.kubernetes.config import KubernetesConfig

logger = structlog.get_logger()


class KubernetesClient:
    """Thin wrapper over the official client for one cluster context.

    Example:
        ```python
        with KubernetesClient(KubernetesConfig()) as client:
            if client.check_connection():
                pods = client.core_v1.list_namespaced_pod(namespace="default")
        ```
    """

    def __init__(self, config: KubernetesConfig) -> None:
        """Load configuration for the active context.

        Args:
            config: Cluster selection and API defaults.

        Raises:
            KubernetesConnectionError: If neither kubeconfig nor in-cluster
                configuration can be loaded.
        """
        self._config = config
        self._retries = config.defaults.retry_attempts
        self._apis: dict[str, Any] = {}
        source = self._load_config()
        logger.info(
            "kubernetes_client_initialized",
            source=source,
            context=config.get_active_context(),
            default_namespace=config.get_active_namespace(),
        )

    def _load_config(self) -> str:
        from kubernetes import config as k8s_config
        from kubernetes.config import ConfigException

        try:
            k8s_config.load_kube_config(
                config_file=self._config.get_active_kubeconfig(),
                context=self._config.get_active_context(),
            )
            return "kubeconfig"
        except ConfigException as kubeconfig_error:
            logger.debug("kubeconfig_unavailable", error=str(kubeconfig_error))

        try:
            k8s_config.load_incluster_config()
        except ConfigException as e:
            raise KubernetesConnectionError(
                message="Cannot load Kubernetes configuration. "
                "Ensure kubeconfig exists or running inside a cluster.",
                original_error=e,
            ) from e
        return "in-cluster"

    def _api(self, name: str) -> Any:
        if name not in self._apis:
            from kubernetes import client as k8s_client

            self._apis[name] = getattr(k8s_client, name)()
        return self._apis[name]

    @property
    def core_v1(self) -> CoreV1Api:
        """Pods, replication controllers and services."""
        api: CoreV1Api = self._api("CoreV1Api")
        return api

    @property
    def apps_v1(self) -> AppsV1Api:
        """Deployments."""
        api: AppsV1Api = self._api("AppsV1Api")
        return api

    @property
    def default_namespace(self) -> str:
        return self._config.get_active_namespace()

    @property
    def timeout(self) -> int:
        """Request timeout in seconds, passed as ``_request_timeout`` on API calls."""
        return self._config.get_active_timeout()

    def list_contexts(self) -> list[dict[str, Any]]:
        """Kubeconfig contexts as dicts with name, cluster, namespace and active keys.

        An unreadable kubeconfig yields an empty list.
        """
        from kubernetes import config as k8s_config
        from kubernetes.config import ConfigException

        try:
            contexts, active = k8s_config.list_kube_config_contexts(
                config_file=self._config.get_active_kubeconfig()
            )
        except (ConfigException, OSError) as e:
            logger.warning("list_contexts_failed", error=str(e))
            return []

        active_name = (active or {}).get("name")
        return [
            {
                "name": entry.get("name", ""),
                "cluster": entry.get("context", {}).get("cluster", ""),
                "namespace": entry.get("context", {}).get("namespace", "default"),
                "active": entry.get("name") == active_name,
            }
            for entry in contexts
        ]

    def get_cluster_version(self) -> str:
        """Server version as ``v<major>.<minor>``.

        Connection failures are retried ``defaults.retry_attempts`` times with
        exponential backoff.

        Raises:
            KubernetesConnectionError: If the API server stays unreachable.
        """
        retrying = Retrying(
            retry=retry_if_exception_type(KubernetesConnectionError),
            stop=stop_after_attempt(self._retries),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            reraise=True,
        )
        for attempt in retrying:
            with attempt:
                info = self._fetch_version()
        return f"v{info.major}.{info.minor}"

    def _fetch_version(self) -> Any:
        try:
            return self._api("VersionApi").get_code(_request_timeout=self.timeout)
        except Exception as e:
            raise KubernetesConnectionError(
                message="Failed to get cluster version",
                original_error=e,
            ) from e

    def check_connection(self) -> bool:
        """True if the API server answers a version request."""
        try:
            version = self.get_cluster_version()
        except KubernetesConnectionError as e:
            logger.warning("cluster_unreachable", error=str(e))
            return False
        logger.debug("cluster_reachable", version=version)
        return True

    @staticmethod
    def translate_api_exception(
        e: Exception,
        resource_type: str | None = None,
        resource_name: str | None = None,
        namespace: str | None = None,
    ) -> KubernetesError:
        """Map ``e`` onto the ``KubernetesError`` hierarchy.

        Errors that already are ``KubernetesError`` pass through unchanged.
        """
        from kubernetes.client import ApiException

        if isinstance(e, KubernetesError):
            return e
        context = {
            "resource_type": resource_type,
            "resource_name": resource_name,
            "namespace": namespace,
        }
        if not isinstance(e, ApiException):
            return KubernetesError(message=str(e), **context)

        status = e.status
        if status == 404:
            return KubernetesNotFoundError(**context)
        if status == 409:
            return KubernetesConflictError(**context)
        if status in (401, 403):
            return KubernetesAuthError(
                message=e.reason or "Authentication/authorization failed",
                status_code=status,
                reason=e.reason,
            )
        if status in (400, 422):
            return KubernetesValidationError(
                message=e.reason or "Validation failed",
                status_code=status,
            )
        return KubernetesError(
            message=e.reason or f"Kubernetes API error: {status}",
            status_code=status,
            **context,
        )

    def close(self) -> None:
        """Drop cached API group instances."""
        self._apis.clear()
        logger.debug("kubernetes_client_closed")

    def __enter__(self) -> KubernetesClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
