"""Action executors for each resource kind.

An executor publishes the actions offered for its kind (``actions``) and
performs them in ``execute_action(key, name, namespace)`` once the action
bar has fired (and, for destructive actions, the user has confirmed).

Usage:
    executor = PodActions(client, clipboard=app.copy_to_clipboard)
    executor.execute_action(KeyEvent("d"), "web-0", "default")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

import structlog

from cluster_dashboard.integrations.kubernetes.client import KubernetesClient
from cluster_dashboard.tui.keys import ActionDescriptor, KeyEvent

logger = structlog.get_logger()

DELETE_ACTION = ActionDescriptor(key="d", label="Delete", requires_confirmation=True)
COPY_NAME_ACTION = ActionDescriptor(key="c", label="Copy")
COPY_LOGS_COMMAND_ACTION = ActionDescriptor(key="l", label="Copy logs command")

Clipboard = Callable[[str], None]


class ResourceActions:
    """Base executor: delete (confirmed) and copy-name for one resource kind.

    Subclasses set ``resource_type``, ``api_group`` and ``delete_method``
    (the name of the namespaced delete call on that API group).
    """

    resource_type: ClassVar[str] = "Resource"
    api_group: ClassVar[str] = "core_v1"
    delete_method: ClassVar[str] = ""
    actions: ClassVar[tuple[ActionDescriptor, ...]] = (DELETE_ACTION, COPY_NAME_ACTION)

    def __init__(self, client: KubernetesClient, clipboard: Clipboard | None = None) -> None:
        """Initialize the executor.

        Args:
            client: Kubernetes API client.
            clipboard: Callable that puts text on the clipboard.
        """
        self._client = client
        self._clipboard = clipboard
        self._log = logger.bind(entity=self.resource_type)

    def _handlers(self) -> dict[str, Callable[[str, str | None], None]]:
        return {
            DELETE_ACTION.key: self.delete,
            COPY_NAME_ACTION.key: self.copy_name,
        }

    def execute_action(self, key: KeyEvent, name: str, namespace: str | None) -> None:
        """Perform the action bound to ``key`` on resource ``name``.

        Unknown keys are logged and ignored.

        Raises:
            KubernetesError: If the API call behind the action fails.
        """
        handler = self._handlers().get(key.normalized)
        if handler is None:
            self._log.warning("unknown_action", key=key.name, name=name)
            return
        handler(name, namespace)

    def delete(self, name: str, namespace: str | None) -> None:
        ns = namespace or self._client.default_namespace
        delete_fn = getattr(getattr(self._client, self.api_group), self.delete_method)
        self._log.info("deleting_resource", name=name, namespace=ns)
        try:
            delete_fn(name=name, namespace=ns, _request_timeout=self._client.timeout)
        except Exception as e:
            raise KubernetesClient.translate_api_exception(
                e,
                resource_type=self.resource_type,
                resource_name=name,
                namespace=ns,
            ) from e
        self._log.info("deleted_resource", name=name, namespace=ns)

    def copy_name(self, name: str, namespace: str | None) -> None:
        self._copy(name)

    def _copy(self, text: str) -> None:
        if self._clipboard is None:
            self._log.warning("clipboard_unavailable")
            return
        self._clipboard(text)
        self._log.debug("copied_to_clipboard", text=text)


class PodActions(ResourceActions):
    """Pods additionally offer copying a ``kubectl logs`` command."""

    resource_type = "Pod"
    delete_method = "delete_namespaced_pod"
    actions = (DELETE_ACTION, COPY_NAME_ACTION, COPY_LOGS_COMMAND_ACTION)

    def _handlers(self) -> dict[str, Callable[[str, str | None], None]]:
        return {**super()._handlers(), COPY_LOGS_COMMAND_ACTION.key: self.copy_logs_command}

    def copy_logs_command(self, name: str, namespace: str | None) -> None:
        ns = namespace or self._client.default_namespace
        self._copy(f"kubectl logs -n {ns} {name}")


class ReplicationControllerActions(ResourceActions):
    resource_type = "ReplicationController"
    delete_method = "delete_namespaced_replication_controller"


class DeploymentActions(ResourceActions):
    resource_type = "Deployment"
    api_group = "apps_v1"
    delete_method = "delete_namespaced_deployment"


class ServiceActions(ResourceActions):
    resource_type = "Service"
    delete_method = "delete_namespaced_service"
