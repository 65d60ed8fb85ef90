"""Main Textual application for the cluster dashboard."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.app import App
from textual.binding import Binding

from cluster_dashboard.tui.apps.dashboard.kinds import ResourceKind
from cluster_dashboard.tui.apps.dashboard.screens import ResourceScreen
from cluster_dashboard.tui.input import KeypressStream

if TYPE_CHECKING:
    from cluster_dashboard.core.config import DashboardConfig
    from cluster_dashboard.integrations.kubernetes.client import KubernetesClient


class DashboardApp(App[None]):
    """TUI application for browsing and acting on cluster resources.

    Args:
        client: Kubernetes API client instance.
        config: Dashboard configuration.
        kind: Resource kind shown at startup (defaults to ``config.resource``).
    """

    TITLE = "Cluster Dashboard"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("question_mark", "help", "Help", show=True),
    ]

    def __init__(
        self,
        client: KubernetesClient,
        config: DashboardConfig,
        kind: ResourceKind | None = None,
    ) -> None:
        super().__init__()
        self._client = client
        self._config = config
        self._kind = kind or ResourceKind.from_name(config.resource)
        self.keypress_stream = KeypressStream()

    def get_default_screen(self) -> ResourceScreen:
        return ResourceScreen(
            client=self._client,
            kind=self._kind,
            namespace=self._config.resolve_namespace(),
            stream=self.keypress_stream,
            set_raw_mode=self.keypress_stream.set_raw_mode,
            refresh_interval=self._config.refresh_interval,
            clipboard=self.copy_to_clipboard,
        )

    def action_help(self) -> None:
        """Show keyboard shortcut help."""
        self.notify(
            "j/k: navigate | tab: next kind | r: refresh | "
            "action keys: see bar below table | y/n: confirm | q: quit"
        )
