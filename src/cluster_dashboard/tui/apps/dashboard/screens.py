"""Resource screen for the dashboard.

Hosts one ``ResourceContainer`` for the current kind and forwards every key
event into the application's keypress stream, where the action bar's
listeners pick up their keys.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import structlog
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import DataTable, Footer, Header

from cluster_dashboard.tui.apps.dashboard.container import ResourceContainer, ResourcePipeline
from cluster_dashboard.tui.apps.dashboard.kinds import (
    RESOURCE_KINDS,
    ResourceKind,
    cycle_kind,
)
from cluster_dashboard.tui.base import BaseScreen
from cluster_dashboard.tui.input import KEYPRESS_EVENT, KeypressStream
from cluster_dashboard.tui.keys import KeyEvent

if TYPE_CHECKING:
    from cluster_dashboard.integrations.kubernetes.client import KubernetesClient

logger = structlog.get_logger()


class ResourceScreen(BaseScreen[None]):
    """Browse one resource kind at a time and act on the selected row."""

    BINDINGS = [
        Binding("tab", "next_kind", "Next kind", priority=True),
        Binding("shift+tab", "previous_kind", "Prev kind", priority=True),
        ("j", "cursor_down", "Down"),
        ("k", "cursor_up", "Up"),
        ("r", "refresh", "Refresh"),
    ]

    def __init__(
        self,
        client: KubernetesClient,
        kind: ResourceKind,
        namespace: str,
        stream: KeypressStream,
        set_raw_mode: Callable[[bool], None],
        refresh_interval: float = 0.0,
        clipboard: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the screen.

        Args:
            client: Kubernetes API client.
            kind: Resource kind shown first.
            namespace: Namespace to browse.
            stream: Application keypress stream.
            set_raw_mode: Raw-mode setter handed to action bars.
            refresh_interval: Seconds between automatic refreshes.
            clipboard: Callable used by copy actions.
        """
        super().__init__()
        self._client = client
        self._kind = kind
        self._namespace = namespace
        self._stream = stream
        self._set_raw_mode = set_raw_mode
        self._refresh_interval = refresh_interval
        self._clipboard = clipboard

    @property
    def kind(self) -> ResourceKind:
        return self._kind

    def build_container(self) -> ResourceContainer:
        """Build the container for the current kind."""
        spec = RESOURCE_KINDS[self._kind]
        pipeline = ResourcePipeline(
            api=getattr(self._client, spec.api_group),
            refresh_fn=spec.refresh_fn,
            transformer=spec.transformer,
            namespace=self._namespace,
            is_namespaced=spec.is_namespaced,
            resource_type=spec.title,
            request_timeout=self._client.timeout,
        )
        clipboard = self.copy_from_worker if self._clipboard is not None else None
        return ResourceContainer(
            pipeline=pipeline,
            executor=spec.executor_cls(self._client, clipboard=clipboard),
            stream=self._stream,
            set_raw_mode=self._set_raw_mode,
            columns=spec.columns,
            refresh_interval=self._refresh_interval,
        )

    def copy_from_worker(self, text: str) -> None:
        """Clipboard callable for executors, which run in worker threads."""
        if self._clipboard is not None:
            self.app.call_from_thread(self._clipboard, text)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Container(self.build_container(), id="container-host")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = f"{RESOURCE_KINDS[self._kind].title} / {self._namespace}"

    def on_key(self, event: events.Key) -> None:
        self._stream.emit(KEYPRESS_EVENT, event.character, KeyEvent.from_textual(event))

    async def switch_kind(self, kind: ResourceKind) -> None:
        """Replace the container with one for ``kind``.

        Removing the old container unmounts its action bar, which
        deregisters that bar's listeners before the new ones register.
        """
        host = self.query_one("#container-host", Container)
        await host.remove_children()
        self._kind = kind
        await host.mount(self.build_container())
        self.sub_title = f"{RESOURCE_KINDS[kind].title} / {self._namespace}"
        logger.debug("switched_kind", kind=kind.value)

    async def action_next_kind(self) -> None:
        await self.switch_kind(cycle_kind(self._kind, 1))

    async def action_previous_kind(self) -> None:
        await self.switch_kind(cycle_kind(self._kind, -1))

    def action_cursor_down(self) -> None:
        self.query_one(DataTable).action_cursor_down()

    def action_cursor_up(self) -> None:
        self.query_one(DataTable).action_cursor_up()

    def action_refresh(self) -> None:
        self.query_one(ResourceContainer).trigger_refresh()
