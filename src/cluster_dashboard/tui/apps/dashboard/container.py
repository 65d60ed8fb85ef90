"""Resource container: fetch, transform and display one resource collection.

``ResourcePipeline`` calls a named listing operation on an API group,
transforms the raw response into rows and keeps the last good row set.
``ResourceContainer`` is the widget that drives the pipeline (on mount, on
demand and on a timer), feeds a ``ResourceTable`` and hands fired actions
to the kind's executor.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import structlog
from rich.markup import escape
from textual.app import ComposeResult
from textual.message import Message
from textual.timer import Timer
from textual.widgets import Label

from cluster_dashboard.tui.base import BaseWidget
from cluster_dashboard.tui.components.resource_table import (
    DEFAULT_COLUMNS,
    Columns,
    PerformedAction,
    ResourceRow,
    ResourceTable,
)
from cluster_dashboard.tui.input import KeypressStream
from cluster_dashboard.tui.keys import ActionDescriptor, KeyEvent, find_action
from cluster_dashboard.tui.theme import Styles

logger = structlog.get_logger()

Transformer = Callable[[Any], Sequence[ResourceRow]]


class ActionExecutor(Protocol):
    """Performs the side effect behind a fired action."""

    actions: tuple[ActionDescriptor, ...]

    def execute_action(self, key: KeyEvent, name: str, namespace: str | None) -> None: ...


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of one refresh: the rows to show and the error, if any.

    On failure ``rows`` holds the previous row set.
    """

    rows: tuple[ResourceRow, ...]
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class ResourcePipeline:
    """Fetches and transforms one resource collection.

    Args:
        api: API group object holding the listing operation.
        refresh_fn: Name of the listing operation on ``api``.
        transformer: Turns the raw response into rows.
        namespace: Namespace passed to the listing operation.
        is_namespaced: Call ``refresh_fn`` with ``namespace=``; cluster-scoped
            listings are called without arguments.
        resource_type: Label used in logs and status text.
        request_timeout: Seconds passed to the listing call as
            ``_request_timeout``; None leaves the client default.
    """

    def __init__(
        self,
        api: Any,
        refresh_fn: str,
        transformer: Transformer,
        namespace: str | None = None,
        *,
        is_namespaced: bool = True,
        resource_type: str = "resources",
        request_timeout: float | None = None,
    ) -> None:
        self._api = api
        self._refresh_fn = refresh_fn
        self._transformer = transformer
        self._namespace = namespace if is_namespaced else None
        self._is_namespaced = is_namespaced
        self.resource_type = resource_type
        self._request_timeout = request_timeout
        self._rows: tuple[ResourceRow, ...] = ()
        self._last_error: str | None = None
        self._log = logger.bind(resource_type=resource_type, refresh_fn=refresh_fn)

    @property
    def namespace(self) -> str | None:
        return self._namespace

    @property
    def is_namespaced(self) -> bool:
        return self._is_namespaced

    @property
    def rows(self) -> tuple[ResourceRow, ...]:
        return self._rows

    @property
    def last_error(self) -> str | None:
        return self._last_error

    async def _call_refresh_fn(self) -> Any:
        fn = getattr(self._api, self._refresh_fn)
        kwargs: dict[str, Any] = {"namespace": self._namespace} if self._is_namespaced else {}
        if self._request_timeout is not None:
            kwargs["_request_timeout"] = self._request_timeout
        if inspect.iscoroutinefunction(fn):
            return await fn(**kwargs)
        return await asyncio.to_thread(fn, **kwargs)

    async def refresh(self) -> RefreshResult:
        """Fetch and transform the collection.

        Never raises for API or transformer failures: the error is logged,
        the previous rows are kept and returned with the error message.
        """
        self._log.debug("refresh_started", namespace=self._namespace)
        try:
            raw = await self._call_refresh_fn()
            rows = tuple(self._transformer(raw))
        except Exception as e:
            self._last_error = str(e) or type(e).__name__
            self._log.error(
                "refresh_failed",
                namespace=self._namespace,
                error=self._last_error,
                error_type=type(e).__name__,
            )
            return RefreshResult(rows=self._rows, error=self._last_error)

        self._rows = rows
        self._last_error = None
        self._log.debug("refresh_completed", namespace=self._namespace, count=len(rows))
        return RefreshResult(rows=rows)


class ResourceContainer(BaseWidget):
    """Status line plus resource table for one pipeline."""

    DEFAULT_CSS = """
    ResourceContainer {
        height: 1fr;
    }

    ResourceContainer #status-bar {
        height: 1;
        padding: 0 1;
    }
    """

    class RefreshCompleted(Message):
        """Emitted after every refresh, successful or not."""

        def __init__(self, result: RefreshResult) -> None:
            """Initialize with the refresh outcome.

            Args:
                result: Rows shown and error message, if any.
            """
            self.result = result
            super().__init__()

    def __init__(
        self,
        pipeline: ResourcePipeline,
        executor: ActionExecutor,
        stream: KeypressStream,
        set_raw_mode: Callable[[bool], None],
        columns: Columns = DEFAULT_COLUMNS,
        refresh_interval: float = 0.0,
        **kwargs: Any,
    ) -> None:
        """Initialize the container.

        Args:
            pipeline: Pipeline supplying rows.
            executor: Performs fired actions; its ``actions`` are offered.
            stream: Keypress stream for the action bar.
            set_raw_mode: Raw-mode setter for the action bar.
            columns: Table column definitions.
            refresh_interval: Seconds between automatic refreshes, 0 disables.
            **kwargs: Additional widget arguments.
        """
        super().__init__(**kwargs)
        self._pipeline = pipeline
        self._executor = executor
        self._stream = stream
        self._set_raw_mode = set_raw_mode
        self._columns = columns
        self._refresh_interval = refresh_interval
        self._refresh_timer: Timer | None = None
        self._notified_error: str | None = None
        self.status_text = Styles.muted(f"Loading {pipeline.resource_type}...")

    @property
    def pipeline(self) -> ResourcePipeline:
        return self._pipeline

    def compose(self) -> ComposeResult:
        yield Label(self.status_text, id="status-bar")
        yield ResourceTable(
            rows=self._pipeline.rows,
            namespace=self._pipeline.namespace,
            actions=self._executor.actions,
            on_action_performed=self.handle_action_performed,
            stream=self._stream,
            set_raw_mode=self._set_raw_mode,
            columns=self._columns,
            id="resource-table-controller",
        )

    def on_mount(self) -> None:
        self.trigger_refresh()
        if self._refresh_interval > 0:
            self._refresh_timer = self.set_interval(self._refresh_interval, self.scheduled_refresh)

    def on_unmount(self) -> None:
        if self._refresh_timer is not None:
            self._refresh_timer.stop()

    @property
    def refresh_in_flight(self) -> bool:
        """True while a refresh worker of this container has not finished."""
        return any(
            worker.node is self and worker.group == "refresh" and not worker.is_finished
            for worker in self.workers
        )

    def trigger_refresh(self) -> None:
        """Start a refresh, cancelling one still in flight."""
        self.run_worker(self._refresh(), exclusive=True, group="refresh")

    def scheduled_refresh(self) -> None:
        """Timer tick: refresh unless the previous refresh is still running."""
        if self.refresh_in_flight:
            logger.debug("refresh_skipped", resource_type=self._pipeline.resource_type)
            return
        self.trigger_refresh()

    async def _refresh(self) -> None:
        result = await self._pipeline.refresh()
        self.apply_result(result)

    def apply_result(self, result: RefreshResult) -> None:
        """Re-render the table and status line for ``result``.

        A failure while rendering rows is reported like a refresh error.
        """
        try:
            self.query_one(ResourceTable).update_rows(result.rows)
        except Exception as e:
            logger.error(
                "render_failed",
                resource_type=self._pipeline.resource_type,
                error=str(e),
                error_type=type(e).__name__,
            )
            result = RefreshResult(rows=result.rows, error=f"cannot display rows: {e}")

        kind = self._pipeline.resource_type
        if result.ok:
            self._notified_error = None
            scope = self._pipeline.namespace or "cluster"
            self.status_text = Styles.muted(f"{len(result.rows)} {kind} in {scope}")
        else:
            self.status_text = Styles.error(f"Error loading {kind}: {escape(result.error or '')}")
            if result.error != self._notified_error:
                self._notified_error = result.error
                self.notify_user(
                    f"Failed to load {kind}: {escape(result.error or '')}", severity="error"
                )

        self.query_one("#status-bar", Label).update(self.status_text)
        self.post_message(self.RefreshCompleted(result))

    def handle_action_performed(self, performed: PerformedAction) -> None:
        """Run the executor for ``performed`` in a worker, then refresh."""
        self.run_worker(self._perform(performed), group="actions")

    async def _perform(self, performed: PerformedAction) -> None:
        action = find_action(self._executor.actions, performed.key)
        label = action.label if action else performed.key.name
        try:
            await asyncio.to_thread(
                self._executor.execute_action,
                performed.key,
                performed.name,
                performed.namespace,
            )
        except Exception as e:
            logger.error(
                "action_failed",
                key=performed.key.name,
                name=performed.name,
                namespace=performed.namespace,
                error=str(e),
            )
            self.notify_user(f"{label} failed: {escape(str(e))}", severity="error")
        else:
            self.notify_user(f"{label}: {performed.name}")
        self.trigger_refresh()
