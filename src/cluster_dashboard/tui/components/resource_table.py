"""Resource table with a shared action bar.

Rows are rendered in a DataTable; one ``ActionBar`` bound to the table's
action set sits underneath. When an action fires the table resolves the row
under the cursor and reports a ``PerformedAction`` (key, name, namespace).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

import structlog
from textual import on
from textual.app import ComposeResult
from textual.widgets import DataTable

from cluster_dashboard.tui.base import BaseWidget
from cluster_dashboard.tui.components.action_bar import ActionBar
from cluster_dashboard.tui.input import KeypressStream
from cluster_dashboard.tui.keys import ActionDescriptor, KeyEvent

logger = structlog.get_logger()

# (label, width) per column
Columns = Sequence[tuple[str, int]]

DEFAULT_COLUMNS: Columns = (("Name", 40),)


@dataclass(frozen=True)
class ResourceRow:
    """One display-ready resource.

    Attributes:
        name: Resource name, reported when an action fires on the row.
        namespace: Namespace of the resource (None for cluster-scoped kinds).
        cells: Column values in display order; defaults to just the name.
    """

    name: str
    namespace: str | None = None
    cells: tuple[str, ...] = ()

    @property
    def display_cells(self) -> tuple[str, ...]:
        return self.cells or (self.name,)


@dataclass(frozen=True)
class PerformedAction:
    """An action fired against a row."""

    key: KeyEvent
    name: str
    namespace: str | None


class ResourceTable(BaseWidget):
    """DataTable of resource rows plus the action bar acting on them."""

    DEFAULT_CSS = """
    ResourceTable {
        height: 1fr;
    }

    ResourceTable DataTable {
        height: 1fr;
    }
    """

    def __init__(
        self,
        rows: Sequence[ResourceRow],
        namespace: str | None,
        actions: Sequence[ActionDescriptor],
        on_action_performed: Callable[[PerformedAction], None],
        stream: KeypressStream,
        set_raw_mode: Callable[[bool], None],
        columns: Columns = DEFAULT_COLUMNS,
        **kwargs: Any,
    ) -> None:
        """Initialize the table.

        Args:
            rows: Initial rows.
            namespace: Namespace reported with fired actions. When None the
                row's own namespace is reported.
            actions: Actions offered for the selected row.
            on_action_performed: Receives a PerformedAction for each fired action.
            stream: Keypress stream handed to the action bar.
            set_raw_mode: Raw-mode setter handed to the action bar.
            columns: Column (label, width) definitions.
            **kwargs: Additional widget arguments.
        """
        super().__init__(**kwargs)
        self._rows: tuple[ResourceRow, ...] = tuple(rows)
        self._namespace = namespace
        self._actions = tuple(actions)
        self._on_action_performed = on_action_performed
        self._stream = stream
        self._set_raw_mode = set_raw_mode
        self._columns = tuple(columns)
        self._cursor_row = 0

    @property
    def rows(self) -> tuple[ResourceRow, ...]:
        return self._rows

    @property
    def namespace(self) -> str | None:
        return self._namespace

    @property
    def actions(self) -> tuple[ActionDescriptor, ...]:
        return self._actions

    @property
    def selected_row(self) -> ResourceRow | None:
        """Row under the cursor, or None when the table is empty."""
        if 0 <= self._cursor_row < len(self._rows):
            return self._rows[self._cursor_row]
        return None

    def compose(self) -> ComposeResult:
        yield DataTable(id="resource-table")
        yield ActionBar(
            self._actions,
            on_action_performed=self.handle_action_fired,
            stream=self._stream,
            set_raw_mode=self._set_raw_mode,
            id="action-bar",
        )

    def on_mount(self) -> None:
        table = self.query_one("#resource-table", DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        self._populate_table()

    def update_rows(self, rows: Sequence[ResourceRow]) -> None:
        """Replace the row set and re-render, keeping the cursor position if possible."""
        self._rows = tuple(rows)
        if self.is_mounted:
            self._populate_table()

    def _populate_table(self) -> None:
        table = self.query_one("#resource-table", DataTable)
        table.clear(columns=True)
        for label, width in self._columns:
            table.add_column(label, width=width)
        for row in self._rows:
            table.add_row(*self.fit_cells(row))

        if self._rows:
            self._cursor_row = min(self._cursor_row, len(self._rows) - 1)
            table.move_cursor(row=self._cursor_row)
        else:
            self._cursor_row = 0

    def fit_cells(self, row: ResourceRow) -> tuple[str, ...]:
        """Pad or truncate ``row``'s cells to the number of columns."""
        width = len(self._columns)
        cells = row.display_cells[:width]
        return cells + ("",) * (width - len(cells))

    @on(DataTable.RowHighlighted)
    def handle_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        self._cursor_row = event.cursor_row

    def handle_action_fired(self, key_event: KeyEvent) -> None:
        """Report ``key_event`` against the selected row."""
        row = self.selected_row
        if row is None:
            logger.warning("action_without_selection", key=key_event.name)
            self.notify_user("No resource selected", severity="warning")
            return

        performed = PerformedAction(
            key=key_event,
            name=row.name,
            namespace=self._namespace if self._namespace is not None else row.namespace,
        )
        logger.info(
            "action_performed",
            key=key_event.name,
            name=performed.name,
            namespace=performed.namespace,
        )
        self._on_action_performed(performed)
