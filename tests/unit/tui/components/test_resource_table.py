"""Unit tests for the resource table controller."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from textual.app import App, ComposeResult
from textual.widgets import DataTable

from cluster_dashboard.tui.components.action_bar import ActionBar
from cluster_dashboard.tui.components.resource_table import (
    PerformedAction,
    ResourceRow,
    ResourceTable,
)
from cluster_dashboard.tui.input import KEYPRESS_EVENT, KeypressStream
from cluster_dashboard.tui.keys import ActionDescriptor, KeyEvent

COPY = ActionDescriptor(key="c", label="Copy")
DELETE = ActionDescriptor(key="d", label="Delete", requires_confirmation=True)


def make_table(
    stream: KeypressStream,
    rows: list[ResourceRow],
    namespace: str | None,
    on_action_performed: MagicMock,
    actions: tuple[ActionDescriptor, ...] = (COPY,),
) -> ResourceTable:
    return ResourceTable(
        rows=rows,
        namespace=namespace,
        actions=actions,
        on_action_performed=on_action_performed,
        stream=stream,
        set_raw_mode=stream.set_raw_mode,
        columns=(("Name", 30), ("Status", 10)),
        id="table",
    )


@pytest.mark.unit
class TestResourceRow:
    """Tests for ResourceRow."""

    def test_display_cells_default_to_name(self) -> None:
        assert ResourceRow(name="web-0").display_cells == ("web-0",)

    def test_display_cells(self) -> None:
        row = ResourceRow(name="web-0", namespace="prod", cells=("web-0", "Running"))
        assert row.display_cells == ("web-0", "Running")


@pytest.mark.unit
class TestActionTargeting:
    """Fired actions are reported against the selected row."""

    def test_executor_receives_key_name_and_namespace(self, keypress_stream: KeypressStream) -> None:
        """A table in namespace some-name firing c on some-pod-name reaches the executor."""
        executor = MagicMock()
        table = make_table(
            keypress_stream,
            rows=[ResourceRow(name="some-pod-name")],
            namespace="some-name",
            on_action_performed=lambda performed: executor.execute_action(
                performed.key, performed.name, performed.namespace
            ),
        )

        table.handle_action_fired(KeyEvent(name="c"))

        executor.execute_action.assert_called_once_with(
            KeyEvent(name="c"), "some-pod-name", "some-name"
        )

    def test_reports_performed_action(self, keypress_stream: KeypressStream) -> None:
        on_action = MagicMock()
        table = make_table(
            keypress_stream,
            rows=[ResourceRow(name="web-0", namespace="other")],
            namespace="prod",
            on_action_performed=on_action,
        )

        table.handle_action_fired(KeyEvent(name="c"))

        on_action.assert_called_once_with(
            PerformedAction(key=KeyEvent(name="c"), name="web-0", namespace="prod")
        )

    def test_falls_back_to_row_namespace(self, keypress_stream: KeypressStream) -> None:
        """Without a table namespace (all namespaces) the row's namespace is reported."""
        on_action = MagicMock()
        table = make_table(
            keypress_stream,
            rows=[ResourceRow(name="web-0", namespace="team-a")],
            namespace=None,
            on_action_performed=on_action,
        )

        table.handle_action_fired(KeyEvent(name="c"))

        assert on_action.call_args.args[0].namespace == "team-a"

    def test_selected_row_empty_table(self, keypress_stream: KeypressStream) -> None:
        table = make_table(keypress_stream, rows=[], namespace="prod", on_action_performed=MagicMock())
        assert table.selected_row is None

    def test_no_rows_drops_action_and_warns(self, keypress_stream: KeypressStream) -> None:
        on_action = MagicMock()
        table = make_table(keypress_stream, rows=[], namespace="prod", on_action_performed=on_action)

        with patch.object(ResourceTable, "notify_user") as mock_notify:
            table.handle_action_fired(KeyEvent(name="c"))

        on_action.assert_not_called()
        mock_notify.assert_called_once_with("No resource selected", severity="warning")

    def test_update_rows_before_mount(self, keypress_stream: KeypressStream) -> None:
        table = make_table(keypress_stream, rows=[], namespace="prod", on_action_performed=MagicMock())

        table.update_rows([ResourceRow(name="web-0")])

        assert table.rows == (ResourceRow(name="web-0"),)
        assert table.selected_row == ResourceRow(name="web-0")


class TableTestApp(App[None]):
    """App hosting one ResourceTable."""

    def __init__(self, table: ResourceTable) -> None:
        super().__init__()
        self._table = table

    def compose(self) -> ComposeResult:
        yield self._table


class TestResourceTableWidget:
    """Widget-level tests with a Textual pilot."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_renders_rows_and_action_bar(self, keypress_stream: KeypressStream) -> None:
        rows = [
            ResourceRow(name="web-0", cells=("web-0", "Running")),
            ResourceRow(name="web-1", cells=("web-1", "Pending")),
        ]
        table = make_table(keypress_stream, rows, "prod", MagicMock(), actions=(DELETE, COPY))
        app = TableTestApp(table)

        async with app.run_test():
            data_table = app.query_one("#resource-table", DataTable)
            assert data_table.row_count == 2
            assert len(data_table.columns) == 2
            bar = app.query_one("#action-bar", ActionBar)
            assert str(bar.render()) == "[D]: Delete [C]: Copy "
            assert keypress_stream.listener_count(KEYPRESS_EVENT) == 2

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_fires_against_highlighted_row(self, keypress_stream: KeypressStream) -> None:
        rows = [ResourceRow(name="web-0"), ResourceRow(name="web-1")]
        on_action = MagicMock()
        table = make_table(keypress_stream, rows, "prod", on_action)
        app = TableTestApp(table)

        async with app.run_test() as pilot:
            app.query_one("#resource-table", DataTable).move_cursor(row=1)
            await pilot.pause()

            keypress_stream.emit(KEYPRESS_EVENT, "c", KeyEvent(name="c", character="c"))

        on_action.assert_called_once_with(
            PerformedAction(key=KeyEvent(name="c", character="c"), name="web-1", namespace="prod")
        )

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_update_rows_keeps_cursor_in_range(self, keypress_stream: KeypressStream) -> None:
        rows = [ResourceRow(name=f"web-{i}") for i in range(3)]
        table = make_table(keypress_stream, rows, "prod", MagicMock())
        app = TableTestApp(table)

        async with app.run_test() as pilot:
            app.query_one("#resource-table", DataTable).move_cursor(row=2)
            await pilot.pause()

            table.update_rows([ResourceRow(name="web-0")])
            await pilot.pause()

            assert app.query_one("#resource-table", DataTable).row_count == 1
            assert table.selected_row == ResourceRow(name="web-0")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_rows_wider_than_columns_are_truncated(
        self, keypress_stream: KeypressStream
    ) -> None:
        rows = [ResourceRow(name="web-0", cells=("web-0", "Running", "1/1", "0", "node-a", "3d"))]
        table = make_table(keypress_stream, rows, "prod", MagicMock())
        app = TableTestApp(table)

        async with app.run_test():
            data_table = app.query_one("#resource-table", DataTable)
            assert data_table.row_count == 1
            assert data_table.get_row_at(0) == ["web-0", "Running"]


@pytest.mark.unit
class TestFitCells:
    """Cells are padded or truncated to the column count."""

    def test_truncates_extra_cells(self, keypress_stream: KeypressStream) -> None:
        table = make_table(keypress_stream, [], "prod", MagicMock())
        row = ResourceRow(name="web-0", cells=("web-0", "Running", "1/1"))
        assert table.fit_cells(row) == ("web-0", "Running")

    def test_pads_missing_cells(self, keypress_stream: KeypressStream) -> None:
        table = make_table(keypress_stream, [], "prod", MagicMock())
        assert table.fit_cells(ResourceRow(name="web-0")) == ("web-0", "")
