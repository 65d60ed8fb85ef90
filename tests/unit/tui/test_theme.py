"""Unit tests for TUI theme module.

Tests the Colors constants, Styles helper methods and pod phase colors.
"""

from __future__ import annotations

import pytest

from cluster_dashboard.tui.theme import PHASE_COLORS, Colors, Styles


class TestColors:
    """Tests for Colors class constants."""

    @pytest.mark.unit
    def test_css_variables(self) -> None:
        """Colors map to Textual CSS variables."""
        assert Colors.SUCCESS == "$success"
        assert Colors.WARNING == "$warning"
        assert Colors.ERROR == "$error"
        assert Colors.PRIMARY == "$primary"
        assert Colors.TEXT_MUTED == "$text-muted"


class TestStyles:
    """Tests for Styles markup helpers."""

    @pytest.mark.unit
    def test_success(self) -> None:
        assert Styles.success("ok") == "[green]ok[/green]"

    @pytest.mark.unit
    def test_warning(self) -> None:
        assert Styles.warning("careful") == "[yellow]careful[/yellow]"

    @pytest.mark.unit
    def test_error(self) -> None:
        assert Styles.error("boom") == "[red]boom[/red]"

    @pytest.mark.unit
    def test_muted(self) -> None:
        assert Styles.muted("quiet") == "[dim]quiet[/dim]"


class TestPhaseColors:
    """Tests for PHASE_COLORS."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("phase", "color"),
        [("Running", "green"), ("Pending", "yellow"), ("Failed", "red")],
    )
    def test_phase_color(self, phase: str, color: str) -> None:
        """Common pod phases have a status color."""
        assert PHASE_COLORS[phase] == color
