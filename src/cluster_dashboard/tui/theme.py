"""Theme constants and Rich markup helpers.

Usage:
    from cluster_dashboard.tui.theme import Colors, Styles

    DEFAULT_CSS = f'''
    .error {{ color: {Colors.ERROR}; }}
    '''

    status = Styles.error("Refresh failed")
"""

from __future__ import annotations


class Colors:
    """Textual CSS variables used across the dashboard."""

    SUCCESS = "$success"
    WARNING = "$warning"
    ERROR = "$error"
    PRIMARY = "$primary"
    TEXT_MUTED = "$text-muted"


class Styles:
    """Wrap text in Rich markup tags."""

    @staticmethod
    def success(text: str) -> str:
        return f"[green]{text}[/green]"

    @staticmethod
    def warning(text: str) -> str:
        return f"[yellow]{text}[/yellow]"

    @staticmethod
    def error(text: str) -> str:
        return f"[red]{text}[/red]"

    @staticmethod
    def muted(text: str) -> str:
        return f"[dim]{text}[/dim]"


# Pod phase -> Rich color used in the Status column
PHASE_COLORS: dict[str, str] = {
    "Running": "green",
    "Succeeded": "green",
    "Pending": "yellow",
    "Failed": "red",
    "Unknown": "dim",
}
