"""Base classes for TUI screens and widgets.

Usage:
    from cluster_dashboard.tui import BaseScreen, BaseWidget

    class MyWidget(BaseWidget):
        DEFAULT_CSS = '''
        MyWidget { height: auto; }
        '''
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from textual.app import ComposeResult
from textual.screen import Screen
from textual.widget import Widget

if TYPE_CHECKING:
    from textual.notifications import SeverityLevel

T = TypeVar("T")


class BaseWidget(Widget):
    """Base class for dashboard widgets."""

    def notify_user(
        self,
        message: str,
        severity: SeverityLevel = "information",
    ) -> None:
        """Show a notification to the user.

        Args:
            message: Notification text.
            severity: One of "information", "warning", "error".
        """
        self.app.notify(message, severity=severity)


class BaseScreen(Screen[T]):
    """Base class for dashboard screens.

    Type Parameters:
        T: The type returned when the screen is dismissed.
    """

    def notify_user(
        self,
        message: str,
        severity: SeverityLevel = "information",
    ) -> None:
        """Show a notification to the user."""
        self.app.notify(message, severity=severity)

    def compose(self) -> ComposeResult:
        """Compose the screen layout. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement compose()")
