"""Terminal User Interface for the cluster dashboard.

Usage:
    from cluster_dashboard.tui import BaseScreen, BaseWidget, Colors, Styles
    from cluster_dashboard.tui.components import ActionBar, ResourceTable
    from cluster_dashboard.tui.apps.dashboard import DashboardApp
"""

from cluster_dashboard.tui.base import BaseScreen, BaseWidget
from cluster_dashboard.tui.theme import Colors, Styles

__all__ = [
    "BaseScreen",
    "BaseWidget",
    "Colors",
    "Styles",
]
