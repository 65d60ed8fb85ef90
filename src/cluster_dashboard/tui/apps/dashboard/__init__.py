"""Cluster dashboard TUI application.

Usage:
    from cluster_dashboard.tui.apps.dashboard import DashboardApp

    app = DashboardApp(client=client, config=config)
    app.run()
"""

from cluster_dashboard.tui.apps.dashboard.app import DashboardApp

__all__ = ["DashboardApp"]
