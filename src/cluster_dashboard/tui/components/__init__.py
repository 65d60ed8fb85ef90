"""Reusable TUI components.

Components:
- ActionBar: Keyboard actions with Y/N confirmation for destructive ones
- ResourceTable: Resource rows with a shared action bar
"""

from cluster_dashboard.tui.components.action_bar import (
    CONFIRMATION_PROMPT,
    ActionBar,
    ConfirmationEngine,
    PendingConfirmation,
    build_available_actions_label,
    render_action_bar,
    transition,
)
from cluster_dashboard.tui.components.resource_table import (
    PerformedAction,
    ResourceRow,
    ResourceTable,
)

__all__ = [
    "CONFIRMATION_PROMPT",
    "ActionBar",
    "ConfirmationEngine",
    "PendingConfirmation",
    "PerformedAction",
    "ResourceRow",
    "ResourceTable",
    "build_available_actions_label",
    "render_action_bar",
    "transition",
]
