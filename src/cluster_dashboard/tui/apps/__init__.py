"""TUI applications package.

Available applications:
- dashboard: Browse Kubernetes resources and act on them from the keyboard
"""
