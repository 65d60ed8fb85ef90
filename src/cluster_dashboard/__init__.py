"""Interactive terminal dashboard for browsing and acting on Kubernetes resources."""

__version__ = "0.1.0"
