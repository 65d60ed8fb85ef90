"""Main CLI entry point using Typer."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from cluster_dashboard import __version__
from cluster_dashboard.core.config import DashboardConfig, load_config
from cluster_dashboard.integrations.kubernetes.client import KubernetesClient
from cluster_dashboard.integrations.kubernetes.exceptions import KubernetesError
from cluster_dashboard.logging.config import configure_logging, get_logger

app = typer.Typer(
    name="kdash",
    help="Interactive terminal dashboard for Kubernetes resources.",
    add_completion=True,
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"kdash version {__version__}")
        raise typer.Exit()


def _fail(message: str) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {message}")
    return typer.Exit(code=1)


def _apply_overrides(
    config: DashboardConfig,
    namespace: str | None,
    context: str | None,
    resource: str | None,
    refresh_interval: float | None,
) -> DashboardConfig:
    updates: dict[str, object] = {}
    if namespace:
        updates["namespace"] = namespace
    if resource:
        updates["resource"] = resource.strip().lower()
    if refresh_interval is not None:
        if refresh_interval < 0:
            raise _fail("--refresh-interval must be non-negative")
        updates["refresh_interval"] = refresh_interval
    if context:
        updates["kubernetes"] = config.kubernetes.model_copy(update={"active_cluster": context})
    return config.model_copy(update=updates)


def _connect(config: DashboardConfig, verify: bool = True) -> KubernetesClient:
    try:
        client = KubernetesClient(config.kubernetes)
    except KubernetesError as e:
        logger.error("connection_failed", error=str(e))
        raise _fail(str(e)) from e

    if verify and not client.check_connection():
        client.close()
        logger.error("cluster_unreachable", context=config.kubernetes.get_active_context())
        raise _fail("Cannot reach the Kubernetes API server for the active context")
    return client


def run_dashboard(config: DashboardConfig) -> None:
    """Launch the dashboard TUI for ``config``."""
    from cluster_dashboard.tui.apps.dashboard import DashboardApp
    from cluster_dashboard.tui.apps.dashboard.kinds import ResourceKind

    try:
        kind = ResourceKind.from_name(config.resource)
    except ValueError as e:
        raise _fail(str(e)) from e

    with _connect(config) as client:
        logger.info("dashboard_starting", kind=kind.value, namespace=config.resolve_namespace())
        DashboardApp(client=client, config=config, kind=kind).run()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output."),
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode."),
    namespace: str | None = typer.Option(
        None, "--namespace", "-n", help="Namespace to browse."
    ),
    context: str | None = typer.Option(
        None, "--context", help="Kubeconfig context or configured cluster name."
    ),
    resource: str | None = typer.Option(
        None, "--resource", "-r", help="Resource kind shown at startup (pods, rc, deploy, svc)."
    ),
    refresh_interval: float | None = typer.Option(
        None, "--refresh-interval", help="Seconds between automatic refreshes, 0 disables."
    ),
    config_path: Path | None = typer.Option(
        None, "--config", help="Path to the YAML config file."
    ),
) -> None:
    """Browse Kubernetes resources and act on them from the keyboard."""
    configure_logging(verbose=verbose, debug=debug, console=ctx.invoked_subcommand is not None)

    try:
        config = load_config(config_path)
    except ValueError as e:
        raise _fail(str(e)) from e

    config = _apply_overrides(config, namespace, context, resource, refresh_interval)
    ctx.obj = config

    if ctx.invoked_subcommand is None:
        run_dashboard(config)


@app.command()
def contexts(ctx: typer.Context) -> None:
    """List kubeconfig contexts."""
    config: DashboardConfig = ctx.obj
    with _connect(config, verify=False) as client:
        entries = client.list_contexts()

    if not entries:
        console.print("[yellow]No kubeconfig contexts found.[/yellow]")
        return

    table = Table(title="Kubernetes Contexts")
    table.add_column("Active", justify="center")
    table.add_column("Name", style="cyan")
    table.add_column("Cluster")
    table.add_column("Namespace")
    for entry in entries:
        table.add_row(
            "*" if entry["active"] else "",
            entry["name"],
            entry["cluster"],
            entry["namespace"],
        )
    console.print(table)


if __name__ == "__main__":
    app()
