"""Shared pytest fixtures for cluster_dashboard tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import typer
from typer.testing import CliRunner

from cluster_dashboard.cli.main import app
from cluster_dashboard.tui.input import KeypressStream


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary dashboard config file."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        """
namespace: staging
resource: deploy
refresh_interval: 2
kubernetes:
  clusters:
    dev:
      context: dev-context
      namespace: dev
  active_cluster: dev
"""
    )
    return config_path


@pytest.fixture(autouse=True)
def reset_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset environment variables for each test."""
    # Clear any KDASH_ prefixed environment variables
    for key in list(os.environ.keys()):
        if key.startswith("KDASH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path: Path) -> Generator[Path]:
    """Keep file logs written by configure_logging inside the test's tmp dir."""
    log_dir = tmp_path / "logs"
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    with (
        patch("cluster_dashboard.logging.config.LOG_DIR", log_dir),
        patch("cluster_dashboard.logging.config.LOG_FILE", log_dir / "kdash.log"),
    ):
        yield log_dir
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers


@pytest.fixture
def keypress_stream() -> KeypressStream:
    """A fresh keypress stream."""
    return KeypressStream()


@pytest.fixture
def mock_k8s_client() -> MagicMock:
    """Mock KubernetesClient with core_v1/apps_v1 sub-mocks."""
    client = MagicMock()
    client.default_namespace = "default"
    client.timeout = 30
    return client


@pytest.fixture
def cli_app() -> typer.Typer:
    """Return the CLI app for testing."""
    return app
