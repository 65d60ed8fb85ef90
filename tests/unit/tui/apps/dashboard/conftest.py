"""Shared fixtures for dashboard app tests."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from tests.unit.tui.apps.dashboard.factories import list_response, make_pod


@pytest.fixture
def pod_list() -> SimpleNamespace:
    return list_response(make_pod("web-0"), make_pod("web-1", phase="Pending", ready=(False,)))
