"""
Pytest configuration and shared fixtures for selfupgrade tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from selfupgrade.logging import SilentLogger, set_global_logger
from selfupgrade.releases import Release
from selfupgrade.upgrade import get_default_coordinator


@pytest.fixture(autouse=True)
def silent_global_logger():
    """Reset the global logger after every test."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def default_coordinator():
    """
    Provide the process-wide coordinator and restore it afterwards.

    Collaborators are put back and the shared slot is freed, so a test that
    completes an upgrade does not leak a held slot into other tests.
    """
    coordinator = get_default_coordinator()
    saved = (
        coordinator.perform_upgrade,
        coordinator.perform_upgrade_from_url,
        coordinator.executable_path,
    )
    yield coordinator
    (
        coordinator.perform_upgrade,
        coordinator.perform_upgrade_from_url,
        coordinator.executable_path,
    ) = saved
    if coordinator.slot.held:
        coordinator.slot.release()


@pytest.fixture
def fake_executable(tmp_path: Path) -> Path:
    """Provide a file standing in for the running binary."""
    path = tmp_path / "app"
    path.write_bytes(b"\x7fELF")
    return path


@pytest.fixture
def sample_release_data() -> dict[str, Any]:
    """
    Provide a release object as returned by the GitHub releases API.

    Includes fields selfupgrade ignores, like the real payload.
    """
    return {
        "tag_name": "v1.4.0",
        "name": "v1.4.0",
        "prerelease": False,
        "draft": False,
        "assets": [
            {
                "url": "https://example.com/app-v1.4.0-linux-amd64.tar.gz",
                "name": "app-v1.4.0-linux-amd64.tar.gz",
                "size": 1024,
            },
            {
                "url": "https://example.com/app-v1.4.0-windows-amd64.zip",
                "name": "app-v1.4.0-windows-amd64.zip",
                "size": 2048,
            },
        ],
    }


@pytest.fixture
def sample_release(sample_release_data: dict[str, Any]) -> Release:
    return Release.from_dict(sample_release_data)


@pytest.fixture
def create_yaml_file(tmp_path: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("app.yaml", {"upgrade": {...}})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
