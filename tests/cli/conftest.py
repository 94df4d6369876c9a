"""
Pytest fixtures for CLI tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from sentire.api.client import PaginationInfo
from sentire.core.config import reset_settings


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point settings at an empty config directory with no token in the environment."""
    config_dir = tmp_path / "config"
    monkeypatch.delenv("SENTRY_API_TOKEN", raising=False)
    monkeypatch.delenv("SENTIRE_DEBUG", raising=False)
    monkeypatch.setenv("SENTIRE_CONFIG_DIR", str(config_dir))
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield config_dir
    reset_settings()


@pytest.fixture
def mock_client(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Client returned to every command in place of a real SentryClient."""
    client = MagicMock()
    client.fetch.return_value = ([], PaginationInfo())
    for module in ("events", "projects", "org", "inspect"):
        monkeypatch.setattr(f"sentire.cli.commands.{module}.get_client", lambda: client)
    return client
