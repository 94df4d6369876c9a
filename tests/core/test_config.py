"""
Tests for settings loading and the token config file.
"""

from __future__ import annotations

import json
import stat
from collections.abc import Iterator
from pathlib import Path

import pytest

from sentire.constants import SentryAPIConfig
from sentire.core.config import (
    SentireSettings,
    get_settings,
    load_config_file,
    reset_settings,
    save_config,
)
from sentire.core.exceptions import ConfigFileError, MissingCredentialsError


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test without a token in the environment and outside any .env."""
    monkeypatch.delenv("SENTRY_API_TOKEN", raising=False)
    monkeypatch.delenv("SENTIRE_CONFIG_DIR", raising=False)
    monkeypatch.delenv("SENTIRE_BASE_URL", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "sentire"


def _write_config(config_dir: Path, content: str) -> Path:
    config_dir.mkdir(parents=True, exist_ok=True)
    path = config_dir / "config.json"
    path.write_text(content)
    return path


class TestSettings:
    """Tests for SentireSettings."""

    def test_defaults(self, config_dir: Path) -> None:
        """Defaults point at sentry.io with a 30 second timeout."""
        settings = SentireSettings(config_dir=config_dir)

        assert settings.base_url == SentryAPIConfig.BASE_URL
        assert settings.timeout == 30
        assert settings.config_file == config_dir / "config.json"

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Prefixed environment variables override defaults."""
        monkeypatch.setenv("SENTIRE_BASE_URL", "https://sentry.example.com/api/0")
        monkeypatch.setenv("SENTIRE_TIMEOUT", "5")

        settings = SentireSettings()

        assert settings.base_url == "https://sentry.example.com/api/0"
        assert settings.timeout == 5

    def test_singleton(self) -> None:
        """get_settings caches until reset."""
        first = get_settings()

        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first


class TestTokenResolution:
    """Tests for resolve_token precedence."""

    def test_env_token(self, monkeypatch: pytest.MonkeyPatch, config_dir: Path) -> None:
        """The environment token is used when set."""
        monkeypatch.setenv("SENTRY_API_TOKEN", "env-token")

        assert SentireSettings(config_dir=config_dir).resolve_token() == "env-token"

    def test_env_wins_over_file(self, monkeypatch: pytest.MonkeyPatch, config_dir: Path) -> None:
        """The environment takes precedence over the config file."""
        _write_config(config_dir, '{"sentry_api_token": "file-token"}')
        monkeypatch.setenv("SENTRY_API_TOKEN", "env-token")

        assert SentireSettings(config_dir=config_dir).resolve_token() == "env-token"

    def test_file_fallback(self, config_dir: Path) -> None:
        """The config file is used when the environment has no token."""
        _write_config(config_dir, '{"sentry_api_token": "file-token"}')

        settings = SentireSettings(config_dir=config_dir)

        assert settings.resolve_token() == "file-token"
        assert settings.has_credentials

    def test_missing_everywhere(self, config_dir: Path) -> None:
        """No token anywhere raises MissingCredentialsError."""
        settings = SentireSettings(config_dir=config_dir)

        with pytest.raises(MissingCredentialsError) as exc_info:
            settings.resolve_token()

        assert "SENTRY_API_TOKEN environment variable is required" in str(exc_info.value)
        assert str(config_dir / "config.json") in str(exc_info.value)
        assert not settings.has_credentials

    def test_empty_file_token(self, config_dir: Path) -> None:
        """An empty token in the file counts as missing."""
        _write_config(config_dir, '{"sentry_api_token": ""}')

        with pytest.raises(MissingCredentialsError):
            SentireSettings(config_dir=config_dir).resolve_token()

    def test_malformed_file(self, config_dir: Path) -> None:
        """A config file that is not JSON raises ConfigFileError."""
        path = _write_config(config_dir, "{not json")

        with pytest.raises(ConfigFileError) as exc_info:
            SentireSettings(config_dir=config_dir).resolve_token()

        assert exc_info.value.path == str(path)
        assert exc_info.value.reason == "invalid JSON"


class TestConfigFile:
    """Tests for load_config_file and save_config."""

    def test_load_missing(self, tmp_path: Path) -> None:
        """A missing file loads as None."""
        assert load_config_file(tmp_path / "nope.json") is None

    def test_load_ignores_unknown_keys(self, config_dir: Path) -> None:
        """Unknown keys in the file are ignored."""
        path = _write_config(config_dir, '{"sentry_api_token": "t", "other": 1}')

        config = load_config_file(path)

        assert config is not None
        assert config.sentry_api_token.get_secret_value() == "t"

    def test_save_creates_owner_only_file(self, config_dir: Path) -> None:
        """Saving creates parent directories and a 0600 file."""
        path = save_config("new-token", config_dir / "config.json")

        assert path == config_dir / "config.json"
        assert path.read_text() == '{\n  "sentry_api_token": "new-token"\n}\n'
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_save_default_location(
        self, monkeypatch: pytest.MonkeyPatch, config_dir: Path
    ) -> None:
        """Without a path the configured location is used."""
        monkeypatch.setenv("SENTIRE_CONFIG_DIR", str(config_dir))

        path = save_config("abc")

        assert path == config_dir / "config.json"
        assert json.loads(path.read_text()) == {"sentry_api_token": "abc"}

    def test_saved_token_resolves(self, config_dir: Path) -> None:
        """A saved token is picked up by a fresh settings instance."""
        save_config("round-trip", config_dir / "config.json")

        assert SentireSettings(config_dir=config_dir).resolve_token() == "round-trip"
