"""
Configuration management for sentire.

The API token comes from the SENTRY_API_TOKEN environment variable (or a
.env file) and falls back to ~/.config/sentire/config.json. The environment
always wins when both are present.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from sentire.constants import SentryAPIConfig
from sentire.core.exceptions import ConfigFileError, MissingCredentialsError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"


# =============================================================================
# Config File
# =============================================================================


class SentireConfigFile(BaseModel):
    """
    On-disk configuration, a JSON object with a single token field.

    Attributes:
        sentry_api_token: Sentry API bearer token
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")

    sentry_api_token: SecretStr = SecretStr("")


def load_config_file(path: Path) -> SentireConfigFile | None:
    """
    Load the config file if it exists.

    Args:
        path: Path to config.json

    Returns:
        Parsed config, or None if the file does not exist

    Raises:
        ConfigFileError: If the file cannot be read or is not valid JSON
    """
    if not path.exists():
        return None

    try:
        return SentireConfigFile.model_validate_json(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigFileError(str(path), str(e)) from e
    except PydanticValidationError as e:
        raise ConfigFileError(str(path), "invalid JSON") from e


def save_config(token: str, path: Path | None = None) -> Path:
    """
    Write the token to the config file.

    Parent directories are created; the file is readable by the owner only.

    Args:
        token: Sentry API token
        path: Destination config.json (defaults to the configured location)

    Returns:
        The written path
    """
    if path is None:
        path = get_settings().config_file
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps({"sentry_api_token": token}, indent=2) + "\n", encoding="utf-8")
    os.chmod(path, 0o600)
    logger.debug(f"Wrote config file {path}")
    return path


# =============================================================================
# Main Settings
# =============================================================================


class SentireSettings(BaseSettings):
    """
    Main settings for sentire, loaded from environment and .env files.

    Environment variables:
        SENTRY_API_TOKEN
        SENTIRE_BASE_URL, SENTIRE_TIMEOUT
        SENTIRE_DEBUG, SENTIRE_LOG_LEVEL
        SENTIRE_CONFIG_DIR
    """

    model_config = SettingsConfigDict(
        env_prefix="SENTIRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Sentry API
    sentry_api_token: SecretStr = Field(
        default=SecretStr(""), validation_alias=SentryAPIConfig.TOKEN_ENV_VAR
    )
    base_url: str = SentryAPIConfig.BASE_URL
    timeout: Annotated[int, Field(default=SentryAPIConfig.DEFAULT_TIMEOUT, ge=1, le=300)]

    # Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "sentire")

    # Logging
    debug: bool = False
    log_level: Annotated[str, Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")]

    @property
    def config_file(self) -> Path:
        """Path to the token config file."""
        return self.config_dir / CONFIG_FILENAME

    def resolve_token(self) -> str:
        """
        Return the API token, environment first, then the config file.

        Raises:
            MissingCredentialsError: If no token is configured anywhere
            ConfigFileError: If the config file is malformed
        """
        token = self.sentry_api_token.get_secret_value().strip()
        if token:
            return token

        file_config = load_config_file(self.config_file)
        if file_config is not None:
            token = file_config.sentry_api_token.get_secret_value()
            if token:
                logger.debug(f"Using API token from {self.config_file}")
                return token

        raise MissingCredentialsError(SentryAPIConfig.TOKEN_ENV_VAR, str(self.config_file))

    @property
    def has_credentials(self) -> bool:
        """Check if a token is configured."""
        try:
            self.resolve_token()
        except (MissingCredentialsError, ConfigFileError):
            return False
        return True


# =============================================================================
# Singleton Settings Access
# =============================================================================

_settings: SentireSettings | None = None


def get_settings() -> SentireSettings:
    """
    Get the global settings instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _settings
    if _settings is None:
        _settings = SentireSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
