"""
Client utilities for CLI commands.

Provides authenticated API client access.
"""

from __future__ import annotations

from sentire.api.client import SentryClient
from sentire.core.config import get_settings


def get_client() -> SentryClient:
    """Get authenticated Sentry API client.

    Resolves the token from the environment or the config file.

    Returns:
        Configured SentryClient instance

    Raises:
        MissingCredentialsError: If no token is configured
        ConfigFileError: If the config file is malformed
    """
    return SentryClient.from_settings(get_settings())
