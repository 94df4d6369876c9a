"""
Exception hierarchy for sentire.

All exceptions inherit from SentireError for unified error handling.
Each failing stage (network, HTTP status, decoding, validation, output
format, configuration) has its own branch so callers can tell them apart.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any


class SentireError(Exception):
    """
    Base exception for all sentire errors.

    Attributes:
        message: Human-readable error description
        context: Optional dictionary with additional error context
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SentireError):
    """Error in configuration loading or validation."""

    pass


class ConfigFileError(ConfigurationError):
    """Configuration file exists but could not be read or parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Failed to read config file {path}: {reason}",
            context={"path": path},
        )
        self.path = path
        self.reason = reason


class MissingCredentialsError(ConfigurationError):
    """No API token in the environment or the config file."""

    def __init__(self, env_var: str, config_path: str):
        super().__init__(
            f"{env_var} environment variable is required (or configure {config_path})"
        )
        self.env_var = env_var
        self.config_path = config_path


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(SentireError):
    """
    The request never produced an HTTP response.

    Attributes:
        cause: The underlying requests exception
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class APIConnectionError(TransportError):
    """Failed to connect to the API endpoint."""

    pass


class APITimeoutError(TransportError):
    """API request timed out."""

    pass


# =============================================================================
# API Errors
# =============================================================================


class APIError(SentireError):
    """
    The API answered with a status code >= 400.

    The body is kept verbatim; it is usually JSON but is never re-parsed.

    Attributes:
        status_code: HTTP status code
        body: Raw response body text
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"API request failed with status {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class APIAuthenticationError(APIError):
    """Token rejected (401) or lacking scope (403)."""

    pass


class APINotFoundError(APIError):
    """Requested resource does not exist (404)."""

    pass


class APIRateLimitError(APIError):
    """Rate limit exceeded (429)."""

    def __init__(self, status_code: int, body: str, reset: datetime | None = None):
        super().__init__(status_code, body)
        self.reset = reset


# =============================================================================
# Data Errors
# =============================================================================


class DecodeError(SentireError):
    """Response body did not parse as the expected JSON shape."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class ValidationError(SentireError):
    """
    A required option was missing before any request was sent.

    Attributes:
        field: Option name
        reason: Why validation failed
    """

    def __init__(self, field: str, reason: str):
        super().__init__(f"{field} parameter is {reason}", context={"field": field})
        self.field = field
        self.reason = reason


# =============================================================================
# Output Errors
# =============================================================================


class UnsupportedFormatError(SentireError):
    """Requested output format is not one of the known formats."""

    def __init__(self, format_name: str):
        super().__init__(f"unsupported format: {format_name}")
        self.format_name = format_name


# =============================================================================
# Input Errors
# =============================================================================


class InvalidURLError(SentireError):
    """A Sentry web URL could not be parsed into organization and issue."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to parse Sentry URL: {reason}", context={"url": url})
        self.url = url
        self.reason = reason
