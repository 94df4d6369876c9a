"""
Core module for sentire.

Contains configuration management and the exception hierarchy.
"""

from __future__ import annotations

from sentire.core.config import SentireSettings, get_settings, reset_settings, save_config
from sentire.core.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    SentireError,
    TransportError,
    UnsupportedFormatError,
    ValidationError,
)

__all__ = [
    # Settings
    "get_settings",
    "reset_settings",
    "save_config",
    "SentireSettings",
    # Exceptions
    "SentireError",
    "TransportError",
    "APIError",
    "DecodeError",
    "ValidationError",
    "UnsupportedFormatError",
    "ConfigurationError",
]
