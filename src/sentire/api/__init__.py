"""
Sentry API client module.

Provides the HTTP transport and the cursor pagination driver.
"""

from __future__ import annotations

from sentire.api.client import (
    PaginationInfo,
    RateLimitState,
    SentryClient,
    SentryResponse,
    parse_link_header,
)
from sentire.api.pagination import fetch_pages, iter_pages

__all__ = [
    "SentryClient",
    "SentryResponse",
    "PaginationInfo",
    "RateLimitState",
    "parse_link_header",
    "fetch_pages",
    "iter_pages",
]
