"""
Constants, default values, and API endpoints for sentire.

This module provides centralized configuration for:
- Sentry API base URL, timeouts and request headers
- Rate-limit and pagination header names
- Endpoint path templates
- Output truncation budgets
"""

from __future__ import annotations

from typing import Final

from sentire import __version__

# =============================================================================
# Sentry API Configuration
# =============================================================================


class SentryAPIConfig:
    """Sentry REST API configuration constants."""

    BASE_URL: Final[str] = "https://sentry.io/api/0"
    USER_AGENT: Final[str] = f"sentire/{__version__}"
    CONTENT_TYPE: Final[str] = "application/json"

    DEFAULT_TIMEOUT: Final[int] = 30

    TOKEN_ENV_VAR: Final[str] = "SENTRY_API_TOKEN"

    # Rate limiting
    RATE_LIMIT_LIMIT_HEADER: Final[str] = "X-Sentry-Rate-Limit-Limit"
    RATE_LIMIT_REMAINING_HEADER: Final[str] = "X-Sentry-Rate-Limit-Remaining"
    RATE_LIMIT_RESET_HEADER: Final[str] = "X-Sentry-Rate-Limit-Reset"
    RATE_LIMIT_CONCURRENT_LIMIT_HEADER: Final[str] = "X-Sentry-Rate-Limit-ConcurrentLimit"
    RATE_LIMIT_CONCURRENT_REMAINING_HEADER: Final[str] = (
        "X-Sentry-Rate-Limit-ConcurrentRemaining"
    )

    # Pagination
    LINK_HEADER: Final[str] = "Link"
    CURSOR_PARAM: Final[str] = "cursor"


class SentryEndpoints:
    """Sentry API endpoint paths."""

    # =========================================================================
    # Events & Issues
    # =========================================================================
    PROJECT_EVENTS: Final[str] = "/projects/{org}/{project}/events/"
    PROJECT_EVENT: Final[str] = "/projects/{org}/{project}/events/{event_id}/"
    ORG_ISSUES: Final[str] = "/organizations/{org}/issues/"
    ORG_ISSUE: Final[str] = "/organizations/{org}/issues/{issue_id}/"
    ISSUE_EVENTS: Final[str] = "/organizations/{org}/issues/{issue_id}/events/"
    ISSUE_EVENT: Final[str] = "/organizations/{org}/issues/{issue_id}/events/{event_id}/"

    # =========================================================================
    # Projects
    # =========================================================================
    PROJECTS: Final[str] = "/projects/"
    PROJECT: Final[str] = "/projects/{org}/{project}/"

    # =========================================================================
    # Organizations
    # =========================================================================
    ORG_PROJECTS: Final[str] = "/organizations/{org}/projects/"
    ORG_STATS_SUMMARY: Final[str] = "/organizations/{org}/stats-summary/"


# =============================================================================
# Output Configuration
# =============================================================================


class OutputLimits:
    """Truncation budgets and list caps for rendered output."""

    TABLE_EVENT_TITLE: Final[int] = 30
    TABLE_ISSUE_TITLE: Final[int] = 30
    TABLE_PROJECT_NAME: Final[int] = 25

    MARKDOWN_EVENT_TITLE: Final[int] = 20
    MARKDOWN_ISSUE_TITLE: Final[int] = 25
    MARKDOWN_PROJECT_NAME: Final[int] = 20

    TEXT_TITLE: Final[int] = 80

    TEXT_EVENT_ENTRIES: Final[int] = 3
    MARKDOWN_EVENT_ENTRIES: Final[int] = 5
    TEXT_STATS_PROJECTS: Final[int] = 5
    MARKDOWN_STATS_PROJECTS: Final[int] = 10


DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
SHORT_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M"
MONTH_DAY_FORMAT: Final[str] = "%m-%d %H:%M"
DATE_FORMAT: Final[str] = "%Y-%m-%d"
