"""
Service modules for sentire.

Contains one service per Sentry resource family, built on top of the
API client.
"""

from __future__ import annotations

from sentire.services.base import BaseService, QueryBuilder, QueryOptions
from sentire.services.events import (
    LATEST_EVENT,
    OLDEST_EVENT,
    RECOMMENDED_EVENT,
    EventService,
    ListIssueEventsOptions,
    ListIssuesOptions,
    ListProjectEventsOptions,
    event_service,
)
from sentire.services.organizations import (
    DEFAULT_STATS_FIELD,
    OrganizationService,
    StatsOptions,
    organization_service,
)
from sentire.services.projects import ProjectService, project_service

__all__ = [
    # Base
    "BaseService",
    "QueryBuilder",
    "QueryOptions",
    # Events & issues
    "EventService",
    "ListProjectEventsOptions",
    "ListIssueEventsOptions",
    "ListIssuesOptions",
    "LATEST_EVENT",
    "OLDEST_EVENT",
    "RECOMMENDED_EVENT",
    "event_service",
    # Projects
    "ProjectService",
    "project_service",
    # Organizations
    "OrganizationService",
    "StatsOptions",
    "DEFAULT_STATS_FIELD",
    "organization_service",
]
