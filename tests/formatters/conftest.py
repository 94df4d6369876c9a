"""
Pytest fixtures for formatter tests.
"""

from __future__ import annotations

from io import StringIO

import pytest

from sentire.models.event import Event
from sentire.models.issue import Issue
from sentire.models.organization import OrganizationStats
from sentire.models.project import Project

EVENT_DATA = {
    "id": "1001",
    "eventID": "9fac2ceed9344f2bbfdd1fdacb0ed9b1",
    "projectID": "42",
    "groupID": "555",
    "title": "TypeError: Cannot read properties of undefined (reading 'map')",
    "message": "Cannot read properties of undefined",
    "platform": "javascript",
    "type": "error",
    "dateCreated": "2024-03-05T14:30:00Z",
    "dateReceived": "2024-03-05T14:30:01Z",
    "size": 2048,
    "environment": "production",
    "culprit": "app/components/List",
    "entries": [
        {"type": "exception", "data": {"values": []}},
        {"type": "breadcrumbs", "data": {"values": []}},
        {"type": "request", "data": {"url": "https://example.com"}},
        {"type": "message", "data": {"formatted": "hi"}},
    ],
    "tags": [{"key": "browser", "value": "Chrome 122"}],
    "extra": {"retries": 3, "nested": {"ok": True}},
}

ISSUE_DATA = {
    "id": "4567890123",
    "shortId": "BACKEND-1A",
    "title": "ZeroDivisionError: division by zero in [billing]",
    "level": "error",
    "status": "unresolved",
    "substatus": "ongoing",
    "priority": "high",
    "platform": "python",
    "project": {"id": "42", "name": "Backend", "slug": "backend"},
    "count": "128",
    "userCount": 17,
    "firstSeen": "2024-03-01T08:00:00Z",
    "lastSeen": "2024-03-05T14:30:00Z",
    "permalink": "https://acme.sentry.io/issues/4567890123/",
    "isPublic": False,
    "isBookmarked": True,
    "isSubscribed": False,
}

PROJECT_DATA = {
    "id": "42",
    "slug": "backend",
    "name": "Backend API Service Production",
    "platform": "python",
    "status": "active",
    "dateCreated": "2023-06-15T10:00:00Z",
    "isPublic": False,
    "isBookmarked": False,
    "organization": {"id": "7", "slug": "acme", "name": "Acme Corp"},
}

STATS_DATA = {
    "start": "2024-03-01T00:00:00Z",
    "end": "2024-03-08T00:00:00Z",
    "projects": [{"id": str(i), "slug": f"project-{i}", "stats": []} for i in range(12)],
    "totals": {"sum": 123456, "times_seen": 789},
}


@pytest.fixture
def buffer() -> StringIO:
    """Output sink."""
    return StringIO()


@pytest.fixture
def event() -> Event:
    return Event.model_validate(EVENT_DATA)


@pytest.fixture
def issue() -> Issue:
    return Issue.model_validate(ISSUE_DATA)


@pytest.fixture
def project() -> Project:
    return Project.model_validate(PROJECT_DATA)


@pytest.fixture
def stats() -> OrganizationStats:
    return OrganizationStats.model_validate(STATS_DATA)
