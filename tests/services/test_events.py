"""
Tests for EventService.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError as PydanticValidationError

from sentire.api.client import PaginationInfo
from sentire.models.event import Event
from sentire.models.issue import Issue
from sentire.services.events import (
    RECOMMENDED_EVENT,
    EventService,
    ListIssueEventsOptions,
    ListIssuesOptions,
    ListProjectEventsOptions,
)

from .conftest import fetch_call


@pytest.fixture
def svc(mock_client: MagicMock) -> EventService:
    """Create an EventService with a mock client."""
    return EventService(mock_client)


class TestListProjectEvents:
    """Tests for listing project events."""

    def test_endpoint_and_shape(self, svc: EventService, mock_client: MagicMock) -> None:
        """Requests the project events endpoint as a list of events."""
        svc.list_project_events("acme", "backend")

        endpoint, shape, params = fetch_call(mock_client)
        assert endpoint == "/projects/acme/backend/events/"
        assert shape == list[Event]
        assert params == {}

    def test_all_options(self, svc: EventService, mock_client: MagicMock) -> None:
        """Every option maps to its query parameter."""
        options = ListProjectEventsOptions(
            stats_period="24h", start="2024-01-01T00:00:00", end="2024-01-02T00:00:00", full=True, sample=True
        )

        svc.list_project_events("acme", "backend", options, cursor="c2")

        _, _, params = fetch_call(mock_client)
        assert params == {
            "statsPeriod": "24h",
            "start": "2024-01-01T00:00:00",
            "end": "2024-01-02T00:00:00",
            "full": "true",
            "sample": "true",
            "cursor": "c2",
        }

    def test_false_flags_omitted(self, svc: EventService, mock_client: MagicMock) -> None:
        """Disabled flags are not sent."""
        svc.list_project_events("acme", "backend", ListProjectEventsOptions(stats_period="1h"))

        _, _, params = fetch_call(mock_client)
        assert params == {"statsPeriod": "1h"}

    def test_returns_records_and_pagination(self, svc: EventService, mock_client: MagicMock) -> None:
        """Returns what the client decoded along with the page cursors."""
        events = [Event(id="1")]
        pagination = PaginationInfo(next_cursor="c2", has_next=True)
        mock_client.fetch.return_value = (events, pagination)

        result = svc.list_project_events("acme", "backend")

        assert result == (events, pagination)


class TestListIssueEvents:
    """Tests for listing issue events."""

    def test_endpoint(self, svc: EventService, mock_client: MagicMock) -> None:
        """Requests the organization-scoped issue events endpoint."""
        svc.list_issue_events("acme", "123")

        endpoint, shape, _ = fetch_call(mock_client)
        assert endpoint == "/organizations/acme/issues/123/events/"
        assert shape == list[Event]

    def test_repeated_environment(self, svc: EventService, mock_client: MagicMock) -> None:
        """Each environment becomes a repeated key; query is passed through."""
        options = ListIssueEventsOptions(environment=["prod", "staging"], query="user.id:42")

        svc.list_issue_events("acme", "123", options)

        _, _, params = fetch_call(mock_client)
        assert params == {"environment": ["prod", "staging"], "query": "user.id:42"}


class TestListIssues:
    """Tests for listing organization issues."""

    def test_endpoint(self, svc: EventService, mock_client: MagicMock) -> None:
        """Requests the organization issues endpoint as a list of issues."""
        svc.list_issues("acme")

        endpoint, shape, params = fetch_call(mock_client)
        assert endpoint == "/organizations/acme/issues/"
        assert shape == list[Issue]
        assert params == {}

    def test_all_options(self, svc: EventService, mock_client: MagicMock) -> None:
        """Every option maps to its query parameter."""
        options = ListIssuesOptions(
            environment=["prod"],
            project=["1", "2"],
            stats_period="14d",
            query="is:unresolved",
            sort="freq",
            limit=25,
        )

        svc.list_issues("acme", options)

        _, _, params = fetch_call(mock_client)
        assert params == {
            "environment": ["prod"],
            "project": ["1", "2"],
            "statsPeriod": "14d",
            "query": "is:unresolved",
            "sort": "freq",
            "limit": "25",
        }

    def test_zero_limit_omitted(self, svc: EventService, mock_client: MagicMock) -> None:
        """A limit of 0 means no limit parameter."""
        svc.list_issues("acme", ListIssuesOptions(limit=0))

        _, _, params = fetch_call(mock_client)
        assert "limit" not in params

    def test_options_are_frozen(self) -> None:
        """Option sets cannot be mutated after creation."""
        options = ListIssuesOptions(query="is:unresolved")

        with pytest.raises(PydanticValidationError):
            options.query = "is:resolved"  # type: ignore[misc]


class TestSingleLookups:
    """Tests for single event and issue lookups."""

    def test_get_project_event(self, svc: EventService, mock_client: MagicMock) -> None:
        """Fetches one project event."""
        event = Event(id="e1")
        mock_client.fetch.return_value = (event, PaginationInfo())

        result = svc.get_project_event("acme", "backend", "abc")

        endpoint, shape, _ = fetch_call(mock_client)
        assert endpoint == "/projects/acme/backend/events/abc/"
        assert shape is Event
        assert result is event

    def test_get_issue(self, svc: EventService, mock_client: MagicMock) -> None:
        """Fetches one issue."""
        issue = Issue(id="123")
        mock_client.fetch.return_value = (issue, PaginationInfo())

        result = svc.get_issue("acme", "123")

        endpoint, shape, _ = fetch_call(mock_client)
        assert endpoint == "/organizations/acme/issues/123/"
        assert shape is Issue
        assert result is issue

    def test_get_issue_event_recommended(self, svc: EventService, mock_client: MagicMock) -> None:
        """Special event ids are used as path segments."""
        mock_client.fetch.return_value = (Event(id="e1"), PaginationInfo())

        svc.get_issue_event("acme", "123", RECOMMENDED_EVENT, environments=["prod"])

        endpoint, _, params = fetch_call(mock_client)
        assert endpoint == "/organizations/acme/issues/123/events/recommended/"
        assert params == {"environment": ["prod"]}

    def test_get_issue_event_without_environment(self, svc: EventService, mock_client: MagicMock) -> None:
        """No environment means no query parameters."""
        mock_client.fetch.return_value = (Event(id="e1"), PaginationInfo())

        svc.get_issue_event("acme", "123", "latest")

        _, _, params = fetch_call(mock_client)
        assert params == {}
