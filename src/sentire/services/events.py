"""
Service for Sentry events and issues.

Covers project events, issue events and organization issues.
"""

from __future__ import annotations

from pydantic import Field

from sentire.api.client import PaginationInfo, SentryClient
from sentire.constants import SentryEndpoints
from sentire.models.event import Event
from sentire.models.issue import Issue
from sentire.services.base import BaseService, QueryBuilder, QueryOptions

# Special event ids accepted by the issue event endpoint
LATEST_EVENT = "latest"
OLDEST_EVENT = "oldest"
RECOMMENDED_EVENT = "recommended"


class ListProjectEventsOptions(QueryOptions):
    """Filters for listing a project's events."""

    stats_period: str | None = None
    start: str | None = None
    end: str | None = None
    full: bool = False
    sample: bool = False


class ListIssueEventsOptions(QueryOptions):
    """Filters for listing an issue's events."""

    stats_period: str | None = None
    start: str | None = None
    end: str | None = None
    environment: list[str] = Field(default_factory=list)
    full: bool = False
    sample: bool = False
    query: str | None = None


class ListIssuesOptions(QueryOptions):
    """Filters for listing an organization's issues."""

    environment: list[str] = Field(default_factory=list)
    project: list[str] = Field(default_factory=list)
    stats_period: str | None = None
    start: str | None = None
    end: str | None = None
    query: str | None = None
    sort: str | None = None
    limit: int = 0


class EventService(BaseService):
    """
    Service for querying Sentry events and issues.

    Usage:
        svc = EventService(client)
        events, pagination = svc.list_project_events("acme", "backend")
        issue = svc.get_issue("acme", "1234567")
        event = svc.get_issue_event("acme", "1234567", RECOMMENDED_EVENT)
    """

    def list_project_events(
        self,
        org: str,
        project: str,
        options: ListProjectEventsOptions | None = None,
        cursor: str | None = None,
    ) -> tuple[list[Event], PaginationInfo]:
        """
        List one page of error events for a project.

        Args:
            org: Organization slug
            project: Project slug
            options: Time window and payload filters
            cursor: Page cursor (None for the first page)

        Returns:
            Tuple of (events, pagination info)
        """
        options = options or ListProjectEventsOptions()
        params = (
            QueryBuilder()
            .set("statsPeriod", options.stats_period)
            .set("start", options.start)
            .set("end", options.end)
            .flag("full", options.full)
            .flag("sample", options.sample)
        )
        endpoint = SentryEndpoints.PROJECT_EVENTS.format(org=org, project=project)
        return self._get_page(endpoint, list[Event], params, cursor)

    def list_issue_events(
        self,
        org: str,
        issue_id: str,
        options: ListIssueEventsOptions | None = None,
        cursor: str | None = None,
    ) -> tuple[list[Event], PaginationInfo]:
        """
        List one page of events for an issue.

        Args:
            org: Organization slug
            issue_id: Numeric issue id
            options: Time window, environment and search filters
            cursor: Page cursor (None for the first page)

        Returns:
            Tuple of (events, pagination info)
        """
        options = options or ListIssueEventsOptions()
        params = (
            QueryBuilder()
            .set("start", options.start)
            .set("end", options.end)
            .set("statsPeriod", options.stats_period)
            .add("environment", options.environment)
            .flag("full", options.full)
            .flag("sample", options.sample)
            .set("query", options.query)
        )
        endpoint = SentryEndpoints.ISSUE_EVENTS.format(org=org, issue_id=issue_id)
        return self._get_page(endpoint, list[Event], params, cursor)

    def list_issues(
        self,
        org: str,
        options: ListIssuesOptions | None = None,
        cursor: str | None = None,
    ) -> tuple[list[Issue], PaginationInfo]:
        """
        List one page of issues for an organization.

        Args:
            org: Organization slug
            options: Environment, project, time window and search filters
            cursor: Page cursor (None for the first page)

        Returns:
            Tuple of (issues, pagination info)
        """
        options = options or ListIssuesOptions()
        params = (
            QueryBuilder()
            .add("environment", options.environment)
            .add("project", options.project)
            .set("statsPeriod", options.stats_period)
            .set("start", options.start)
            .set("end", options.end)
            .set("query", options.query)
            .set("sort", options.sort)
        )
        if options.limit > 0:
            params.set("limit", str(options.limit))
        endpoint = SentryEndpoints.ORG_ISSUES.format(org=org)
        return self._get_page(endpoint, list[Issue], params, cursor)

    def get_project_event(self, org: str, project: str, event_id: str) -> Event:
        """Get a single event from a project."""
        endpoint = SentryEndpoints.PROJECT_EVENT.format(org=org, project=project, event_id=event_id)
        return self._get_one(endpoint, Event)

    def get_issue(self, org: str, issue_id: str) -> Issue:
        """Get a single issue."""
        endpoint = SentryEndpoints.ORG_ISSUE.format(org=org, issue_id=issue_id)
        return self._get_one(endpoint, Issue)

    def get_issue_event(
        self,
        org: str,
        issue_id: str,
        event_id: str,
        environments: list[str] | None = None,
    ) -> Event:
        """
        Get a specific event of an issue.

        Args:
            org: Organization slug
            issue_id: Numeric issue id
            event_id: Concrete event id, or one of "latest", "oldest", "recommended"
            environments: Optional environment filter

        Returns:
            The event
        """
        params = QueryBuilder().add("environment", environments or [])
        endpoint = SentryEndpoints.ISSUE_EVENT.format(
            org=org, issue_id=issue_id, event_id=event_id
        )
        return self._get_one(endpoint, Event, params)


def event_service(client: SentryClient) -> EventService:
    """Create an event service."""
    return EventService(client)
