"""
Event and issue commands.

Provides commands for listing and fetching Sentry events and issues.
"""

from __future__ import annotations

from typing import Annotated

import typer

from sentire.api.pagination import fetch_pages
from sentire.cli.utils import get_client, get_output, handle_errors, split_csv
from sentire.models.event import Event
from sentire.models.issue import Issue
from sentire.services.events import (
    EventService,
    ListIssueEventsOptions,
    ListIssuesOptions,
    ListProjectEventsOptions,
)

app = typer.Typer(help="Manage Sentry events and issues", no_args_is_help=True)

DEFAULT_ISSUE_QUERY = "is:unresolved issue.priority:[high,medium]"

# Shared option types
OrgArg = Annotated[str, typer.Argument(help="Organization slug")]
PeriodOpt = Annotated[
    str | None, typer.Option("--period", help="Time period (e.g. '24h', '7d')")
]
StartOpt = Annotated[str | None, typer.Option("--start", help="Start time (ISO-8601)")]
EndOpt = Annotated[str | None, typer.Option("--end", help="End time (ISO-8601)")]
FullOpt = Annotated[bool, typer.Option("--full", help="Include full event body")]
SampleOpt = Annotated[bool, typer.Option("--sample", help="Return events in pseudo-random order")]
EnvironmentOpt = Annotated[
    list[str] | None,
    typer.Option("--environment", "-e", help="Filter by environment (repeatable or comma-separated)"),
]
AllOpt = Annotated[bool, typer.Option("--all", help="Fetch all pages")]
MaxPagesOpt = Annotated[
    int | None,
    typer.Option("--max-pages", min=1, help="Stop after this many pages (with --all)"),
]


def _get_service() -> EventService:
    """Get event service."""
    return EventService(get_client())


@app.command("list-project")
def list_project_events(
    ctx: typer.Context,
    org: OrgArg,
    project: Annotated[str, typer.Argument(help="Project slug")],
    period: PeriodOpt = None,
    start: StartOpt = None,
    end: EndOpt = None,
    full: FullOpt = False,
    sample: SampleOpt = False,
    fetch_all: AllOpt = False,
    max_pages: MaxPagesOpt = None,
) -> None:
    """List events for a project."""
    with handle_errors():
        formatter = get_output(ctx)
        svc = _get_service()
        options = ListProjectEventsOptions(
            stats_period=period, start=start, end=end, full=full, sample=sample
        )
        events = fetch_pages(
            lambda cursor: svc.list_project_events(org, project, options, cursor),
            fetch_all=fetch_all,
            max_pages=max_pages,
        )
        formatter.render(events, item_type=Event)


@app.command("list-issue")
def list_issue_events(
    ctx: typer.Context,
    org: OrgArg,
    issue_id: Annotated[str, typer.Argument(help="Issue ID")],
    period: PeriodOpt = None,
    start: StartOpt = None,
    end: EndOpt = None,
    environment: EnvironmentOpt = None,
    full: FullOpt = False,
    sample: SampleOpt = False,
    query: Annotated[str | None, typer.Option("--query", "-q", help="Search query")] = None,
    fetch_all: AllOpt = False,
    max_pages: MaxPagesOpt = None,
) -> None:
    """List events for an issue."""
    with handle_errors():
        formatter = get_output(ctx)
        svc = _get_service()
        options = ListIssueEventsOptions(
            stats_period=period,
            start=start,
            end=end,
            environment=split_csv(environment),
            full=full,
            sample=sample,
            query=query,
        )
        events = fetch_pages(
            lambda cursor: svc.list_issue_events(org, issue_id, options, cursor),
            fetch_all=fetch_all,
            max_pages=max_pages,
        )
        formatter.render(events, item_type=Event)


@app.command("list-issues")
def list_issues(
    ctx: typer.Context,
    org: OrgArg,
    environment: EnvironmentOpt = None,
    project: Annotated[
        list[str] | None,
        typer.Option("--project", "-p", help="Filter by project ID (repeatable or comma-separated)"),
    ] = None,
    period: PeriodOpt = None,
    start: StartOpt = None,
    end: EndOpt = None,
    query: Annotated[
        str, typer.Option("--query", "-q", help="Search/filter query")
    ] = DEFAULT_ISSUE_QUERY,
    sort: Annotated[
        str | None, typer.Option("--sort", help="Sort order (date, freq, inbox, new)")
    ] = None,
    limit: Annotated[int, typer.Option("--limit", "-n", help="Maximum number of results")] = 0,
    fetch_all: AllOpt = False,
    max_pages: MaxPagesOpt = None,
) -> None:
    """List issues for an organization."""
    with handle_errors():
        formatter = get_output(ctx)
        svc = _get_service()
        options = ListIssuesOptions(
            environment=split_csv(environment),
            project=split_csv(project),
            stats_period=period,
            start=start,
            end=end,
            query=query,
            sort=sort,
            limit=limit,
        )
        issues = fetch_pages(
            lambda cursor: svc.list_issues(org, options, cursor),
            fetch_all=fetch_all,
            max_pages=max_pages,
        )
        formatter.render(issues, item_type=Issue)


@app.command("get-event")
def get_event(
    ctx: typer.Context,
    org: OrgArg,
    project: Annotated[str, typer.Argument(help="Project slug")],
    event_id: Annotated[str, typer.Argument(help="Event ID")],
) -> None:
    """Get a specific event."""
    with handle_errors():
        formatter = get_output(ctx)
        event = _get_service().get_project_event(org, project, event_id)
        formatter.render(event)


@app.command("get-issue")
def get_issue(
    ctx: typer.Context,
    org: OrgArg,
    issue_id: Annotated[str, typer.Argument(help="Issue ID")],
) -> None:
    """Get a specific issue."""
    with handle_errors():
        formatter = get_output(ctx)
        issue = _get_service().get_issue(org, issue_id)
        formatter.render(issue)


@app.command("get-issue-event")
def get_issue_event(
    ctx: typer.Context,
    org: OrgArg,
    issue_id: Annotated[str, typer.Argument(help="Issue ID")],
    event_id: Annotated[
        str, typer.Argument(help="Event ID, or one of: latest, oldest, recommended")
    ],
    environment: EnvironmentOpt = None,
) -> None:
    """Get a specific event for an issue."""
    with handle_errors():
        formatter = get_output(ctx)
        event = _get_service().get_issue_event(
            org, issue_id, event_id, environments=split_csv(environment)
        )
        formatter.render(event)
