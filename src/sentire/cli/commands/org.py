"""
Organization commands.

Provides organization project listing and usage statistics.
"""

from __future__ import annotations

from typing import Annotated

import typer

from sentire.api.pagination import fetch_pages
from sentire.cli.utils import get_client, get_output, handle_errors, split_csv
from sentire.models.project import Project
from sentire.services.organizations import DEFAULT_STATS_FIELD, OrganizationService, StatsOptions

app = typer.Typer(help="Manage Sentry organizations", no_args_is_help=True)

OrgArg = Annotated[str, typer.Argument(help="Organization slug")]


def _get_service() -> OrganizationService:
    """Get organization service."""
    return OrganizationService(get_client())


@app.command("list-projects")
def list_projects(
    ctx: typer.Context,
    org: OrgArg,
    fetch_all: Annotated[bool, typer.Option("--all", help="Fetch all pages")] = False,
    max_pages: Annotated[
        int | None,
        typer.Option("--max-pages", min=1, help="Stop after this many pages (with --all)"),
    ] = None,
) -> None:
    """List projects for an organization."""
    with handle_errors():
        formatter = get_output(ctx)
        svc = _get_service()
        projects = fetch_pages(
            lambda cursor: svc.list_projects(org, cursor),
            fetch_all=fetch_all,
            max_pages=max_pages,
        )
        formatter.render(projects, item_type=Project)


@app.command("stats")
def stats(
    ctx: typer.Context,
    org: OrgArg,
    field: Annotated[
        str,
        typer.Option("--field", help="Field to query: sum(quantity) or sum(times_seen)"),
    ] = DEFAULT_STATS_FIELD,
    period: Annotated[
        str | None, typer.Option("--period", help="Time period (e.g. '1d', '7d')")
    ] = None,
    interval: Annotated[
        str | None, typer.Option("--interval", help="Time series resolution (e.g. '1h')")
    ] = None,
    start: Annotated[str | None, typer.Option("--start", help="Start time (ISO-8601)")] = None,
    end: Annotated[str | None, typer.Option("--end", help="End time (ISO-8601)")] = None,
    project: Annotated[
        list[str] | None,
        typer.Option("--project", help="Filter by project ID (repeatable or comma-separated)"),
    ] = None,
    category: Annotated[
        list[str] | None,
        typer.Option("--category", help="Filter by event category (repeatable or comma-separated)"),
    ] = None,
    outcome: Annotated[
        list[str] | None,
        typer.Option("--outcome", help="Filter by event outcome (repeatable or comma-separated)"),
    ] = None,
    reason: Annotated[
        list[str] | None,
        typer.Option("--reason", help="Filter by outcome reason (repeatable or comma-separated)"),
    ] = None,
    download: Annotated[bool, typer.Option("--download", help="Download response as CSV")] = False,
) -> None:
    """Get organization statistics."""
    with handle_errors():
        formatter = get_output(ctx)
        options = StatsOptions(
            field=field,
            stats_period=period,
            interval=interval,
            start=start,
            end=end,
            project=split_csv(project),
            category=split_csv(category),
            outcome=split_csv(outcome),
            reason=split_csv(reason),
            download=download,
        )
        formatter.render(_get_service().get_stats(org, options))
