"""
Project commands.
"""

from __future__ import annotations

from typing import Annotated

import typer

from sentire.api.pagination import fetch_pages
from sentire.cli.utils import get_client, get_output, handle_errors
from sentire.models.project import Project
from sentire.services.projects import ProjectService

app = typer.Typer(help="Manage Sentry projects", no_args_is_help=True)


def _get_service() -> ProjectService:
    """Get project service."""
    return ProjectService(get_client())


@app.command("list")
def list_projects(
    ctx: typer.Context,
    fetch_all: Annotated[bool, typer.Option("--all", help="Fetch all pages")] = False,
    max_pages: Annotated[
        int | None,
        typer.Option("--max-pages", min=1, help="Stop after this many pages (with --all)"),
    ] = None,
) -> None:
    """List all your projects."""
    with handle_errors():
        formatter = get_output(ctx)
        svc = _get_service()
        projects = fetch_pages(svc.list_projects, fetch_all=fetch_all, max_pages=max_pages)
        formatter.render(projects, item_type=Project)


@app.command("get")
def get_project(
    ctx: typer.Context,
    org: Annotated[str, typer.Argument(help="Organization slug")],
    project: Annotated[str, typer.Argument(help="Project slug")],
) -> None:
    """Get a specific project."""
    with handle_errors():
        formatter = get_output(ctx)
        formatter.render(_get_service().get_project(org, project))
