"""
Table output using rich.

Single records render as Field/Value tables, lists as one row per record.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sentire.constants import DATE_FORMAT, MONTH_DAY_FORMAT, SHORT_DATETIME_FORMAT, OutputLimits
from sentire.formatters.base import (
    Formatter,
    OutputFormat,
    format_datetime,
    format_value,
    generic_pairs,
    truncate,
)
from sentire.models.event import Event
from sentire.models.issue import Issue
from sentire.models.organization import OrganizationStats
from sentire.models.project import Project

# Width used when the output is not a terminal (pipes, files, tests)
DEFAULT_WIDTH = 200


class TableFormatter(Formatter):
    """Box-drawn tables rendered by rich."""

    format = OutputFormat.TABLE

    def _console(self) -> Console:
        isatty = getattr(self.output, "isatty", None)
        width = None if isatty is not None and isatty() else DEFAULT_WIDTH
        return Console(file=self.output, highlight=False, emoji=False, width=width)

    def _print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        table = Table()
        for header in headers:
            if header in ("ID", "Field", "Metric", "Index"):
                table.add_column(header, style="cyan", no_wrap=True)
            else:
                table.add_column(header)
        for row in rows:
            # Text cells are never parsed as rich markup
            table.add_row(*(Text(cell) for cell in row))
        self._console().print(table)

    def _print_fields(self, pairs: list[tuple[str, Any]]) -> None:
        self._print_table(["Field", "Value"], [[label, format_value(value)] for label, value in pairs])

    # =========================================================================
    # Single records
    # =========================================================================

    def format_event(self, event: Event) -> None:
        self._print_fields(event.describe())

    def format_issue(self, issue: Issue) -> None:
        self._print_fields([(label, value) for label, value in issue.describe() if label != "Permalink"])

    def format_project(self, project: Project) -> None:
        self._print_fields(project.describe())

    def format_org_stats(self, stats: OrganizationStats) -> None:
        self._print_table(
            ["Metric", "Value"],
            [
                ["Start Time", format_datetime(stats.start)],
                ["End Time", format_datetime(stats.end)],
                ["Total Sum", str(stats.totals.sum)],
                ["Times Seen", str(stats.totals.times_seen)],
            ],
        )

    # =========================================================================
    # Lists
    # =========================================================================

    def format_events(self, events: Sequence[Event]) -> None:
        if not events:
            self._write("No events found\n")
            return

        self._print_table(
            ["ID", "Title", "Type", "Platform", "Project ID", "Date Created", "Environment"],
            [
                [
                    event.event_id,
                    truncate(event.title, OutputLimits.TABLE_EVENT_TITLE),
                    event.type,
                    event.platform,
                    event.project_id,
                    format_datetime(event.date_created, SHORT_DATETIME_FORMAT),
                    event.environment or "",
                ]
                for event in events
            ],
        )

    def format_issues(self, issues: Sequence[Issue]) -> None:
        if not issues:
            self._write("No issues found\n")
            return

        self._print_table(
            ["ID", "Title", "Level", "Status", "Count", "User Count", "Last Seen", "Project"],
            [
                [
                    issue.short_id,
                    truncate(issue.title, OutputLimits.TABLE_ISSUE_TITLE),
                    issue.level,
                    issue.status,
                    issue.count,
                    str(issue.user_count),
                    format_datetime(issue.last_seen, MONTH_DAY_FORMAT),
                    issue.project.slug,
                ]
                for issue in issues
            ],
        )

    def format_projects(self, projects: Sequence[Project]) -> None:
        if not projects:
            self._write("No projects found\n")
            return

        self._print_table(
            ["Slug", "Name", "Platform", "Organization", "Status", "Date Created"],
            [
                [
                    project.slug,
                    truncate(project.name, OutputLimits.TABLE_PROJECT_NAME),
                    project.platform or "",
                    project.organization.slug,
                    project.status,
                    format_datetime(project.date_created, DATE_FORMAT),
                ]
                for project in projects
            ],
        )

    # =========================================================================
    # Generic
    # =========================================================================

    def format_generic(self, data: Any) -> None:
        if isinstance(data, (list, tuple)):
            if not data:
                self._write("No data found\n")
                return
            method = self._known_list_method(data)
            if method is not None:
                method(data)
                return
            self._print_table(
                ["Index", "Value"],
                [[str(i), format_value(item)] for i, item in enumerate(data)],
            )
            return

        pairs = generic_pairs(data)
        if pairs is None:
            value = "<nil>" if data is None else format_value(data)
            pairs = [("Value", value)]
        self._print_fields(pairs)
