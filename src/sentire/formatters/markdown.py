"""
Markdown output.

Single records become a heading with bold labels; lists become pipe tables
with table-breaking characters escaped in free-text cells.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sentire.constants import DATE_FORMAT, MONTH_DAY_FORMAT, OutputLimits
from sentire.formatters.base import (
    Formatter,
    OutputFormat,
    format_datetime,
    format_value,
    generic_pairs,
    truncate,
    type_label,
)
from sentire.models.event import Event
from sentire.models.issue import Issue
from sentire.models.organization import OrganizationStats
from sentire.models.project import Project

_MARKDOWN_ESCAPES = str.maketrans({c: f"\\{c}" for c in "|*_`[]"})


def escape_markdown(value: str) -> str:
    """Backslash-escape characters that break a markdown table cell."""
    return value.translate(_MARKDOWN_ESCAPES)


def _field(label: str, value: Any) -> str:
    # Two trailing spaces force a line break
    return f"**{label}**: {value}  "


def _table(headers: list[str], rows: list[list[str]]) -> list[str]:
    lines = [
        "| " + " | ".join(headers) + " |",
        "|" + "|".join("----" for _ in headers) + "|",
    ]
    lines.extend("| " + " | ".join(row) + " |" for row in rows)
    return lines


class MarkdownFormatter(Formatter):
    """Markdown for pasting into tickets and chat."""

    format = OutputFormat.MARKDOWN

    def _lines(self, lines: list[str]) -> None:
        self._write("\n".join(lines) + "\n")

    # =========================================================================
    # Events
    # =========================================================================

    def format_event(self, event: Event) -> None:
        lines = [
            "# Event Details",
            "",
            _field("ID", event.id),
            _field("Event ID", event.event_id),
            _field("Title", event.title),
            _field("Message", event.message),
            _field("Type", event.type),
            _field("Platform", event.platform),
            _field("Project ID", event.project_id),
            _field("Date Created", format_datetime(event.date_created)),
            _field("Date Received", format_datetime(event.date_received)),
            _field("Size", f"{event.size} bytes"),
        ]
        if event.group_id:
            lines.append(_field("Group ID", event.group_id))
        if event.logger:
            lines.append(_field("Logger", event.logger))
        if event.culprit:
            lines.append(_field("Culprit", event.culprit))
        if event.environment:
            lines.append(_field("Environment", event.environment))

        if event.entries:
            limit = OutputLimits.MARKDOWN_EVENT_ENTRIES
            lines.extend(["", "## Entries", ""])
            for i, entry in enumerate(event.entries[:limit], start=1):
                lines.append(f"{i}. **Type**: {entry.type}")
            if len(event.entries) > limit:
                lines.append(f"... and {len(event.entries) - limit} more entries")

        lines.append("")
        self._lines(lines)

    def format_events(self, events: Sequence[Event]) -> None:
        if not events:
            self._write("# Events\n\nNo events found.\n")
            return

        rows = [
            [
                event.event_id,
                escape_markdown(truncate(event.title, OutputLimits.MARKDOWN_EVENT_TITLE)),
                event.type,
                event.platform,
                event.project_id,
                format_datetime(event.date_created, MONTH_DAY_FORMAT),
                event.environment or "",
            ]
            for event in events
        ]
        lines = [f"# Events ({len(events)} total)", ""]
        lines.extend(
            _table(
                ["ID", "Title", "Type", "Platform", "Project ID", "Date Created", "Environment"],
                rows,
            )
        )
        lines.append("")
        self._lines(lines)

    # =========================================================================
    # Issues
    # =========================================================================

    def format_issue(self, issue: Issue) -> None:
        status = issue.status
        if issue.substatus:
            status += f" ({issue.substatus})"

        lines = [
            "# Issue Details",
            "",
            _field("ID", f"{issue.id} ({issue.short_id})"),
            _field("Title", issue.title),
            _field("Level", issue.level),
            _field("Status", status),
        ]
        if issue.priority:
            lines.append(_field("Priority", issue.priority))
        lines.extend(
            [
                _field("Platform", issue.platform),
                _field("Project", f"{issue.project.name} ({issue.project.slug})"),
                _field("Count", issue.count),
                _field("User Count", issue.user_count),
                _field("First Seen", format_datetime(issue.first_seen)),
                _field("Last Seen", format_datetime(issue.last_seen)),
            ]
        )
        if issue.culprit:
            lines.append(_field("Culprit", issue.culprit))
        if issue.logger:
            lines.append(_field("Logger", issue.logger))
        lines.append(
            f"**Public**: {format_value(issue.is_public)}"
            f" | **Bookmarked**: {format_value(issue.is_bookmarked)}"
            f" | **Subscribed**: {format_value(issue.is_subscribed)}  "
        )
        if issue.permalink:
            lines.append(_field("Permalink", f"[{issue.permalink}]({issue.permalink})"))

        lines.append("")
        self._lines(lines)

    def format_issues(self, issues: Sequence[Issue]) -> None:
        if not issues:
            self._write("# Issues\n\nNo issues found.\n")
            return

        rows = [
            [
                issue.short_id,
                escape_markdown(truncate(issue.title, OutputLimits.MARKDOWN_ISSUE_TITLE)),
                issue.level,
                issue.status,
                issue.count,
                str(issue.user_count),
                format_datetime(issue.last_seen, MONTH_DAY_FORMAT),
                issue.project.slug,
            ]
            for issue in issues
        ]
        lines = [f"# Issues ({len(issues)} total)", ""]
        lines.extend(
            _table(
                ["ID", "Title", "Level", "Status", "Count", "User Count", "Last Seen", "Project"],
                rows,
            )
        )
        lines.append("")
        self._lines(lines)

    # =========================================================================
    # Projects
    # =========================================================================

    def format_project(self, project: Project) -> None:
        self._lines(
            [
                "# Project Details",
                "",
                _field("Name", project.name),
                _field("ID", project.id),
                _field("Slug", project.slug),
                _field("Platform", project.platform or ""),
                _field(
                    "Organization", f"{project.organization.name} ({project.organization.slug})"
                ),
                _field("Status", project.status),
                _field("Date Created", format_datetime(project.date_created)),
                f"**Public**: {format_value(project.is_public)}"
                f" | **Bookmarked**: {format_value(project.is_bookmarked)}  ",
                "",
            ]
        )

    def format_projects(self, projects: Sequence[Project]) -> None:
        if not projects:
            self._write("# Projects\n\nNo projects found.\n")
            return

        rows = [
            [
                project.slug,
                escape_markdown(truncate(project.name, OutputLimits.MARKDOWN_PROJECT_NAME)),
                project.platform or "",
                project.organization.slug,
                project.status,
                format_datetime(project.date_created, DATE_FORMAT),
            ]
            for project in projects
        ]
        lines = [f"# Projects ({len(projects)} total)", ""]
        lines.extend(
            _table(
                ["Slug", "Name", "Platform", "Organization", "Status", "Date Created"], rows
            )
        )
        lines.append("")
        self._lines(lines)

    # =========================================================================
    # Organization stats
    # =========================================================================

    def format_org_stats(self, stats: OrganizationStats) -> None:
        lines = ["# Organization Statistics", ""]
        lines.extend(
            _table(
                ["Metric", "Value"],
                [
                    ["Period Start", format_datetime(stats.start)],
                    ["Period End", format_datetime(stats.end)],
                    ["Total Sum", str(stats.totals.sum)],
                    ["Times Seen", str(stats.totals.times_seen)],
                ],
            )
        )

        if stats.projects:
            limit = OutputLimits.MARKDOWN_STATS_PROJECTS
            rows = [
                [format_value(project.slug), format_value(project.id)]
                for project in stats.projects[:limit]
            ]
            if len(stats.projects) > limit:
                rows.append(["...", "..."])
            lines.extend(["", f"## Projects ({len(stats.projects)})", ""])
            lines.extend(_table(["Project", "ID"], rows))

        lines.append("")
        self._lines(lines)

    # =========================================================================
    # Generic
    # =========================================================================

    def format_generic(self, data: Any) -> None:
        if isinstance(data, (list, tuple)):
            if not data:
                self._write("# Data\n\nNo data found.\n")
                return
            method = self._known_list_method(data)
            if method is not None:
                method(data)
                return
            lines = [f"# Data ({len(data)} items)", ""]
            lines.extend(f"{i}. {format_value(item)}" for i, item in enumerate(data, start=1))
            lines.append("")
            self._lines(lines)
            return

        pairs = generic_pairs(data)
        if pairs is None:
            value = "nil" if data is None else format_value(data)
            self._lines(["# Value", "", f"`{value}`"])
            return

        lines = [f"# {type_label(data)}", ""]
        lines.extend(_field(name, format_value(value)) for name, value in pairs)
        lines.append("")
        self._lines(lines)
