"""
Plain text output.

Labelled lines for single records, numbered entries for lists.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sentire.constants import DATE_FORMAT, SHORT_DATETIME_FORMAT, OutputLimits
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


class TextFormatter(Formatter):
    """Human-readable plain text."""

    format = OutputFormat.TEXT

    def _lines(self, lines: list[str]) -> None:
        self._write("\n".join(lines) + "\n")

    # =========================================================================
    # Events
    # =========================================================================

    def format_event(self, event: Event) -> None:
        lines = [
            f"Event #{event.id}",
            f"Event ID: {event.event_id}",
            f"Title: {event.title}",
            f"Message: {event.message}",
            f"Type: {event.type}",
            f"Platform: {event.platform}",
            f"Project ID: {event.project_id}",
            f"Date Created: {format_datetime(event.date_created)}",
            f"Date Received: {format_datetime(event.date_received)}",
            f"Size: {event.size} bytes",
        ]
        if event.group_id:
            lines.append(f"Group ID: {event.group_id}")
        if event.logger:
            lines.append(f"Logger: {event.logger}")
        if event.culprit:
            lines.append(f"Culprit: {event.culprit}")
        if event.environment:
            lines.append(f"Environment: {event.environment}")

        if event.entries:
            lines.append("")
            lines.append("Entries:")
            for i, entry in enumerate(event.entries[: OutputLimits.TEXT_EVENT_ENTRIES], start=1):
                lines.append(f"  {i}. Type: {entry.type}")

        lines.append("")
        self._lines(lines)

    def format_events(self, events: Sequence[Event]) -> None:
        if not events:
            self._write("No events found\n")
            return

        lines = [f"Events ({len(events)} total):", ""]
        for i, event in enumerate(events, start=1):
            lines.extend(
                [
                    f"{i}. Event #{event.event_id}",
                    f"   Title: {truncate(event.title, OutputLimits.TEXT_TITLE)}",
                    f"   Type: {event.type} | Platform: {event.platform} | Project ID: {event.project_id}",
                    f"   Date: {format_datetime(event.date_created, SHORT_DATETIME_FORMAT)}"
                    f" | Environment: {event.environment or ''}",
                    "",
                ]
            )
        self._lines(lines)

    # =========================================================================
    # Issues
    # =========================================================================

    def format_issue(self, issue: Issue) -> None:
        status = issue.status
        if issue.substatus:
            status += f" ({issue.substatus})"

        lines = [
            f"Issue #{issue.id} ({issue.short_id})",
            f"Title: {issue.title}",
            f"Level: {issue.level}",
            f"Status: {status}",
        ]
        if issue.priority:
            lines.append(f"Priority: {issue.priority}")
        lines.extend(
            [
                f"Platform: {issue.platform}",
                f"Project: {issue.project.name} ({issue.project.slug})",
                f"Count: {issue.count}",
                f"User Count: {issue.user_count}",
                f"First Seen: {format_datetime(issue.first_seen)}",
                f"Last Seen: {format_datetime(issue.last_seen)}",
            ]
        )
        if issue.culprit:
            lines.append(f"Culprit: {issue.culprit}")
        if issue.logger:
            lines.append(f"Logger: {issue.logger}")
        lines.append(
            f"Public: {format_value(issue.is_public)} | Bookmarked: {format_value(issue.is_bookmarked)}"
            f" | Subscribed: {format_value(issue.is_subscribed)}"
        )
        if issue.permalink:
            lines.append(f"Permalink: {issue.permalink}")

        lines.append("")
        self._lines(lines)

    def format_issues(self, issues: Sequence[Issue]) -> None:
        if not issues:
            self._write("No issues found\n")
            return

        lines = [f"Issues ({len(issues)} total):", ""]
        for i, issue in enumerate(issues, start=1):
            lines.extend(
                [
                    f"{i}. Issue #{issue.short_id}",
                    f"   Title: {truncate(issue.title, OutputLimits.TEXT_TITLE)}",
                    f"   Level: {issue.level} | Status: {issue.status} | Count: {issue.count}",
                    f"   Project: {issue.project.slug} | Users: {issue.user_count}",
                    f"   Last Seen: {format_datetime(issue.last_seen, SHORT_DATETIME_FORMAT)}",
                    "",
                ]
            )
        self._lines(lines)

    # =========================================================================
    # Projects
    # =========================================================================

    def format_project(self, project: Project) -> None:
        self._lines(
            [
                f"Project: {project.name}",
                f"ID: {project.id}",
                f"Slug: {project.slug}",
                f"Platform: {project.platform or ''}",
                f"Organization: {project.organization.name} ({project.organization.slug})",
                f"Status: {project.status}",
                f"Date Created: {format_datetime(project.date_created)}",
                f"Public: {format_value(project.is_public)} | Bookmarked: {format_value(project.is_bookmarked)}",
                "",
            ]
        )

    def format_projects(self, projects: Sequence[Project]) -> None:
        if not projects:
            self._write("No projects found\n")
            return

        lines = [f"Projects ({len(projects)} total):", ""]
        for i, project in enumerate(projects, start=1):
            lines.extend(
                [
                    f"{i}. {truncate(project.name, OutputLimits.TEXT_TITLE)} ({project.slug})",
                    f"   Platform: {project.platform or ''} | Organization: {project.organization.slug}",
                    f"   Status: {project.status} | Created: {format_datetime(project.date_created, DATE_FORMAT)}",
                    "",
                ]
            )
        self._lines(lines)

    # =========================================================================
    # Organization stats
    # =========================================================================

    def format_org_stats(self, stats: OrganizationStats) -> None:
        lines = [
            "Organization Statistics",
            "======================",
            "",
            f"Period Start: {format_datetime(stats.start)}",
            f"Period End: {format_datetime(stats.end)}",
            f"Total Sum: {stats.totals.sum}",
            f"Times Seen: {stats.totals.times_seen}",
        ]

        if stats.projects:
            limit = OutputLimits.TEXT_STATS_PROJECTS
            lines.append("")
            lines.append(f"Projects ({len(stats.projects)}):")
            for i, project in enumerate(stats.projects[:limit], start=1):
                lines.append(f"  {i}. {format_value(project.slug)} ({format_value(project.id)})")
            if len(stats.projects) > limit:
                lines.append(f"... and {len(stats.projects) - limit} more projects")

        lines.append("")
        self._lines(lines)

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
            lines = [f"Data ({len(data)} items):", ""]
            lines.extend(f"{i}. {format_value(item)}" for i, item in enumerate(data, start=1))
            lines.append("")
            self._lines(lines)
            return

        pairs = generic_pairs(data)
        if pairs is None:
            value = "<nil>" if data is None else format_value(data)
            self._lines([f"Value: {value}", ""])
            return

        label = type_label(data)
        lines = [f"{label}:", "=" * (len(label) + 1)]
        lines.extend(f"{name}: {format_value(value)}" for name, value in pairs)
        lines.append("")
        self._lines(lines)
