"""
JSON output.

Every value is serialized the same way: records with their API field names,
two-space indentation, one trailing newline.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from sentire.formatters.base import Formatter, OutputFormat, to_plain
from sentire.models.event import Event
from sentire.models.issue import Issue
from sentire.models.organization import OrganizationStats
from sentire.models.project import Project


class JSONFormatter(Formatter):
    """Identity formatter: dumps whatever it is given as indented JSON."""

    format = OutputFormat.JSON

    def _dump(self, data: Any) -> None:
        self._write(json.dumps(to_plain(data), indent=2, ensure_ascii=False, default=str) + "\n")

    def format_event(self, event: Event) -> None:
        self._dump(event)

    def format_events(self, events: Sequence[Event]) -> None:
        self._dump(list(events))

    def format_issue(self, issue: Issue) -> None:
        self._dump(issue)

    def format_issues(self, issues: Sequence[Issue]) -> None:
        self._dump(list(issues))

    def format_project(self, project: Project) -> None:
        self._dump(project)

    def format_projects(self, projects: Sequence[Project]) -> None:
        self._dump(list(projects))

    def format_org_stats(self, stats: OrganizationStats) -> None:
        self._dump(stats)

    def format_generic(self, data: Any) -> None:
        self._dump(data)
