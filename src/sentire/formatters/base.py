"""
Formatter base class and shared rendering helpers.

Every output format implements one method per known record shape plus a
generic fallback. `render()` picks the method from the value it is given, so
commands never branch on the output format themselves.
"""

from __future__ import annotations

import json
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from datetime import datetime
from enum import Enum
from typing import Any, TextIO

from pydantic import BaseModel

from sentire.constants import DATETIME_FORMAT
from sentire.models.base import Describable
from sentire.models.event import Event
from sentire.models.issue import Issue
from sentire.models.organization import OrganizationStats
from sentire.models.project import Project


class OutputFormat(str, Enum):
    """Supported output formats."""

    JSON = "json"
    TABLE = "table"
    TEXT = "text"
    MARKDOWN = "markdown"


# =============================================================================
# Value Helpers
# =============================================================================


def truncate(value: str | None, max_len: int = 60) -> str:
    """Truncate a string with ellipsis.

    Args:
        value: String to truncate
        max_len: Maximum length, ellipsis included

    Returns:
        Truncated string or original if shorter
    """
    if not value:
        return ""
    if len(value) <= max_len:
        return value
    return value[: max_len - 3] + "..."


def format_datetime(value: datetime | None, fmt: str = DATETIME_FORMAT) -> str:
    """Format a timestamp, or "N/A" when it is missing."""
    if value is None:
        return "N/A"
    return value.strftime(fmt)


def to_plain(value: Any) -> Any:
    """Convert records (and containers of records) to JSON-compatible data."""
    if isinstance(value, BaseModel):
        if hasattr(value, "to_json_data"):
            return value.to_json_data()
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


def format_value(value: Any) -> str:
    """
    Render any value as a single display string.

    Timestamps use the long date format, booleans are lowercase, containers
    and records become compact JSON.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, (BaseModel, dict, list, tuple)):
        return json.dumps(to_plain(value), ensure_ascii=False, default=str)
    return str(value)


def generic_pairs(data: Any) -> list[tuple[str, Any]] | None:
    """
    Label/value pairs for a single non-list value, or None for a scalar.

    Records describe themselves; mappings use their items.
    """
    if isinstance(data, Describable):
        return data.describe()
    if isinstance(data, dict):
        return [(str(k), v) for k, v in data.items()]
    return None


def type_label(data: Any) -> str:
    """Heading for a generic single value."""
    if isinstance(data, BaseModel):
        return type(data).__name__
    return "Data"


# =============================================================================
# Formatter Base
# =============================================================================


class Formatter(ABC):
    """
    Base class for output formatters.

    Attributes:
        output: Output stream (defaults to stdout)
    """

    format: OutputFormat

    def __init__(self, output: TextIO | None = None):
        """
        Initialize formatter.

        Args:
            output: Output stream (defaults to stdout)
        """
        self.output = output or sys.stdout

    def _write(self, text: str) -> None:
        """Write text to output stream."""
        self.output.write(text)
        self.output.flush()

    @abstractmethod
    def format_event(self, event: Event) -> None: ...

    @abstractmethod
    def format_events(self, events: Sequence[Event]) -> None: ...

    @abstractmethod
    def format_issue(self, issue: Issue) -> None: ...

    @abstractmethod
    def format_issues(self, issues: Sequence[Issue]) -> None: ...

    @abstractmethod
    def format_project(self, project: Project) -> None: ...

    @abstractmethod
    def format_projects(self, projects: Sequence[Project]) -> None: ...

    @abstractmethod
    def format_org_stats(self, stats: OrganizationStats) -> None: ...

    @abstractmethod
    def format_generic(self, data: Any) -> None:
        """Render a value of any shape without failing on unknown types."""
        ...

    def _list_method(self, item_type: type) -> Callable[[Sequence[Any]], None] | None:
        methods: dict[type, Callable[[Sequence[Any]], None]] = {
            Event: self.format_events,
            Issue: self.format_issues,
            Project: self.format_projects,
        }
        return methods.get(item_type)

    def _known_list_method(self, data: Sequence[Any]) -> Callable[[Sequence[Any]], None] | None:
        """Typed list method when every item is the same known record type."""
        if not data:
            return None
        item_type = type(data[0])
        method = self._list_method(item_type)
        if method is None or not all(type(item) is item_type for item in data):
            return None
        return method

    def render(self, data: Any, item_type: type | None = None) -> None:
        """
        Dispatch data to the matching format method.

        Known single records and non-empty homogeneous lists of a known record
        type go to their typed method; everything else goes to format_generic.

        Args:
            data: Value to render
            item_type: Record type of a list, so an empty list still renders
                its typed "not found" notice
        """
        if isinstance(data, Event):
            self.format_event(data)
        elif isinstance(data, Issue):
            self.format_issue(data)
        elif isinstance(data, Project):
            self.format_project(data)
        elif isinstance(data, OrganizationStats):
            self.format_org_stats(data)
        elif isinstance(data, (list, tuple)):
            method = self._known_list_method(data)
            if method is None and not data and item_type is not None:
                method = self._list_method(item_type)
            if method is not None:
                method(data)
            else:
                self.format_generic(data)
        else:
            self.format_generic(data)
