"""
Pydantic models for sentire.

Contains data models for:
- Events: error occurrences with stack traces and contexts
- Issues: grouped events
- Projects and organizations
- Organization stats summaries
"""

from __future__ import annotations

from sentire.models.base import Describable, Record
from sentire.models.event import (
    Breadcrumb,
    Contexts,
    Entry,
    Event,
    EventException,
    EventRequest,
    EventTag,
    EventUser,
    ExceptionValue,
    StackFrame,
    Stacktrace,
)
from sentire.models.issue import Issue, IssueActivity, IssueOwner, IssueProject, IssueUser
from sentire.models.organization import (
    CategoryStats,
    Organization,
    OrganizationStats,
    ProjectStatsDetail,
    StatsOutcomes,
    StatsTotals,
)
from sentire.models.project import Project, ProjectTeam

__all__ = [
    "Describable",
    "Record",
    "Event",
    "Entry",
    "EventException",
    "ExceptionValue",
    "Stacktrace",
    "StackFrame",
    "Breadcrumb",
    "EventRequest",
    "Contexts",
    "EventTag",
    "EventUser",
    "Issue",
    "IssueProject",
    "IssueUser",
    "IssueOwner",
    "IssueActivity",
    "Project",
    "ProjectTeam",
    "Organization",
    "OrganizationStats",
    "ProjectStatsDetail",
    "CategoryStats",
    "StatsOutcomes",
    "StatsTotals",
]
