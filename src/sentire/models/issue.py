"""
Issue models.

An issue is a group of events Sentry has fingerprinted as the same problem.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field, JsonValue, field_validator

from sentire.models.base import Record


class IssueProject(Record):
    """Project summary embedded in an issue."""

    id: str = ""
    name: str = ""
    slug: str = ""


class IssueUser(Record):
    """Assignee or activity author."""

    id: str = ""
    name: str = ""
    email: str | None = None
    type: str | None = None


class IssueOwner(Record):
    """Ownership rule match (user, team, ...)."""

    type: str = ""
    id: str | None = None
    name: str | None = None


class IssueActivity(Record):
    """Entry in an issue's history."""

    id: str
    type: str
    user: IssueUser | None = None
    data: dict[str, JsonValue] | None = None
    date_created: datetime | None = Field(default=None, alias="dateCreated")


class Issue(Record):
    """A Sentry issue."""

    id: str
    share_id: str | None = Field(default=None, alias="shareId")
    short_id: str = Field(default="", alias="shortId")
    title: str = ""
    level: str = ""
    status: str = ""
    substatus: str | None = None
    status_details: JsonValue = Field(default=None, alias="statusDetails")
    priority: str | None = None
    priority_locked_at: datetime | None = Field(default=None, alias="priorityLockedAt")
    is_public: bool = Field(default=False, alias="isPublic")
    platform: str = ""
    project: IssueProject = Field(default_factory=IssueProject)
    type: str = ""
    issue_type: str | None = Field(default=None, alias="issueType")
    issue_category: str | None = Field(default=None, alias="issueCategory")
    count: str = "0"
    user_count: int = Field(default=0, alias="userCount")
    first_seen: datetime | None = Field(default=None, alias="firstSeen")
    last_seen: datetime | None = Field(default=None, alias="lastSeen")
    permalink: str = ""
    logger: str | None = None
    culprit: str | None = None
    metadata: JsonValue = None
    num_comments: int = Field(default=0, alias="numComments")
    assigned_to: IssueUser | None = Field(default=None, alias="assignedTo")
    owners: list[IssueOwner] | None = None
    is_bookmarked: bool = Field(default=False, alias="isBookmarked")
    is_subscribed: bool = Field(default=False, alias="isSubscribed")
    is_unhandled: bool | None = Field(default=None, alias="isUnhandled")
    subscription_details: JsonValue = Field(default=None, alias="subscriptionDetails")
    has_seen: bool = Field(default=False, alias="hasSeen")
    annotations: list[JsonValue] | None = None
    activity: list[IssueActivity] | None = None

    @field_validator("count", mode="before")
    @classmethod
    def coerce_count(cls, v: Any) -> Any:
        """The API sends the event count as a string, but not always."""
        if isinstance(v, int):
            return str(v)
        return v

    def describe(self) -> list[tuple[str, Any]]:
        pairs: list[tuple[str, Any]] = [
            ("ID", self.id),
            ("Short ID", self.short_id),
            ("Title", self.title),
            ("Level", self.level),
            ("Status", self.status),
            ("Platform", self.platform),
            ("Project", f"{self.project.name} ({self.project.slug})"),
            ("Count", self.count),
            ("User Count", self.user_count),
            ("First Seen", self.first_seen),
            ("Last Seen", self.last_seen),
            ("Is Public", self.is_public),
            ("Is Bookmarked", self.is_bookmarked),
            ("Is Subscribed", self.is_subscribed),
        ]
        optional = [
            ("Substatus", self.substatus),
            ("Priority", self.priority),
            ("Culprit", self.culprit),
            ("Logger", self.logger),
            ("Permalink", self.permalink),
        ]
        pairs.extend((label, value) for label, value in optional if value)
        return pairs
