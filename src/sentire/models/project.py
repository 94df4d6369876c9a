"""
Project models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from sentire.models.base import Record
from sentire.models.organization import Organization


class ProjectTeam(Record):
    id: str = ""
    slug: str = ""
    name: str = ""


class Project(Record):
    """A Sentry project."""

    id: str
    slug: str = ""
    name: str = ""
    is_public: bool = Field(default=False, alias="isPublic")
    is_bookmarked: bool = Field(default=False, alias="isBookmarked")
    color: str | None = None
    date_created: datetime | None = Field(default=None, alias="dateCreated")
    first_event: datetime | None = Field(default=None, alias="firstEvent")
    platform: str | None = None
    platforms: list[str] = Field(default_factory=list)
    has_access: bool = Field(default=False, alias="hasAccess")
    features: list[str] = Field(default_factory=list)
    status: str = ""
    organization: Organization = Field(default_factory=Organization)
    team: ProjectTeam | None = None
    teams: list[ProjectTeam] = Field(default_factory=list)

    def describe(self) -> list[tuple[str, Any]]:
        return [
            ("ID", self.id),
            ("Slug", self.slug),
            ("Name", self.name),
            ("Platform", self.platform or ""),
            ("Organization", f"{self.organization.name} ({self.organization.slug})"),
            ("Date Created", self.date_created),
            ("Status", self.status),
            ("Is Public", self.is_public),
            ("Is Bookmarked", self.is_bookmarked),
        ]
