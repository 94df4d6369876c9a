"""
Organization and organization statistics models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from sentire.models.base import Record


class OrganizationStatus(Record):
    id: str = ""
    name: str = ""


class OrganizationAvatar(Record):
    avatar_type: str | None = Field(default=None, alias="avatarType")
    avatar_uuid: str | None = Field(default=None, alias="avatarUuid")


class Organization(Record):
    """A Sentry organization."""

    id: str = ""
    slug: str = ""
    name: str = ""
    date_created: datetime | None = Field(default=None, alias="dateCreated")
    status: OrganizationStatus | None = None
    avatar: OrganizationAvatar | None = None
    features: list[str] = Field(default_factory=list)
    is_early_adopter: bool = Field(default=False, alias="isEarlyAdopter")
    access: list[str] = Field(default_factory=list)


# =============================================================================
# Stats summary
# =============================================================================


class StatsOutcomes(Record):
    """Event counts per ingestion outcome."""

    accepted: int = 0
    filtered: int = 0
    rate_limited: int = 0
    invalid: int = 0
    abuse: int = 0
    client_discard: int = 0
    cardinality_limited: int = 0


class StatsTotals(Record):
    dropped: int = 0
    sum: int = Field(default=0, alias="sum(quantity)")
    times_seen: int = 0


class CategoryStats(Record):
    """Outcomes and totals for one data category (error, transaction, ...)."""

    category: str = ""
    outcomes: StatsOutcomes = Field(default_factory=StatsOutcomes)
    totals: StatsTotals = Field(default_factory=StatsTotals)


class ProjectStatsDetail(Record):
    """Per-project breakdown; the API sends the id as a string or a number."""

    id: str | int | None = None
    slug: str | None = None
    stats: list[CategoryStats] = Field(default_factory=list)


class OrganizationTotals(Record):
    sum: int = 0
    times_seen: int = 0


class OrganizationStats(Record):
    """Result of the organization stats-summary endpoint."""

    start: datetime | None = None
    end: datetime | None = None
    projects: list[ProjectStatsDetail] = Field(default_factory=list)
    totals: OrganizationTotals = Field(default_factory=OrganizationTotals)

    def describe(self) -> list[tuple[str, Any]]:
        return [
            ("Start Time", self.start),
            ("End Time", self.end),
            ("Total Sum", self.totals.sum),
            ("Times Seen", self.totals.times_seen),
            ("Projects", len(self.projects)),
        ]
