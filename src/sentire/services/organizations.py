"""
Service for Sentry organizations.

Provides organization-scoped project listing and the stats summary.
"""

from __future__ import annotations

from pydantic import Field

from sentire.api.client import PaginationInfo, SentryClient
from sentire.constants import SentryEndpoints
from sentire.core.exceptions import ValidationError
from sentire.models.organization import OrganizationStats
from sentire.models.project import Project
from sentire.services.base import BaseService, QueryBuilder, QueryOptions

DEFAULT_STATS_FIELD = "sum(quantity)"


class StatsOptions(QueryOptions):
    """
    Parameters for the stats summary.

    Attributes:
        field: Aggregate to compute, "sum(quantity)" or "sum(times_seen)" (required)
        stats_period: Relative window such as "24h" or "14d"
        interval: Bucket width such as "1h" or "1d"
        start: Absolute window start (ISO 8601)
        end: Absolute window end (ISO 8601)
        project: Project ids or slugs to include
        category: Data categories (error, transaction, attachment, ...)
        outcome: Outcomes (accepted, filtered, rate_limited, ...)
        reason: Outcome reasons
        download: Ask the API for a CSV attachment
    """

    field: str = ""
    stats_period: str | None = None
    interval: str | None = None
    start: str | None = None
    end: str | None = None
    project: list[str] = Field(default_factory=list)
    category: list[str] = Field(default_factory=list)
    outcome: list[str] = Field(default_factory=list)
    reason: list[str] = Field(default_factory=list)
    download: bool = False


class OrganizationService(BaseService):
    """
    Service for organization-level queries.

    Usage:
        svc = OrganizationService(client)
        projects, pagination = svc.list_projects("acme")
        stats = svc.get_stats("acme", StatsOptions(field="sum(quantity)", stats_period="7d"))
    """

    def list_projects(
        self, org: str, cursor: str | None = None
    ) -> tuple[list[Project], PaginationInfo]:
        """List one page of an organization's projects."""
        endpoint = SentryEndpoints.ORG_PROJECTS.format(org=org)
        return self._get_page(endpoint, list[Project], cursor=cursor)

    def get_stats(self, org: str, options: StatsOptions) -> OrganizationStats:
        """
        Get the organization stats summary.

        Args:
            org: Organization slug
            options: Stats parameters; field is required

        Returns:
            Stats with per-project breakdowns and totals

        Raises:
            ValidationError: If options.field is empty (no request is sent)
        """
        if not options.field:
            raise ValidationError("field", "required")

        params = (
            QueryBuilder()
            .set("field", options.field)
            .set("statsPeriod", options.stats_period)
            .set("interval", options.interval)
            .set("start", options.start)
            .set("end", options.end)
            .add("project", options.project)
            .add("category", options.category)
            .add("outcome", options.outcome)
            .add("reason", options.reason)
            .flag("download", options.download)
        )
        endpoint = SentryEndpoints.ORG_STATS_SUMMARY.format(org=org)
        return self._get_one(endpoint, OrganizationStats, params)


def organization_service(client: SentryClient) -> OrganizationService:
    """Create an organization service."""
    return OrganizationService(client)
