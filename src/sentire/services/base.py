"""
Base service class for Sentry API operations.

Provides query-parameter building and the fetch/decode plumbing shared by
the resource-specific services.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict

from sentire.api.client import PaginationInfo, SentryClient
from sentire.constants import SentryAPIConfig


class QueryOptions(BaseModel):
    """Base class for frozen request option sets."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class QueryBuilder:
    """
    Accumulates query parameters, skipping empty values.

    Scalar values replace earlier ones; list values become repeated keys.
    """

    def __init__(self) -> None:
        self._params: dict[str, str | list[str]] = {}

    def set(self, key: str, value: str | None) -> QueryBuilder:
        if value:
            self._params[key] = value
        return self

    def flag(self, key: str, enabled: bool) -> QueryBuilder:
        if enabled:
            self._params[key] = "true"
        return self

    def add(self, key: str, values: Iterable[str]) -> QueryBuilder:
        items = [v for v in values if v]
        if items:
            existing = self._params.get(key, [])
            if isinstance(existing, str):
                existing = [existing]
            self._params[key] = [*existing, *items]
        return self

    def build(self) -> dict[str, str | list[str]]:
        return dict(self._params)


class BaseService:
    """
    Base class for Sentry API services.

    Usage:
        class ProjectService(BaseService):
            def get_project(self, org, project):
                return self._get_one(f"/projects/{org}/{project}/", Project)

        svc = ProjectService(client)
        project = svc.get_project("acme", "backend")
    """

    def __init__(self, client: SentryClient):
        """
        Initialize service with an authenticated API client.

        Args:
            client: Configured SentryClient instance
        """
        self.client = client

    def _get_one(
        self,
        endpoint: str,
        shape: Any,
        params: QueryBuilder | None = None,
    ) -> Any:
        """Fetch a single resource and decode it."""
        value, _ = self.client.fetch(endpoint, shape, params.build() if params else None)
        return value

    def _get_page(
        self,
        endpoint: str,
        shape: Any,
        params: QueryBuilder | None = None,
        cursor: str | None = None,
    ) -> tuple[Any, PaginationInfo]:
        """
        Fetch one page of a list endpoint.

        Args:
            endpoint: Endpoint path
            shape: Decoded shape, e.g. list[Event]
            params: Query parameters for the endpoint
            cursor: Page cursor from a previous PaginationInfo (None for first page)

        Returns:
            Tuple of (records, pagination info)
        """
        builder = params or QueryBuilder()
        builder.set(SentryAPIConfig.CURSOR_PARAM, cursor)
        return self.client.fetch(endpoint, shape, builder.build())
