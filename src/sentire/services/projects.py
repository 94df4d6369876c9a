"""
Service for Sentry projects.
"""

from __future__ import annotations

from sentire.api.client import PaginationInfo, SentryClient
from sentire.constants import SentryEndpoints
from sentire.models.project import Project
from sentire.services.base import BaseService


class ProjectService(BaseService):
    """
    Service for the projects the token can access.

    Usage:
        svc = ProjectService(client)
        projects, pagination = svc.list_projects()
        project = svc.get_project("acme", "backend")
    """

    def list_projects(self, cursor: str | None = None) -> tuple[list[Project], PaginationInfo]:
        """List one page of projects across all organizations."""
        return self._get_page(SentryEndpoints.PROJECTS, list[Project], cursor=cursor)

    def get_project(self, org: str, project: str) -> Project:
        """
        Get a single project.

        Args:
            org: Organization slug
            project: Project slug

        Returns:
            The project
        """
        endpoint = SentryEndpoints.PROJECT.format(org=org, project=project)
        return self._get_one(endpoint, Project)


def project_service(client: SentryClient) -> ProjectService:
    """Create a project service."""
    return ProjectService(client)
