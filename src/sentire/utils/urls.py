"""
Sentry web URL parsing.

Turns a browser URL such as https://acme.sentry.io/issues/4567890123/?project=42
into the organization slug and issue id the API needs.
"""

from __future__ import annotations

import re
from typing import NamedTuple
from urllib.parse import urlsplit

from sentire.core.exceptions import InvalidURLError

_HOST_PATTERN = re.compile(r"^([^.]+)\.sentry\.io$")
_ISSUE_PATH_PATTERN = re.compile(r"/issues/(\d+)/?")


class IssueURL(NamedTuple):
    """Organization and issue extracted from a Sentry issue URL."""

    organization: str
    issue_id: str


def parse_issue_url(url: str) -> IssueURL:
    """
    Extract organization and issue id from a Sentry issue URL.

    Args:
        url: URL of the form https://<org>.sentry.io/issues/<id>/...

    Returns:
        IssueURL(organization, issue_id)

    Raises:
        InvalidURLError: If the host is not an organization subdomain of
            sentry.io or the path has no /issues/<digits> segment

    Example:
        >>> parse_issue_url("https://acme.sentry.io/issues/123/?project=4")
        IssueURL(organization='acme', issue_id='123')
    """
    try:
        parsed = urlsplit(url.strip())
        host = parsed.hostname or ""
    except ValueError as e:
        raise InvalidURLError(url, f"invalid URL format: {e}") from e

    host_match = _HOST_PATTERN.match(host)
    if not host_match:
        raise InvalidURLError(
            url, "invalid Sentry URL: expected format https://orgname.sentry.io/..."
        )

    issue_match = _ISSUE_PATH_PATTERN.search(parsed.path)
    if not issue_match:
        raise InvalidURLError(url, "invalid issue URL: expected format /issues/<issue_id>/")

    return IssueURL(organization=host_match.group(1), issue_id=issue_match.group(1))
