"""
Utility functions for sentire.
"""

from __future__ import annotations

from sentire.utils.urls import IssueURL, parse_issue_url

__all__ = ["IssueURL", "parse_issue_url"]
