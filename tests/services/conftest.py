"""
Pytest fixtures for service tests.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from sentire.api.client import PaginationInfo


@pytest.fixture
def mock_client() -> MagicMock:
    """Create a mock SentryClient whose fetch returns an empty first page."""
    client = MagicMock()
    client.fetch.return_value = ([], PaginationInfo())
    return client


def fetch_call(client: MagicMock) -> tuple[str, Any, dict[str, Any] | None]:
    """Return (endpoint, shape, params) of the last fetch call."""
    args = client.fetch.call_args.args
    kwargs = client.fetch.call_args.kwargs
    endpoint = args[0]
    shape = args[1] if len(args) > 1 else kwargs.get("shape")
    params = args[2] if len(args) > 2 else kwargs.get("params")
    return endpoint, shape, params
