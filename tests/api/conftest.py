"""
Pytest fixtures for API client tests.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import MagicMock

import pytest

from sentire.api.client import SentryClient


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock requests.Session."""
    return MagicMock()


@pytest.fixture
def client(mock_session: MagicMock) -> SentryClient:
    """Create a SentryClient with mocked session."""
    client = SentryClient(token="test-token", base_url="https://sentry.example.com/api/0")
    client._session = mock_session
    return client


def make_response(
    status_code: int = 200,
    json_data: Any = None,
    text: str = "",
    headers: dict[str, str] | None = None,
) -> MagicMock:
    """Create a mock requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text or (json.dumps(json_data) if json_data is not None else "")
    response.content = response.text.encode("utf-8")
    response.headers = headers or {}
    return response
