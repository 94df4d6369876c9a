"""
Sentry REST API client.

Provides a session-based client with bearer-token authentication,
rate-limit tracking, Link-header pagination decoding and error handling.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from urllib.parse import parse_qs, urlencode, urlsplit

import requests
from pydantic import SecretStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from sentire.constants import SentryAPIConfig
from sentire.core.config import SentireSettings
from sentire.core.exceptions import (
    APIAuthenticationError,
    APIConnectionError,
    APIError,
    APINotFoundError,
    APIRateLimitError,
    APITimeoutError,
    DecodeError,
    TransportError,
)

logger = logging.getLogger(__name__)

QueryParams = Mapping[str, str | Sequence[str]]


@dataclass
class RateLimitState:
    """
    Rate-limit counters from the most recent response that carried them.

    Each field is overwritten independently; a response that omits a header
    leaves the previous value in place.
    """

    limit: int = 0
    remaining: int = 0
    reset: datetime | None = None
    concurrent_limit: int = 0
    concurrent_remaining: int = 0


@dataclass(frozen=True)
class PaginationInfo:
    """Cursor metadata decoded from one response's Link header."""

    next_cursor: str = ""
    prev_cursor: str = ""
    has_next: bool = False
    has_prev: bool = False


@dataclass
class SentryResponse:
    """
    HTTP response paired with its pagination info.

    The body is read once, by SentryClient.decode_json.
    """

    response: requests.Response
    pagination: PaginationInfo = field(default_factory=PaginationInfo)
    consumed: bool = False

    @property
    def status_code(self) -> int:
        return self.response.status_code


def parse_link_header(value: str | None) -> PaginationInfo:
    """
    Parse a Sentry Link header into cursor information.

    Entries look like::

        <https://sentry.io/api/0/projects/?&cursor=100:1:0>; rel="next"; results="true"; cursor="100:1:0"

    A "next" link only counts as available when it also reports
    results="true" and carries a cursor; a "previous" link is always
    available.

    Args:
        value: Raw header value (may be None or empty)

    Returns:
        PaginationInfo (all defaults when the header is missing)
    """
    next_cursor = ""
    prev_cursor = ""
    has_next = False
    has_prev = False

    if not value:
        return PaginationInfo()

    for link in value.split(","):
        parts = link.strip().split(";")
        if len(parts) < 2:
            continue

        url_part = parts[0].strip().strip("<>").strip()
        try:
            query = parse_qs(urlsplit(url_part).query, keep_blank_values=True)
        except ValueError:
            logger.debug(f"Ignoring unparseable link URL: {url_part!r}")
            continue
        cursor = query.get(SentryAPIConfig.CURSOR_PARAM, [""])[0]

        attributes = [p.strip() for p in parts[1:]]
        is_next = any('rel="next"' in a for a in attributes)
        is_prev = any('rel="previous"' in a for a in attributes)
        has_results = any('results="true"' in a for a in attributes)

        if is_next:
            next_cursor = cursor
            has_next = has_results and bool(cursor)
        if is_prev:
            prev_cursor = cursor
            has_prev = True

    return PaginationInfo(
        next_cursor=next_cursor,
        prev_cursor=prev_cursor,
        has_next=has_next,
        has_prev=has_prev,
    )


def _header_int(headers: Mapping[str, str], name: str) -> int | None:
    raw = headers.get(name)
    if not raw:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.debug(f"Ignoring malformed {name} header: {raw!r}")
        return None


class SentryClient:
    """
    Sentry REST API client with bearer-token authentication.

    One instance per process; requests are strictly sequential and the
    rate-limit state is updated in place after every response.

    Usage:
        client = SentryClient.from_settings(get_settings())

        response = client.get("/projects/")
        projects = client.decode_json(response, list[Project])

        # Fetch and decode in one step
        issues, pagination = client.fetch("/organizations/acme/issues/", list[Issue])
    """

    def __init__(
        self,
        token: str | SecretStr,
        base_url: str = SentryAPIConfig.BASE_URL,
        timeout: int = SentryAPIConfig.DEFAULT_TIMEOUT,
    ):
        """
        Initialize the Sentry API client.

        Args:
            token: Sentry API bearer token
            base_url: API root, e.g. https://sentry.io/api/0
            timeout: Request timeout in seconds
        """
        self._token = token if isinstance(token, SecretStr) else SecretStr(token)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.rate_limit = RateLimitState()
        self._session = requests.Session()

    @classmethod
    def from_settings(cls, settings: SentireSettings) -> SentryClient:
        """
        Create client from settings.

        Raises:
            MissingCredentialsError: If no token is configured
        """
        return cls(
            token=settings.resolve_token(),
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token.get_secret_value()}",
            "Content-Type": SentryAPIConfig.CONTENT_TYPE,
            "User-Agent": SentryAPIConfig.USER_AGENT,
        }

    def _update_rate_limit(self, headers: Mapping[str, str]) -> None:
        """Overwrite each rate-limit field whose header is present and numeric."""
        state = self.rate_limit

        if (limit := _header_int(headers, SentryAPIConfig.RATE_LIMIT_LIMIT_HEADER)) is not None:
            state.limit = limit
        if (remaining := _header_int(headers, SentryAPIConfig.RATE_LIMIT_REMAINING_HEADER)) is not None:
            state.remaining = remaining
        if (reset := _header_int(headers, SentryAPIConfig.RATE_LIMIT_RESET_HEADER)) is not None:
            try:
                state.reset = datetime.fromtimestamp(reset, tz=timezone.utc)
            except (OverflowError, OSError, ValueError):
                logger.debug(f"Ignoring out-of-range rate limit reset: {reset}")
        if (
            concurrent_limit := _header_int(headers, SentryAPIConfig.RATE_LIMIT_CONCURRENT_LIMIT_HEADER)
        ) is not None:
            state.concurrent_limit = concurrent_limit
        if (
            concurrent_remaining := _header_int(
                headers, SentryAPIConfig.RATE_LIMIT_CONCURRENT_REMAINING_HEADER
            )
        ) is not None:
            state.concurrent_remaining = concurrent_remaining

    def _raise_for_status(self, response: requests.Response) -> None:
        """
        Raise the APIError matching a failed response.

        The body is read in full and kept verbatim.

        Raises:
            APIAuthenticationError: For 401 and 403 responses
            APINotFoundError: For 404 responses
            APIRateLimitError: For 429 responses
            APIError: For any other status >= 400
        """
        try:
            body = response.text
        finally:
            response.close()

        status = response.status_code
        logger.debug(f"API error {status}: {body}")

        if status in (401, 403):
            raise APIAuthenticationError(status, body)
        if status == 404:
            raise APINotFoundError(status, body)
        if status == 429:
            raise APIRateLimitError(status, body, reset=self.rate_limit.reset)
        raise APIError(status, body)

    def execute(self, method: str, url: str) -> SentryResponse:
        """
        Send one authenticated request.

        Rate-limit and pagination headers are processed for every response,
        including error responses.

        Args:
            method: HTTP method
            url: Absolute URL, query string included

        Returns:
            SentryResponse with an unread body

        Raises:
            APITimeoutError: If the request times out
            APIConnectionError: If the connection fails
            TransportError: For any other transport failure
            APIError: If the status code is >= 400
        """
        logger.debug(f"API {method} {url}")

        try:
            response = self._session.request(
                method=method,
                url=url,
                headers=self._build_headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise APITimeoutError(f"Request timed out: {e}", cause=e) from e
        except requests.exceptions.ConnectionError as e:
            raise APIConnectionError(f"Connection failed: {e}", cause=e) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}", cause=e) from e

        self._update_rate_limit(response.headers)
        envelope = SentryResponse(
            response=response,
            pagination=parse_link_header(response.headers.get(SentryAPIConfig.LINK_HEADER)),
        )

        logger.debug(
            f"API {method} {url} -> {response.status_code} "
            f"(rate limit {self.rate_limit.remaining}/{self.rate_limit.limit})"
        )

        if response.status_code >= 400:
            self._raise_for_status(response)

        return envelope

    def get(self, endpoint: str, params: QueryParams | None = None) -> SentryResponse:
        """
        Make a GET request against base_url + endpoint.

        List values in params become repeated query keys.
        """
        url = self.base_url + endpoint
        if params:
            url += "?" + urlencode(params, doseq=True)
        return self.execute("GET", url)

    def decode_json(self, response: SentryResponse, shape: Any) -> Any:
        """
        Decode the response body into the given shape.

        Args:
            response: Response from execute/get
            shape: Any pydantic-compatible type, e.g. Event or list[Issue]

        Returns:
            Validated value of the requested shape

        Raises:
            DecodeError: If the body is not valid JSON for the shape, or was
                already consumed
        """
        if response.consumed:
            raise DecodeError("Response body already consumed")
        response.consumed = True

        try:
            body = response.response.content
        finally:
            response.response.close()

        try:
            return TypeAdapter(shape).validate_json(body)
        except PydanticValidationError as e:
            raise DecodeError(f"Failed to decode JSON response: {e}", cause=e) from e

    def fetch(
        self,
        endpoint: str,
        shape: Any,
        params: QueryParams | None = None,
    ) -> tuple[Any, PaginationInfo]:
        """GET an endpoint and decode it, returning the value and its pagination info."""
        response = self.get(endpoint, params)
        return self.decode_json(response, shape), response.pagination
