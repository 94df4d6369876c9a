"""
Cursor pagination driver.

Sentry list endpoints return one page per request and advertise the next
page through the Link header. The driver keeps requesting pages while the
caller asked for everything and the server reports more results.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import TypeVar

from sentire.api.client import PaginationInfo
from sentire.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

PageFetcher = Callable[[str | None], tuple[Sequence[T], PaginationInfo | None]]


def iter_pages(
    fetch: PageFetcher[T],
    fetch_all: bool = False,
    max_pages: int | None = None,
) -> Iterator[T]:
    """
    Yield records page by page.

    Args:
        fetch: Callable taking a cursor (None for the first page) and
            returning the page's records and its pagination info
        fetch_all: Follow next cursors until the server reports no more results
        max_pages: Stop after this many pages even if more are available
            (None for no limit)

    Yields:
        Records in server order, page after page

    Raises:
        ValidationError: If max_pages is less than 1
    """
    if max_pages is not None and max_pages < 1:
        raise ValidationError("max_pages", "must be at least 1")

    cursor: str | None = None
    page = 0

    while True:
        page += 1
        logger.debug(f"Fetching page {page} (cursor={cursor!r})")
        records, pagination = fetch(cursor)
        logger.debug(f"Page {page} returned {len(records)} records")
        yield from records

        if not fetch_all or pagination is None or not pagination.has_next:
            break

        if max_pages is not None and page >= max_pages:
            logger.warning(
                f"Stopped after {page} page(s); more results are available "
                f"(next cursor {pagination.next_cursor!r})"
            )
            break

        if not pagination.next_cursor:
            logger.warning(f"Page {page} reported more results without a next cursor; stopping")
            break

        cursor = pagination.next_cursor


def fetch_pages(
    fetch: PageFetcher[T],
    fetch_all: bool = False,
    max_pages: int | None = None,
) -> list[T]:
    """
    Collect records from one page, or from every page when fetch_all is set.

    Errors from any page propagate and records already collected are
    discarded.

    Args:
        fetch: Callable taking a cursor and returning (records, pagination)
        fetch_all: Keep fetching while the server reports more results
        max_pages: Optional cap on the number of pages fetched

    Returns:
        All collected records in server order

    Example:
        issues = fetch_pages(
            lambda cursor: events.list_issues("acme", options, cursor),
            fetch_all=True,
        )
    """
    results = list(iter_pages(fetch, fetch_all=fetch_all, max_pages=max_pages))
    logger.debug(f"Collected {len(results)} records")
    return results
