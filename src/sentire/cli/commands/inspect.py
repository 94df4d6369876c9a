"""
Inspect command.

Opens a Sentry issue from its browser URL and shows the event Sentry
recommends for debugging it.
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from sentire.cli.utils import get_client, get_output, handle_errors
from sentire.services.events import RECOMMENDED_EVENT, EventService
from sentire.utils.urls import parse_issue_url

logger = logging.getLogger(__name__)


def inspect(
    ctx: typer.Context,
    url: Annotated[
        str, typer.Argument(help="Issue URL, e.g. https://acme.sentry.io/issues/123456/")
    ],
) -> None:
    """Inspect a Sentry issue from its URL."""
    with handle_errors():
        formatter = get_output(ctx)
        parts = parse_issue_url(url)
        logger.debug(f"Inspecting issue {parts.issue_id} in {parts.organization}")
        event = EventService(get_client()).get_issue_event(
            parts.organization, parts.issue_id, RECOMMENDED_EVENT
        )
        formatter.render(event)
