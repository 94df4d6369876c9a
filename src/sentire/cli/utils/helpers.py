"""
Helper utilities for CLI commands.

Provides error reporting and option normalization shared by all commands.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from sentire.core.exceptions import SentireError

logger = logging.getLogger(__name__)

# Errors go to stderr so stdout stays parseable
_err_console = Console(stderr=True)


@contextmanager
def handle_errors(console: Console | None = None) -> Iterator[None]:
    """Report sentire errors and exit with status 1.

    Every failing stage (configuration, network, HTTP status, decoding,
    validation, output format) surfaces as a single red "Error: ..." line.

    Args:
        console: Console for error output (uses stderr if None)

    Raises:
        typer.Exit: With code 1 when a SentireError was raised
    """
    console = console or _err_console
    try:
        yield
    except SentireError as e:
        logger.debug(f"Command failed: {type(e).__name__}: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None


def split_csv(values: list[str] | None) -> list[str]:
    """Flatten repeated and comma-separated option values.

    Args:
        values: Raw option values, e.g. ["prod,staging", "dev"]

    Returns:
        Non-empty stripped items, e.g. ["prod", "staging", "dev"]

    Example:
        >>> split_csv(["prod,staging", " dev "])
        ['prod', 'staging', 'dev']
    """
    if not values:
        return []
    items: list[str] = []
    for value in values:
        items.extend(part.strip() for part in value.split(",") if part.strip())
    return items
