"""
Output utilities for CLI commands.

Resolves the global --format option into a formatter.
"""

from __future__ import annotations

from typing import TextIO

import typer

from sentire.formatters import Formatter, OutputFormat, get_formatter


def get_output_format(ctx: typer.Context) -> str:
    """Return the format name chosen on the root command (json by default)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return obj.get("format", OutputFormat.JSON.value)


def get_output(ctx: typer.Context, output: TextIO | None = None) -> Formatter:
    """Create the formatter for the current command.

    Call this before any request is sent so an unknown format fails first.

    Args:
        ctx: Typer context of the running command
        output: Output stream (defaults to stdout)

    Returns:
        Formatter instance

    Raises:
        UnsupportedFormatError: If --format names an unknown format
    """
    return get_formatter(get_output_format(ctx), output)
