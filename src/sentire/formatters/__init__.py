"""
Output formatters for sentire.

Provides rendering of events, issues, projects and organization stats
in various formats (JSON, table, text, markdown).
"""

from __future__ import annotations

from typing import TextIO

from sentire.core.exceptions import UnsupportedFormatError
from sentire.formatters.base import Formatter, OutputFormat, format_datetime, format_value, truncate
from sentire.formatters.json_formatter import JSONFormatter
from sentire.formatters.markdown import MarkdownFormatter, escape_markdown
from sentire.formatters.table import TableFormatter
from sentire.formatters.text import TextFormatter

_FORMATTERS: dict[OutputFormat, type[Formatter]] = {
    OutputFormat.JSON: JSONFormatter,
    OutputFormat.TABLE: TableFormatter,
    OutputFormat.TEXT: TextFormatter,
    OutputFormat.MARKDOWN: MarkdownFormatter,
}


def get_formatter(name: str | OutputFormat, output: TextIO | None = None) -> Formatter:
    """
    Create the formatter for a format name.

    Args:
        name: One of "json", "table", "text", "markdown"
        output: Output stream (defaults to stdout)

    Returns:
        Formatter instance

    Raises:
        UnsupportedFormatError: If the name is not a known format
    """
    try:
        fmt = OutputFormat(name)
    except ValueError:
        raise UnsupportedFormatError(str(name)) from None
    return _FORMATTERS[fmt](output)


__all__ = [
    "Formatter",
    "OutputFormat",
    "JSONFormatter",
    "TableFormatter",
    "TextFormatter",
    "MarkdownFormatter",
    "get_formatter",
    "escape_markdown",
    "format_datetime",
    "format_value",
    "truncate",
]
