"""
CLI utility modules for shared functionality.

Provides common utilities used across CLI commands:
- client: Authenticated API client access
- helpers: Error reporting, option normalization
- output: Formatter selection from the global --format option
"""

from sentire.cli.utils.client import get_client
from sentire.cli.utils.helpers import handle_errors, split_csv
from sentire.cli.utils.output import get_output, get_output_format

__all__ = [
    # Client
    "get_client",
    # Helpers
    "handle_errors",
    "split_csv",
    # Output
    "get_output",
    "get_output_format",
]
