"""
CLI module for sentire.

Provides the `sentire` command-line interface.
"""

from __future__ import annotations

from sentire.cli.main import app, cli

__all__ = ["app", "cli"]
