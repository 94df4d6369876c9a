"""
Main CLI entry point for sentire.

Provides the `sentire` command with subcommands for:
- events: Events and issues
- projects: Projects across organizations
- org: Organization projects and statistics
- inspect: Open an issue from its browser URL
- config: Configuration management
- version: Version information
"""

from __future__ import annotations

import logging
import platform
import sys
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from sentire import __version__
from sentire.cli.commands import config, events, org, projects
from sentire.cli.commands.inspect import inspect
from sentire.core.config import get_settings
from sentire.formatters import OutputFormat

# Main CLI app
app = typer.Typer(
    name="sentire",
    help="A command-line tool for the Sentry API",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Rich console for formatted output
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"sentire version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help=f"Output format: {', '.join(f.value for f in OutputFormat)}",
        ),
    ] = OutputFormat.JSON.value,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            envvar="SENTIRE_DEBUG",
            help="Enable debug output",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """
    sentire - Sentry API client.

    Query events, issues, projects and organization statistics from the
    command line. Set SENTRY_API_TOKEN or run 'sentire config set-token'.
    """
    settings = get_settings()
    if debug:
        settings.debug = True

    # Configure logging on stderr so command output stays clean
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=Console(stderr=True), show_path=settings.debug, rich_tracebacks=True
            )
        ],
        force=True,
    )

    ctx.ensure_object(dict)
    ctx.obj["format"] = format


# Register command groups
app.add_typer(events.app, name="events", help="Manage Sentry events and issues")
app.add_typer(projects.app, name="projects", help="Manage Sentry projects")
app.add_typer(org.app, name="org", help="Manage Sentry organizations")
app.add_typer(config.app, name="config", help="Manage sentire configuration")
app.command("inspect")(inspect)


@app.command()
def version(
    detailed: Annotated[
        bool, typer.Option("--detailed", help="Show detailed version information")
    ] = False,
) -> None:
    """Show version information."""
    console.print(f"sentire version {__version__}", highlight=False)
    if detailed:
        console.print(f"Python version: {platform.python_version()}", highlight=False)
        console.print(f"OS/Arch: {sys.platform}/{platform.machine()}", highlight=False)


def cli() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
