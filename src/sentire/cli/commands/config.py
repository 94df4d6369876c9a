"""
Configuration management commands.

Provides commands for viewing and managing sentire configuration.
"""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from sentire.cli.utils import handle_errors
from sentire.constants import SentryAPIConfig
from sentire.core.config import get_settings, load_config_file, reset_settings, save_config

app = typer.Typer(help="Manage sentire configuration", no_args_is_help=True)
console = Console()


def _mask(token: str) -> str:
    if not token:
        return "[dim]Not set[/dim]"
    if len(token) <= 8:
        return "****"
    return f"{token[:4]}...{token[-4:]}"


@app.command("show")
def show_config() -> None:
    """Show current configuration."""
    with handle_errors():
        settings = get_settings()
        env_token = settings.sentry_api_token.get_secret_value()
        file_config = load_config_file(settings.config_file)
        file_token = file_config.sentry_api_token.get_secret_value() if file_config else ""

        console.print("\n[bold cyan]General Settings[/bold cyan]")
        table = Table(show_header=False, box=None)
        table.add_column("Setting", style="dim")
        table.add_column("Value")

        table.add_row("Config file", str(settings.config_file))
        table.add_row("Debug mode", str(settings.debug))
        table.add_row("Log level", settings.log_level)
        console.print(table)

        console.print("\n[bold cyan]Sentry API[/bold cyan]")
        api_table = Table(show_header=False, box=None)
        api_table.add_column("Setting", style="dim")
        api_table.add_column("Value")

        api_table.add_row("Base URL", settings.base_url)
        api_table.add_row("Timeout", f"{settings.timeout}s")
        api_table.add_row(f"Token ({SentryAPIConfig.TOKEN_ENV_VAR})", _mask(env_token))
        api_table.add_row("Token (config file)", _mask(file_token))
        console.print(api_table)

        console.print()
        if env_token or file_token:
            source = "environment" if env_token else "config file"
            console.print(f"[green]✓ Sentry API token configured ({source})[/green]")
        else:
            console.print("[yellow]⚠ Sentry API token not configured[/yellow]")
            console.print("\nSet the environment variable:")
            console.print(f"  export {SentryAPIConfig.TOKEN_ENV_VAR}=your-token")
            console.print("or run:")
            console.print("  sentire config set-token your-token")


@app.command("set-token")
def set_token(
    token: Annotated[str, typer.Argument(help="Sentry API auth token")],
) -> None:
    """Save the API token to the config file."""
    token = token.strip()
    if not token:
        console.print("[red]Error: token must not be empty[/red]")
        raise typer.Exit(1)

    path = save_config(token)
    reset_settings()
    console.print(f"[green]✓[/green] Token saved to {path}")


@app.command("path")
def config_path() -> None:
    """Show the config file path."""
    console.print(str(get_settings().config_file), soft_wrap=True)
