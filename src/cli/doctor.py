"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file

_console = Console()


def run() -> None:
    """Show the effective configuration and where it is read from."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    env_file = get_user_env_file()

    table = Table(title="entry-facade doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("URL preference", "OK", settings.default_url_preference.value)
    table.add_row("Log level", "OK", settings.log_level)

    _console.print(table)
