"""CLI de entry-facade (Typer).

Comandos:
- `urls`: resuelve las URLs de un registro JSON según una preferencia.
- `facade`: construye el facade de login y lo muestra como tabla.
- `doctor`: muestra la configuración efectiva.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import export_facade_json
from adapters.mapping_record import MappingRecord, load_record
from cli import doctor
from cli.ui_components import build_facade_table
from core.config import AppSettings
from core.domain.models import URLPreference
from core.services.entry_facade import (
    create_entry_facade,
    default_login_field_specs,
    get_entry_urls,
)

app = typer.Typer(no_args_is_help=True, help="Entry facades and URL resolution for credential records.")
app.command(name="doctor")(doctor.run)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )


def _load_settings_or_exit() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _load_record_or_exit(path: Path) -> MappingRecord:
    try:
        return load_record(path)
    except (OSError, ValueError, ValidationError) as exc:
        # ValueError cubre json.JSONDecodeError.
        _err_console.print(f"[red]Could not load record {path}:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _parse_preference(value: str | None, settings: AppSettings) -> URLPreference:
    if value is None:
        return settings.default_url_preference
    try:
        return URLPreference(value.strip().lower())
    except ValueError as exc:
        choices = ", ".join(p.value for p in URLPreference)
        raise typer.BadParameter(f"must be one of: {choices}", param_hint="--preference") from exc


@app.command()
def urls(
    record_path: Path = typer.Argument(..., help="JSON file with properties/meta/attributes."),
    preference: Optional[str] = typer.Option(
        None,
        "--preference",
        "-p",
        help="any | general | login | icon (default from settings).",
    ),
) -> None:
    """Print the record's URLs, one per line, best first."""

    settings = _load_settings_or_exit()
    _configure_logging(settings)
    pref = _parse_preference(preference, settings)

    record = _load_record_or_exit(record_path)
    results = get_entry_urls(record.properties(), pref)
    logger.info("Resolved %d URL(s) from %s with preference %s", len(results), record_path, pref.value)
    for url in results:
        typer.echo(url)


@app.command()
def facade(
    record_path: Path = typer.Argument(..., help="JSON file with properties/meta/attributes."),
    json_out: Optional[Path] = typer.Option(None, "--json-out", help="Also export the facade as JSON."),
    show_secrets: bool = typer.Option(False, "--show-secrets", help="Do not mask secret values."),
) -> None:
    """Build the login facade of a record and show it as a table."""

    settings = _load_settings_or_exit()
    _configure_logging(settings)

    record = _load_record_or_exit(record_path)
    entry_facade = create_entry_facade(record, default_login_field_specs(record))
    _console.print(
        build_facade_table(
            entry_facade,
            show_secrets=show_secrets,
            mask_character=settings.mask_character,
        )
    )

    if json_out is not None:
        out = export_facade_json(facade=entry_facade, output_path=json_out)
        _console.print(f"[green]Saved facade to:[/green] {out}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
