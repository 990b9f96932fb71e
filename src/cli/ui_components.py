"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas en múltiples comandos.
"""

from __future__ import annotations

from rich.table import Table

from core.domain.models import EntryFacade, EntryFacadeField


def mask_value(value: str, mask_character: str = "•") -> str:
    """Enmascara un valor secreto conservando su longitud."""

    return mask_character * len(value)


def _display_value(field: EntryFacadeField, *, show_secrets: bool, mask_character: str) -> str:
    value = field.value or ""
    if field.secret and not show_secrets:
        return mask_value(value, mask_character)
    return value


def build_facade_table(
    facade: EntryFacade,
    *,
    show_secrets: bool = False,
    mask_character: str = "•",
) -> Table:
    """Tabla Rich con un campo del facade por fila."""

    table = Table(title=f"Entry facade ({facade.type})")
    table.add_column("Title", style="cyan", no_wrap=True)
    table.add_column("Field", style="dim")
    table.add_column("Property", style="white")
    table.add_column("Value", style="magenta")
    table.add_column("Flags", style="yellow")

    for field in facade.fields:
        flags = [
            name
            for name, enabled in (
                ("secret", field.secret),
                ("multiline", field.multiline),
                ("removeable", field.removeable),
            )
            if enabled
        ]
        table.add_row(
            field.title,
            field.field.value,
            field.property,
            _display_value(field, show_secrets=show_secrets, mask_character=mask_character),
            ", ".join(flags),
        )
    return table
