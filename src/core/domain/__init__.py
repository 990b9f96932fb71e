"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce archivos, CLI, ni el almacenamiento del registro: solo
  conceptos del facade (campos, tipos, preferencias de URL).
"""

from core.domain.errors import EntryFacadeError, UnknownPropertyKind
from core.domain.models import (
    EntryFacade,
    EntryFacadeField,
    FieldKind,
    FieldOptions,
    URLPreference,
)

__all__ = [
    "EntryFacade",
    "EntryFacadeError",
    "EntryFacadeField",
    "FieldKind",
    "FieldOptions",
    "URLPreference",
    "UnknownPropertyKind",
]
