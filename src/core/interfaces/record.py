"""Contrato de lectura del registro de credenciales.

Por qué Protocol:
- El registro (almacenamiento, cifrado, historial) es un colaborador externo.
- El Core solo necesita tres getters; cualquier objeto que los tenga sirve,
  incluido un mock en tests.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EntryRecord(Protocol):
    """Contrato mínimo de un registro.

    Reglas de diseño:
    - Tres espacios de nombres independientes: property, meta y attribute.
    - Qué devuelve un nombre ausente es decisión del registro.
    """

    def get_property(self, name: str) -> str:
        ...

    def get_meta(self, name: str) -> str:
        ...

    def get_attribute(self, name: str) -> str:
        ...
