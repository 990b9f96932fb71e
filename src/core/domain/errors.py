"""Errores del dominio."""

from __future__ import annotations


class EntryFacadeError(Exception):
    """Base para los errores propios del facade."""


class UnknownPropertyKind(EntryFacadeError, ValueError):
    """Se pidió un valor a un tipo de propiedad que el registro no expone.

    Solo existen tres espacios de nombres: `property`, `meta` y `attribute`.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"Cannot retrieve value: Unknown property type: {kind}")
