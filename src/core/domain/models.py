"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core al almacenamiento del registro.
- `frozen=True` convierte cada descriptor en un snapshot inmutable: el valor es
  el del registro en el momento de construirlo, no una vista viva.

Nota:
- Estos modelos describen *qué* se presenta, no *cómo* se lee del registro.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class FieldKind(str, Enum):
    """Espacio de nombres del registro al que apunta un campo."""

    PROPERTY = "property"
    META = "meta"
    ATTRIBUTE = "attribute"


class URLPreference(str, Enum):
    """Política para elegir la(s) URL(s) de un registro."""

    ANY = "any"
    GENERAL = "general"
    ICON = "icon"
    LOGIN = "login"

    @classmethod
    def default(cls) -> "URLPreference":
        return cls.ANY

    @classmethod
    def coerce(cls, value: "URLPreference | str | None") -> "URLPreference":
        """Normaliza una preferencia; lo no reconocido cae en `any`."""

        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.default()


# `False` (sin formato) o un descriptor opaco del proveedor. `Any` no valida
# ni copia: el objeto llega intacto al descriptor.
Formatting = Any


class FieldOptions(BaseModel):
    """Opciones de presentación de un campo.

    Las claves desconocidas se ignoran para poder añadir opciones nuevas sin
    romper a quien construye descriptores con versiones anteriores.
    """

    model_config = ConfigDict(extra="ignore")

    multiline: bool = Field(
        default=False,
        description="Editar el valor como texto multilínea.",
    )
    secret: bool = Field(
        default=False,
        description="Enmascarar el valor al mostrarlo.",
    )
    formatting: Formatting = Field(
        default=False,
        description="Formato del proveedor; se pasa sin interpretar.",
    )
    removeable: bool = Field(
        default=False,
        description="El usuario puede eliminar el campo.",
    )
    max_length: int = Field(
        default=-1,
        ge=-1,
        description="Longitud máxima recomendada del valor (-1 = sin límite).",
    )


class EntryFacadeField(BaseModel):
    """Descriptor presentable de un único campo del registro.

    `field` + `property` identifican la ubicación en el registro. Un facade
    puede contener duplicados; deduplicar es cosa de quien lo construye.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        description="Etiqueta legible del campo.",
    )
    field: FieldKind = Field(
        ...,
        description="Espacio de nombres del registro (property/meta/attribute).",
    )
    property: str = Field(
        ...,
        description="Nombre de la clave dentro de ese espacio de nombres.",
    )
    value: str | None = Field(
        default="",
        description="Valor en el momento de construir el descriptor (None si el registro no lo tiene).",
    )
    secret: bool = False
    multiline: bool = False
    formatting: Formatting = False
    removeable: bool = False
    max_length: int = -1


class EntryFacade(BaseModel):
    """Secuencia ordenada de campos presentables de un registro."""

    type: str = Field(
        default="login",
        min_length=1,
        description="Tipo de facade (p.ej. 'login', 'credit_card').",
    )
    fields: list[EntryFacadeField] = Field(
        default_factory=list,
        description="Campos en orden de presentación.",
    )
