"""Registro en memoria sobre tres mapeos planos.

Idea:
- El Core solo conoce el contrato `EntryRecord`; este adaptador lo implementa
  sobre dicts para la CLI, exportaciones y tests.
- Los registros reales (cifrados, con historial) viven fuera de este repo.

Formato de archivo:
    {"properties": {...}, "meta": {...}, "attributes": {...}}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator, Mapping

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class RecordFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    properties: dict[str, str] = Field(default_factory=dict)
    meta: dict[str, str] = Field(default_factory=dict)
    attributes: dict[str, str] = Field(default_factory=dict)

    @field_validator("properties", "meta", "attributes", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return {str(k): "" if v is None else str(v) for k, v in value.items()}
        return value


class MappingRecord:
    """Registro de solo lectura; un nombre ausente devuelve cadena vacía."""

    def __init__(
        self,
        properties: Mapping[str, str] | None = None,
        meta: Mapping[str, str] | None = None,
        attributes: Mapping[str, str] | None = None,
    ) -> None:
        self._properties = dict(properties or {})
        self._meta = dict(meta or {})
        self._attributes = dict(attributes or {})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MappingRecord":
        parsed = RecordFile.model_validate(data)
        return cls(parsed.properties, parsed.meta, parsed.attributes)

    def get_property(self, name: str) -> str:
        return self._properties.get(name, "")

    def get_meta(self, name: str) -> str:
        return self._meta.get(name, "")

    def get_attribute(self, name: str) -> str:
        return self._attributes.get(name, "")

    def property_names(self) -> Iterator[str]:
        return iter(list(self._properties))

    def properties(self) -> dict[str, str]:
        """Copia de las propiedades en orden de inserción."""

        return dict(self._properties)

    def __repr__(self) -> str:
        return (
            f"MappingRecord(properties={len(self._properties)}, "
            f"meta={len(self._meta)}, attributes={len(self._attributes)})"
        )


def load_record(path: Path) -> MappingRecord:
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    return MappingRecord.from_dict(data)
