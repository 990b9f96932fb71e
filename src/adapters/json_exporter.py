"""Exportación JSON del facade.

Por qué JSON:
- Interoperabilidad con las interfaces que editan o muestran el registro.
- Permite guardar un snapshot del facade sin depender del render en consola.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import EntryFacade


def export_facade_json(*, facade: EntryFacade, output_path: Path) -> Path:
    """Exporta `EntryFacade` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = facade.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
