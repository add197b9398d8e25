"""Exportación JSON de una lista.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (jq, hojas de cálculo).
- Permite guardar lo que se mostró sin depender del render de la terminal.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.domain.models import DisplayRecord


def export_records_json(*, records: Sequence[DisplayRecord], output_path: Path) -> Path:
    """Exporta `DisplayRecord`s a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [record.model_dump(mode="json") for record in records]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
