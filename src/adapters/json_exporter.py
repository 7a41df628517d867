"""Exportación JSON del display.

Por qué JSON:
- Interoperabilidad con otras herramientas (dashboards, drivers de LEDs).
- Da el estado de las lámparas sin parsear el render de texto.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.domain.models import FiveRowDisplay, TimeOfDay


def display_to_payload(display: FiveRowDisplay, time: TimeOfDay) -> dict[str, Any]:
    return {
        "time": str(time),
        "rows": display.lines(),
        "lit": [row.lit_count for row in display.rows],
    }


def dumps_display(display: FiveRowDisplay, time: TimeOfDay) -> str:
    """Stable JSON text (sorted keys, indented, trailing newline)."""

    payload = display_to_payload(display, time)
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_display_json(*, display: FiveRowDisplay, time: TimeOfDay, output_path: Path) -> Path:
    """Write `display` to `output_path` as UTF-8 JSON."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_display(display, time), encoding="utf-8")
    return output_path
