"""Exportación JSON de RUTs y reportes de validación.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (fixtures de test,
  cargas masivas).
- Formato estable (`sort_keys`, `indent=2`) para diffs limpios.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from rut_lib.core.domain.models import Format, Rut
from rut_lib.core.services.batch_validation import BatchReport


def _write_json(payload: Any, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path


def rut_payload(rut: Rut, fmt: Format = Format.DASH) -> dict[str, Any]:
    payload = rut.model_dump(mode="json")
    payload["formatted"] = rut.render(fmt)
    return payload


def export_ruts_json(
    *,
    ruts: Iterable[Rut],
    output_path: Path,
    fmt: Format = Format.DASH,
) -> Path:
    """Exporta una lista de `Rut` a JSON UTF-8."""

    return _write_json([rut_payload(rut, fmt) for rut in ruts], output_path)


def export_report_json(*, report: BatchReport, output_path: Path) -> Path:
    """Exporta un `BatchReport` con resumen y detalle por input."""

    results = []
    for outcome in report.outcomes:
        results.append(
            {
                "input": outcome.input,
                "valid": outcome.ok,
                "rut": rut_payload(outcome.rut) if outcome.rut is not None else None,
                "error": str(outcome.error) if outcome.error is not None else None,
                "error_kind": outcome.error_kind,
            }
        )
    return _write_json({"summary": report.summary(), "results": results}, output_path)
