"""Batch validation of RUT strings.

Runs `Rut.from_text` over many inputs (typically lines of a file) and keeps
every outcome, so the CLI can render a table and export a report without
re-parsing. Failures are captured per input; no exception escapes for a
single bad value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from rut_lib.core.domain.errors import RutError
from rut_lib.core.domain.models import Rut


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating one input value."""

    input: str
    rut: Rut | None = None
    error: RutError | None = None

    @property
    def ok(self) -> bool:
        return self.rut is not None

    @property
    def error_kind(self) -> str | None:
        return type(self.error).__name__ if self.error is not None else None


@dataclass
class BatchReport:
    """Output of `validate_many`."""

    outcomes: list[ValidationOutcome] = field(default_factory=list)

    @property
    def valid(self) -> list[ValidationOutcome]:
        return [o for o in self.outcomes if o.ok]

    @property
    def invalid(self) -> list[ValidationOutcome]:
        return [o for o in self.outcomes if not o.ok]

    def summary(self) -> dict[str, int]:
        return {
            "total": len(self.outcomes),
            "valid": len(self.valid),
            "invalid": len(self.invalid),
        }


def validate_one(value: str) -> ValidationOutcome:
    try:
        return ValidationOutcome(input=value, rut=Rut.from_text(value))
    except RutError as exc:
        return ValidationOutcome(input=value, error=exc)


def validate_many(values: Iterable[str]) -> BatchReport:
    """Validate each value; blank entries are skipped, whitespace is stripped."""

    report = BatchReport()
    for raw in values:
        value = raw.strip()
        if not value:
            continue
        report.outcomes.append(validate_one(value))
    return report
