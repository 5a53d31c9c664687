"""Diagnostics reported back to the caller of a provider operation."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

INTERNAL_DIAGNOSTIC_DETAIL = (
    "this is an internal provider error and should be reported as an issue"
)


class Severity(enum.Enum):
    """How serious a diagnostic is."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single message about an operation, optionally tied to an attribute."""

    severity: Severity
    summary: str
    detail: str = ""
    attribute_path: Optional[Sequence[str]] = None


class DiagnosticError(Exception):
    """Raised when an operation produces error diagnostics."""

    def __init__(self, diagnostics: Iterable[Diagnostic]) -> None:
        self.diagnostics: List[Diagnostic] = list(diagnostics)
        super().__init__("; ".join(d.summary for d in self.diagnostics))


def _diagnostic(
    severity: Severity,
    summary: str,
    detail: str = "",
    path: Optional[Sequence[str]] = None,
) -> Diagnostic:
    return Diagnostic(
        severity=severity,
        summary=summary,
        detail=detail,
        attribute_path=None if path is None else tuple(path),
    )


def short_diagnostic(severity: Severity, summary: str) -> List[Diagnostic]:
    """Return a list holding one diagnostic with only a summary."""
    return [_diagnostic(severity, summary)]


def detailed_diagnostic(
    severity: Severity,
    summary: str,
    detail: str,
    path: Optional[Sequence[str]],
) -> List[Diagnostic]:
    """Return a list holding one diagnostic with detail and attribute path."""
    return [_diagnostic(severity, summary, detail, path)]


def internal_error(summary: str) -> List[Diagnostic]:
    """Return an error diagnostic that marks an internal fault."""
    return [_diagnostic(Severity.ERROR, summary, INTERNAL_DIAGNOSTIC_DETAIL)]


def internal_unexpected_type(expected: str, actual: Any) -> List[Diagnostic]:
    """Return an error diagnostic about a value of an unexpected type."""
    summary = f"expected type {expected}, got unexpected type {type(actual).__name__}"
    return [_diagnostic(Severity.ERROR, summary, INTERNAL_DIAGNOSTIC_DETAIL)]