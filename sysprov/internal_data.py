"""Opaque internal data stored alongside resource state."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from .diagnostics import DiagnosticError, Severity, detailed_diagnostic, short_diagnostic

INTERNAL_DATA_SCHEMA_KEY = "internal"


def encode_internal_data(value: Any) -> str:
    """Serialise value as JSON and return it base64 encoded."""
    try:
        encoded_json = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise DiagnosticError(
            detailed_diagnostic(
                Severity.ERROR, "failed to marshal internal resource data", str(exc), None
            )
        ) from exc
    return base64.b64encode(encoded_json.encode("utf-8")).decode("ascii")


def decode_internal_data(encoded: Any) -> Any:
    """Decode internal data; returns None when nothing is stored."""
    if encoded is None or encoded == "":
        return None
    if not isinstance(encoded, str):
        raise DiagnosticError(
            short_diagnostic(Severity.ERROR, "failed to decode internal resource data")
        )
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DiagnosticError(
            detailed_diagnostic(
                Severity.ERROR, "failed to decode internal resource data", str(exc), None
            )
        ) from exc
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise DiagnosticError(
            detailed_diagnostic(
                Severity.ERROR, "failed to unmarshal internal resource data", str(exc), None
            )
        ) from exc