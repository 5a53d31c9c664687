"""Structured log field builders."""

from __future__ import annotations

from typing import Any, Callable, Dict

Field = Callable[[Dict[str, Any]], None]


def package(pkg: str) -> Field:
    """Return a field that records the originating package."""

    def apply(fields: Dict[str, Any]) -> None:
        fields["package"] = pkg

    return apply


def error(err: BaseException) -> Field:
    """Return a field that records the message of an error."""

    def apply(fields: Dict[str, Any]) -> None:
        fields["error"] = str(err)

    return apply


def additional_fields(*args: Field) -> Dict[str, Any]:
    """Apply the given fields in order and return the resulting mapping."""
    result: Dict[str, Any] = {}
    for field in args:
        field(result)
    return result