"""Octal permission string conversion."""

from __future__ import annotations

import re

_OCTAL = re.compile(r"[0-7]+")
_MAX = 1 << 32


def format_mode(mode: int) -> str:
    """Format a mode as an octal string without prefix, e.g. ``644``."""
    return format(mode, "o")


def parse(mode: str) -> int:
    """Parse an octal mode string into an integer of at most 32 bits."""
    if not _OCTAL.fullmatch(mode):
        raise ValueError(f"invalid octal file mode: {mode!r}")
    value = int(mode, 8)
    if value >= _MAX:
        raise ValueError(f"file mode out of range: {mode!r}")
    return value


def must_parse(mode: str) -> int:
    """Parse an octal mode string, returning 0 when it is invalid."""
    try:
        return parse(mode)
    except ValueError:
        return 0