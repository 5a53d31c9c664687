"""HTTP entity tag (ETag) header parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass

HEADER_KEY = "etag"

_HEADER_PATTERN = re.compile(r'(W/)?"(.*)"')


class HeaderParseError(ValueError):
    """Raised when an ETag header value is malformed."""


@dataclass(frozen=True)
class Header:
    """An entity tag; weak tags only guarantee semantic equivalence."""

    etag: str
    weak: bool = False

    def __str__(self) -> str:
        value = f'"{self.etag}"'
        return f"W/{value}" if self.weak else value


def parse(header: str) -> Header:
    """Parse an ETag header value such as ``W/"abc"`` or ``"abc"``."""
    match = _HEADER_PATTERN.fullmatch(header)
    if match is None:
        raise HeaderParseError(f"invalid etag header: {header}")
    return Header(etag=match.group(2), weak=match.group(1) is not None)