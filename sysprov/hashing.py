"""Hash helpers for byte streams."""

from __future__ import annotations

import hashlib
import io
from typing import BinaryIO

_CHUNK = 64 * 1024


def from_reader(h, reader: BinaryIO) -> bytes:
    """Feed everything read from reader into hash h and return its digest."""
    for chunk in iter(lambda: reader.read(_CHUNK), b""):
        h.update(chunk)
    return h.digest()


def sha1_bytes(data: bytes) -> bytes:
    """Return the SHA-1 digest of data."""
    return from_reader(hashlib.sha1(), io.BytesIO(data))