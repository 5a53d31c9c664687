"""Parsing of os-release identification files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from dotenv import dotenv_values

ALPINE_ID = "alpine"
DEBIAN_ID = "debian"
FEDORA_ID = "fedora"


@dataclass(frozen=True)
class Info:
    """Operating system identification."""

    name: str = ""
    id: str = ""
    pretty_name: str = ""
    version: str = ""
    version_id: str = ""


_KEYS = {
    "name": "NAME",
    "id": "ID",
    "pretty_name": "PRETTY_NAME",
    "version": "VERSION",
    "version_id": "VERSION_ID",
}


def parse(stream: TextIO) -> Info:
    """Parse the KEY=value content of an os-release file."""
    values = dotenv_values(stream=stream)
    return Info(**{attr: values.get(key) or "" for attr, key in _KEYS.items()})