"""Environment variable helpers and membership checks."""

from __future__ import annotations

import os
from typing import Iterable


def has(key: str) -> bool:
    """Return True if the environment variable is set."""
    return key in os.environ


def set_env(key: str, value: str) -> None:
    """Set an environment variable, raising if the platform rejects it."""
    os.environ[key] = value


def set_optional(key: str, value: str) -> None:
    """Set an environment variable only if it is not already set."""
    if key not in os.environ:
        os.environ[key] = value


def contains(values: Iterable[str], value: str) -> bool:
    """Return True if value is present in values."""
    return any(item == value for item in values)