"""The group resource: request and state mapping."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

RESOURCE_GROUP_NAME = "system_group"

ATTR_ID = "id"
ATTR_NAME = "name"
ATTR_GID = "gid"
ATTR_SYSTEM = "system"

_DECIMAL = re.compile(r"[+-]?[0-9]+")


@dataclass
class GroupRecord:
    """A group on the remote system.

    An empty name means "unchanged" and a gid of -1 lets the system pick one.
    """

    name: str = ""
    gid: int = -1
    system: bool = False


def _optional_id(value: Any) -> int:
    if value is None:
        return -1
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer gid, got {type(value).__name__}")
    return value


def group_request(gid: Optional[int], system: bool, changes: Mapping[str, Any]) -> GroupRecord:
    """Build the record to create or update a group.

    ``gid`` is the configured gid or None, ``system`` the configured flag, and
    ``changes`` holds only the attributes that changed, with their new values.
    """
    if not isinstance(system, bool):
        raise TypeError(f"expected boolean for {ATTR_SYSTEM!r}, got {type(system).__name__}")
    record = GroupRecord(gid=_optional_id(gid), system=system)
    if ATTR_NAME in changes:
        record.name = changes[ATTR_NAME] or ""
    return record


def group_state(record: GroupRecord) -> Dict[str, Any]:
    """Return the resource state of a group."""
    return {
        ATTR_NAME: record.name,
        ATTR_GID: record.gid,
        ATTR_SYSTEM: record.system,
    }


def parse_group_id(group_id: str) -> int:
    """Parse the resource id of a group, which is its decimal gid."""
    if not isinstance(group_id, str) or not _DECIMAL.fullmatch(group_id):
        raise ValueError(f"invalid group id: {group_id!r}")
    return int(group_id)