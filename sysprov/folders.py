"""The folder and link resources: request and state mapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .filemode import format_mode, must_parse

RESOURCE_FOLDER_NAME = "system_folder"
RESOURCE_LINK_NAME = "system_link"

ATTR_ID = "id"
ATTR_PATH = "path"
ATTR_MODE = "mode"
ATTR_USER = "user"
ATTR_UID = "uid"
ATTR_GROUP = "group"
ATTR_GID = "gid"
ATTR_BASENAME = "basename"
ATTR_TARGET = "target"


@dataclass
class FolderRecord:
    """A folder on the remote system; -1 ids and empty names mean "unchanged"."""

    path: str
    mode: int = 0
    user: str = ""
    uid: int = -1
    group: str = ""
    gid: int = -1


@dataclass
class LinkRecord:
    """A symbolic link on the remote system; empty values mean "unchanged"."""

    path: str
    target: str = ""
    user: str = ""
    uid: int = -1
    group: str = ""
    gid: int = -1


def _base(path: str) -> str:
    """Return the last element of a slash-separated path."""
    if path == "":
        return "."
    stripped = path.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _optional_id(value: Any) -> int:
    if value is None:
        return -1
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer id, got {type(value).__name__}")
    return value


def _apply_ownership(record, changes: Mapping[str, Any]) -> None:
    if ATTR_USER in changes:
        record.user = changes[ATTR_USER] or ""
    if ATTR_UID in changes:
        record.uid = _optional_id(changes[ATTR_UID])
    if ATTR_GROUP in changes:
        record.group = changes[ATTR_GROUP] or ""
    if ATTR_GID in changes:
        record.gid = _optional_id(changes[ATTR_GID])


def folder_request(path: str, changes: Mapping[str, Any]) -> FolderRecord:
    """Build the record to create or update a folder from the changed attributes."""
    record = FolderRecord(path=path)
    if ATTR_MODE in changes:
        record.mode = must_parse(changes[ATTR_MODE] or "")
    _apply_ownership(record, changes)
    return record


def folder_state(record: FolderRecord) -> Dict[str, Any]:
    """Return the resource state of a folder."""
    return {
        ATTR_ID: record.path,
        ATTR_PATH: record.path,
        ATTR_MODE: format_mode(record.mode),
        ATTR_USER: record.user,
        ATTR_UID: record.uid,
        ATTR_GROUP: record.group,
        ATTR_GID: record.gid,
        ATTR_BASENAME: _base(record.path),
    }


def link_request(path: str, changes: Mapping[str, Any]) -> LinkRecord:
    """Build the record to create or update a link from the changed attributes."""
    record = LinkRecord(path=path)
    if ATTR_TARGET in changes:
        record.target = changes[ATTR_TARGET] or ""
    _apply_ownership(record, changes)
    return record


def link_state(record: LinkRecord) -> Dict[str, Any]:
    """Return the resource state of a link."""
    return {
        ATTR_ID: record.path,
        ATTR_PATH: record.path,
        ATTR_TARGET: record.target,
        ATTR_USER: record.user,
        ATTR_UID: record.uid,
        ATTR_GROUP: record.group,
        ATTR_GID: record.gid,
    }