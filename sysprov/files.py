"""The file resource and the file meta data source: request and state mapping."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, BinaryIO, Callable, Dict, Mapping, Optional, Tuple, Union

from .filemode import format_mode, must_parse

RESOURCE_FILE_NAME = "system_file"
DATA_FILE_META_NAME = "system_file_meta"

ATTR_ID = "id"
ATTR_PATH = "path"
ATTR_MODE = "mode"
ATTR_USER = "user"
ATTR_UID = "uid"
ATTR_GROUP = "group"
ATTR_GID = "gid"
ATTR_CONTENT = "content"
ATTR_CONTENT_SENSITIVE = "content_sensitive"
ATTR_SOURCE = "source"
ATTR_MD5SUM = "md5sum"
ATTR_BASENAME = "basename"

CONTENT_ATTRIBUTES = (ATTR_CONTENT, ATTR_CONTENT_SENSITIVE)

_ETAG_PREFIX = "etag="

Content = Union[bytes, bytearray, str, BinaryIO]


@dataclass
class FileRecord:
    """A file on the remote system; -1 ids and empty names mean "unchanged"."""

    path: str
    mode: int = 0
    user: str = ""
    uid: int = -1
    group: str = ""
    gid: int = -1
    content: Optional[Content] = None
    md5sum: str = ""


def _base(path: str) -> str:
    """Return the last element of a slash-separated path."""
    if path == "":
        return "."
    stripped = path.rstrip("/")
    if stripped == "":
        return "/"
    return stripped.rsplit("/", 1)[-1]


def _read_content(content: Content) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, (bytes, bytearray)):
        raw = bytes(content)
    else:
        raw = content.read()
        if isinstance(raw, str):
            return raw
    return raw.decode("utf-8", errors="surrogateescape")


def file_meta_state(record: FileRecord) -> Dict[str, Any]:
    """Return the computed attributes describing a file, without its content."""
    return {
        ATTR_ID: record.path,
        ATTR_PATH: record.path,
        ATTR_MODE: format_mode(record.mode),
        ATTR_USER: record.user,
        ATTR_UID: record.uid,
        ATTR_GROUP: record.group,
        ATTR_GID: record.gid,
        ATTR_MD5SUM: record.md5sum,
        ATTR_BASENAME: _base(record.path),
    }


def file_state(record: FileRecord, content_attribute: Optional[str]) -> Dict[str, Any]:
    """Return the resource state of a file.

    When the record carries content it is stored under ``content_attribute``,
    or under ``content`` when that is None (as on import). Without content both
    content attributes are cleared.
    """
    if content_attribute is not None and content_attribute not in CONTENT_ATTRIBUTES:
        raise ValueError(f"unexpected content attribute {content_attribute!r}")

    state = file_meta_state(record)
    if record.content is not None:
        state[content_attribute or ATTR_CONTENT] = _read_content(record.content)
    else:
        state[ATTR_CONTENT] = None
        state[ATTR_CONTENT_SENSITIVE] = None
    return state


def _optional_id(value: Any) -> int:
    if value is None:
        return -1
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer id, got {type(value).__name__}")
    return value


def _content_bytes(value: Any) -> Optional[bytes]:
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def file_request(path: str, changes: Mapping[str, Any]) -> FileRecord:
    """Build the record to create or update a file from the changed attributes.

    ``changes`` holds only the attributes that changed, with their new values.
    A changed ``source`` is expected to be an opened binary stream or bytes.
    ``content`` takes precedence over ``content_sensitive``, which takes
    precedence over ``source``.
    """
    record = FileRecord(path=path)

    if ATTR_MODE in changes:
        record.mode = must_parse(changes[ATTR_MODE] or "")
    if ATTR_USER in changes:
        record.user = changes[ATTR_USER] or ""
    if ATTR_UID in changes:
        record.uid = _optional_id(changes[ATTR_UID])
    if ATTR_GROUP in changes:
        record.group = changes[ATTR_GROUP] or ""
    if ATTR_GID in changes:
        record.gid = _optional_id(changes[ATTR_GID])

    if ATTR_CONTENT in changes:
        data = _content_bytes(changes[ATTR_CONTENT])
        record.content = io.BytesIO(data) if data is not None else None
    elif ATTR_CONTENT_SENSITIVE in changes:
        data = _content_bytes(changes[ATTR_CONTENT_SENSITIVE])
        record.content = io.BytesIO(data) if data is not None else None
    elif ATTR_SOURCE in changes:
        source = changes[ATTR_SOURCE]
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))
        record.content = source

    return record


def parse_file_import_id(import_id: str) -> Tuple[str, Optional[str]]:
    """Split an import id ``path[:content|:content_sensitive]``.

    Returns the path and the content attribute to fill, or None.
    """
    parts = import_id.split(":")
    if len(parts) > 2:
        raise ValueError("unexpected import id format")
    if len(parts) == 2:
        if parts[1] not in CONTENT_ATTRIBUTES:
            raise ValueError("unexpected import id format")
        return parts[0], parts[1]
    return parts[0], None


def source_state(value: Any, resolve_etag: Callable[[str], str]) -> str:
    """Return the state value of ``source``: ``etag=<etag>`` of the referenced source."""
    if not isinstance(value, str):
        raise TypeError(
            f"attribute `{ATTR_SOURCE}` in resource `{RESOURCE_FILE_NAME}` "
            f"expects a string but got {value!r}"
        )
    if value.startswith(_ETAG_PREFIX):
        return value
    return f"{_ETAG_PREFIX}{resolve_etag(value)}"