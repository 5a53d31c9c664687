"""The file data source: meta information and content of a remote file."""

from __future__ import annotations

from typing import Any, Dict

from .files import ATTR_CONTENT, FileRecord, _read_content, file_meta_state

DATA_FILE_NAME = "system_file"


def file_data_state(record: FileRecord) -> Dict[str, Any]:
    """Return the state of the file data source, including the file content."""
    state = file_meta_state(record)
    state[ATTR_CONTENT] = None if record.content is None else _read_content(record.content)
    return state