"""Parsing of ``stat`` command output into file metadata."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Union

PACKAGE_NAME = "stat"

FORMAT_JSON_GNU = (
    '{"plat":"gnu","mode":"%f","name":"%N","user":"%U","uid":"%u",'
    '"group":"%G","gid":"%g","size":"%s","atime":"%X","mtime":"%Y","ctime":"%Z"}'
)
FORMAT_TERSE_GNU = "%n %s %b %f %u %g %D %i %h %t %T %X %Y %Z %o"

MODE_TYPE = 0o170000
MODE_SOCKET = 0o140000
MODE_SYMLINK = 0o120000
MODE_REGULAR_FILE = 0o100000
MODE_BLOCK_DEVICE = 0o060000
MODE_DIRECTORY = 0o040000
MODE_CHAR_DEVICE = 0o020000
MODE_NAMED_PIPE = 0o010000
MODE_SETUID = 0o004000
MODE_SETGID = 0o002000
MODE_STICKY = 0o001000
MODE_PERM = 0o777

_SYMLINK_NAME = re.compile(r"'([^']*)' -> '([^']*)'")
_DECIMAL = re.compile(r"[+-]?[0-9]+")
_HEX = re.compile(r"[0-9a-fA-F]+")
_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class ParseError(ValueError):
    """Raised when ``stat`` output cannot be parsed."""

    def __init__(self, msg: str = "") -> None:
        super().__init__(msg)
        self.msg = msg

    def __str__(self) -> str:
        text = f"{PACKAGE_NAME}.ParseError"
        return f"{text}: {self.msg}" if self.msg else text


class FileMode(int):
    """A 16-bit Linux file mode including type bits."""

    def is_regular(self) -> bool:
        return self & MODE_REGULAR_FILE == MODE_REGULAR_FILE

    def is_dir(self) -> bool:
        return self & MODE_DIRECTORY == MODE_DIRECTORY

    def is_symlink(self) -> bool:
        return self & MODE_SYMLINK == MODE_SYMLINK

    def perm(self) -> "FileMode":
        return FileMode(self & MODE_PERM)

    def permission_string(self) -> str:
        """Render the permission bits as ``-rwxr-xr-x``."""
        bits = self & MODE_PERM
        letters = "rwxrwxrwx"
        return "-" + "".join(
            letter if bits & (1 << (8 - pos)) else "-"
            for pos, letter in enumerate(letters)
        )


@dataclass
class Stat:
    """File metadata reported by ``stat``."""

    platform: str = ""
    mode: FileMode = field(default_factory=lambda: FileMode(0))
    name: str = ""
    target: str = ""
    user: str = ""
    uid: int = 0
    group: str = ""
    gid: int = 0
    size: int = 0
    access_time: datetime = _ZERO_TIME
    modified_time: datetime = _ZERO_TIME
    change_time: datetime = _ZERO_TIME

    def to_file_info(self) -> "StatFileInfo":
        return StatFileInfo(self)


class StatFileInfo:
    """Generic file-info view over a Stat."""

    def __init__(self, stat: Stat) -> None:
        self._stat = stat

    def name(self) -> str:
        return self._stat.name

    def size(self) -> int:
        return self._stat.size

    def mode(self) -> FileMode:
        return self._stat.mode.perm()

    def mod_time(self) -> datetime:
        return self._stat.change_time

    def is_dir(self) -> bool:
        return self._stat.mode.is_dir()


def _parse_signed(text: str, bits: int = 64) -> int:
    if not _DECIMAL.fullmatch(text):
        raise ValueError(text)
    value = int(text)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(text)
    return value


def _parse_hex(text: str, bits: int) -> int:
    if not _HEX.fullmatch(text):
        raise ValueError(text)
    value = int(text, 16)
    if value >= 1 << bits:
        raise ValueError(text)
    return value


def _parse_epoch(text: str) -> datetime:
    return datetime.fromtimestamp(_parse_signed(text), tz=timezone.utc)


def _unquote_single(text: str) -> str:
    if len(text) >= 2 and text.startswith("'") and text.endswith("'"):
        return text[1:-1]
    return text


def _convert(text: str, parser, message: str):
    try:
        return parser(text)
    except (ValueError, OverflowError, OSError):
        raise ParseError(message) from None


def parse_json_format(data: Union[bytes, str]) -> Stat:
    """Parse ``stat`` output produced with FORMAT_JSON_GNU."""
    try:
        raw = json.loads(data)
    except ValueError as exc:
        raise ParseError(f"invalid json: {exc}") from None
    if not isinstance(raw, dict):
        raise ParseError("invalid json: expected an object")

    def text(key: str) -> str:
        value = raw.get(key, "")
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ParseError(f"invalid json: field {key!r} is not a string")
        return value

    mode_text = text("mode")
    mode = FileMode(
        _convert(mode_text, lambda s: _parse_hex(s, 16), f"failed to parse mode '{mode_text}'")
    )

    raw_name = text("name")
    target = ""
    if mode.is_symlink():
        match = _SYMLINK_NAME.fullmatch(raw_name)
        if match is None:
            raise ParseError(f"unexpected name '{raw_name}' for symlink")
        name, target = match.group(1), match.group(2)
    else:
        name = _unquote_single(raw_name)

    size = _convert(text("size"), _parse_signed, f"failed to parse size {text('size')}")
    uid = _convert(text("uid"), _parse_signed, f"failed to parse uid {text('uid')}")
    gid = _convert(text("gid"), _parse_signed, f"failed to parse gid {text('gid')}")
    atime = _convert(text("atime"), _parse_epoch, f"failed to parse access time {text('atime')}")
    mtime = _convert(text("mtime"), _parse_epoch, f"failed to parse modified time {text('mtime')}")
    ctime = _convert(text("ctime"), _parse_epoch, f"failed to parse change time {text('ctime')}")

    return Stat(
        platform=text("plat"),
        mode=mode,
        name=name,
        target=target,
        user=text("user"),
        uid=uid,
        group=text("group"),
        gid=gid,
        size=size,
        access_time=atime,
        modified_time=mtime,
        change_time=ctime,
    )


_TERSE_FIELDS = 15


def parse_terse_format(data: Union[bytes, str]) -> Stat:
    """Parse ``stat`` output produced with FORMAT_TERSE_GNU."""
    text = data.decode() if isinstance(data, bytes) else data
    parts = text.split(" ")
    if len(parts) < _TERSE_FIELDS:
        raise ParseError("invalid format")
    if len(parts) > _TERSE_FIELDS:
        # The file name contains spaces: rejoin the leading parts.
        split_at = len(parts) - _TERSE_FIELDS + 1
        parts = [" ".join(parts[:split_at]), *parts[split_at:]]

    name = parts[0]
    size = _convert(parts[1], _parse_signed, f"failed to parse size {parts[1]}")
    mode_value = _convert(
        parts[3], lambda s: _parse_hex(s, 32), f"failed to parse mode '{parts[3]}'"
    )
    atime = _convert(parts[11], _parse_epoch, f"failed to parse access time {parts[11]}")
    mtime = _convert(parts[12], _parse_epoch, f"failed to parse modified time {parts[12]}")
    ctime = _convert(parts[13], _parse_epoch, f"failed to parse change time {parts[13]}")

    return Stat(
        mode=FileMode(mode_value & 0xFFFF),
        name=name,
        size=size,
        access_time=atime,
        modified_time=mtime,
        change_time=ctime,
    )