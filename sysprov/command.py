"""The command data source: expectations and result state."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .data_ids import data_id_from_attr_values
from .diagnostics import DiagnosticError, Severity, short_diagnostic
from .limited import LimitedWriter

DATA_COMMAND_NAME = "system_command"

STDOUT_LIMIT_DEFAULT = 65536
STDERR_LIMIT_DEFAULT = 65536


@dataclass(frozen=True)
class CommandExpect:
    """What a command is expected to do and which output to capture."""

    exit_code: int = 0
    stdout: bool = True
    stdout_limit: int = STDOUT_LIMIT_DEFAULT
    stderr: bool = True
    stderr_limit: int = STDERR_LIMIT_DEFAULT

    def stdout_writer(self, writer) -> Optional[LimitedWriter]:
        """Wrap writer to capture stdout within its limit, or None if not captured."""
        return LimitedWriter(writer, self.stdout_limit) if self.stdout else None

    def stderr_writer(self, writer) -> Optional[LimitedWriter]:
        """Wrap writer to capture stderr within its limit, or None if not captured."""
        return LimitedWriter(writer, self.stderr_limit) if self.stderr else None


@dataclass(frozen=True)
class CommandData:
    """Computed state of the command data source."""

    id: str
    command: str
    exit_code: int
    stdout: str
    stderr: str


def _int_field(block: Mapping[str, Any], key: str, default: int) -> int:
    value = block.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer for {key!r}, got {type(value).__name__}")
    return value


def _bool_field(block: Mapping[str, Any], key: str, default: bool) -> bool:
    value = block.get(key, default)
    if not isinstance(value, bool):
        raise TypeError(f"expected boolean for {key!r}, got {type(value).__name__}")
    return value


def _limit_field(block: Mapping[str, Any], key: str, default: int) -> int:
    value = _int_field(block, key, default)
    if value < 0:
        raise ValueError(f"expected {key} to be at least (0), got {value}")
    return value


def expand_command_expect(value: Any) -> CommandExpect:
    """Build a CommandExpect from a single-element list holding the expect block."""
    if isinstance(value, Mapping) or not isinstance(value, (list, tuple)):
        raise TypeError("expected a list with a single expect block")
    if len(value) != 1:
        raise ValueError(f"expected exactly one expect block, got {len(value)}")
    block = value[0]
    if not isinstance(block, Mapping):
        raise TypeError(f"expected a mapping, got {type(block).__name__}")
    return CommandExpect(
        exit_code=_int_field(block, "exit_code", 0),
        stdout=_bool_field(block, "stdout", True),
        stdout_limit=_limit_field(block, "stdout_limit", STDOUT_LIMIT_DEFAULT),
        stderr=_bool_field(block, "stderr", True),
        stderr_limit=_limit_field(block, "stderr_limit", STDERR_LIMIT_DEFAULT),
    )


def default_command_expect() -> CommandExpect:
    """Return the expectations used when no expect block is given."""
    return CommandExpect()


def command_data(
    command: str,
    expect: Optional[CommandExpect],
    exit_code: int,
    stdout: Optional[bytes],
    stderr: Optional[bytes],
) -> CommandData:
    """Check a command result against expectations and build its state."""
    expect = expect or default_command_expect()
    if exit_code != expect.exit_code:
        raise DiagnosticError(
            short_diagnostic(
                Severity.ERROR,
                f"expected exit code {expect.exit_code}, got exit code {exit_code}",
            )
        )
    out = bytes(stdout or b"")
    err = bytes(stderr or b"")
    return CommandData(
        id=data_id_from_attr_values(command, exit_code, out, err),
        command=command,
        exit_code=exit_code,
        stdout=base64.b64encode(out).decode("ascii"),
        stderr=base64.b64encode(err).decode("ascii"),
    )