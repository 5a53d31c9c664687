"""A writer that accepts at most a fixed number of bytes."""

from __future__ import annotations


class LimitedWriter:
    """Writes to an underlying writer but stops after ``limit`` bytes.

    A write longer than the remaining budget is truncated and reports the
    shorter count; once the budget is spent, further writes raise EOFError.
    """

    def __init__(self, writer, limit: int) -> None:
        self.writer = writer
        self.remaining = limit

    def write(self, data: bytes) -> int:
        if self.remaining <= 0:
            raise EOFError("write limit reached")
        chunk = bytes(data[: self.remaining])
        written = self.writer.write(chunk)
        if written is None:
            written = len(chunk)
        self.remaining -= written
        return written