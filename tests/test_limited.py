import io

import pytest

from sysprov.limited import LimitedWriter


def test_write_within_limit():
    sink = io.BytesIO()
    writer = LimitedWriter(sink, 10)
    assert writer.write(b"hello") == 5
    assert sink.getvalue() == b"hello"
    assert writer.remaining == 5


def test_write_truncates_at_limit():
    sink = io.BytesIO()
    writer = LimitedWriter(sink, 3)
    assert writer.write(b"hello") == 3
    assert sink.getvalue() == b"hello"[:3]
    assert writer.remaining == 0


def test_write_after_limit_raises():
    writer = LimitedWriter(io.BytesIO(), 2)
    writer.write(b"ab")
    with pytest.raises(EOFError):
        writer.write(b"c")


def test_zero_limit_raises_immediately():
    sink = io.BytesIO()
    writer = LimitedWriter(sink, 0)
    with pytest.raises(EOFError):
        writer.write(b"x")
    assert sink.getvalue() == b""


def test_multiple_writes_accumulate():
    sink = io.BytesIO()
    writer = LimitedWriter(sink, 4)
    writer.write(b"ab")
    assert writer.write(b"cdef") == 2
    assert sink.getvalue() == b"abcd"