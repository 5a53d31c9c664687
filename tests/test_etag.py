import pytest

from sysprov.etag import Header, HeaderParseError, parse


@pytest.mark.parametrize(
    "header, expected",
    [
        ('"xyzzy"', Header(etag="xyzzy", weak=False)),
        ('W/"xyzzy"', Header(etag="xyzzy", weak=True)),
        ('""', Header(etag="", weak=False)),
    ],
)
def test_parse_valid(header, expected):
    assert parse(header) == expected


@pytest.mark.parametrize("header", ["", 'xyzzy"'])
def test_parse_invalid(header):
    with pytest.raises(HeaderParseError):
        parse(header)


def test_str_strong():
    assert str(Header(etag="xyzzy")) == '"xyzzy"'


def test_str_weak():
    assert str(Header(etag="xyzzy", weak=True)) == 'W/"xyzzy"'


@pytest.mark.parametrize("header", ['"xyzzy"', 'W/"xyzzy"', '""'])
def test_round_trip(header):
    assert str(parse(header)) == header


def test_trailing_newline_rejected():
    with pytest.raises(HeaderParseError):
        parse('"xyzzy"\n')