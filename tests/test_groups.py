import pytest

from sysprov.groups import GroupRecord, group_request, group_state, parse_group_id


def test_request_takes_changed_name():
    record = group_request(None, False, {"name": "developers"})
    assert record.name == "developers"


def test_request_without_name_change_leaves_name_empty():
    record = group_request(100, True, {})
    assert record.name == ""
    assert record.gid == 100
    assert record.system is True


def test_request_missing_gid_defaults_to_minus_one():
    record = group_request(None, False, {"name": "staff"})
    assert record.gid == -1
    assert record.system is False


def test_request_rejects_non_integer_gid():
    with pytest.raises(TypeError):
        group_request("7", False, {})


def test_state_round_trip():
    record = GroupRecord(name="staff", gid=50, system=True)
    state = group_state(record)
    assert state == {"name": "staff", "gid": 50, "system": True}
    rebuilt = group_request(state["gid"], state["system"], {"name": state["name"]})
    assert rebuilt == record


@pytest.mark.parametrize("text,expected", [("42", 42), ("0", 0), ("-1", -1), ("+7", 7)])
def test_parse_group_id(text, expected):
    assert parse_group_id(text) == expected


@pytest.mark.parametrize("text", ["", "abc", " 1", "1_000", "4.2"])
def test_parse_group_id_invalid(text):
    with pytest.raises(ValueError):
        parse_group_id(text)


def test_parse_group_id_round_trips_gid():
    assert parse_group_id(str(1234)) == 1234