import hashlib

from sysprov.data_ids import data_id_from_attr_values


def test_no_values_hashes_empty_string():
    assert data_id_from_attr_values() == "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def test_single_string_is_hashed_as_is():
    assert data_id_from_attr_values("abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_values_are_joined_with_pipe():
    assert data_id_from_attr_values("a", "b", "c") == data_id_from_attr_values("a|b|c")


def test_bytes_and_str_are_equivalent():
    assert data_id_from_attr_values("x", b"Linux\n") == data_id_from_attr_values("x", "Linux\n")


def test_integer_rendering():
    expected = hashlib.sha1(b"root|%!s(int=0)").hexdigest()
    assert data_id_from_attr_values("root", 0) == expected


def test_id_is_deterministic_hex():
    first = data_id_from_attr_values("Alpine Linux v3.14", "alpine", "3.14.1", "")
    second = data_id_from_attr_values("Alpine Linux v3.14", "alpine", "3.14.1", "")
    assert first == second
    assert len(first) == 40
    assert int(first, 16) >= 0


def test_integer_and_string_differ():
    as_int = data_id_from_attr_values(1)
    as_str = data_id_from_attr_values("1")
    assert len({as_int, as_str}) == 2