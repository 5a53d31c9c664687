import re

from sysprov.data_ids import data_id_from_attr_values
from sysprov.info import Identity, Release, identity_data, release_data

_HEX40 = re.compile(r"[0-9a-f]{40}")


def test_identity_data_attributes():
    state = identity_data(Identity(name="root", uid=0, group="root", gid=0))
    assert state["user"] == "root"
    assert state["uid"] == 0
    assert state["group"] == "root"
    assert state["gid"] == 0


def test_identity_id_is_sha1_hex():
    state = identity_data(Identity(name="root", uid=0, group="root", gid=0))
    identifier = state["id"]
    assert len(identifier) == 40
    assert set(identifier) <= set("0123456789abcdef")


def test_identity_id_matches_attribute_id():
    state = identity_data(Identity(name="daemon", uid=2, group="daemon", gid=2))
    assert state["id"] == data_id_from_attr_values("daemon", 2, "daemon", 2)


def test_identity_id_depends_on_uid():
    a = identity_data(Identity(name="root", uid=0, group="root", gid=0))
    b = identity_data(Identity(name="root", uid=1, group="root", gid=0))
    assert a["id"] != b["id"]
    assert a["user"] == b["user"]


def test_release_data_attributes():
    release = Release(
        name="Debian GNU/Linux 11 (bullseye)", vendor="debian", version="11", release="bullseye"
    )
    state = release_data(release)
    assert state["name"] == "Debian GNU/Linux 11 (bullseye)"
    assert state["vendor"] == "debian"
    assert state["version"] == "11"
    assert state["release"] == "bullseye"


def test_release_id_deterministic_and_matches():
    release = Release(name="Alpine Linux v3.14", vendor="alpine", version="3.14.1", release="")
    first = release_data(release)
    second = release_data(release)
    assert first["id"] == second["id"]
    assert first["id"] == data_id_from_attr_values("Alpine Linux v3.14", "alpine", "3.14.1", "")
    assert _HEX40.fullmatch(first["id"]) is not None


def test_release_id_depends_on_vendor():
    a = release_data(Release(name="x", vendor="alpine", version="1", release=""))
    b = release_data(Release(name="x", vendor="debian", version="1", release=""))
    assert a["id"] != b["id"]