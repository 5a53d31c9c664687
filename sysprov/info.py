"""The identity and release data sources."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .data_ids import data_id_from_attr_values

DATA_IDENTITY_NAME = "system_identity"
DATA_RELEASE_NAME = "system_release"


@dataclass(frozen=True)
class Identity:
    """The user on the remote system and its primary group."""

    name: str
    uid: int
    group: str
    gid: int


@dataclass(frozen=True)
class Release:
    """The operating system distribution of the remote system."""

    name: str
    vendor: str
    version: str
    release: str


def identity_data(identity: Identity) -> Dict[str, Any]:
    """Return the state of the identity data source."""
    return {
        "id": data_id_from_attr_values(
            identity.name, identity.uid, identity.group, identity.gid
        ),
        "user": identity.name,
        "uid": identity.uid,
        "group": identity.group,
        "gid": identity.gid,
    }


def release_data(release: Release) -> Dict[str, Any]:
    """Return the state of the release data source."""
    return {
        "id": data_id_from_attr_values(
            release.name, release.vendor, release.version, release.release
        ),
        "name": release.name,
        "vendor": release.vendor,
        "version": release.version,
        "release": release.release,
    }