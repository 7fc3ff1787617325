"""
Registry of the configuration versions this release can read.

Every historical version maps to its frozen snapshot model, the version that
followed it and the forward conversion between the two. The loader walks
this registry one hop at a time until it reaches :data:`VERSION`.

Development versions are special: they were only ever written by unreleased
builds, so a single stable release (the *bridging release*) knows how to
update them. Any other release refuses them and points the user at it.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Type

from loguru import logger
from pydantic import BaseModel
from semantic_version import Version

from .. import __version__
from ..exceptions import UnsupportedDevelopmentVersion, UnsupportedVersion
from . import conversions
from .models import VERSION
from .snapshots import v0_1, v0_2_dev_0, v0_2_dev_1, v0_2_dev_2, v0_2_dev_3

# The running release, compared against bridging releases.
RELEASE: str = __version__


@dataclass(frozen=True)
class Snapshot:
    """
    A historical configuration version.

    Attributes:
        version: The version tag written in the file
        model: The frozen pydantic model of that version
        next_version: The version the forward conversion produces
        upgrade: The forward conversion from ``model`` to ``next_version``
    """

    version: str
    model: Type[BaseModel]
    next_version: str
    upgrade: Callable[[Any], BaseModel]


SNAPSHOTS: Dict[str, Snapshot] = {
    v0_1.VERSION: Snapshot(v0_1.VERSION, v0_1.Config, VERSION, conversions.v0_1_to_v0_2),
    v0_2_dev_0.VERSION: Snapshot(
        v0_2_dev_0.VERSION, v0_2_dev_0.Config, v0_2_dev_1.VERSION,
        conversions.v0_2_dev_0_to_v0_2_dev_1,
    ),
    v0_2_dev_1.VERSION: Snapshot(
        v0_2_dev_1.VERSION, v0_2_dev_1.Config, v0_2_dev_2.VERSION,
        conversions.v0_2_dev_1_to_v0_2_dev_2,
    ),
    v0_2_dev_2.VERSION: Snapshot(
        v0_2_dev_2.VERSION, v0_2_dev_2.Config, v0_2_dev_3.VERSION,
        conversions.v0_2_dev_2_to_v0_2_dev_3,
    ),
    v0_2_dev_3.VERSION: Snapshot(
        v0_2_dev_3.VERSION, v0_2_dev_3.Config, VERSION,
        conversions.v0_2_dev_3_to_v0_2,
    ),
}

# Development version -> the only release able to update it.
DEVELOPMENT_VERSIONS: Dict[str, str] = {
    v0_2_dev_0.VERSION: "0.2.0",
    v0_2_dev_1.VERSION: "0.2.0",
    v0_2_dev_2.VERSION: "0.2.0",
    v0_2_dev_3.VERSION: "0.2.0",
}


def is_development_version(version: str) -> bool:
    return version in DEVELOPMENT_VERSIONS


def bridge_is_open(version: str, release: Optional[str] = None) -> bool:
    """
    Tell whether ``release`` can still read the development ``version``.

    Args:
        version: A development version tag
        release: The release to check; the running release when None

    Returns:
        True only when ``release`` is the bridging release of ``version``
    """
    release = RELEASE if release is None else release
    return Version(release) == Version(DEVELOPMENT_VERSIONS[version])


def check_supported(version: str) -> None:
    """
    Raise if ``version`` cannot be read by the running release.

    Raises:
        UnsupportedDevelopmentVersion: For a development version outside its bridge
        UnsupportedVersion: For any tag that is neither current nor registered
    """
    if version == VERSION:
        return
    if is_development_version(version) and not bridge_is_open(version):
        logger.error(f"Development version {version} can only be updated by git-z {DEVELOPMENT_VERSIONS[version]}")
        raise UnsupportedDevelopmentVersion(version, DEVELOPMENT_VERSIONS[version])
    if version not in SNAPSHOTS:
        logger.error(f"Unsupported configuration version {version}")
        raise UnsupportedVersion(version)


def upgrade_path(version: str) -> List[Snapshot]:
    """
    List the snapshots to go through from ``version`` to :data:`VERSION`.

    Raises:
        UnsupportedVersion: If the chain leads to an unregistered version
    """
    path = []
    while version != VERSION:
        snapshot = SNAPSHOTS.get(version)
        if snapshot is None:
            raise UnsupportedVersion(version)
        path.append(snapshot)
        version = snapshot.next_version
    return path


__all__ = [
    "RELEASE",
    "VERSION",
    "Snapshot",
    "SNAPSHOTS",
    "DEVELOPMENT_VERSIONS",
    "is_development_version",
    "bridge_is_open",
    "check_supported",
    "upgrade_path",
]
