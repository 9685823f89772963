from __future__ import annotations

"""backend/diagkit/services/information.py

Release information for the running build.

A version's release type is decided by its semver build metadata only:

- no build metadata                         -> production
- a 7 or 40 character hex commit hash       -> snapshot
- any other build metadata, or unparseable  -> unknown

The prerelease tag never matters: 1.0.0-beta.19 is a production release,
1.0.0-beta.19+6374412 a snapshot.
"""

import logging
import re
from enum import Enum
from importlib import metadata

from diagkit import __version__

logger = logging.getLogger(__name__)

DISTRIBUTION_NAME = "diagkit"

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
_SEMVER_PATTERN = re.compile(
    r"(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

# Short and full git commit hashes
_COMMIT_HASH_PATTERN = re.compile(r"[0-9a-fA-F]{7}|[0-9a-fA-F]{40}")


class ReleaseType(str, Enum):
    PRODUCTION = "production"
    SNAPSHOT = "snapshot"
    UNKNOWN = "unknown"
    # Reserved for unpublished release builds; never returned by get_release_type.
    DRAFT = "draft"


RELEASE_TYPE: dict[str, str] = {member.name: member.value for member in ReleaseType}


def parse_build_metadata(version: str) -> str | None:
    """Return the build metadata of a semver string, or None if it has none.

    Raises ValueError when `version` is not a valid semver string.
    """
    if not isinstance(version, str):
        raise ValueError(f"Expected a version string, got {type(version).__name__}")
    match = _SEMVER_PATTERN.fullmatch(version)
    if match is None:
        raise ValueError(f"Invalid semantic version: {version!r}")
    return match.group("build")


def get_release_type(version: str) -> ReleaseType:
    try:
        build = parse_build_metadata(version)
    except ValueError as exc:
        logger.debug("Treating version as unknown release: %s", exc)
        return ReleaseType.UNKNOWN

    if build is None:
        return ReleaseType.PRODUCTION
    if _COMMIT_HASH_PATTERN.fullmatch(build):
        return ReleaseType.SNAPSHOT
    return ReleaseType.UNKNOWN


def get_current_version() -> str:
    """Return the declared version of the installed diagkit distribution.

    Falls back to diagkit.__version__ when running from a source tree
    without installed metadata.
    """
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        logger.debug("No installed metadata for %s, using package version", DISTRIBUTION_NAME)
        return __version__
