"""
Resolution of the latest release tag.
"""

import logging
import re
from typing import Iterable, Optional, Tuple

from autoversion.core.interfaces import VersionControl

from .exceptions import VersionControlError
from .version import Comparison, VersionIdentifier, compare_versions, parse_version

logger = logging.getLogger(__name__)

DEFAULT_TAG_PREFIX = "v"

_FIRST_DIGIT = re.compile(r"[0-9]")


def strip_marker_prefix(name: str) -> Optional[str]:
    """
    Remove any non-numeric prefix from a tag name.

    Args:
        name: Tag name such as "v1.2.3+4" or "release-1.2.3"

    Returns:
        The version part of the name, or None if it contains no digits
    """
    match = _FIRST_DIGIT.search(name)
    if not match:
        return None
    return name[match.start() :].strip()


def latest_marker(names: Iterable[str]) -> Optional[Tuple[str, VersionIdentifier]]:
    """
    Pick the tag carrying the highest version.

    Names are ordered by semantic version first and build number second.
    Names that carry no version at all are ignored.
    """
    latest = None
    latest_name = None
    for name in names:
        version_string = strip_marker_prefix(name)
        if version_string is None:
            logger.debug(f"Ignoring tag without a version: {name}")
            continue
        version = parse_version(version_string)
        if version is None:
            continue
        if latest is None or compare_versions(version, latest) == Comparison.GREATER:
            latest = version
            latest_name = name
    if latest is None:
        return None
    return latest_name, latest


class MarkerResolver:
    """
    Finds the most recently published release tag.

    Failures are not fatal. A failed fetch falls back to the local tags; a
    failed listing is treated like a repository without tags, which sends the
    run down the first-release path.
    """

    def __init__(self, vcs: VersionControl, tag_prefix: str = DEFAULT_TAG_PREFIX):
        self.vcs = vcs
        self.tag_prefix = tag_prefix

    def resolve_latest(self) -> Optional[VersionIdentifier]:
        """
        Get the version of the latest tag.

        Returns:
            The latest tagged version, or None if no tags exist
        """
        try:
            self.vcs.fetch_markers()
        except VersionControlError as e:
            logger.warning(f"⚠️  Could not fetch tags, using local tags: {e}")

        try:
            names = [n.strip() for n in self.vcs.list_markers() if n.strip()]
        except VersionControlError as e:
            logger.warning(f"⚠️  Error getting latest tag: {e}")
            return None

        found = latest_marker(names)
        if found is None:
            logger.info("No previous tags found - this is the first release")
            return None

        name, latest = found
        logger.info(f"📌 Found latest tag: {name} (version: {latest})")
        return latest
