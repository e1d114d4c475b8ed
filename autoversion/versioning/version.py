"""
Version utility module for version string operations.

Versions follow the Flutter/pubspec convention ``major.minor.patch+build``:
a semantic triple followed by an optional build counter. The semantic part is
compared through the standard packaging.version library, the build counter is
a plain integer tiebreak.

Parsing is permissive: malformed components degrade to 0 and a warning is
logged, so none of the functions in this module raise on bad input.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from packaging.version import Version as PackagingVersion

logger = logging.getLogger(__name__)

BOOTSTRAP_VERSION = "1.0.0+1"

_LEADING_DIGITS = re.compile(r"^\s*([0-9]+)")
_DIGITS = re.compile(r"[0-9]+")
_COMPONENT_NAMES = ("major", "minor", "patch")


class Comparison(Enum):
    """Result of comparing two version identifiers."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class VersionIdentifier:
    """
    An immutable ``major.minor.patch+build`` version.

    ``raw`` keeps the string the identifier was parsed from so it can be
    written back or used in a tag name exactly as declared.
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    build: int = 0
    raw: str = ""

    def __post_init__(self):
        if not self.raw:
            object.__setattr__(self, "raw", f"{self.base}+{self.build}")

    @classmethod
    def from_parts(
        cls, major: int, minor: int, patch: int, build: int
    ) -> "VersionIdentifier":
        """Build an identifier whose raw form is ``major.minor.patch+build``."""
        return cls(major, minor, patch, build, f"{major}.{minor}.{patch}+{build}")

    @property
    def base(self) -> str:
        """The semantic part of the version, without the build counter."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def semantic(self) -> PackagingVersion:
        return PackagingVersion(self.base)

    def __str__(self) -> str:
        return self.raw


def _read_int(text: Optional[str], name: str, raw: str) -> int:
    if text is None or text == "":
        logger.warning(f"Version '{raw}' has no {name} component, using 0")
        return 0
    match = _LEADING_DIGITS.match(text)
    if not match:
        logger.warning(f"Version '{raw}' has a non-numeric {name} '{text}', using 0")
        return 0
    if match.group(0).strip() != text.strip():
        logger.warning(
            f"Version '{raw}' has a malformed {name} '{text}', using {match.group(1)}"
        )
    return int(match.group(1))


def parse_version(
    version_string: Union[str, int, float, None],
) -> Optional[VersionIdentifier]:
    """
    Parse a version string into a VersionIdentifier.

    Args:
        version_string: Version string such as "1.2.3+4". Numbers (as loaded
            from YAML) are accepted and converted to strings.

    Returns:
        The parsed identifier, or None if the input is empty.
    """
    if version_string is None:
        return None

    # Handle numeric inputs (float/int from YAML)
    raw = str(version_string).strip()
    if not raw:
        return None

    base_text, plus, build_text = raw.partition("+")
    if plus and _DIGITS.fullmatch(build_text.strip()):
        build = int(build_text)
    else:
        if plus:
            logger.warning(
                f"Version '{raw}' has a non-numeric build number '{build_text}', using 0"
            )
        build = 0

    parts = base_text.split(".")
    components = []
    for index, name in enumerate(_COMPONENT_NAMES):
        text = parts[index] if index < len(parts) else None
        components.append(_read_int(text, name, raw))

    major, minor, patch = components
    return VersionIdentifier(major, minor, patch, build, raw)


def _coerce(
    version: Union[VersionIdentifier, str, None],
) -> Optional[VersionIdentifier]:
    if version is None or isinstance(version, VersionIdentifier):
        return version
    return parse_version(version)


def compare_versions(
    version1: Union[VersionIdentifier, str, None],
    version2: Union[VersionIdentifier, str, None],
) -> Comparison:
    """
    Compare two versions.

    The semantic ``major.minor.patch`` part decides first; the build counter
    only breaks ties. If either version is missing or empty the versions are
    reported as EQUAL.

    Args:
        version1: First version (identifier or string)
        version2: Second version (identifier or string)

    Returns:
        Comparison.GREATER, Comparison.EQUAL or Comparison.LESS
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    if v1 is None or v2 is None:
        return Comparison.EQUAL

    if v1.semantic > v2.semantic:
        return Comparison.GREATER
    if v1.semantic < v2.semantic:
        return Comparison.LESS

    if v1.build > v2.build:
        return Comparison.GREATER
    if v1.build < v2.build:
        return Comparison.LESS
    return Comparison.EQUAL


def increment_version(
    version: Union[VersionIdentifier, str, None],
) -> VersionIdentifier:
    """
    Return the next version: patch and build counter both go up by one.

    Major and minor are never changed. With no version at all the first
    release, 1.0.0+1, is returned.
    """
    current = _coerce(version)
    if current is None:
        return parse_version(BOOTSTRAP_VERSION)

    return VersionIdentifier.from_parts(
        current.major, current.minor, current.patch + 1, current.build + 1
    )
