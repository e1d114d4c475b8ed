"""
Reading and updating the version declared in a YAML manifest (pubspec.yaml).

Only the top-level ``version:`` line is rewritten so comments and formatting
of the rest of the file survive an update.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict

import yaml

from autoversion.versioning.exceptions import (
    ManifestError,
    ManifestNotFoundError,
    ManifestWriteError,
    MissingVersionError,
)

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "pubspec.yaml"


class PubspecManifest:
    """
    A YAML manifest file with a top-level version field.
    """

    def __init__(self, path: Path, key: str = "version"):
        self._path = Path(path)
        self.key = key
        self._line_pattern = re.compile(
            rf"^(?P<prefix>{re.escape(key)}[ \t]*:[ \t]*)"
            r"(?P<quote>['\"]?)(?P<value>[^'\"\s#]*)(?P=quote)"
            r"(?P<suffix>[ \t]*(?:#[^\n]*)?\r?)$",
            re.MULTILINE,
        )

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, Any]:
        if not self._path.exists():
            raise ManifestNotFoundError(str(self._path))

        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ManifestError(str(self._path), f"invalid YAML: {e}") from e
        except OSError as e:
            raise ManifestError(str(self._path), str(e)) from e

        if not isinstance(data, dict):
            raise MissingVersionError(str(self._path), self.key)
        return data

    def read_version(self) -> str:
        """
        Get the declared version.

        Returns:
            The version string

        Raises:
            ManifestNotFoundError: If the file does not exist
            ManifestError: If the file cannot be read or is not valid YAML
            MissingVersionError: If no version is declared
        """
        data = self._load()
        version = data.get(self.key)
        if version is None or str(version).strip() == "":
            raise MissingVersionError(str(self._path), self.key)
        return str(version).strip()

    def write_version(self, version: str) -> bool:
        """
        Set the declared version.

        Args:
            version: The new version string

        Returns:
            True if the file content changed, False if it already held version

        Raises:
            ManifestWriteError: If the file cannot be updated
        """
        try:
            content = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise ManifestWriteError(str(self._path), version, str(e)) from e

        updated, count = self._line_pattern.subn(
            lambda m: f"{m['prefix']}{m['quote']}{version}{m['quote']}{m['suffix']}",
            content,
            count=1,
        )
        if count == 0:
            logger.debug(f"No '{self.key}:' line in {self._path}, rewriting document")
            try:
                data = yaml.safe_load(content) or {}
            except yaml.YAMLError as e:
                raise ManifestWriteError(str(self._path), version, str(e)) from e
            if not isinstance(data, dict):
                raise ManifestWriteError(
                    str(self._path), version, "manifest is not a mapping"
                )
            data[self.key] = version
            updated = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)

        if updated == content:
            return False

        try:
            written = yaml.safe_load(updated)
        except yaml.YAMLError as e:
            raise ManifestWriteError(str(self._path), version, str(e)) from e
        if not isinstance(written, dict) or str(written.get(self.key)) != version:
            raise ManifestWriteError(
                str(self._path), version, "version field did not round-trip"
            )

        try:
            self._path.write_text(updated, encoding="utf-8")
        except OSError as e:
            raise ManifestWriteError(str(self._path), version, str(e)) from e
        return True
