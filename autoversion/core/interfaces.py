"""Protocol interfaces for the collaborators of a reconciliation run.

Protocols that decouple the versioning logic from git and from the manifest
file format.
"""

from pathlib import Path
from typing import List, Optional, Protocol, Sequence


class VersionControl(Protocol):
    """Minimal interface for the repository holding the release tags."""

    def fetch_markers(self) -> None:
        """Refresh tags from the remote."""
        ...

    def list_markers(self) -> List[str]:
        """Names of all existing tags."""
        ...

    def marker_exists(self, name: str) -> bool:
        """Whether a tag with this name has been pushed to the remote."""
        ...

    def create_marker(self, name: str, message: str) -> None:
        """Create an annotated tag (unless it exists locally) and push it."""
        ...

    def has_pending_changes(self, paths: Optional[Sequence[Path]] = None) -> bool:
        """Whether the working tree has uncommitted changes."""
        ...

    def commit_and_push(
        self, files: Sequence[Path], message: str, branch: str
    ) -> None:
        """Stage files, commit them and push HEAD to branch."""
        ...


class ManifestStore(Protocol):
    """Minimal interface for the file declaring the project version."""

    @property
    def path(self) -> Path:
        """Location of the manifest file."""
        ...

    def read_version(self) -> str:
        """Declared version string."""
        ...

    def write_version(self, version: str) -> bool:
        """Persist a new version; returns True if the file content changed."""
        ...
