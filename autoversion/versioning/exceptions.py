"""
Exception classes for the versioning module.
"""


class VersioningError(Exception):
    """Base exception for all versioning-related errors."""

    pass


class ManifestError(VersioningError):
    """Raised when the manifest file cannot be read or parsed."""

    def __init__(self, manifest_path: str, message: str = ""):
        self.manifest_path = manifest_path
        if message:
            super().__init__(f"Manifest error for {manifest_path}: {message}")
        else:
            super().__init__(f"Could not read manifest {manifest_path}")


class ManifestNotFoundError(ManifestError):
    """Raised when the manifest file does not exist."""

    def __init__(self, manifest_path: str):
        self.manifest_path = manifest_path
        VersioningError.__init__(self, f"{manifest_path} not found")


class MissingVersionError(ManifestError):
    """Raised when the manifest does not declare a version."""

    def __init__(self, manifest_path: str, key: str = "version"):
        self.manifest_path = manifest_path
        self.key = key
        VersioningError.__init__(
            self, f"Could not read '{key}' from {manifest_path}"
        )


class ManifestWriteError(ManifestError):
    """Raised when the new version cannot be written to the manifest."""

    def __init__(self, manifest_path: str, version: str, reason: str = ""):
        self.manifest_path = manifest_path
        self.version = version
        message = f"Failed to update {manifest_path} to version {version}"
        if reason:
            message = f"{message}: {reason}"
        VersioningError.__init__(self, message)


class VersionControlError(VersioningError):
    """Raised when a git operation fails."""

    def __init__(self, command: str, message: str = ""):
        self.command = command
        if message:
            super().__init__(f"Git command failed: {command}\nError: {message}")
        else:
            super().__init__(f"Git command failed: {command}")


class PublishError(VersioningError):
    """Raised when a mandatory publish step (commit, push, tag) fails."""

    def __init__(self, step: str, cause: Exception):
        self.step = step
        self.cause = cause
        super().__init__(f"Failed to {step}: {cause}")


class CredentialError(VersioningError):
    """Raised when a required credential is missing."""

    def __init__(self, name: str = "token"):
        self.name = name
        super().__init__(f"GitHub {name} is required")
