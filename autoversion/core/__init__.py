"""Core interfaces shared across autoversion modules."""

from autoversion.core.interfaces import ManifestStore, VersionControl

__all__ = ["ManifestStore", "VersionControl"]
