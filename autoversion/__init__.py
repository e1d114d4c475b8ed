"""Reconcile a manifest version with the latest release tag."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("autoversion")
except PackageNotFoundError:
    # Running from a source checkout
    __version__ = "0.1.0"
