"""Configuration for a reconciliation run.

Values come from command-line options (which also read the action's INPUT_*
environment variables), then from an optional INI file, then from built-in
defaults.
"""

import configparser
import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from autoversion.git import DEFAULT_REMOTE, DEFAULT_USER_EMAIL, DEFAULT_USER_NAME
from autoversion.manifest import DEFAULT_MANIFEST
from autoversion.versioning.exceptions import CredentialError
from autoversion.versioning.markers import DEFAULT_TAG_PREFIX

APP_NAME = "autoversion"
SECTION = APP_NAME

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

if platform.system() == "Darwin":
    # macOS
    config_dir = Path("~/Library/Application Support/autoversion").expanduser()
else:
    # Linux or others
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


default_cfg = {
    SECTION: {
        "branch": "main",
        "manifest": DEFAULT_MANIFEST,
        "tag_prefix": DEFAULT_TAG_PREFIX,
        "remote": DEFAULT_REMOTE,
        "user_name": DEFAULT_USER_NAME,
        "user_email": DEFAULT_USER_EMAIL,
    }
}


def get_config_file() -> Path:
    override = os.environ.get("AUTOVERSION_CONFIG")
    if override:
        return Path(override).expanduser()
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    A dict-like accessor for configuration files.

    Missing files, sections and keys are not errors; the default is returned.

    Usage:
        config = ConfigAccessor()
        value = config.get('autoversion', 'branch', default='main')
    """

    def __init__(self, config_path: Optional[Path] = None):
        if config_path is None:
            self.config_path = get_config_file()
        else:
            self.config_path = Path(config_path)

        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            self.config.read(self.config_path)

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if the section or key doesn't exist

        Returns:
            The configuration value if it exists, otherwise the default value
        """
        try:
            return self.config[section][key]
        except (KeyError, configparser.NoSectionError, configparser.NoOptionError):
            return default

    def sections(self) -> list:
        return self.config.sections()


@dataclass
class ReconcileConfig:
    """Settings of one reconciliation run."""

    repo_path: Path
    branch: str = "main"
    token: Optional[str] = None
    commit_message: Optional[str] = None
    manifest: str = DEFAULT_MANIFEST
    tag_prefix: str = DEFAULT_TAG_PREFIX
    remote: str = DEFAULT_REMOTE
    user_name: str = DEFAULT_USER_NAME
    user_email: str = DEFAULT_USER_EMAIL

    @property
    def manifest_path(self) -> Path:
        path = Path(self.manifest)
        if path.is_absolute():
            return path
        return self.repo_path / path

    @classmethod
    def from_options(
        cls, accessor: Optional[ConfigAccessor] = None, **options: Any
    ) -> "ReconcileConfig":
        """
        Build a config from command-line options, filling gaps from the file.

        Options that are None fall back to the config file, then to defaults.
        Empty strings (unset action inputs) count as None.
        """
        if accessor is None:
            accessor = ConfigAccessor()

        def pick(key: str) -> Any:
            value = options.get(key)
            if value is None or value == "":
                value = accessor.get(SECTION, key, default_cfg[SECTION].get(key))
            return value

        repo_path = Path(options.get("repo_path") or Path.cwd()).resolve()
        commit_message = options.get("commit_message") or None
        tag_prefix = options.get("tag_prefix")
        if tag_prefix is None:
            tag_prefix = accessor.get(SECTION, "tag_prefix", DEFAULT_TAG_PREFIX)

        return cls(
            repo_path=Path(repo_path),
            branch=pick("branch"),
            token=options.get("token") or None,
            commit_message=commit_message,
            manifest=pick("manifest"),
            tag_prefix=tag_prefix,
            remote=pick("remote"),
            user_name=pick("user_name"),
            user_email=pick("user_email"),
        )

    def require_token(self) -> str:
        """
        Raises:
            CredentialError: If no token was provided
        """
        if not self.token:
            raise CredentialError("token")
        return self.token
