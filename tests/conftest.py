import io
import logging

import pytest
from git import Repo

from .fakes import FakeManifest, FakeVersionControl

PUBSPEC = """\
name: demo_app
description: A demo Flutter application.
# Bumped automatically on every push to main
version: {version} # keep in sync with tags

environment:
  sdk: ">=3.0.0 <4.0.0"

dependencies:
  flutter:
    sdk: flutter
"""


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("autoversion")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    log_stream.close()


@pytest.fixture
def fake_vcs():
    return FakeVersionControl()


@pytest.fixture
def make_manifest(fake_vcs):
    def _make(version):
        return FakeManifest(version, vcs=fake_vcs)

    return _make


def _init_workspace(tmp_path, version: str = "1.0.0+1"):
    remote_path = tmp_path / "remote.git"
    Repo.init(remote_path, bare=True)

    work_path = tmp_path / "work"
    repo = Repo.init(work_path)
    with repo.config_writer() as config:
        config.set_value("user", "name", "Test User")
        config.set_value("user", "email", "test@example.com")

    (work_path / "pubspec.yaml").write_text(PUBSPEC.format(version=version))
    repo.index.add(["pubspec.yaml"])
    repo.index.commit("Initial commit")
    repo.create_remote("origin", str(remote_path))
    repo.git.push("origin", "HEAD:main")
    return repo, Repo(remote_path)


@pytest.fixture
def git_workspace(tmp_path):
    """A working clone with a pubspec.yaml and a bare 'origin' remote."""
    return _init_workspace(tmp_path)


@pytest.fixture
def make_git_workspace(tmp_path):
    def _make(version: str = "1.0.0+1"):
        return _init_workspace(tmp_path, version)

    return _make
