"""CLI commands reconciling the manifest version with the release tags."""

from functools import wraps
from pathlib import Path
from typing import Optional

import click

from autoversion.cli.outputs import emit_outputs
from autoversion.cli.utils.logging import logger
from autoversion.config import ReconcileConfig
from autoversion.git import GitRepository
from autoversion.manifest import PubspecManifest
from autoversion.versioning import Reconciler, VersioningError


def reconcile_options(func):
    """Options shared by the run and plan commands."""

    @click.option(
        "--branch",
        "-b",
        envvar="INPUT_BRANCH",
        help="Branch the version bump is pushed to. [default: main]",
    )
    @click.option(
        "--manifest",
        "-m",
        envvar="INPUT_MANIFEST",
        help="Path of the manifest, relative to the repository. [default: pubspec.yaml]",
    )
    @click.option(
        "--tag-prefix",
        envvar="INPUT_TAG_PREFIX",
        help="Prefix of release tag names. [default: v]",
    )
    @click.option(
        "--remote",
        envvar="INPUT_REMOTE",
        help="Git remote to fetch tags from and push to. [default: origin]",
    )
    @click.option(
        "--repo",
        "repo_path",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        help="Repository working tree. [default: current directory]",
    )
    @click.option(
        "--output-file",
        envvar="GITHUB_OUTPUT",
        type=click.Path(dir_okay=False, path_type=Path),
        help="File the action outputs are appended to.",
    )
    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper


@click.command(name="run")
@reconcile_options
@click.option(
    "--token",
    envvar=["INPUT_TOKEN", "GITHUB_TOKEN"],
    help="GitHub token used to push commits and tags.",
)
@click.option(
    "--commit-message",
    envvar="INPUT_COMMIT_MESSAGE",
    help="Custom commit message; {previous} and {new} are replaced.",
)
@click.pass_context
def run(
    ctx,
    branch: Optional[str],
    manifest: Optional[str],
    tag_prefix: Optional[str],
    remote: Optional[str],
    repo_path: Optional[Path],
    output_file: Optional[Path],
    token: Optional[str],
    commit_message: Optional[str],
):
    """Check the manifest version against the latest tag and publish it.

    \b
    - No tags yet: tag the declared version.
    - Declared version equals or is lower than the latest tag: bump it,
      commit, push and tag.
    - Declared version is higher: tag it.
    """
    logger.info("🚀 Version Checker & Auto-Increment")
    logger.info("━" * 44)

    try:
        config = ReconcileConfig.from_options(
            branch=branch,
            token=token,
            commit_message=commit_message,
            manifest=manifest,
            tag_prefix=tag_prefix,
            remote=remote,
            repo_path=repo_path,
        )
        config.require_token()

        repo = GitRepository(config.repo_path, remote=config.remote)
        repo.configure_identity(config.user_name, config.user_email)
        repo.configure_auth(config.token)

        reconciler = Reconciler(
            PubspecManifest(config.manifest_path),
            repo,
            branch=config.branch,
            commit_message=config.commit_message,
            tag_prefix=config.tag_prefix,
        )
        result = reconciler.run()
    except VersioningError as e:
        logger.error(f"❌ Action failed: {e}")
        ctx.exit(1)

    emit_outputs(result, output_file)


@click.command(name="plan")
@reconcile_options
@click.pass_context
def plan(
    ctx,
    branch: Optional[str],
    manifest: Optional[str],
    tag_prefix: Optional[str],
    remote: Optional[str],
    repo_path: Optional[Path],
    output_file: Optional[Path],
):
    """Show what run would do, without writing, committing or tagging."""
    try:
        config = ReconcileConfig.from_options(
            branch=branch,
            manifest=manifest,
            tag_prefix=tag_prefix,
            remote=remote,
            repo_path=repo_path,
        )
        reconciler = Reconciler(
            PubspecManifest(config.manifest_path),
            GitRepository(config.repo_path, remote=config.remote),
            branch=config.branch,
            tag_prefix=config.tag_prefix,
        )
        result = reconciler.run(dry_run=True)
    except VersioningError as e:
        logger.error(f"❌ {e}")
        ctx.exit(1)

    logger.info(f"Scenario: {result.scenario.name}, tag: {result.marker}")
    emit_outputs(result, output_file)
