"""
Execution of reconciliation plans.

The executor applies an ActionPlan against the manifest and the git
repository. Every step is guarded so that re-running a plan whose effects are
already (partially) in place finishes without error:

- the manifest write is a no-op when the file already holds the new version,
- the commit is skipped when the manifest has no pending changes,
- the tag is skipped when it has already been pushed to the remote.

The first failing mandatory step raises and nothing after it is attempted;
in particular no tag is created when the commit or push failed.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from autoversion.core.interfaces import ManifestStore, VersionControl

from .exceptions import (
    ManifestWriteError,
    PublishError,
    VersionControlError,
    VersioningError,
)
from .markers import DEFAULT_TAG_PREFIX
from .plan import ActionPlan, Scenario

logger = logging.getLogger(__name__)

NO_PREVIOUS_VERSION = "none"

DEFAULT_COMMIT_MESSAGE = """🔧 Auto-increment version to {new}

Previous version: {previous}
New version: {new}
[skip ci]"""


def format_commit_message(
    plan: ActionPlan, template: Optional[str] = None
) -> str:
    """
    Render the commit message for a version bump.

    Args:
        plan: The plan being executed
        template: Custom message; may use the {previous} and {new} placeholders

    Returns:
        The commit message
    """
    values = {
        "previous": plan.baseline_identifier.raw,
        "new": plan.final_identifier.raw,
    }
    if not template:
        return DEFAULT_COMMIT_MESSAGE.format(**values)
    try:
        return template.format(**values)
    except (KeyError, IndexError, ValueError):
        # Not a template, use it verbatim
        return template


@dataclass
class ReconciliationResult:
    """Outcome of a reconciliation run, as reported to the caller."""

    scenario: Scenario
    previous_version: str
    current_version: str
    updated: bool
    marker: str
    committed: bool = False
    marker_created: bool = False

    @property
    def new_version(self) -> str:
        return self.current_version

    def as_outputs(self) -> dict:
        """Action outputs, keyed by output name."""
        return {
            "previous-version": self.previous_version,
            "current-version": self.current_version,
            "version-updated": "true" if self.updated else "false",
            "new-version": self.new_version,
        }


class PublishExecutor:
    """
    Applies an ActionPlan to the manifest and the git repository.
    """

    def __init__(
        self,
        manifest: ManifestStore,
        vcs: VersionControl,
        branch: str = "main",
        commit_message: Optional[str] = None,
        tag_prefix: str = DEFAULT_TAG_PREFIX,
    ):
        """
        Initialize the executor.

        Args:
            manifest: Store holding the declared version
            vcs: Repository to commit to and tag
            branch: Branch the version bump is pushed to
            commit_message: Optional custom commit message template
            tag_prefix: Prefix prepended to the version in tag names
        """
        self.manifest = manifest
        self.vcs = vcs
        self.branch = branch
        self.commit_message = commit_message
        self.tag_prefix = tag_prefix

    def marker_name(self, plan: ActionPlan) -> str:
        return f"{self.tag_prefix}{plan.final_identifier.raw}"

    def describe(self, plan: ActionPlan) -> ReconciliationResult:
        """
        Build the result a plan would produce, without executing it.
        """
        return ReconciliationResult(
            scenario=plan.scenario,
            previous_version=self._previous_version(plan),
            current_version=plan.final_identifier.raw,
            updated=plan.must_write_manifest,
            marker=self.marker_name(plan),
        )

    def execute(self, plan: ActionPlan) -> ReconciliationResult:
        """
        Carry out a plan.

        Args:
            plan: The plan returned by decide()

        Returns:
            The ReconciliationResult of the run

        Raises:
            ManifestWriteError: If the manifest could not be updated
            PublishError: If committing, pushing or tagging failed
        """
        manifest_changed = False
        committed = False
        marker_created = False

        if plan.must_write_manifest:
            manifest_changed = self._write_manifest(plan)

        if plan.must_commit:
            committed = self._commit(plan)

        if plan.must_create_marker:
            marker_created = self._create_marker(plan)

        result = self.describe(plan)
        result.updated = plan.must_write_manifest and (manifest_changed or committed)
        result.committed = committed
        result.marker_created = marker_created
        return result

    def _previous_version(self, plan: ActionPlan) -> str:
        if plan.scenario == Scenario.BOOTSTRAP:
            return NO_PREVIOUS_VERSION
        return plan.baseline_identifier.raw

    def _write_manifest(self, plan: ActionPlan) -> bool:
        version = plan.final_identifier.raw
        try:
            changed = self.manifest.write_version(version)
        except ManifestWriteError:
            raise
        except (OSError, VersioningError) as e:
            raise ManifestWriteError(str(self.manifest.path), version, str(e)) from e

        if changed:
            logger.info(f"✅ Updated {self.manifest.path.name} with version: {version}")
        else:
            logger.info(f"ℹ️  {self.manifest.path.name} already at version {version}")
        return changed

    def _commit(self, plan: ActionPlan) -> bool:
        try:
            if not self.vcs.has_pending_changes([self.manifest.path]):
                logger.info("ℹ️  No changes to commit")
                return False

            message = format_commit_message(plan, self.commit_message)
            logger.info(f"💾 Committing version update and pushing to {self.branch}...")
            self.vcs.commit_and_push([self.manifest.path], message, self.branch)
        except VersionControlError as e:
            raise PublishError("commit/push", e) from e
        return True

    def _create_marker(self, plan: ActionPlan) -> bool:
        name = self.marker_name(plan)
        try:
            if self.vcs.marker_exists(name):
                logger.info(f"ℹ️  Tag {name} already exists, skipping tag creation")
                return False

            logger.info(f"🏷️  Creating tag {name}...")
            self.vcs.create_marker(name, f"Release {name}")
        except VersionControlError as e:
            raise PublishError("create/push tag", e) from e

        logger.info(f"✅ Successfully created and pushed tag {name}")
        return True
