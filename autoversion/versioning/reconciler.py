"""
One reconciliation run: read the declared version, find the latest tag,
decide, and publish.
"""

import logging
from typing import Optional

from autoversion.core.interfaces import ManifestStore, VersionControl

from .exceptions import MissingVersionError
from .executor import PublishExecutor, ReconciliationResult
from .markers import DEFAULT_TAG_PREFIX, MarkerResolver
from .plan import ActionPlan, Scenario, decide
from .version import parse_version

logger = logging.getLogger(__name__)

SEPARATOR = "━" * 44


class Reconciler:
    """
    Wires the manifest, the tag history and the publish step together.

    The reconciler holds no state between runs; every call to run() reads the
    manifest and the tags afresh.
    """

    def __init__(
        self,
        manifest: ManifestStore,
        vcs: VersionControl,
        branch: str = "main",
        commit_message: Optional[str] = None,
        tag_prefix: str = DEFAULT_TAG_PREFIX,
    ):
        self.manifest = manifest
        self.resolver = MarkerResolver(vcs, tag_prefix=tag_prefix)
        self.executor = PublishExecutor(
            manifest,
            vcs,
            branch=branch,
            commit_message=commit_message,
            tag_prefix=tag_prefix,
        )

    def plan(self) -> ActionPlan:
        """
        Decide what the run has to do, without side effects on the repository.

        Raises:
            ManifestError: If the manifest is missing, unreadable or has no version
        """
        declared_string = self.manifest.read_version()
        declared = parse_version(declared_string)
        if declared is None:
            raise MissingVersionError(str(self.manifest.path))

        logger.info(f"📦 Current version in {self.manifest.path.name}: {declared}")

        latest = self.resolver.resolve_latest()
        plan = decide(declared, latest)
        self._log_plan(plan)
        return plan

    def run(self, dry_run: bool = False) -> ReconciliationResult:
        """
        Reconcile the declared version with the latest tag.

        Args:
            dry_run: Only report what would happen

        Returns:
            The ReconciliationResult of the run

        Raises:
            ManifestError: If the manifest cannot be read or updated
            PublishError: If committing, pushing or tagging failed
        """
        plan = self.plan()
        if dry_run:
            logger.info("Dry run, nothing is written or pushed")
            return self.executor.describe(plan)

        result = self.executor.execute(plan)
        if result.updated:
            logger.info("🎉 Version updated, committed, pushed, and tagged!")
        elif result.marker_created:
            logger.info("🎉 Tag created successfully!")
        else:
            logger.info("ℹ️  Nothing to publish, everything is up to date")
        return result

    def _log_plan(self, plan: ActionPlan) -> None:
        declared = plan.declared_identifier
        final = plan.final_identifier

        logger.info(SEPARATOR)
        logger.info(f"📌 SCENARIO: {plan.scenario.value}")
        logger.info(SEPARATOR)

        if plan.scenario == Scenario.BOOTSTRAP:
            logger.info(f"✅ Creating initial tag with version: {final}")
        elif plan.scenario == Scenario.AHEAD:
            logger.info(
                f"✅ Version {declared} is higher than previous tag "
                f"{plan.baseline_identifier}"
            )
            logger.info("📝 No version bump needed, creating tag only...")
        else:
            relation = "equals" if plan.scenario == Scenario.SAME else "is lower than"
            logger.warning(
                f"⚠️  Version {declared} {relation} previous tag "
                f"{plan.baseline_identifier}"
            )
            logger.info(f"🔼 Auto-incrementing: {declared} → {final}")
