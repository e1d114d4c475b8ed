"""
Reconciliation decision table.

``decide`` compares the version declared in the manifest with the latest
published tag and returns an ActionPlan describing what has to happen. The
plan is plain data; nothing is written until the PublishExecutor runs it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .version import Comparison, VersionIdentifier, compare_versions, increment_version


class Scenario(Enum):
    """The four mutually exclusive reconciliation outcomes."""

    BOOTSTRAP = "first release"
    SAME = "version is same as previous tag"
    REGRESSED = "version is lower than previous tag"
    AHEAD = "version is higher than previous tag"


@dataclass(frozen=True)
class ActionPlan:
    """
    Side effects a reconciliation run has to perform.

    Attributes:
        scenario: Which row of the decision table produced this plan
        declared_identifier: Version read from the manifest
        final_identifier: Version that ends up in the manifest and in the tag
        baseline_identifier: Version cited as "previous" in the commit message
        must_write_manifest: Rewrite the manifest version field
        must_commit: Commit and push the manifest change
        must_create_marker: Create and push a tag for final_identifier
    """

    scenario: Scenario
    declared_identifier: VersionIdentifier
    final_identifier: VersionIdentifier
    baseline_identifier: VersionIdentifier
    must_write_manifest: bool
    must_commit: bool
    must_create_marker: bool = True


def decide(
    declared: VersionIdentifier, latest: Optional[VersionIdentifier]
) -> ActionPlan:
    """
    Pick the reconciliation scenario for a declared version and the latest tag.

    Args:
        declared: Version declared in the manifest
        latest: Version of the latest tag, or None when there are no tags yet

    Returns:
        The ActionPlan for the matching scenario
    """
    if latest is None:
        return ActionPlan(
            scenario=Scenario.BOOTSTRAP,
            declared_identifier=declared,
            final_identifier=declared,
            baseline_identifier=declared,
            must_write_manifest=False,
            must_commit=False,
        )

    comparison = compare_versions(declared, latest)

    if comparison == Comparison.EQUAL:
        return ActionPlan(
            scenario=Scenario.SAME,
            declared_identifier=declared,
            final_identifier=increment_version(declared),
            baseline_identifier=latest,
            must_write_manifest=True,
            must_commit=True,
        )

    if comparison == Comparison.LESS:
        # The declared version is stale, so bump from the real latest release.
        return ActionPlan(
            scenario=Scenario.REGRESSED,
            declared_identifier=declared,
            final_identifier=increment_version(latest),
            baseline_identifier=latest,
            must_write_manifest=True,
            must_commit=True,
        )

    return ActionPlan(
        scenario=Scenario.AHEAD,
        declared_identifier=declared,
        final_identifier=declared,
        baseline_identifier=latest,
        must_write_manifest=False,
        must_commit=False,
    )
