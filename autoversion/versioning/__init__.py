"""
Versioning Module for autoversion.

This module holds all the logic that turns "version declared in the manifest"
plus "latest release tag" into a decision and publishes it. Reading the
manifest and talking to git happen behind the interfaces in
``autoversion.core.interfaces`` so the decision logic can be exercised without
either.

ARCHITECTURAL LAYERS:
====================

1. **Core Version Logic** (version.py):
   - VersionIdentifier: immutable ``major.minor.patch+build`` value
   - parse_version / compare_versions / increment_version
   - Parsing is permissive and never raises: bad components become 0

2. **Decision Table** (plan.py):
   - decide(): picks one of four scenarios (first release, same version,
     lower version, higher version) and returns an ActionPlan
   - Pure function, no I/O

3. **Tag Resolution** (markers.py):
   - MarkerResolver: finds the latest release tag through the VersionControl
     collaborator, falling back to "no tags" on errors

4. **Publishing** (executor.py):
   - PublishExecutor: writes the manifest, commits, pushes and tags
   - Every step is skipped when its effect is already in place, so re-running
     after a partial failure is safe

5. **Orchestration** (reconciler.py):
   - Reconciler: one run from manifest to published tag

6. **Exception Hierarchy** (exceptions.py):
   - Unified exception types for all fatal versioning errors

DECISION TABLE:
===============

=========== =================== =================== ======= ======
Scenario    Condition           Final version       Commit  Tag
=========== =================== =================== ======= ======
BOOTSTRAP   no tags             declared            no      yes
SAME        declared == latest  declared + 1        yes     yes
REGRESSED   declared < latest   latest + 1          yes     yes
AHEAD       declared > latest   declared            no      yes
=========== =================== =================== ======= ======

"+ 1" bumps both the patch number and the build counter.
"""

from .exceptions import (
    CredentialError,
    ManifestError,
    ManifestNotFoundError,
    ManifestWriteError,
    MissingVersionError,
    PublishError,
    VersionControlError,
    VersioningError,
)
from .executor import PublishExecutor, ReconciliationResult, format_commit_message
from .markers import MarkerResolver, latest_marker, strip_marker_prefix
from .plan import ActionPlan, Scenario, decide
from .reconciler import Reconciler
from .version import (
    Comparison,
    VersionIdentifier,
    compare_versions,
    increment_version,
    parse_version,
)

__all__ = [
    # Orchestration
    "Reconciler",
    "PublishExecutor",
    "ReconciliationResult",
    "MarkerResolver",
    # Decision table
    "ActionPlan",
    "Scenario",
    "decide",
    # Core version utilities
    "VersionIdentifier",
    "Comparison",
    "parse_version",
    "compare_versions",
    "increment_version",
    "latest_marker",
    "strip_marker_prefix",
    "format_commit_message",
    # Centralized exception hierarchy
    "VersioningError",
    "ManifestError",
    "ManifestNotFoundError",
    "MissingVersionError",
    "ManifestWriteError",
    "VersionControlError",
    "PublishError",
    "CredentialError",
]
