"""
Tests for Reconciler, the end-to-end run over in-memory collaborators.
"""

import pytest

from autoversion.versioning.exceptions import MissingVersionError
from autoversion.versioning.plan import Scenario
from autoversion.versioning.reconciler import Reconciler

from tests.fakes import FakeManifest, FakeVersionControl


def make_reconciler(declared, markers=None, **kwargs):
    vcs = FakeVersionControl(markers=markers)
    manifest = FakeManifest(declared, vcs=vcs)
    return Reconciler(manifest, vcs, **kwargs), manifest, vcs


@pytest.mark.short
class TestReconciler:
    @pytest.mark.parametrize(
        "declared, markers, scenario, current, previous, updated",
        [
            ("1.0.0+1", [], Scenario.BOOTSTRAP, "1.0.0+1", "none", False),
            ("1.0.0+1", ["v1.0.0+1"], Scenario.SAME, "1.0.1+2", "1.0.0+1", True),
            ("1.0.0+1", ["v1.5.3+15"], Scenario.REGRESSED, "1.5.4+16", "1.5.3+15", True),
            ("1.5.4+16", ["v1.5.3+15"], Scenario.AHEAD, "1.5.4+16", "1.5.3+15", False),
        ],
    )
    def test_scenarios(self, declared, markers, scenario, current, previous, updated):
        reconciler, manifest, vcs = make_reconciler(declared, markers)
        result = reconciler.run()

        assert result.scenario == scenario
        assert result.current_version == current
        assert result.previous_version == previous
        assert result.updated is updated
        assert f"v{current}" in vcs.markers

    def test_missing_version_is_fatal(self):
        reconciler, _, vcs = make_reconciler(None)
        with pytest.raises(MissingVersionError):
            reconciler.run()
        assert vcs.calls == []

    def test_dry_run_changes_nothing(self):
        reconciler, manifest, vcs = make_reconciler("1.0.0+1", ["v1.0.0+1"])
        result = reconciler.run(dry_run=True)

        assert result.current_version == "1.0.1+2"
        assert result.updated is True
        assert manifest.version == "1.0.0+1"
        assert vcs.call_names() == ["fetch_markers", "list_markers"]

    def test_second_run_reconciles_again(self):
        # The bump of the first run becomes the latest tag of the second one.
        reconciler, manifest, vcs = make_reconciler("1.0.0+1", ["v1.0.0+1"])
        reconciler.run()
        result = reconciler.run()

        assert result.scenario == Scenario.SAME
        assert result.previous_version == "1.0.1+2"
        assert result.current_version == "1.0.2+3"

    def test_logs_scenario(self, capture_logs):
        reconciler, _, _ = make_reconciler("1.0.0+1", ["v1.5.3+15"])
        reconciler.run()

        output = capture_logs.getvalue()
        assert "SCENARIO: version is lower than previous tag" in output
        assert "Auto-incrementing: 1.0.0+1 → 1.5.4+16" in output

    def test_custom_prefix(self):
        reconciler, _, vcs = make_reconciler(
            "1.0.0+1", ["release-1.0.0+1"], tag_prefix="release-"
        )
        result = reconciler.run()

        assert result.marker == "release-1.0.1+2"
        assert "release-1.0.1+2" in vcs.pushed_markers
