"""
Tests for VersionIdentifier and the version utilities.

All tests in this file are marked as 'short' since they don't require
external dependencies, containers, or network I/O.
"""

import pytest

from autoversion.versioning.version import (
    Comparison,
    VersionIdentifier,
    compare_versions,
    increment_version,
    parse_version,
)


@pytest.mark.short
class TestParseVersion:
    """Test parse_version."""

    def test_full_version(self):
        v = parse_version("1.5.3+15")
        assert (v.major, v.minor, v.patch, v.build) == (1, 5, 3, 15)
        assert v.base == "1.5.3"
        assert v.raw == "1.5.3+15"
        assert str(v) == "1.5.3+15"

    def test_without_build_number(self):
        v = parse_version("2.1.0")
        assert v.build == 0
        assert v.base == "2.1.0"
        assert v.raw == "2.1.0"

    def test_empty_input_is_none(self):
        assert parse_version(None) is None
        assert parse_version("") is None
        assert parse_version("   ") is None

    def test_missing_components_default_to_zero(self):
        v = parse_version("3")
        assert (v.major, v.minor, v.patch) == (3, 0, 0)
        assert v.base == "3.0.0"

        v = parse_version("3.4")
        assert (v.major, v.minor, v.patch) == (3, 4, 0)

    def test_non_numeric_components_default_to_zero(self):
        v = parse_version("a.b.c+d")
        assert (v.major, v.minor, v.patch, v.build) == (0, 0, 0, 0)
        assert v.raw == "a.b.c+d"

    def test_leading_digits_are_kept(self):
        v = parse_version("1.2.3-beta+7")
        assert (v.major, v.minor, v.patch, v.build) == (1, 2, 3, 7)

    def test_splits_on_first_plus_only(self):
        v = parse_version("1.2.3+4+5")
        assert v.build == 0
        assert v.base == "1.2.3"

    def test_numeric_yaml_values(self):
        v = parse_version(1.5)
        assert (v.major, v.minor, v.patch) == (1, 5, 0)
        assert v.raw == "1.5"

    def test_whitespace_is_stripped(self):
        assert parse_version("  1.0.0+1\n").raw == "1.0.0+1"

    def test_malformed_input_logs_warning(self, capture_logs):
        parse_version("x.2.3")
        assert "non-numeric major" in capture_logs.getvalue()

    @pytest.mark.parametrize(
        "raw",
        ["", "+", "...", "+++", "v1.2.3", "1..2", "-1.-2.-3+-4", "١.٢.٣", "1.2.3+²", "🚀"],
    )
    def test_parsing_never_raises(self, raw):
        v = parse_version(raw)
        if v is not None:
            assert v.major >= 0 and v.minor >= 0 and v.patch >= 0 and v.build >= 0
            assert v.base == f"{v.major}.{v.minor}.{v.patch}"

    @pytest.mark.parametrize("raw", ["0.0.0+0", "1.0.0+1", "1.5.3+15", "10.20.30+400"])
    def test_raw_round_trip(self, raw):
        assert parse_version(parse_version(raw).raw).raw == raw

    def test_identifiers_are_immutable(self):
        v = parse_version("1.0.0+1")
        with pytest.raises(AttributeError):
            v.patch = 2

    def test_default_raw_form(self):
        v = VersionIdentifier(1, 2, 3, 4)
        assert v.raw == "1.2.3+4"


@pytest.mark.short
class TestCompareVersions:
    """Test compare_versions."""

    def test_semantic_part_decides_first(self):
        assert compare_versions("1.5.4+1", "1.5.3+99") == Comparison.GREATER
        assert compare_versions("1.0.0+100", "1.5.3+15") == Comparison.LESS
        assert compare_versions("2.0.0", "1.99.99") == Comparison.GREATER
        assert compare_versions("1.10.0", "1.9.0") == Comparison.GREATER

    def test_build_breaks_ties(self):
        assert compare_versions("1.0.0+2", "1.0.0+1") == Comparison.GREATER
        assert compare_versions("1.0.0+1", "1.0.0+2") == Comparison.LESS
        assert compare_versions("1.0.0+1", "1.0.0+1") == Comparison.EQUAL

    def test_missing_build_equals_zero(self):
        assert compare_versions("1.0.0", "1.0.0+0") == Comparison.EQUAL

    def test_missing_version_compares_equal(self):
        assert compare_versions(None, "1.0.0") == Comparison.EQUAL
        assert compare_versions("1.0.0", "") == Comparison.EQUAL
        assert compare_versions(None, None) == Comparison.EQUAL

    def test_accepts_identifiers(self):
        a = parse_version("1.2.3+4")
        b = parse_version("1.2.3+5")
        assert compare_versions(a, b) == Comparison.LESS
        assert compare_versions(b, a) == Comparison.GREATER

    def test_comparison_values(self):
        assert Comparison.GREATER.value == 1
        assert Comparison.EQUAL.value == 0
        assert Comparison.LESS.value == -1

    def test_ordering_properties(self):
        versions = [
            parse_version(v)
            for v in ["0.0.1", "1.0.0+1", "1.0.0+2", "1.0.1+1", "1.5.3+15", "2.0.0"]
        ]
        for a in versions:
            assert compare_versions(a, a) == Comparison.EQUAL
            for b in versions:
                forward = compare_versions(a, b)
                backward = compare_versions(b, a)
                assert forward.value == -backward.value
                for c in versions:
                    if (
                        forward == Comparison.LESS
                        and compare_versions(b, c) == Comparison.LESS
                    ):
                        assert compare_versions(a, c) == Comparison.LESS


@pytest.mark.short
class TestIncrementVersion:
    """Test increment_version."""

    def test_patch_and_build_advance(self):
        assert increment_version("1.0.0+1").raw == "1.0.1+2"
        assert increment_version("1.5.3+15").raw == "1.5.4+16"

    def test_major_and_minor_untouched(self):
        v = increment_version("3.7.9+41")
        assert (v.major, v.minor) == (3, 7)

    def test_without_build_number(self):
        assert increment_version("2.0.0").raw == "2.0.1+1"

    def test_bootstrap_default(self):
        assert increment_version(None).raw == "1.0.0+1"

    def test_returns_new_identifier(self):
        v = parse_version("1.0.0+1")
        bumped = increment_version(v)
        assert bumped is not v
        assert v.raw == "1.0.0+1"

    @pytest.mark.parametrize(
        "raw", ["0.0.0", "1.0.0+1", "1.5.3+15", "9.9.9+0", "garbage", "1.2", "0.0.0+999"]
    )
    def test_increment_is_greater(self, raw):
        v = parse_version(raw)
        assert compare_versions(increment_version(v), v) == Comparison.GREATER

    def test_incremented_raw_round_trips(self):
        bumped = increment_version("1.5.3+15")
        assert parse_version(bumped.raw) == bumped
