"""Unit tests for versionkit.utils.version_utils.

Test Coverage:
- Three-way comparison of strings and Version objects
- Stable sorting, ascending and descending
- Update type classification (major, minor, patch, update)
- New installation, downgrade and same-version detection
- Invalid and missing version handling
"""

from __future__ import annotations

from typing import Optional

import pytest

from versionkit.exceptions import IllegalFormatError
from versionkit.models.version import Version, parse_version
from versionkit.utils.version_utils import (
    compare_versions,
    get_update_type,
    sort_versions,
)


@pytest.mark.unit
class TestCompareVersions:
    """Tests for compare_versions."""

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            ("1.0.0", "2.0.0", -1),
            ("2.0.0", "1.0.0", 1),
            ("1.0.0", "1.0.0", 0),
            ("1.0.0-alpha", "1.0.0", -1),
            ("1.0.0-alpha.1", "1.0.0-alpha", -1),
            ("1.0.0-beta.11", "1.0.0-beta.2", 1),
            ("1.0.0+a", "1.0.0+b", 0),
            ("1", "1.0.0", 0),
        ],
    )
    def test_strings(self, left: str, right: str, expected: int) -> None:
        assert compare_versions(left, right) == expected

    def test_accepts_version_objects(self) -> None:
        assert compare_versions(Version(1, 0, 0), "1.0.1") == -1
        assert compare_versions(Version(1, 0, 1), Version(1, 0, 0)) == 1

    def test_invalid_string_raises(self) -> None:
        with pytest.raises(IllegalFormatError):
            compare_versions("1.0.0", "not.a.version")


@pytest.mark.unit
class TestSortVersions:
    """Tests for sort_versions."""

    def test_ascending(self) -> None:
        result = sort_versions(["1.10.0", "1.2.0", "1.0.0-rc.1", "1.0.0"])

        assert [str(v) for v in result] == ["1.0.0-rc.1", "1.0.0", "1.2.0", "1.10.0"]

    def test_descending(self) -> None:
        result = sort_versions(["1.0.0", "3", "2.1"], reverse=True)

        assert [str(v) for v in result] == ["3.0.0", "2.1.0", "1.0.0"]

    def test_ties_keep_input_order(self) -> None:
        result = sort_versions(["1.0.0+b", "0.1", "1.0.0+a"])

        assert [str(v) for v in result] == ["0.1.0", "1.0.0+b", "1.0.0+a"]

    def test_mixed_inputs(self) -> None:
        result = sort_versions([parse_version("2"), "1"])

        assert result == [Version(1, 0, 0), Version(2, 0, 0)]

    def test_empty(self) -> None:
        assert sort_versions([]) == []

    def test_invalid_raises(self) -> None:
        with pytest.raises(IllegalFormatError):
            sort_versions(["1.0.0", "x"])


@pytest.mark.unit
class TestGetUpdateType:
    """Tests for get_update_type classification."""

    def test_both_none_returns_unknown(self) -> None:
        assert get_update_type(None, None) == "unknown"

    def test_current_none_returns_new(self) -> None:
        assert get_update_type(None, "1.0.0") == "new"

    def test_target_none_returns_unknown(self) -> None:
        assert get_update_type("1.0.0", None) == "unknown"

    @pytest.mark.parametrize(
        "current,target,expected",
        [
            ("1.2.3", "1.2.3", "same"),
            ("1.2.3+a", "1.2.3+b", "same"),
            ("2.0.0", "1.0.0", "downgrade"),
            ("1.0.0", "1.0.0-rc.1", "downgrade"),
            ("1.0.0", "2.0.0", "major"),
            ("1.0.0", "1.1.0", "minor"),
            ("1.0.0", "1.0.1", "patch"),
            ("1.0.0-rc.1", "1.0.0", "update"),
            ("1.0.0-alpha", "1.0.0-beta", "update"),
            ("1.9.0-rc", "2.0.0", "major"),
        ],
    )
    def test_classification(self, current: str, target: str, expected: str) -> None:
        assert get_update_type(current, target) == expected

    @pytest.mark.parametrize(
        "current,target",
        [
            ("not-a-version", "1.0.0"),
            ("1.0.0", "invalid"),
            ("1.2.3.4", "1.2.3.5"),
        ],
    )
    def test_invalid_returns_unknown(self, current: Optional[str], target: Optional[str]) -> None:
        assert get_update_type(current, target) == "unknown"

    def test_accepts_version_objects(self) -> None:
        assert get_update_type(Version(1, 0, 0), Version(1, 0, 5)) == "patch"
