"""Tests for version bumping and comparison."""

import pytest

from editorial_workflow.exceptions import ValidationError
from editorial_workflow.models.version import Version, VersionRule
from editorial_workflow.workflow.versioning import Ordering, bump, compare


class TestBump:
    """Test the bump rules."""

    def test_increase_minor_resets_patch(self) -> None:
        """Verify a new draft increases minor and resets patch."""
        assert bump(Version(1, 0, 4), VersionRule.INCREASE_MINOR_RESET_PATCH) == Version(1, 1, 0)

    def test_increase_major_resets_minor(self) -> None:
        """Verify validation increases major and resets minor."""
        assert bump(Version(1, 3, 0), VersionRule.INCREASE_MAJOR_RESET_MINOR) == Version(2, 0, 0)

    def test_none_leaves_version(self) -> None:
        """Verify the none rule returns an equal version."""
        assert bump(Version(1, 3, 0), VersionRule.NONE) == Version(1, 3, 0)

    def test_accepts_rule_names(self) -> None:
        """Verify rules given as strings are accepted."""
        assert bump(Version(0, 1, 0), "increase_major_reset_minor") == Version(1, 0, 0)

    def test_does_not_mutate_input(self) -> None:
        """Verify bump returns a new object and leaves the input intact."""
        original = Version(0, 1, 0)
        bumped = bump(original, VersionRule.INCREASE_MINOR_RESET_PATCH)
        assert bumped is not original
        assert original == Version(0, 1, 0)

    def test_rejects_unknown_rule(self) -> None:
        """Verify unknown rules raise ValidationError."""
        with pytest.raises(ValidationError):
            bump(Version(), "increase_patch")

    def test_rejects_non_version(self) -> None:
        """Verify bump only operates on Version values."""
        with pytest.raises(ValidationError):
            bump((0, 1, 0), VersionRule.NONE)  # type: ignore[arg-type]


class TestCompare:
    """Test version comparison."""

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            (Version(0, 1, 0), Version(1, 0, 0), Ordering.LESS),
            (Version(1, 0, 0), Version(1, 0, 0), Ordering.EQUAL),
            (Version(2, 0, 0), Version(1, 9, 0), Ordering.GREATER),
            (Version(1, 1, 1), Version(1, 1, 0), Ordering.GREATER),
        ],
    )
    def test_compare(self, a: Version, b: Version, expected: Ordering) -> None:
        """Verify compare orders by major, minor, patch."""
        assert compare(a, b) == expected
