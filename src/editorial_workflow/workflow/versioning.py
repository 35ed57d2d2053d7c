"""Version bumping and comparison."""

from __future__ import annotations

from enum import StrEnum

from editorial_workflow.exceptions import ValidationError
from editorial_workflow.models.version import Version, VersionRule


class Ordering(StrEnum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


def bump(version: Version, rule: VersionRule | str) -> Version:
    """Return the version produced by applying ``rule``; the input is untouched."""
    if not isinstance(version, Version):
        raise ValidationError(f"Expected a Version, got {type(version).__name__}")
    try:
        rule = VersionRule(rule)
    except ValueError as exc:
        raise ValidationError(f"Unknown version rule {rule!r}") from exc
    match rule:
        case VersionRule.INCREASE_MINOR_RESET_PATCH:
            return Version(version.major, version.minor + 1, 0)
        case VersionRule.INCREASE_MAJOR_RESET_MINOR:
            return Version(version.major + 1, 0, 0)
        case VersionRule.NONE:
            return version


def compare(a: Version, b: Version) -> Ordering:
    """Compare two versions by ``(major, minor, patch)``."""
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL
