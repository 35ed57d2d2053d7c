"""Document version: an immutable major.minor.patch triple."""

from __future__ import annotations

import functools
from enum import StrEnum
from typing import Annotated, Any

import pydantic
from pydantic import Field
from pydantic.dataclasses import dataclass

from editorial_workflow.exceptions import ValidationError

Component = Annotated[int, Field(ge=0, strict=True)]


class VersionRule(StrEnum):
    """Enumerate how a transition changes the document version."""

    INCREASE_MINOR_RESET_PATCH = "increase_minor_reset_patch"
    INCREASE_MAJOR_RESET_MINOR = "increase_major_reset_minor"
    NONE = "none"


def _raise_workflow_errors(cls: type[Version]) -> type[Version]:
    """Re-raise pydantic's constructor errors as ValidationError."""
    validated_init = cls.__init__

    @functools.wraps(validated_init)
    def __init__(self: Version, *args: Any, **kwargs: Any) -> None:
        try:
            validated_init(self, *args, **kwargs)
        except pydantic.ValidationError as exc:
            detail = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in exc.errors()
            )
            raise ValidationError(
                f"Version components must be non-negative integers ({detail})"
            ) from exc

    cls.__init__ = __init__  # type: ignore[method-assign]
    return cls


@_raise_workflow_errors
@dataclass(frozen=True, order=True)
class Version:
    """The document version of a revision.

    Ordering is lexicographic over ``(major, minor, patch)``. The patch
    component is carried but no workflow rule increases it.
    """

    major: Component = 0
    minor: Component = 1
    patch: Component = 0

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse a ``"major.minor.patch"`` string."""
        parts = text.strip().split(".")
        if len(parts) != 3:  # noqa: PLR2004
            raise ValidationError(f"Malformed version string {text!r}")
        try:
            major, minor, patch = (int(part) for part in parts)
        except ValueError as exc:
            raise ValidationError(f"Malformed version string {text!r}") from exc
        return cls(major, minor, patch)

    def same_release(self, other: Version) -> bool:
        """Return True when both versions share major and minor numbers."""
        return (self.major, self.minor) == (other.major, other.minor)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
