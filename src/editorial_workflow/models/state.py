"""Moderation states of the corporate editorial workflow."""

from __future__ import annotations

from enum import StrEnum


class ModerationState(StrEnum):
    """Enumerate the workflow states in progression order."""

    DRAFT = "draft"
    NEEDS_REVIEW = "needs_review"
    REQUEST_VALIDATION = "request_validation"
    VALIDATED = "validated"
    PUBLISHED = "published"
    ARCHIVED = "archived"

    @property
    def position(self) -> int:
        """Index of the state in workflow progression."""
        return list(ModerationState).index(self)


INITIAL_STATE = ModerationState.DRAFT

# States whose revisions replace the entity's default revision.
DEFAULT_REVISION_STATES = frozenset({ModerationState.PUBLISHED, ModerationState.ARCHIVED})
