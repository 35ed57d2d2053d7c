"""Access gates keyed on moderation state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from editorial_workflow.models.actor import Permission
from editorial_workflow.models.state import ModerationState

if TYPE_CHECKING:
    from editorial_workflow.models.actor import Actor

TRANSLATABLE_STATES = frozenset({ModerationState.VALIDATED, ModerationState.PUBLISHED})


def can_start_translation(state: ModerationState | str, actor: Actor | None = None) -> bool:
    """Translations may only start from validated or published content."""
    if actor is not None and not actor.has_permission(Permission.CREATE_TRANSLATION_TASKS):
        return False
    return state in TRANSLATABLE_STATES


def can_unpublish(state: ModerationState | str, actor: Actor | None = None) -> bool:
    """Only published content can be unpublished."""
    if actor is not None and not actor.has_permission(Permission.UNPUBLISH_CONTENT):
        return False
    return state == ModerationState.PUBLISHED
