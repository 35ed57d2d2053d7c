"""Unpublish resolver: move published content back to a fallback state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from editorial_workflow.exceptions import InvalidTransitionError
from editorial_workflow.models.state import ModerationState

if TYPE_CHECKING:
    from collections.abc import Iterable

    from editorial_workflow.models.revision import Revision
    from editorial_workflow.workflow.state_machine import ModerationStateMachine


@dataclass(frozen=True)
class UnpublishResult:
    """Outcome of an unpublish action."""

    revision: Revision
    message: str


def resolve_unpublish_target(
    fallback_states: Iterable[ModerationState | str],
    machine: ModerationStateMachine,
) -> list[ModerationState]:
    """Return the configured fallback states that published content can move to."""
    options: list[ModerationState] = []
    for state in fallback_states:
        state = ModerationState(state)
        if state == ModerationState.PUBLISHED or state in options:
            continue
        if machine.is_allowed(ModerationState.PUBLISHED, state):
            options.append(state)
    return options


def check_unpublish(
    current_state: ModerationState,
    chosen_state: ModerationState | str,
    options: Iterable[ModerationState],
) -> ModerationState:
    """Validate an unpublish request and return the chosen state."""
    if current_state != ModerationState.PUBLISHED:
        raise InvalidTransitionError(
            current_state, str(chosen_state), "only published content can be unpublished"
        )
    try:
        chosen = ModerationState(chosen_state)
    except ValueError as exc:
        raise InvalidTransitionError(
            current_state, str(chosen_state), "unknown moderation state"
        ) from exc
    if chosen not in set(options):
        raise InvalidTransitionError(
            current_state, chosen, "not an unpublish fallback state"
        )
    return chosen


def unpublished_message(revision: Revision) -> str:
    return f"The content {revision.label} has been unpublished."
