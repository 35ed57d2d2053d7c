"""Moderation state machine: a graph of states with version-tagged edges.

Transitions:
    draft → needs_review → request_validation → validated → published → archived
      ↑          │                  │               │           │          │
      └──────────┴──────────────────┴───────────────┴───────────┴──────────┘
                             (new draft, minor version +1)

``request_validation → validated`` starts a new major version. Any pair of
states may be connected by configuration; the engine does not impose the
linear order above.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from editorial_workflow.exceptions import InvalidTransitionError, ValidationError
from editorial_workflow.models.state import ModerationState
from editorial_workflow.models.version import Version, VersionRule
from editorial_workflow.workflow.versioning import bump

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """A configured edge between two states."""

    from_state: ModerationState
    to_state: ModerationState
    rule: VersionRule = VersionRule.NONE

    @property
    def name(self) -> str:
        if self.from_state == self.to_state == ModerationState.DRAFT:
            return "create_new_draft"
        return f"{self.from_state}_to_{self.to_state}"


class TransitionTable:
    """Directed graph of moderation states keyed by ``(from, to)``."""

    def __init__(self, transitions: Iterable[Transition]) -> None:
        self._edges: dict[tuple[ModerationState, ModerationState], Transition] = {}
        for transition in transitions:
            self._edges[(transition.from_state, transition.to_state)] = transition

    def get(self, from_state: ModerationState, to_state: ModerationState) -> Transition | None:
        return self._edges.get((from_state, to_state))

    def successors(self, state: ModerationState) -> list[ModerationState]:
        """Return the states reachable in one step, in workflow order."""
        targets = {to for (frm, to) in self._edges if frm == state}
        return sorted(targets, key=lambda s: s.position)

    def __iter__(self):
        return iter(self._edges.values())

    def __len__(self) -> int:
        return len(self._edges)

    @classmethod
    def from_config(cls, entries: Iterable[Mapping[str, Any]]) -> TransitionTable:
        """Build a table from ``{"from": ..., "to": ..., "rule": ...}`` mappings."""
        transitions = []
        for entry in entries:
            try:
                transitions.append(
                    Transition(
                        from_state=ModerationState(entry["from"]),
                        to_state=ModerationState(entry["to"]),
                        rule=VersionRule(entry.get("rule", VersionRule.NONE)),
                    )
                )
            except (KeyError, ValueError) as exc:
                raise ValidationError(f"Invalid transition entry {dict(entry)!r}") from exc
        return cls(transitions)

    @classmethod
    def from_file(cls, path: str | Path) -> TransitionTable:
        """Load a table from a JSON file holding a list of transition entries."""
        entries = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.from_config(entries)


def corporate_transitions() -> TransitionTable:
    """Return the default corporate editorial workflow table."""
    s = ModerationState
    forward = [
        Transition(s.DRAFT, s.NEEDS_REVIEW),
        Transition(s.NEEDS_REVIEW, s.REQUEST_VALIDATION),
        Transition(s.REQUEST_VALIDATION, s.VALIDATED, VersionRule.INCREASE_MAJOR_RESET_MINOR),
        Transition(s.VALIDATED, s.PUBLISHED),
        Transition(s.PUBLISHED, s.ARCHIVED),
    ]
    to_draft = [
        Transition(state, s.DRAFT, VersionRule.INCREASE_MINOR_RESET_PATCH)
        for state in s
    ]
    return TransitionTable(forward + to_draft)


class ModerationStateMachine:
    """Validate transitions and compute the resulting version."""

    def __init__(self, table: TransitionTable | None = None) -> None:
        self.table = table or corporate_transitions()

    def is_allowed(self, current_state: ModerationState, target_state: ModerationState) -> bool:
        return self.table.get(ModerationState(current_state), ModerationState(target_state)) is not None

    def successors(self, state: ModerationState) -> list[ModerationState]:
        return self.table.successors(ModerationState(state))

    def transition(
        self,
        current_state: ModerationState,
        target_state: ModerationState,
        current_version: Version,
    ) -> tuple[ModerationState, Version]:
        """Return ``(new_state, new_version)`` for moving to ``target_state``.

        Raises InvalidTransitionError when no edge connects the two states.
        Requesting the current state without a configured self-edge returns
        the inputs unchanged.
        """
        try:
            current_state = ModerationState(current_state)
            target_state = ModerationState(target_state)
        except ValueError as exc:
            raise InvalidTransitionError(
                str(current_state), str(target_state), "unknown moderation state"
            ) from exc
        edge = self.table.get(current_state, target_state)
        if edge is None:
            if current_state == target_state:
                return current_state, current_version
            logger.warning("Rejected transition %s → %s", current_state, target_state)
            raise InvalidTransitionError(current_state, target_state)
        new_version = bump(current_version, edge.rule)
        logger.debug(
            "Transition %s: version %s → %s", edge.name, current_version, new_version
        )
        return target_state, new_version
