"""Workflow rules: versions, transitions, access gates, propagation and unpublish."""

from editorial_workflow.workflow.access import can_start_translation, can_unpublish
from editorial_workflow.workflow.propagation import copy_on_derive, resolve_commit_target
from editorial_workflow.workflow.state_machine import (
    ModerationStateMachine,
    Transition,
    TransitionTable,
    corporate_transitions,
)
from editorial_workflow.workflow.unpublish import UnpublishResult, resolve_unpublish_target
from editorial_workflow.workflow.versioning import Ordering, bump, compare

__all__ = [
    "ModerationStateMachine",
    "Ordering",
    "Transition",
    "TransitionTable",
    "UnpublishResult",
    "bump",
    "can_start_translation",
    "can_unpublish",
    "compare",
    "copy_on_derive",
    "corporate_transitions",
    "resolve_commit_target",
    "resolve_unpublish_target",
]
