"""Workflow error hierarchy: raised synchronously to the caller, never retried."""

from __future__ import annotations


class WorkflowError(Exception):
    """Base class for all editorial workflow errors."""


class ValidationError(WorkflowError, ValueError):
    """Malformed input: a bad version component, version rule or transition entry."""


class InvalidTransitionError(WorkflowError):
    """The target state is not reachable from the current state."""

    def __init__(self, current_state: str, target_state: str, reason: str = "") -> None:
        self.current_state = current_state
        self.target_state = target_state
        message = f"Cannot transition from {current_state} to {target_state}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AccessDeniedError(WorkflowError):
    """The action is not permitted in the current moderation state."""


class NotFoundError(WorkflowError):
    """An entity, revision or translation job does not exist."""


class TranslationJobError(WorkflowError):
    """A translation job cannot be completed."""
