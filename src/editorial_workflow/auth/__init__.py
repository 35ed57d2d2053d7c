"""Session-based actor resolution."""

from editorial_workflow.auth.middleware import get_actor, get_user, require_actor

__all__ = ["get_actor", "get_user", "require_actor"]
