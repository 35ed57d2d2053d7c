"""Authentication helpers: resolve the acting user from the session."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, Request, status
from pydantic import ValidationError

from editorial_workflow.models.actor import Actor


def get_user(request: Request) -> dict[str, Any] | None:
    """Extract the authenticated user from the session, if present."""
    return request.session.get("user") if hasattr(request, "session") else None


def get_actor(request: Request) -> Actor | None:
    """Build an Actor from the session user, or None when anonymous."""
    user = get_user(request)
    if not user:
        return None
    try:
        return Actor.model_validate(user)
    except ValidationError:
        return None


def require_actor(request: Request) -> Actor:
    """Return the acting user or raise HTTP 401."""
    actor = get_actor(request)
    if actor is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return actor
