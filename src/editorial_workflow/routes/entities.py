"""Entity routes: create, inspect revisions, transition, unpublish."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel, Field

from editorial_workflow.auth.middleware import get_actor, require_actor
from editorial_workflow.workflow.access import can_start_translation, can_unpublish

router = APIRouter(prefix="/entities", tags=["entities"])


class CreateEntityRequest(BaseModel):
    payload: dict[str, Any] = Field(default_factory=dict)
    bundle: str = "page"


class TransitionRequest(BaseModel):
    target_state: str
    payload: dict[str, Any] | None = None
    summary: str = ""


class UnpublishRequest(BaseModel):
    state: str


@router.post("/", status_code=status.HTTP_201_CREATED)
async def create_entity(request: Request, body: CreateEntityRequest) -> dict[str, Any]:
    """Create an entity with its first draft revision."""
    actor = require_actor(request)
    moderation = request.app.state.moderation
    entity, revision = await moderation.create_entity(
        body.payload, bundle=body.bundle, actor=actor
    )
    return {
        "entity": entity.model_dump(mode="json"),
        "revision": revision.model_dump(mode="json"),
    }


@router.get("/{entity_id}")
async def entity_detail(request: Request, entity_id: str) -> dict[str, Any]:
    """Return the default and latest revisions of an entity."""
    moderation = request.app.state.moderation
    default = await moderation.load_default(entity_id)
    latest = await moderation.load_latest(entity_id)
    return {
        "default_revision": default.model_dump(mode="json"),
        "latest_revision": latest.model_dump(mode="json"),
    }


@router.get("/{entity_id}/revisions")
async def list_revisions(request: Request, entity_id: str) -> list[dict[str, Any]]:
    """List an entity's revisions in creation order."""
    moderation = request.app.state.moderation
    revisions = await moderation.revisions(entity_id)
    return [revision.model_dump(mode="json") for revision in revisions]


@router.post("/{entity_id}/transitions")
async def transition_entity(
    request: Request, entity_id: str, body: TransitionRequest
) -> dict[str, Any]:
    """Move the entity to a new moderation state."""
    actor = require_actor(request)
    moderation = request.app.state.moderation
    revision = await moderation.transition(
        entity_id,
        body.target_state,
        payload=body.payload,
        actor=actor,
        summary=body.summary,
    )
    return revision.model_dump(mode="json")


@router.get("/{entity_id}/access")
async def entity_access(request: Request, entity_id: str) -> dict[str, bool]:
    """Report which gated actions the current user may take."""
    actor = get_actor(request)
    moderation = request.app.state.moderation
    latest = await moderation.load_latest(entity_id)
    return {
        "can_start_translation": actor is not None
        and can_start_translation(latest.state, actor),
        "can_unpublish": actor is not None and can_unpublish(latest.state, actor),
    }


async def _check_unpublish_access(request: Request, entity_id: str):
    actor = require_actor(request)
    moderation = request.app.state.moderation
    latest = await moderation.load_latest(entity_id)
    if not can_unpublish(latest.state, actor):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only published content can be unpublished",
        )
    return actor, moderation


@router.get("/{entity_id}/unpublish")
async def unpublish_options(request: Request, entity_id: str) -> dict[str, Any]:
    """Return the states published content can be unpublished to."""
    _, moderation = await _check_unpublish_access(request, entity_id)
    return {"options": [str(state) for state in moderation.unpublish_options()]}


@router.post("/{entity_id}/unpublish")
async def unpublish_entity(
    request: Request, entity_id: str, body: UnpublishRequest
) -> dict[str, Any]:
    """Unpublish an entity to the chosen fallback state."""
    actor, moderation = await _check_unpublish_access(request, entity_id)
    result = await moderation.apply_unpublish(entity_id, body.state, actor=actor)
    return {
        "message": result.message,
        "revision": result.revision.model_dump(mode="json"),
    }
