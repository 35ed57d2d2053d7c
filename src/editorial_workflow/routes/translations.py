"""Translation routes: start a job on an entity, complete it."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request, status
from pydantic import BaseModel

from editorial_workflow.auth.middleware import require_actor

router = APIRouter(tags=["translations"])


class StartTranslationRequest(BaseModel):
    source_locale: str
    target_locale: str


class CompleteTranslationRequest(BaseModel):
    translation: dict[str, Any]


@router.post("/entities/{entity_id}/translations", status_code=status.HTTP_201_CREATED)
async def start_translation(
    request: Request, entity_id: str, body: StartTranslationRequest
) -> dict[str, Any]:
    """Start a translation job anchored on the entity's latest revision."""
    actor = require_actor(request)
    translations = request.app.state.translations
    job = await translations.start_job(
        entity_id, body.source_locale, body.target_locale, actor=actor
    )
    return job.model_dump(mode="json")


@router.get("/translations/{job_id}")
async def translation_detail(request: Request, job_id: str) -> dict[str, Any]:
    translations = request.app.state.translations
    job = await translations.get_job(job_id)
    return job.model_dump(mode="json")


@router.post("/translations/{job_id}/complete")
async def complete_translation(
    request: Request, job_id: str, body: CompleteTranslationRequest
) -> dict[str, Any]:
    """Save the finished translation onto its target revision."""
    require_actor(request)
    translations = request.app.state.translations
    revision = await translations.complete_job(job_id, body.translation)
    return revision.model_dump(mode="json")
