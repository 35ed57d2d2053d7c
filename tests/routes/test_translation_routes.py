"""Tests for the translation routes."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from editorial_workflow.exceptions import AccessDeniedError
from editorial_workflow.models.actor import Permission
from editorial_workflow.routes.translations import (
    CompleteTranslationRequest,
    StartTranslationRequest,
    complete_translation,
    start_translation,
    translation_detail,
)
from editorial_workflow.services.moderation import ModerationService
from editorial_workflow.services.translations import TranslationService


def _request(
    moderation: ModerationService, translations: TranslationService, permissions: list[str]
) -> MagicMock:
    request = MagicMock()
    request.app.state.moderation = moderation
    request.app.state.translations = translations
    request.session = {"user": {"id": "u-1", "permissions": permissions}}
    return request


class TestTranslationRoutes:
    """Test starting and completing translation jobs over HTTP."""

    async def test_start_and_complete(
        self, moderation: ModerationService, translations: TranslationService, moderate
    ) -> None:
        """Verify a job started on validated content commits to the published revision."""
        request = _request(moderation, translations, [str(Permission.CREATE_TRANSLATION_TASKS)])
        entity, _ = await moderation.create_entity({"title": "My node"})
        validated = await moderate(entity.id, "validated")

        job = await start_translation(
            request, entity.id, StartTranslationRequest(source_locale="en", target_locale="fr")
        )
        assert job["anchor_revision_id"] == validated.id
        assert job["status"] == "active"

        published = await moderate(entity.id, "published")
        revision = await complete_translation(
            request, job["id"], CompleteTranslationRequest(translation={"title": "My node FR"})
        )
        assert revision["id"] == published.id
        assert revision["translations"] == {"fr": {"title": "My node FR"}}

        detail = await translation_detail(request, job["id"])
        assert detail["status"] == "completed"
        assert detail["target_revision_id"] == published.id

    async def test_start_denied_for_draft(
        self, moderation: ModerationService, translations: TranslationService
    ) -> None:
        """Verify draft content cannot be sent for translation."""
        request = _request(moderation, translations, [str(Permission.CREATE_TRANSLATION_TASKS)])
        entity, _ = await moderation.create_entity({"title": "My node"})

        with pytest.raises(AccessDeniedError):
            await start_translation(
                request, entity.id, StartTranslationRequest(source_locale="en", target_locale="fr")
            )
