"""Shared fixtures: in-memory stores and services."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import pytest

from editorial_workflow.database.store import InMemoryRevisionStore, InMemoryTranslationJobStore
from editorial_workflow.models.revision import Revision
from editorial_workflow.models.state import ModerationState
from editorial_workflow.services.moderation import ModerationService
from editorial_workflow.services.translations import TranslationService

# Linear path used to walk content forward in tests.
_FORWARD = [
    ModerationState.DRAFT,
    ModerationState.NEEDS_REVIEW,
    ModerationState.REQUEST_VALIDATION,
    ModerationState.VALIDATED,
    ModerationState.PUBLISHED,
]

Moderate = Callable[[str, ModerationState], Awaitable[Revision]]


@pytest.fixture
def store() -> InMemoryRevisionStore:
    return InMemoryRevisionStore()


@pytest.fixture
def jobs() -> InMemoryTranslationJobStore:
    return InMemoryTranslationJobStore()


@pytest.fixture
def moderation(store: InMemoryRevisionStore) -> ModerationService:
    return ModerationService(store)


@pytest.fixture
def translations(
    store: InMemoryRevisionStore, jobs: InMemoryTranslationJobStore
) -> TranslationService:
    return TranslationService(store, jobs)


@pytest.fixture
def moderate(moderation: ModerationService) -> Moderate:
    """Return a helper that sends an entity through each state up to a target."""

    async def _moderate(entity_id: str, target_state: ModerationState) -> Revision:
        revision = await moderation.load_latest(entity_id)
        if revision.state == target_state:
            return revision
        position = _FORWARD.index(revision.state)
        for state in _FORWARD[position + 1 :]:
            revision = await moderation.transition(entity_id, state)
            if state == target_state:
                break
        return revision

    return _moderate
