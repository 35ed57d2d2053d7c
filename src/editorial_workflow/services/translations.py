"""Translation job business logic: start on an anchor, commit on completion."""

from __future__ import annotations

import copy
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from editorial_workflow.exceptions import AccessDeniedError
from editorial_workflow.models.translation import TranslationJob
from editorial_workflow.workflow.access import can_start_translation
from editorial_workflow.workflow.propagation import resolve_commit_target, with_translation

if TYPE_CHECKING:
    from editorial_workflow.database.store import RevisionStore, TranslationJobStore
    from editorial_workflow.models.actor import Actor
    from editorial_workflow.models.revision import Revision

logger = logging.getLogger(__name__)


class TranslationService:
    """Start translation jobs and commit their results onto the right revision."""

    def __init__(self, store: RevisionStore, jobs: TranslationJobStore) -> None:
        self.store = store
        self.jobs = jobs

    async def start_job(
        self,
        entity_id: str,
        source_locale: str,
        target_locale: str,
        *,
        actor: Actor | None = None,
    ) -> TranslationJob:
        """Anchor a new job on the entity's latest revision."""
        anchor = await self.store.load_latest(entity_id)
        if not can_start_translation(anchor.state, actor):
            raise AccessDeniedError(
                f"Cannot start a translation of entity {entity_id} in state {anchor.state}"
            )
        job = TranslationJob(
            entity_id=entity_id,
            source_locale=source_locale,
            target_locale=target_locale,
            anchor_revision_id=anchor.id,
            suggestion=self._suggestion(anchor, target_locale),
        )
        await self.jobs.create(job)
        logger.info(
            "Started translation job=%s entity=%s %s → %s anchor=%s",
            job.id,
            entity_id,
            source_locale,
            target_locale,
            anchor.id,
        )
        return job

    async def get_job(self, job_id: str) -> TranslationJob:
        return await self.jobs.get(job_id)

    async def complete_job(self, job_id: str, translation: dict[str, Any]) -> Revision:
        """Claim the job, then commit the translated payload onto its target revision."""
        job = await self.jobs.claim_completion(job_id)
        anchor = await self.store.load_by_id(job.anchor_revision_id)
        revisions = await self.store.list_revisions(job.entity_id)
        target = resolve_commit_target(anchor, revisions)
        committed = await self.store.save(
            with_translation(target, job.target_locale, translation)
        )

        job.translation = copy.deepcopy(translation)
        job.target_revision_id = committed.id
        job.updated_at = datetime.now(UTC)
        await self.jobs.update(job)

        logger.info(
            "Committed translation job=%s locale=%s anchor=%s target=%s",
            job.id,
            job.target_locale,
            anchor.id,
            committed.id,
        )
        return committed

    @staticmethod
    def _suggestion(anchor: Revision, target_locale: str) -> dict[str, Any]:
        """Pre-fill from the existing translation, falling back to the source."""
        existing = anchor.translations.get(target_locale)
        return copy.deepcopy(existing if existing is not None else anchor.payload)
