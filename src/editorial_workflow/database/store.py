"""Revision and translation job store contracts with in-memory implementations."""

from __future__ import annotations

import abc
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from editorial_workflow.exceptions import NotFoundError, TranslationJobError
from editorial_workflow.models.translation import TranslationJobStatus
from editorial_workflow.workflow.propagation import copy_on_derive

if TYPE_CHECKING:
    from editorial_workflow.models.entity import ContentEntity
    from editorial_workflow.models.revision import Revision
    from editorial_workflow.models.translation import TranslationJob
    from editorial_workflow.workflow.propagation import RevisionCreateHook


class RevisionStore(abc.ABC):
    """Persist entities and their append-only revisions.

    Concurrent writers to one entity are not coordinated.
    """

    def __init__(self, on_revision_create: RevisionCreateHook = copy_on_derive) -> None:
        self._on_revision_create = on_revision_create

    async def create_revision(self, parent_revision_id: str, **fields: Any) -> Revision:
        """Build an unsaved revision derived from ``parent_revision_id``."""
        parent = await self.load_by_id(parent_revision_id)
        latest = await self.load_latest(parent.entity_id)
        fields.setdefault("sequence", latest.sequence + 1)
        return self._on_revision_create(parent, fields)

    async def load_default(self, entity_id: str) -> Revision:
        """Load the entity's default revision, or its latest when none is set."""
        entity = await self.load_entity(entity_id)
        if entity.default_revision_id is None:
            return await self.load_latest(entity_id)
        return await self.load_by_id(entity.default_revision_id)

    async def list_revision_ids(self, entity_id: str) -> list[str]:
        return [revision.id for revision in await self.list_revisions(entity_id)]

    @abc.abstractmethod
    async def create_entity(self, entity: ContentEntity) -> ContentEntity: ...

    @abc.abstractmethod
    async def load_entity(self, entity_id: str) -> ContentEntity: ...

    @abc.abstractmethod
    async def save(self, revision: Revision) -> Revision:
        """Insert a new revision or replace a stored one with the same id."""

    @abc.abstractmethod
    async def load_by_id(self, revision_id: str) -> Revision: ...

    @abc.abstractmethod
    async def load_latest(self, entity_id: str) -> Revision: ...

    @abc.abstractmethod
    async def list_revisions(self, entity_id: str) -> list[Revision]:
        """Return all revisions of an entity ordered by sequence."""

    @abc.abstractmethod
    async def set_default_revision(self, entity_id: str, revision_id: str) -> ContentEntity: ...


class TranslationJobStore(abc.ABC):
    """Persist translation jobs."""

    @abc.abstractmethod
    async def create(self, job: TranslationJob) -> TranslationJob: ...

    @abc.abstractmethod
    async def get(self, job_id: str) -> TranslationJob: ...

    @abc.abstractmethod
    async def update(self, job: TranslationJob) -> TranslationJob: ...

    @abc.abstractmethod
    async def claim_completion(self, job_id: str) -> TranslationJob:
        """Atomically move an active job to completed and return it.

        Raises TranslationJobError when the job is already completed or another
        caller completed it concurrently.
        """


class InMemoryRevisionStore(RevisionStore):
    """Process-local store for development runs and tests."""

    def __init__(self, on_revision_create: RevisionCreateHook = copy_on_derive) -> None:
        super().__init__(on_revision_create)
        self._entities: dict[str, ContentEntity] = {}
        self._revisions: dict[str, Revision] = {}

    async def create_entity(self, entity: ContentEntity) -> ContentEntity:
        self._entities[entity.id] = entity
        return entity

    async def load_entity(self, entity_id: str) -> ContentEntity:
        entity = self._entities.get(entity_id)
        if entity is None or entity.deleted_at is not None:
            raise NotFoundError(f"Entity {entity_id} not found")
        return entity

    async def save(self, revision: Revision) -> Revision:
        await self.load_entity(revision.entity_id)
        self._revisions[revision.id] = revision
        return revision

    async def load_by_id(self, revision_id: str) -> Revision:
        revision = self._revisions.get(revision_id)
        if revision is None:
            raise NotFoundError(f"Revision {revision_id} not found")
        return revision

    async def load_latest(self, entity_id: str) -> Revision:
        revisions = await self.list_revisions(entity_id)
        if not revisions:
            raise NotFoundError(f"Entity {entity_id} has no revisions")
        return revisions[-1]

    async def list_revisions(self, entity_id: str) -> list[Revision]:
        await self.load_entity(entity_id)
        revisions = [r for r in self._revisions.values() if r.entity_id == entity_id]
        return sorted(revisions, key=lambda r: r.sequence)

    async def set_default_revision(self, entity_id: str, revision_id: str) -> ContentEntity:
        entity = await self.load_entity(entity_id)
        revision = await self.load_by_id(revision_id)
        if revision.entity_id != entity_id:
            raise NotFoundError(f"Revision {revision_id} does not belong to entity {entity_id}")
        entity.default_revision_id = revision_id
        return entity


class InMemoryTranslationJobStore(TranslationJobStore):
    def __init__(self) -> None:
        self._jobs: dict[str, TranslationJob] = {}

    async def create(self, job: TranslationJob) -> TranslationJob:
        self._jobs[job.id] = job
        return job

    async def get(self, job_id: str) -> TranslationJob:
        job = self._jobs.get(job_id)
        if job is None:
            raise NotFoundError(f"Translation job {job_id} not found")
        return job

    async def update(self, job: TranslationJob) -> TranslationJob:
        await self.get(job.id)
        self._jobs[job.id] = job
        return job

    async def claim_completion(self, job_id: str) -> TranslationJob:
        job = await self.get(job_id)
        if job.status == TranslationJobStatus.COMPLETED:
            raise TranslationJobError(f"Translation job {job_id} is already completed")
        job.status = TranslationJobStatus.COMPLETED
        job.completed_at = datetime.now(UTC)
        job.updated_at = job.completed_at
        return job
