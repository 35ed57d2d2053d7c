"""Revision store backed by the Cosmos DB entities and revisions containers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from editorial_workflow.database.repositories.entities import EntityRepository
from editorial_workflow.database.repositories.revisions import RevisionRepository
from editorial_workflow.database.store import RevisionStore
from editorial_workflow.exceptions import NotFoundError
from editorial_workflow.workflow.propagation import copy_on_derive

if TYPE_CHECKING:
    from azure.cosmos.aio import DatabaseProxy

    from editorial_workflow.models.entity import ContentEntity
    from editorial_workflow.models.revision import Revision
    from editorial_workflow.workflow.propagation import RevisionCreateHook


class CosmosRevisionStore(RevisionStore):
    """Persist revisions in Cosmos DB; each entity's revisions share a partition."""

    def __init__(
        self,
        database: DatabaseProxy,
        on_revision_create: RevisionCreateHook = copy_on_derive,
    ) -> None:
        super().__init__(on_revision_create)
        self._entities = EntityRepository(database)
        self._revisions = RevisionRepository(database)

    async def create_entity(self, entity: ContentEntity) -> ContentEntity:
        return await self._entities.create(entity)

    async def load_entity(self, entity_id: str) -> ContentEntity:
        entity = await self._entities.get(entity_id, entity_id)
        if entity is None:
            raise NotFoundError(f"Entity {entity_id} not found")
        return entity

    async def save(self, revision: Revision) -> Revision:
        await self._revisions.upsert(revision)
        return revision

    async def load_by_id(self, revision_id: str) -> Revision:
        results = await self._revisions.query(
            "SELECT * FROM c WHERE c.id = @id",
            [{"name": "@id", "value": revision_id}],
        )
        if not results:
            raise NotFoundError(f"Revision {revision_id} not found")
        return results[0]

    async def load_latest(self, entity_id: str) -> Revision:
        revision = await self._revisions.get_latest(entity_id)
        if revision is None:
            raise NotFoundError(f"Entity {entity_id} has no revisions")
        return revision

    async def list_revisions(self, entity_id: str) -> list[Revision]:
        return await self._revisions.list_by_entity(entity_id)

    async def set_default_revision(self, entity_id: str, revision_id: str) -> ContentEntity:
        entity = await self.load_entity(entity_id)
        revision = await self.load_by_id(revision_id)
        if revision.entity_id != entity_id:
            raise NotFoundError(f"Revision {revision_id} does not belong to entity {entity_id}")
        entity.default_revision_id = revision_id
        return await self._entities.update(entity, entity_id)
