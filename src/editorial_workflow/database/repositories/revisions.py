"""Repository for the revisions container (partitioned by /entity_id)."""

from __future__ import annotations

from editorial_workflow.database.repositories.base import BaseRepository
from editorial_workflow.models.revision import Revision


class RevisionRepository(BaseRepository[Revision]):
    container_name = "revisions"
    model_class = Revision

    async def list_by_entity(self, entity_id: str) -> list[Revision]:
        """Fetch all revisions of an entity in creation order."""
        return await self.query(
            "SELECT * FROM c WHERE c.entity_id = @entity_id"
            " ORDER BY c.sequence ASC",
            [{"name": "@entity_id", "value": entity_id}],
        )

    async def get_latest(self, entity_id: str) -> Revision | None:
        """Fetch the most recent revision of an entity."""
        results = await self.query(
            "SELECT TOP 1 * FROM c WHERE c.entity_id = @entity_id"
            " ORDER BY c.sequence DESC",
            [{"name": "@entity_id", "value": entity_id}],
        )
        return results[0] if results else None
