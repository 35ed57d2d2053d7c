"""Tests for the Cosmos-backed revision store."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from editorial_workflow.database.cosmos_store import CosmosRevisionStore
from editorial_workflow.exceptions import NotFoundError
from editorial_workflow.models.entity import ContentEntity
from editorial_workflow.models.revision import Revision


@pytest.fixture
def cosmos_store() -> CosmosRevisionStore:
    """Create a store with both repositories mocked."""
    db = MagicMock()
    db.get_container_client.return_value = AsyncMock()
    store = CosmosRevisionStore(db)
    store._entities = AsyncMock()  # noqa: SLF001
    store._revisions = AsyncMock()  # noqa: SLF001
    return store


class TestCosmosRevisionStore:
    """Test the Cosmos revision store."""

    async def test_load_by_id_queries_after_save(self, cosmos_store: CosmosRevisionStore) -> None:
        """Verify lookups by id always query, so the store keeps no per-revision state."""
        rev = Revision(entity_id="ent-1", sequence=1)
        cosmos_store._revisions.query.return_value = [rev]  # noqa: SLF001

        await cosmos_store.save(rev)
        result = await cosmos_store.load_by_id(rev.id)

        assert result == rev
        cosmos_store._revisions.upsert.assert_awaited_once_with(rev)  # noqa: SLF001
        cosmos_store._revisions.get.assert_not_awaited()  # noqa: SLF001
        params = cosmos_store._revisions.query.call_args[0][1]  # noqa: SLF001
        assert params == [{"name": "@id", "value": rev.id}]

    async def test_load_by_id_missing(self, cosmos_store: CosmosRevisionStore) -> None:
        """Verify a missing revision raises NotFoundError."""
        cosmos_store._revisions.query.return_value = []  # noqa: SLF001
        with pytest.raises(NotFoundError):
            await cosmos_store.load_by_id("rev-x")

    async def test_load_latest_missing(self, cosmos_store: CosmosRevisionStore) -> None:
        """Verify an entity without revisions raises NotFoundError."""
        cosmos_store._revisions.get_latest.return_value = None  # noqa: SLF001
        with pytest.raises(NotFoundError):
            await cosmos_store.load_latest("ent-1")

    async def test_set_default_revision_updates_entity(self, cosmos_store: CosmosRevisionStore) -> None:
        """Verify the default pointer is written to the entity document."""
        entity = ContentEntity(id="ent-1")
        rev = Revision(entity_id="ent-1", sequence=1)
        cosmos_store._entities.get.return_value = entity  # noqa: SLF001
        cosmos_store._entities.update.side_effect = lambda item, pk: item  # noqa: SLF001
        cosmos_store._revisions.query.return_value = [rev]  # noqa: SLF001

        result = await cosmos_store.set_default_revision("ent-1", rev.id)

        assert result.default_revision_id == rev.id
        cosmos_store._entities.update.assert_awaited_once_with(entity, "ent-1")  # noqa: SLF001

    async def test_create_revision_uses_latest_sequence(self, cosmos_store: CosmosRevisionStore) -> None:
        """Verify derived revisions are numbered after the entity's latest revision."""
        parent = Revision(entity_id="ent-1", sequence=2, payload={"title": "My node"})
        latest = Revision(entity_id="ent-1", sequence=5)
        cosmos_store._revisions.query.return_value = [parent]  # noqa: SLF001
        cosmos_store._revisions.get_latest.return_value = latest  # noqa: SLF001

        child = await cosmos_store.create_revision(parent.id)

        assert child.sequence == 6  # noqa: PLR2004
        assert child.payload == {"title": "My node"}
