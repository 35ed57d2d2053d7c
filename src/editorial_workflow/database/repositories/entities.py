"""Repository for the entities container (partitioned by /id)."""

from __future__ import annotations

from editorial_workflow.database.repositories.base import BaseRepository
from editorial_workflow.models.entity import ContentEntity


class EntityRepository(BaseRepository[ContentEntity]):
    container_name = "entities"
    model_class = ContentEntity
