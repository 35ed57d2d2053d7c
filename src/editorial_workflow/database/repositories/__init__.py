"""Repository modules for each Cosmos DB container."""

from editorial_workflow.database.repositories.entities import EntityRepository
from editorial_workflow.database.repositories.revisions import RevisionRepository
from editorial_workflow.database.repositories.translation_jobs import TranslationJobRepository

__all__ = [
    "EntityRepository",
    "RevisionRepository",
    "TranslationJobRepository",
]
