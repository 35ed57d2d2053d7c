"""Persistence: store contracts, in-memory stores and Cosmos DB adapters."""

from editorial_workflow.database.store import (
    InMemoryRevisionStore,
    InMemoryTranslationJobStore,
    RevisionStore,
    TranslationJobStore,
)

__all__ = [
    "InMemoryRevisionStore",
    "InMemoryTranslationJobStore",
    "RevisionStore",
    "TranslationJobStore",
]
