"""Revision document model: immutable content snapshots for entities."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from editorial_workflow.models.base import DocumentBase
from editorial_workflow.models.state import ModerationState
from editorial_workflow.models.version import Version


class Revision(DocumentBase):
    """An immutable snapshot of entity content at a point in time."""

    model_config = ConfigDict(frozen=True)

    entity_id: str
    sequence: int
    parent_revision_id: str | None = None
    state: ModerationState = ModerationState.DRAFT
    version: Version = Field(default_factory=Version)
    payload: dict[str, Any] = Field(default_factory=dict)
    translations: dict[str, dict[str, Any]] = Field(default_factory=dict)
    summary: str = ""
    author_id: str | None = None

    @property
    def label(self) -> str:
        """Human-readable label taken from the payload title."""
        return str(self.payload.get("title", self.entity_id))

    def has_translation(self, locale: str) -> bool:
        """Return True when a translated payload exists for ``locale``."""
        return locale in self.translations
