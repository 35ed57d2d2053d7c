"""Translation job document model."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import Field

from editorial_workflow.models.base import DocumentBase


class TranslationJobStatus(StrEnum):
    ACTIVE = "active"
    COMPLETED = "completed"


class TranslationJob(DocumentBase):
    """A translation task anchored on the revision it was started from."""

    entity_id: str
    source_locale: str
    target_locale: str
    anchor_revision_id: str = Field(frozen=True)
    status: TranslationJobStatus = TranslationJobStatus.ACTIVE
    suggestion: dict[str, Any] = Field(default_factory=dict)
    translation: dict[str, Any] | None = None
    target_revision_id: str | None = None
    completed_at: datetime | None = None
