"""Content entity document: owns the default revision pointer."""

from __future__ import annotations

from editorial_workflow.models.base import DocumentBase


class ContentEntity(DocumentBase):
    """A moderated piece of content whose snapshots live in revisions."""

    bundle: str = "page"
    default_revision_id: str | None = None
