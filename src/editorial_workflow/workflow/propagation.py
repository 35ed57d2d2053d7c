"""Translation propagation across revisions.

Two rules keep translations consistent while content moves through the
workflow:

* copy-on-derive: a revision created from a parent copies the parent's
  payload and translations by value. Translations follow the lineage they
  were committed on and never leak in from the default revision.
* commit targeting: a finished translation is saved on the most advanced
  revision that descends from the job's anchor and still carries the
  anchor's release (major.minor). A job started on a validated revision that
  got published meanwhile lands on the published revision; a new draft,
  which opens a new minor version, is left alone.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Protocol

from editorial_workflow.models.revision import Revision

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


class RevisionCreateHook(Protocol):
    """Build a new, unsaved revision from its parent and the proposed fields."""

    def __call__(self, parent: Revision, proposed: Mapping[str, Any]) -> Revision: ...


def copy_on_derive(parent: Revision, proposed: Mapping[str, Any]) -> Revision:
    """Derive a revision from ``parent``, copying payload and translations by value."""
    fields: dict[str, Any] = {
        "entity_id": parent.entity_id,
        "parent_revision_id": parent.id,
        "sequence": parent.sequence + 1,
        "state": parent.state,
        "version": parent.version,
        "payload": copy.deepcopy(parent.payload),
        "translations": copy.deepcopy(parent.translations),
    }
    fields.update(proposed)
    return Revision(**fields)


def descends_from(revision: Revision, ancestor: Revision, by_id: Mapping[str, Revision]) -> bool:
    """Walk parent links from ``revision`` back to ``ancestor``."""
    current: Revision | None = revision
    while current is not None:
        if current.id == ancestor.id:
            return True
        if current.parent_revision_id is None:
            return False
        current = by_id.get(current.parent_revision_id)
    return False


def resolve_commit_target(anchor: Revision, revisions: Sequence[Revision]) -> Revision:
    """Return the revision a translation anchored on ``anchor`` is committed to."""
    by_id = {revision.id: revision for revision in revisions}
    target = anchor
    for revision in sorted(revisions, key=lambda r: r.sequence):
        if revision.sequence <= target.sequence:
            continue
        if not revision.version.same_release(anchor.version):
            continue
        if descends_from(revision, anchor, by_id):
            target = revision
    return target


def with_translation(revision: Revision, locale: str, translation: Mapping[str, Any]) -> Revision:
    """Return a copy of ``revision`` carrying ``translation`` for ``locale``."""
    translations = copy.deepcopy(revision.translations)
    translations[locale] = copy.deepcopy(dict(translation))
    return revision.model_copy(update={"translations": translations})
