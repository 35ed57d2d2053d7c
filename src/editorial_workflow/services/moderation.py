"""Moderation business logic: create, transition, unpublish."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any

from editorial_workflow.models.entity import ContentEntity
from editorial_workflow.models.revision import Revision
from editorial_workflow.models.state import (
    DEFAULT_REVISION_STATES,
    INITIAL_STATE,
    ModerationState,
)
from editorial_workflow.models.version import Version
from editorial_workflow.workflow.state_machine import ModerationStateMachine
from editorial_workflow.workflow.unpublish import (
    UnpublishResult,
    check_unpublish,
    resolve_unpublish_target,
    unpublished_message,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from editorial_workflow.database.store import RevisionStore
    from editorial_workflow.models.actor import Actor

logger = logging.getLogger(__name__)


class ModerationService:
    """Drive entities through the moderation workflow."""

    def __init__(
        self,
        store: RevisionStore,
        machine: ModerationStateMachine | None = None,
        *,
        initial_version: Version | None = None,
        unpublish_states: Iterable[ModerationState | str] = (
            ModerationState.ARCHIVED,
            ModerationState.DRAFT,
        ),
    ) -> None:
        self.store = store
        self.machine = machine or ModerationStateMachine()
        self.initial_version = initial_version or Version()
        self.unpublish_states = [ModerationState(s) for s in unpublish_states]

    async def create_entity(
        self,
        payload: dict[str, Any],
        *,
        bundle: str = "page",
        actor: Actor | None = None,
    ) -> tuple[ContentEntity, Revision]:
        """Create an entity with its first draft revision."""
        entity = await self.store.create_entity(ContentEntity(bundle=bundle))
        revision = Revision(
            entity_id=entity.id,
            sequence=1,
            state=INITIAL_STATE,
            version=self.initial_version,
            payload=copy.deepcopy(payload),
            author_id=actor.id if actor else None,
            summary="Created",
        )
        await self.store.save(revision)
        entity = await self.store.set_default_revision(entity.id, revision.id)
        logger.info(
            "Created entity=%s revision=%s version=%s",
            entity.id,
            revision.id,
            revision.version,
        )
        return entity, revision

    async def transition(
        self,
        entity_id: str,
        target_state: ModerationState | str,
        *,
        payload: dict[str, Any] | None = None,
        actor: Actor | None = None,
        summary: str = "",
    ) -> Revision:
        """Move the entity's latest revision to ``target_state``.

        Returns the new revision, or the latest one unchanged when the target
        equals the current state and no content changes are given.
        """
        latest = await self.store.load_latest(entity_id)
        unchanged = payload is None or {**latest.payload, **payload} == latest.payload
        if unchanged and str(target_state) == latest.state:
            logger.info("No-op transition entity=%s state=%s", entity_id, latest.state)
            return latest

        new_state, new_version = self.machine.transition(
            latest.state, target_state, latest.version  # type: ignore[arg-type]
        )
        revision = await self._derive(
            latest, new_state, new_version, payload=payload, actor=actor, summary=summary
        )
        if await self._becomes_default(revision):
            await self.store.set_default_revision(entity_id, revision.id)
        return revision

    def unpublish_options(self) -> list[ModerationState]:
        """Return the fallback states an actor may choose when unpublishing."""
        return resolve_unpublish_target(self.unpublish_states, self.machine)

    async def apply_unpublish(
        self,
        entity_id: str,
        chosen_state: ModerationState | str,
        *,
        actor: Actor | None = None,
    ) -> UnpublishResult:
        """Move published content to ``chosen_state`` and make it the default revision."""
        latest = await self.store.load_latest(entity_id)
        chosen = check_unpublish(latest.state, chosen_state, self.unpublish_options())
        new_state, new_version = self.machine.transition(latest.state, chosen, latest.version)
        revision = await self._derive(
            latest, new_state, new_version, actor=actor, summary="Unpublished"
        )
        await self.store.set_default_revision(entity_id, revision.id)
        message = unpublished_message(revision)
        logger.info("Unpublished entity=%s state=%s", entity_id, new_state)
        return UnpublishResult(revision=revision, message=message)

    async def revisions(self, entity_id: str) -> list[Revision]:
        return await self.store.list_revisions(entity_id)

    async def load_default(self, entity_id: str) -> Revision:
        return await self.store.load_default(entity_id)

    async def load_latest(self, entity_id: str) -> Revision:
        return await self.store.load_latest(entity_id)

    async def _derive(
        self,
        parent: Revision,
        state: ModerationState,
        version: Version,
        *,
        payload: dict[str, Any] | None = None,
        actor: Actor | None = None,
        summary: str = "",
    ) -> Revision:
        fields: dict[str, Any] = {
            "state": state,
            "version": version,
            "summary": summary,
            "author_id": actor.id if actor else None,
        }
        if payload is not None:
            fields["payload"] = copy.deepcopy({**parent.payload, **payload})
        revision = await self.store.create_revision(parent.id, **fields)
        await self.store.save(revision)
        logger.info(
            "Transition entity=%s %s → %s version %s → %s revision=%s",
            parent.entity_id,
            parent.state,
            state,
            parent.version,
            version,
            revision.id,
        )
        return revision

    async def _becomes_default(self, revision: Revision) -> bool:
        """Published and archived revisions always become default.

        Until an entity first reaches one of those states, its latest revision
        is the default one.
        """
        if revision.state in DEFAULT_REVISION_STATES:
            return True
        current = await self.store.load_default(revision.entity_id)
        return current.state not in DEFAULT_REVISION_STATES
