"""FastAPI application factory and lifespan wiring."""

from __future__ import annotations

import logging
import secrets
from contextlib import asynccontextmanager
from http import HTTPStatus
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from editorial_workflow.config import load_settings
from editorial_workflow.database.client import CosmosClient
from editorial_workflow.database.cosmos_store import CosmosRevisionStore
from editorial_workflow.database.repositories.translation_jobs import TranslationJobRepository
from editorial_workflow.database.store import (
    InMemoryRevisionStore,
    InMemoryTranslationJobStore,
    RevisionStore,
    TranslationJobStore,
)
from editorial_workflow.exceptions import (
    AccessDeniedError,
    InvalidTransitionError,
    NotFoundError,
    TranslationJobError,
    ValidationError,
    WorkflowError,
)
from editorial_workflow.health import check_emulators
from editorial_workflow.logging import configure_logging
from editorial_workflow.routes import entities, translations
from editorial_workflow.services.moderation import ModerationService
from editorial_workflow.services.translations import TranslationService
from editorial_workflow.workflow.state_machine import ModerationStateMachine, TransitionTable

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from editorial_workflow.config import Settings

logger = logging.getLogger(__name__)

_ERROR_STATUS: dict[type[WorkflowError], int] = {
    ValidationError: HTTPStatus.UNPROCESSABLE_ENTITY,
    InvalidTransitionError: HTTPStatus.CONFLICT,
    AccessDeniedError: HTTPStatus.FORBIDDEN,
    NotFoundError: HTTPStatus.NOT_FOUND,
    TranslationJobError: HTTPStatus.CONFLICT,
}


def build_machine(settings: Settings) -> ModerationStateMachine:
    """Create the state machine from the configured transition table, if any."""
    if settings.workflow.transitions_file:
        logger.info("Loading transitions from %s", settings.workflow.transitions_file)
        return ModerationStateMachine(TransitionTable.from_file(settings.workflow.transitions_file))
    return ModerationStateMachine()


async def init_database(settings: Settings) -> CosmosClient:
    """Connect to Cosmos DB, checking the local emulator first in development."""
    if settings.app.is_development and not await check_emulators(settings):
        raise ConnectionError("Cosmos DB is not reachable")
    cosmos = CosmosClient(settings.cosmos)
    await cosmos.initialize()
    return cosmos


async def workflow_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Translate workflow errors into JSON error responses."""
    code = next(
        (code for kind, code in _ERROR_STATUS.items() if isinstance(exc, kind)),
        HTTPStatus.BAD_REQUEST,
    )
    return JSONResponse(status_code=code, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Build the application; stores are wired in the lifespan."""
    settings = load_settings()
    configure_logging(settings.app.log_level, settings.app.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        machine = build_machine(settings)
        cosmos: CosmosClient | None = None
        store: RevisionStore
        jobs: TranslationJobStore
        if settings.cosmos.is_configured:
            cosmos = await init_database(settings)
            store = CosmosRevisionStore(cosmos.database)
            jobs = TranslationJobRepository(cosmos.database)
            logger.info("Using Cosmos DB database=%s", settings.cosmos.database)
        else:
            logger.warning("COSMOS_ENDPOINT is not set, using in-memory stores")
            store = InMemoryRevisionStore()
            jobs = InMemoryTranslationJobStore()

        app.state.settings = settings
        app.state.cosmos = cosmos
        app.state.moderation = ModerationService(
            store,
            machine,
            initial_version=settings.workflow.initial_version,
            unpublish_states=settings.workflow.fallback_states,
        )
        app.state.translations = TranslationService(store, jobs)
        logger.info("Editorial workflow started")
        try:
            yield
        finally:
            if cosmos is not None:
                await cosmos.close()
            logger.info("Editorial workflow stopped")

    app = FastAPI(title="Editorial Workflow", lifespan=lifespan)

    secret_key = settings.app.secret_key
    if not secret_key:
        logger.warning("APP_SECRET_KEY is not set, sessions will not survive restarts")
        secret_key = secrets.token_urlsafe(32)
    app.add_middleware(SessionMiddleware, secret_key=secret_key)

    app.add_exception_handler(WorkflowError, workflow_error_handler)
    app.include_router(entities.router)
    app.include_router(translations.router)
    return app


def main() -> None:
    """Entry point for the web process."""
    uvicorn.run("editorial_workflow.app:create_app", factory=True, host="0.0.0.0", port=8000)  # noqa: S104
