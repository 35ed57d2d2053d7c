"""Tests for app runtime wiring and error translation."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from editorial_workflow.app import build_machine, create_app, init_database
from editorial_workflow.database.cosmos_store import CosmosRevisionStore
from editorial_workflow.database.repositories.translation_jobs import TranslationJobRepository
from editorial_workflow.database.store import InMemoryRevisionStore
from editorial_workflow.models.state import ModerationState
from editorial_workflow.models.version import Version
from editorial_workflow.services.moderation import ModerationService
from editorial_workflow.services.translations import TranslationService


def _settings(*, endpoint: str = "", key: str = "", transitions_file: str = "") -> SimpleNamespace:
    """Create minimal settings for app factory and lifespan wiring tests."""
    return SimpleNamespace(
        app=SimpleNamespace(
            secret_key="test-secret",
            is_development=True,
            log_level="INFO",
            log_file="",
            env="test",
        ),
        cosmos=SimpleNamespace(
            endpoint=endpoint,
            key=key,
            database="editorial-workflow",
            is_configured=bool(endpoint and key),
        ),
        workflow=SimpleNamespace(
            transitions_file=transitions_file,
            initial_version=Version(0, 1, 0),
            fallback_states=[ModerationState.ARCHIVED, ModerationState.DRAFT],
        ),
    )


@pytest.mark.unit
def test_lifespan_uses_in_memory_stores_without_cosmos() -> None:
    """Without Cosmos settings the services run on in-memory stores."""
    with (
        patch("editorial_workflow.app.load_settings", return_value=_settings()),
        patch("editorial_workflow.app.configure_logging"),
    ):
        app = create_app()
        with TestClient(app):
            assert isinstance(app.state.moderation, ModerationService)
            assert isinstance(app.state.moderation.store, InMemoryRevisionStore)
            assert isinstance(app.state.translations, TranslationService)
            assert app.state.cosmos is None


@pytest.mark.unit
def test_lifespan_wires_cosmos_stores_when_configured() -> None:
    """Cosmos-backed stores are used and the client is closed on shutdown."""
    cosmos = MagicMock()
    cosmos.database = MagicMock()
    cosmos.close = AsyncMock()
    settings = _settings(endpoint="https://cosmos.example.com", key="secret")

    with (
        patch("editorial_workflow.app.load_settings", return_value=settings),
        patch("editorial_workflow.app.configure_logging"),
        patch("editorial_workflow.app.init_database", new=AsyncMock(return_value=cosmos)),
    ):
        app = create_app()
        with TestClient(app):
            assert isinstance(app.state.moderation.store, CosmosRevisionStore)
            assert isinstance(app.state.translations.jobs, TranslationJobRepository)
            assert app.state.cosmos is cosmos

    cosmos.close.assert_awaited_once()


@pytest.mark.unit
def test_anonymous_create_is_unauthorized() -> None:
    """Mutating routes require a session user."""
    with (
        patch("editorial_workflow.app.load_settings", return_value=_settings()),
        patch("editorial_workflow.app.configure_logging"),
    ):
        app = create_app()
        with TestClient(app) as client:
            response = client.post("/entities/", json={"payload": {"title": "My node"}})
    assert response.status_code == 401  # noqa: PLR2004


@pytest.mark.unit
def test_workflow_errors_become_json_responses() -> None:
    """NotFoundError is translated to 404 with a detail message."""
    with (
        patch("editorial_workflow.app.load_settings", return_value=_settings()),
        patch("editorial_workflow.app.configure_logging"),
    ):
        app = create_app()
        with TestClient(app) as client:
            response = client.get("/entities/missing/revisions")
    assert response.status_code == 404  # noqa: PLR2004
    assert response.json() == {"detail": "Entity missing not found"}


@pytest.mark.unit
def test_build_machine_loads_transition_file(tmp_path) -> None:
    """A configured transitions file replaces the default table."""
    path = tmp_path / "transitions.json"
    path.write_text(json.dumps([{"from": "draft", "to": "published"}]), encoding="utf-8")

    machine = build_machine(_settings(transitions_file=str(path)))

    assert machine.is_allowed(ModerationState.DRAFT, ModerationState.PUBLISHED)
    assert not machine.is_allowed(ModerationState.DRAFT, ModerationState.NEEDS_REVIEW)


@pytest.mark.unit
async def test_init_database_fails_when_emulator_down() -> None:
    """Development startup refuses to continue without a reachable emulator."""
    settings = _settings(endpoint="http://localhost:8081", key="secret")
    with (
        patch("editorial_workflow.app.check_emulators", new=AsyncMock(return_value=False)),
        pytest.raises(ConnectionError),
    ):
        await init_database(settings)


@pytest.mark.unit
def test_create_app_passes_log_file_to_logging() -> None:
    """LOG_FILE is forwarded to the logging setup."""
    settings = _settings()
    settings.app.log_file = "/var/log/editorial-workflow.log"
    with (
        patch("editorial_workflow.app.load_settings", return_value=settings),
        patch("editorial_workflow.app.configure_logging") as configure,
    ):
        create_app()
    configure.assert_called_once_with("INFO", "/var/log/editorial-workflow.log")
