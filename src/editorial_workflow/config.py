"""Environment-driven configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from editorial_workflow.models.state import ModerationState
from editorial_workflow.models.version import Version


def _env(key: str, default: str = "") -> str:
    return os.environ.get(key, default)


def _csv(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class AppConfig:
    env: str = field(default_factory=lambda: _env("APP_ENV", "development"))
    secret_key: str = field(default_factory=lambda: _env("APP_SECRET_KEY"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE"))

    @property
    def is_development(self) -> bool:
        return self.env == "development"


@dataclass(frozen=True)
class CosmosConfig:
    endpoint: str = field(default_factory=lambda: _env("COSMOS_ENDPOINT"))
    key: str = field(default_factory=lambda: _env("COSMOS_KEY"))
    database: str = field(default_factory=lambda: _env("COSMOS_DATABASE", "editorial-workflow"))

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint and self.key)


@dataclass(frozen=True)
class WorkflowConfig:
    """Static workflow setup: initial version, unpublish choices, transition table."""

    default_version: str = field(default_factory=lambda: _env("WORKFLOW_DEFAULT_VERSION", "0.1.0"))
    unpublish_states: tuple[str, ...] = field(
        default_factory=lambda: _csv(_env("WORKFLOW_UNPUBLISH_STATES", "archived,draft"))
    )
    transitions_file: str = field(default_factory=lambda: _env("WORKFLOW_TRANSITIONS_FILE"))

    @property
    def initial_version(self) -> Version:
        return Version.parse(self.default_version)

    @property
    def fallback_states(self) -> list[ModerationState]:
        return [ModerationState(state) for state in self.unpublish_states]


@dataclass(frozen=True)
class Settings:
    app: AppConfig = field(default_factory=AppConfig)
    cosmos: CosmosConfig = field(default_factory=CosmosConfig)
    workflow: WorkflowConfig = field(default_factory=WorkflowConfig)


def load_settings() -> Settings:
    """Read settings from the process environment."""
    return Settings()
