"""Actor passed explicitly to access checks."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class Permission(StrEnum):
    """Enumerate the permissions the workflow checks."""

    CREATE_TRANSLATION_TASKS = "create translation tasks"
    UNPUBLISH_CONTENT = "unpublish content"


class Actor(BaseModel):
    """The user performing a workflow action."""

    id: str
    name: str = ""
    permissions: frozenset[str] = Field(default_factory=frozenset)

    def has_permission(self, permission: Permission | str) -> bool:
        return str(permission) in self.permissions
