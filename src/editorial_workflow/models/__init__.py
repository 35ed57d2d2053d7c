"""Data models for workflow documents."""

from editorial_workflow.models.actor import Actor, Permission
from editorial_workflow.models.entity import ContentEntity
from editorial_workflow.models.revision import Revision
from editorial_workflow.models.state import ModerationState
from editorial_workflow.models.translation import TranslationJob, TranslationJobStatus
from editorial_workflow.models.version import Version, VersionRule

__all__ = [
    "Actor",
    "ContentEntity",
    "ModerationState",
    "Permission",
    "Revision",
    "TranslationJob",
    "TranslationJobStatus",
    "Version",
    "VersionRule",
]
