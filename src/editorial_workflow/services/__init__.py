"""Workflow services used by the HTTP layer."""

from editorial_workflow.services.moderation import ModerationService
from editorial_workflow.services.translations import TranslationService

__all__ = ["ModerationService", "TranslationService"]
