"""Transifex API integration."""

from .client import TransifexClient, TranslationService, language_id, resource_id

__all__ = ["TransifexClient", "TranslationService", "language_id", "resource_id"]
