"""
Pulling a single Transifex resource for every supported locale.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..config.locales import SUPPORTED_LOCALES, transifex_locale
from ..config.schema import SyncConfig
from ..exceptions import LocaleFetchError, SourceLocaleMissingError
from ..messages.tree import MessageTree, filter_by_threshold, normalize_messages
from ..transifex.client import TranslationService
from ..utils.batch import batch_map

logger = logging.getLogger(__name__)


class ResourcePuller:
    """Fetches, normalizes and filters the translations of one resource at a time."""

    def __init__(
        self,
        client: TranslationService,
        config: SyncConfig,
        locales: Mapping[str, object] | None = None,
    ) -> None:
        """
        Initialize the puller.

        Args:
            client: Translation service client
            config: Sync configuration
            locales: Locales to pull, in output order; defaults to SUPPORTED_LOCALES
        """
        self.client: TranslationService = client
        self.config: SyncConfig = config
        self.locales: list[str] = list(SUPPORTED_LOCALES if locales is None else locales)

    async def _pull_locale(self, resource: str, locale: str) -> MessageTree:
        try:
            messages = await self.client.pull(
                self.config.transifex.project, resource, transifex_locale(locale)
            )
            normalized = normalize_messages(messages)
        except Exception as e:
            # Transifex errors rarely say which language they were about.
            logger.error(f"Could not fetch messages for locale: {locale}")
            raise LocaleFetchError(resource, locale, e) from e
        logger.info(f"Pulled {locale} for {resource}")
        return normalized

    async def pull(self, resource: str, required_completion: float) -> dict[str, MessageTree]:
        """
        Pull a resource and keep the locales that are translated enough.

        Args:
            resource: Transifex resource slug
            required_completion: Fraction from 0 to 1 of source strings a
                locale must translate to be included

        Returns:
            Filtered message trees keyed by lowercased locale code. The source
            locale is never included.

        Raises:
            LocaleFetchError: If any locale could not be fetched
            SourceLocaleMissingError: If the source locale was not pulled
        """

        async def fetch(locale: str) -> MessageTree:
            return await self._pull_locale(resource, locale)

        pulled = await batch_map(self.locales, self.config.concurrency_limit, fetch)

        source_locale = self.config.source_locale
        source_messages = pulled.get(source_locale)
        if source_messages is None:
            raise SourceLocaleMissingError(resource, source_locale)

        translations = {
            locale.lower(): pulled[locale]
            for locale in self.locales
            if locale != source_locale
        }
        result = filter_by_threshold(translations, source_messages, required_completion)
        logger.info(
            f"{resource}: {len(result)} of {len(translations)} locales meet "
            + f"{required_completion:.0%} completion"
        )
        return result
