"""
Uploading source strings to Transifex.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Final

from ..config.schema import SyncConfig
from ..messages.tree import StructuredMessage
from ..transifex.client import TranslationService

logger = logging.getLogger(__name__)

SOURCE_RESOURCE: Final[str] = "guijson"


async def push_source_messages(
    client: TranslationService,
    config: SyncConfig,
    messages: Mapping[str, StructuredMessage],
) -> None:
    """
    Upload the merged source messages as the editor resource.

    Raises:
        TransifexError: If the upload fails
    """
    logger.info("UPLOADING to Transifex...")
    await client.push(config.transifex.project, SOURCE_RESOURCE, messages)
    logger.info(f"Pushed {len(messages)} source messages to {SOURCE_RESOURCE}")
