"""
Command-line entry points.

tw-l10n-pull
    Download translations from Transifex and write them into every sibling
    checkout that is present (scratch-gui, packager, turbowarp-desktop).

tw-l10n-push
    Extract English source strings from scratch-gui and scratch-vm and upload
    them to Transifex.

Neither command takes arguments. Configuration is read from the file named by
TW_L10N_CONFIG, or ./l10n-sync.yml, and the API token from TX_TOKEN.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable

import httpx

from .config.manager import ConfigManager
from .config.schema import LogLevel, SyncConfig
from .exceptions import L10nSyncError
from .pull.report import print_summary
from .pull.resources import ResourcePuller
from .pull.targets import pull_everything
from .push.extractor import extract_source_messages, write_all_used_ids
from .push.pusher import push_source_messages
from .transifex.client import TransifexClient

logger = logging.getLogger(__name__)


def setup_logging(level: LogLevel = LogLevel.INFO) -> None:
    """
    Set up logging configuration.

    Args:
        level: Minimum level written to standard output
    """
    logging.basicConfig(
        level=level.value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def create_client(config: SyncConfig) -> TransifexClient:
    """Create a Transifex client from configuration."""
    return TransifexClient(
        config.transifex,
        ConfigManager.require_token(config),
        source_locale=config.source_locale,
    )


async def run_pull(config: SyncConfig) -> None:
    """Pull every resource into every available target."""
    logger.info("DOWNLOADING from Transifex...")
    async with create_client(config) as client:
        reports = await pull_everything(ResourcePuller(client, config), config)
    print_summary(reports)


async def run_push(config: SyncConfig) -> None:
    """Extract source strings, write the id audit list, and upload."""
    extraction = extract_source_messages(config)
    write_all_used_ids(config.paths.all_used_ids_file, extraction.all_used_ids)
    async with create_client(config) as client:
        await push_source_messages(client, config, extraction.messages)


def run_command(command: str, workflow: Callable[[SyncConfig], Awaitable[None]]) -> int:
    """
    Load configuration and run a workflow to completion.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    try:
        config = ConfigManager.resolve_config()
    except (L10nSyncError, FileNotFoundError) as e:
        setup_logging()
        logger.error(f"❌ {e}")
        return 1

    setup_logging(config.log_level)
    try:
        asyncio.run(workflow(config))
        return 0
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 1
    except (L10nSyncError, httpx.HTTPError) as e:
        logger.error(f"❌ {command} failed: {e}")
        logger.debug("Full traceback:", exc_info=True)
        return 1
    except Exception as e:
        logger.exception(f"❌ Unexpected error during {command}: {e}")
        return 1


def pull_main() -> None:
    """Entry point for tw-l10n-pull."""
    sys.exit(run_command("pull", run_pull))


def push_main() -> None:
    """Entry point for tw-l10n-push."""
    sys.exit(run_command("push", run_push))
