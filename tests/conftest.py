"""
Global test configuration fixtures for tw-l10n-sync tests.

Provides SyncConfig instances whose workspace points at a per-test temporary
directory, a small locale table, and an in-memory translation service.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tw_l10n.config.schema import PathsConfig, SyncConfig, TransifexConfig
from tw_l10n.pull.resources import ResourcePuller

from tests.utils.fake_service import FakeTranslationService

# Keeps tests independent of the full supported-locale table.
TEST_LOCALES: dict[str, object] = {
    "en": {"name": "English"},
    "fr": {"name": "Français"},
    "pt-br": {"name": "Português Brasileiro"},
}


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory that holds the sibling checkouts for a test."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def sync_config(workspace: Path, tmp_path: Path) -> SyncConfig:
    """
    Create a SyncConfig rooted at the test workspace.

    Returns:
        SyncConfig: Configuration with a dummy token and fast polling
    """
    return SyncConfig(
        transifex=TransifexConfig(
            api_url="https://rest.api.transifex.test",
            token="test_token",  # pyright: ignore[reportArgumentType]
            poll_interval=0,
            poll_attempts=3,
        ),
        paths=PathsConfig(
            workspace=workspace,
            all_used_ids_file=tmp_path / "tw-all-used-ids.json",
        ),
        concurrency_limit=4,
    )


@pytest.fixture
def fake_service() -> FakeTranslationService:
    """In-memory translation service returning empty trees by default."""
    return FakeTranslationService()


@pytest.fixture
def puller(fake_service: FakeTranslationService, sync_config: SyncConfig) -> ResourcePuller:
    """ResourcePuller over the fake service and the small test locale table."""
    return ResourcePuller(fake_service, sync_config, locales=TEST_LOCALES)
