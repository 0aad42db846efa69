"""Tests for uploading source strings."""

from __future__ import annotations

import pytest

from tw_l10n.config.schema import SyncConfig
from tw_l10n.messages.tree import make_structured_message
from tw_l10n.push.pusher import SOURCE_RESOURCE, push_source_messages

from tests.utils.fake_service import FakeTranslationService


class TestPushSourceMessages:
    """Test cases for push_source_messages."""

    @pytest.mark.asyncio
    async def test_uploads_editor_resource(
        self, fake_service: FakeTranslationService, sync_config: SyncConfig
    ) -> None:
        """Test that messages go to the editor resource of the configured project."""
        messages = {"tw.a": make_structured_message("A", "First letter")}

        await push_source_messages(fake_service, sync_config, messages)

        assert SOURCE_RESOURCE == "guijson"
        assert fake_service.pushes == [("turbowarp", "guijson", messages)]
