"""
Tests for the Transifex API client.

The service is simulated with httpx.MockTransport so the full job lifecycle
(create, poll, download) runs without network access.
"""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from tw_l10n.config.schema import SyncConfig
from tw_l10n.exceptions import ErrorCategory, TransifexError
from tw_l10n.transifex.client import TransifexClient, language_id, resource_id

API = "https://rest.api.transifex.test"
FILE_URL = "https://storage.transifex.test/files/abc.json"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeTransifexApi:
    """Scripted Transifex API that records every request."""

    def __init__(
        self,
        pending_polls: int = 1,
        file_content: object | None = None,
        upload_status: str = "succeeded",
    ) -> None:
        self.pending_polls: int = pending_polls
        self.file_content: object = {"a": "x"} if file_content is None else file_content
        self.upload_status: str = upload_status
        self.requests: list[httpx.Request] = []
        self.bodies: list[dict[str, object]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if str(request.url) == FILE_URL:
            return httpx.Response(200, json=self.file_content)

        if request.method == "POST":
            self.bodies.append(json.loads(request.content))
            return httpx.Response(202, json={"data": {"id": "job-1", "type": path.strip("/")}})

        if path.endswith("/job-1"):
            if self.pending_polls > 0:
                self.pending_polls -= 1
                return httpx.Response(200, json={"data": {"attributes": {"status": "pending"}}})
            if "async_uploads" in path:
                return httpx.Response(
                    200,
                    json={
                        "data": {
                            "attributes": {
                                "status": self.upload_status,
                                "details": {"strings_created": 1},
                                "errors": [{"detail": "bad content"}],
                            }
                        }
                    },
                )
            return httpx.Response(303, headers={"Location": FILE_URL})

        return httpx.Response(404, json={"errors": [{"detail": "Not found"}]})


def _client(sync_config: SyncConfig, handler: Handler) -> TransifexClient:
    return TransifexClient(
        sync_config.transifex,
        "test_token",
        transport=httpx.MockTransport(handler),
    )


class TestIds:
    """Test cases for Transifex identifiers."""

    def test_resource_id(self) -> None:
        """Test the resource id format."""
        assert resource_id("turbowarp", "turbowarp", "guijson") == (
            "o:turbowarp:p:turbowarp:r:guijson"
        )

    def test_language_id(self) -> None:
        """Test the language id format."""
        assert language_id("pt_BR") == "l:pt_BR"


class TestPull:
    """Test cases for TransifexClient.pull."""

    @pytest.mark.asyncio
    async def test_translation_download(self, sync_config: SyncConfig) -> None:
        """Test the create, poll, redirect and download sequence for a translation."""
        api = FakeTransifexApi(file_content={"b": "y", "a": "x"})

        async with _client(sync_config, api) as client:
            result = await client.pull("turbowarp", "guijson", "fr")

        assert result == {"b": "y", "a": "x"}
        assert [request.method for request in api.requests] == ["POST", "GET", "GET", "GET"]
        assert api.requests[0].url == f"{API}/resource_translations_async_downloads"

        data = api.bodies[0]["data"]
        assert isinstance(data, dict)
        assert data["attributes"]["mode"] == "default"
        assert data["relationships"]["language"]["data"]["id"] == "l:fr"
        assert data["relationships"]["resource"]["data"]["id"] == (
            "o:turbowarp:p:turbowarp:r:guijson"
        )

    @pytest.mark.asyncio
    async def test_source_download(self, sync_config: SyncConfig) -> None:
        """Test that the source language uses the resource strings endpoint."""
        api = FakeTransifexApi(pending_polls=0)

        async with _client(sync_config, api) as client:
            _ = await client.pull("turbowarp", "guijson", "en")

        assert api.requests[0].url == f"{API}/resource_strings_async_downloads"
        data = api.bodies[0]["data"]
        assert isinstance(data, dict)
        assert "language" not in data["relationships"]

    @pytest.mark.asyncio
    async def test_auth_header_only_on_api_requests(self, sync_config: SyncConfig) -> None:
        """Test that the token is not sent to the redirected file URL."""
        api = FakeTransifexApi(pending_polls=0)

        async with _client(sync_config, api) as client:
            _ = await client.pull("turbowarp", "guijson", "fr")

        api_request, poll_request, file_request = api.requests
        assert api_request.headers["Authorization"] == "Bearer test_token"
        assert poll_request.headers["Authorization"] == "Bearer test_token"
        assert "Authorization" not in file_request.headers

    @pytest.mark.asyncio
    async def test_poll_timeout(self, sync_config: SyncConfig) -> None:
        """Test that a job still pending after every attempt fails."""
        api = FakeTransifexApi(pending_polls=100)

        async with _client(sync_config, api) as client:
            with pytest.raises(TransifexError, match="did not finish after 3 checks"):
                _ = await client.pull("turbowarp", "guijson", "fr")

    @pytest.mark.asyncio
    async def test_http_error_status(self, sync_config: SyncConfig) -> None:
        """Test that error statuses surface the API's error detail."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"errors": [{"detail": "Invalid token"}]})

        async with _client(sync_config, handler) as client:
            with pytest.raises(TransifexError, match="Invalid token") as exc_info:
                _ = await client.pull("turbowarp", "guijson", "fr")

        assert exc_info.value.status_code == 401
        assert exc_info.value.category == ErrorCategory.API

    @pytest.mark.asyncio
    async def test_network_error(self, sync_config: SyncConfig) -> None:
        """Test that transport failures become network errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(sync_config, handler) as client:
            with pytest.raises(TransifexError) as exc_info:
                _ = await client.pull("turbowarp", "guijson", "fr")

        assert exc_info.value.status_code is None
        assert exc_info.value.category == ErrorCategory.NETWORK

    @pytest.mark.asyncio
    async def test_non_object_file(self, sync_config: SyncConfig) -> None:
        """Test that a downloaded file must be a JSON object."""
        api = FakeTransifexApi(pending_polls=0, file_content=["not", "an", "object"])

        async with _client(sync_config, api) as client:
            with pytest.raises(TransifexError, match="JSON object"):
                _ = await client.pull("turbowarp", "guijson", "fr")

    @pytest.mark.asyncio
    async def test_requires_context_manager(self, sync_config: SyncConfig) -> None:
        """Test that requests outside the context manager are refused."""
        client = _client(sync_config, FakeTransifexApi())

        with pytest.raises(RuntimeError, match="async context manager"):
            _ = await client.pull("turbowarp", "guijson", "fr")


class TestPush:
    """Test cases for TransifexClient.push."""

    @pytest.mark.asyncio
    async def test_upload_succeeds(self, sync_config: SyncConfig) -> None:
        """Test that the messages are uploaded as JSON content."""
        api = FakeTransifexApi()
        messages = {"tw.x": {"string": "Ça", "context": "c", "developer_comment": "c"}}

        async with _client(sync_config, api) as client:
            await client.push("turbowarp", "guijson", messages)

        assert api.requests[0].url == f"{API}/resource_strings_async_uploads"
        data = api.bodies[0]["data"]
        assert isinstance(data, dict)
        assert json.loads(data["attributes"]["content"]) == messages
        assert "Ça" in data["attributes"]["content"]
        assert data["relationships"]["resource"]["data"]["id"] == (
            "o:turbowarp:p:turbowarp:r:guijson"
        )

    @pytest.mark.asyncio
    async def test_upload_failure(self, sync_config: SyncConfig) -> None:
        """Test that a failed upload job raises."""
        api = FakeTransifexApi(upload_status="failed")

        async with _client(sync_config, api) as client:
            with pytest.raises(TransifexError, match="Upload of guijson failed"):
                await client.push("turbowarp", "guijson", {})
