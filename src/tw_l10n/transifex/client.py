"""
Async client for the Transifex REST API (v3).

Downloads and uploads in API v3 are asynchronous jobs: a job is created with
a POST, then polled until the service either redirects to the finished file
(downloads) or reports a terminal status (uploads). Only the small part of the
API needed to pull and push JSON resources is implemented here.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Final, Protocol, cast

import httpx

from ..exceptions import TransifexError

if TYPE_CHECKING:
    from types import TracebackType

    from ..config.schema import TransifexConfig

logger = logging.getLogger(__name__)

JSON_API_TYPE: Final[str] = "application/vnd.api+json"


class TranslationService(Protocol):
    """The subset of the Transifex client the pull and push workflows rely on."""

    async def pull(self, project: str, resource: str, locale: str) -> Mapping[str, object]: ...

    async def push(self, project: str, resource: str, messages: Mapping[str, object]) -> None: ...


def resource_id(organization: str, project: str, resource: str) -> str:
    """Build a Transifex resource id."""
    return f"o:{organization}:p:{project}:r:{resource}"


def language_id(locale: str) -> str:
    """Build a Transifex language id."""
    return f"l:{locale}"


def _error_detail(response: httpx.Response) -> str:
    """Extract the most useful message from a JSON:API error response."""
    try:
        payload = cast(object, response.json())
    except ValueError:
        return response.text
    if isinstance(payload, dict):
        errors = cast(dict[str, object], payload).get("errors")
        if isinstance(errors, list) and errors:
            details: list[str] = []
            for error in cast(list[object], errors):
                if isinstance(error, dict):
                    error_dict = cast(dict[str, object], error)
                    details.append(
                        str(error_dict.get("detail") or error_dict.get("title") or error_dict)
                    )
            if details:
                return "; ".join(details)
    return response.text


def _json_body(response: httpx.Response) -> dict[str, object]:
    """Parse a JSON:API document, failing with TransifexError if it is not one."""
    try:
        payload = cast(object, response.json())
    except ValueError as e:
        raise TransifexError(f"Invalid JSON in API response: {e}") from e
    if not isinstance(payload, dict):
        raise TransifexError("Invalid API response: expected a JSON object")
    return cast(dict[str, object], payload)


class TransifexClient:
    """Async Transifex API client used as an async context manager."""

    def __init__(
        self,
        config: TransifexConfig,
        token: str,
        source_locale: str = "en",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Transifex configuration
            token: API token
            source_locale: Transifex code of the project's source language
            transport: Optional transport, used by tests to mock the service
        """
        self.config: TransifexConfig = config
        self.source_locale: str = source_locale
        self._headers: dict[str, str] = {
            "Authorization": f"Bearer {token}",
            "Accept": JSON_API_TYPE,
            "Content-Type": JSON_API_TYPE,
        }
        self._transport: httpx.AsyncBaseTransport | None = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> TransifexClient:
        """Enter async context and initialize HTTP client."""
        # Redirect targets are pre-signed storage URLs, so auth headers are
        # sent per API request instead of as client defaults.
        self._client = httpx.AsyncClient(
            timeout=self.config.timeout,
            follow_redirects=False,
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and cleanup HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def _require_client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError(
                "TransifexClient not initialized. Use as async context manager."
            )
        return self._client

    async def _request(
        self, method: str, endpoint: str, payload: Mapping[str, object] | None = None
    ) -> httpx.Response:
        """
        Make a request against the API.

        Raises:
            TransifexError: If the request fails or returns an error status
        """
        client = self._require_client()
        url = f"{self.config.api_url}/{endpoint.lstrip('/')}"
        try:
            response = await client.request(
                method,
                url,
                headers=self._headers,
                content=json.dumps(payload) if payload is not None else None,
            )
        except httpx.RequestError as e:
            raise TransifexError(f"Request to {url} failed: {e}") from e

        if response.status_code >= 400:
            raise TransifexError(
                f"HTTP {response.status_code} from {endpoint}: {_error_detail(response)}",
                status_code=response.status_code,
            )
        return response

    async def _create_job(
        self, job_type: str, attributes: dict[str, object], relationships: dict[str, object]
    ) -> str:
        response = await self._request(
            "POST",
            job_type,
            {
                "data": {
                    "type": job_type,
                    "attributes": attributes,
                    "relationships": relationships,
                }
            },
        )
        data = _json_body(response).get("data")
        job_id = cast(dict[str, object], data).get("id") if isinstance(data, dict) else None
        if not isinstance(job_id, str):
            raise TransifexError(f"Invalid response creating {job_type}: missing job id")
        return job_id

    async def _wait_for_download(self, job_type: str, job_id: str) -> str:
        """Poll a download job until it redirects to the finished file."""
        for _ in range(self.config.poll_attempts):
            response = await self._request("GET", f"{job_type}/{job_id}")
            if response.status_code == 303:
                location = response.headers.get("location")
                if not location:
                    raise TransifexError(f"{job_type} {job_id} redirected without a location")
                return location

            attributes = self._job_attributes(response)
            if attributes.get("status") == "failed":
                raise TransifexError(
                    f"{job_type} {job_id} failed: {attributes.get('errors')}"
                )
            await asyncio.sleep(self.config.poll_interval)

        raise TransifexError(
            f"{job_type} {job_id} did not finish after {self.config.poll_attempts} checks"
        )

    @staticmethod
    def _job_attributes(response: httpx.Response) -> dict[str, object]:
        data = _json_body(response).get("data")
        if isinstance(data, dict):
            attributes = cast(dict[str, object], data).get("attributes")
            if isinstance(attributes, dict):
                return cast(dict[str, object], attributes)
        return {}

    async def _download(self, url: str) -> dict[str, object]:
        client = self._require_client()
        try:
            response = await client.get(url)
            _ = response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransifexError(
                f"HTTP {e.response.status_code} downloading file", e.response.status_code
            ) from e
        except httpx.RequestError as e:
            raise TransifexError(f"Download failed: {e}") from e

        try:
            content = cast(object, response.json())
        except ValueError as e:
            raise TransifexError(f"Downloaded file is not valid JSON: {e}") from e
        if not isinstance(content, dict):
            raise TransifexError(
                f"Downloaded file must be a JSON object, got {type(content).__name__}"
            )
        return cast(dict[str, object], content)

    async def pull(self, project: str, resource: str, locale: str) -> dict[str, object]:
        """
        Download one locale of a resource.

        Args:
            project: Project slug
            resource: Resource slug
            locale: Transifex language code

        Returns:
            The resource's messages for that locale, as parsed JSON

        Raises:
            TransifexError: If any step of the download fails
        """
        relationships: dict[str, object] = {
            "resource": {
                "data": {
                    "type": "resources",
                    "id": resource_id(self.config.organization, project, resource),
                }
            }
        }
        if locale == self.source_locale:
            job_type = "resource_strings_async_downloads"
            attributes: dict[str, object] = {
                "content_encoding": "text",
                "file_type": "default",
            }
        else:
            job_type = "resource_translations_async_downloads"
            attributes = {
                "content_encoding": "text",
                "file_type": "default",
                "mode": "default",
            }
            relationships["language"] = {
                "data": {"type": "languages", "id": language_id(locale)}
            }

        job_id = await self._create_job(job_type, attributes, relationships)
        location = await self._wait_for_download(job_type, job_id)
        return await self._download(location)

    async def push(self, project: str, resource: str, messages: Mapping[str, object]) -> None:
        """
        Upload new source strings for a resource.

        Raises:
            TransifexError: If the upload is rejected or does not finish
        """
        job_type = "resource_strings_async_uploads"
        job_id = await self._create_job(
            job_type,
            {
                "content": json.dumps(messages, ensure_ascii=False),
                "content_encoding": "text",
            },
            {
                "resource": {
                    "data": {
                        "type": "resources",
                        "id": resource_id(self.config.organization, project, resource),
                    }
                }
            },
        )

        for _ in range(self.config.poll_attempts):
            response = await self._request("GET", f"{job_type}/{job_id}")
            attributes = self._job_attributes(response)
            status = attributes.get("status")
            if status == "succeeded":
                logger.info(f"Uploaded {resource}: {attributes.get('details', {})}")
                return
            if status == "failed":
                raise TransifexError(f"Upload of {resource} failed: {attributes.get('errors')}")
            await asyncio.sleep(self.config.poll_interval)

        raise TransifexError(
            f"Upload of {resource} did not finish after {self.config.poll_attempts} checks"
        )
