"""
HTTP transport: builds authenticated requests, dispatches them with httpx and
classifies the result as a typed JSON value, plain text, a file written to
disk, or a live event stream.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import httpx

from .. import __version__
from .errors import (
    APIConnectionError,
    APITimeoutError,
    FileSaveError,
    InvalidArgumentError,
    OpenAIError,
    StreamError,
    error_from_response,
)
from .models import parse_json
from .streaming import EventStream

logger = logging.getLogger(__name__)

# Default v1 API base url
API_BASE = "https://api.openai.com/v1"

ORGANIZATION_HEADER = "OpenAI-Organization"


class HTTPTransport:
    """Low-level async HTTP transport using httpx.

    No retries and no timeout unless ``timeout`` is given; both are the
    caller's policy.
    """

    def __init__(
        self,
        api_key: str,
        organization: str = None,
        base_url: str = API_BASE,
        timeout: Optional[float] = None,
        default_headers: dict = None,
        http_client: httpx.AsyncClient = None,
    ):
        if not api_key:
            raise InvalidArgumentError("`api_key` is required")
        self.api_key = api_key
        self.organization = organization
        self.base_url = (base_url or API_BASE).rstrip("/")
        self.default_headers = default_headers or {}
        if http_client is not None and timeout is not None:
            raise InvalidArgumentError("pass `timeout` to the supplied `http_client` instead")
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    def _build_headers(self, extra_headers: dict = None) -> dict:
        headers = {
            "User-Agent": f"oairest/{__version__}",
            "Accept": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        if self.organization:
            headers[ORGANIZATION_HEADER] = self.organization
        headers.update(self.default_headers)
        if extra_headers:
            headers.update(extra_headers)
        return headers

    def _build_request(
        self,
        method: str,
        route: str,
        params: dict = None,
        body: Any = None,
        data: dict = None,
        files: dict = None,
        headers: dict = None,
    ) -> httpx.Request:
        return self._client.build_request(
            method,
            f"{self.base_url}{route}",
            params=params or None,
            json=body,
            data=data or None,
            files=files or None,
            headers=self._build_headers(headers),
        )

    async def _send(self, request: httpx.Request, stream: bool = False) -> httpx.Response:
        logger.debug("%s %s", request.method, request.url.path)
        try:
            return await self._client.send(request, stream=stream)
        except httpx.TimeoutException as e:
            raise APITimeoutError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise APIConnectionError(f"Connection error: {e}") from e

    async def _check(self, response: httpx.Response) -> None:
        """Raise the mapped APIError for a non-2xx response."""
        if response.is_success:
            return
        try:
            body = await response.aread()
        except httpx.HTTPError as e:
            raise APIConnectionError(f"Connection error: {e}") from e
        error = error_from_response(response.status_code, body.decode("utf-8", errors="replace"))
        logger.warning(
            "%s %s failed: %s", response.request.method, response.request.url.path, error
        )
        raise error

    async def request(
        self,
        method: str,
        route: str,
        cast: Any,
        params: dict = None,
        body: Any = None,
        data: dict = None,
        files: dict = None,
    ) -> Any:
        """Make a request and decode the body into ``cast`` (``str`` for raw text)."""
        request = self._build_request(method, route, params=params, body=body, data=data, files=files)
        response = await self._send(request)
        await self._check(response)
        if cast is str:
            return response.text
        return parse_json(cast, response.content)

    async def get(self, route: str, cast: Any, params: Dict[str, Any] = None) -> Any:
        return await self.request("GET", route, cast, params=params)

    async def get_text(self, route: str, params: Dict[str, Any] = None) -> str:
        return await self.request("GET", route, str, params=params)

    async def post(self, route: str, cast: Any, body: Any = None) -> Any:
        return await self.request("POST", route, cast, body=body)

    async def post_form(self, route: str, cast: Any, data: dict, files: dict) -> Any:
        return await self.request("POST", route, cast, data=data, files=files)

    async def post_form_text(self, route: str, data: dict, files: dict) -> str:
        return await self.request("POST", route, str, data=data, files=files)

    async def delete(self, route: str, cast: Any) -> Any:
        return await self.request("DELETE", route, cast)

    async def post_to_file(self, route: str, body: Any, path: str) -> None:
        """POST ``body`` and write the binary response to ``path``.

        The body is written to a ``.part`` sibling first and only moved onto
        ``path`` once it is complete.
        """
        partial = f"{path}.part"
        request = self._build_request("POST", route, body=body, headers={"Accept": "*/*"})
        response = await self._send(request, stream=True)
        try:
            await self._check(response)
            try:
                with open(partial, "wb") as f:
                    async for chunk in response.aiter_bytes():
                        f.write(chunk)
                os.replace(partial, path)
            except OSError as e:
                raise FileSaveError(f"failed to save file {path}: {e}") from e
        except httpx.HTTPError as e:
            raise APIConnectionError(f"Connection error: {e}") from e
        finally:
            await response.aclose()
            if os.path.exists(partial):
                os.remove(partial)
        logger.debug("Saved %s response to %s", route, path)

    async def post_stream(self, route: str, cast: Any, body: Any) -> EventStream:
        """POST ``body`` and return an open EventStream of ``cast`` items."""
        stream = EventStream(cast)
        request = self._build_request(
            "POST", route, body=body, headers={"Accept": "text/event-stream"}
        )
        response = await self._send(request, stream=True)
        try:
            await self._check(response)
            content_type = response.headers.get("content-type", "")
            if not content_type.startswith("text/event-stream"):
                raise StreamError(
                    f"expected text/event-stream response, got {content_type or 'no content type'}"
                )
        except OpenAIError:
            await response.aclose()
            raise
        stream._start(response)
        return stream

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
