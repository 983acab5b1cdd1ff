"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable
from typing import Any
from urllib.parse import urljoin

import aiohttp

from ..config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ..core.exceptions import DecodeError, TransportError

logger = logging.getLogger(__name__)

# Called as hook(method, url, headers) before each request; may edit headers in place
RequestHook = Callable[[str, str, dict[str, str]], None]


class HTTPClient:
    """Async HTTP client wrapper.

    Errors are reported as TransportError (network failure, timeout,
    non-2xx status) or DecodeError (body is not the expected format).
    Nothing is retried.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.user_agent = user_agent
        self._session: aiohttp.ClientSession | None = None
        self._request_hooks: list[RequestHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout, headers={"User-Agent": self.user_agent}
            )
        return self._session

    def add_request_hook(self, hook: RequestHook) -> None:
        """Register a hook that can rewrite headers of every outbound request."""
        self._request_hooks.append(hook)

    def resolve(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith(("http://", "https://")):
            return urljoin(self.base_url, url)
        return url

    async def request_text(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> str:
        """Send a request and return the response body as text."""
        url = self.resolve(url)
        logger.debug("%s %s", method, url)
        headers = dict(headers or {})
        for hook in self._request_hooks:
            hook(method, url, headers)

        try:
            async with self.session.request(
                method, url, params=params, data=data, headers=headers
            ) as response:
                if not 200 <= response.status < 300:
                    detail = await response.text(errors="replace")
                    raise TransportError(
                        f"{method} {url} failed with HTTP {response.status}: {detail[:200]}",
                        status_code=response.status,
                        url=url,
                    )
                try:
                    return await response.text()
                except UnicodeDecodeError as e:
                    raise DecodeError(f"Response from {url} is not valid text: {e}") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} {url} failed: {e}", url=url) from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"{method} {url} timed out", url=url) from e

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """GET request returning the decoded JSON body."""
        body = await self.request_text(
            "GET", url, params=params, headers={"Accept": "application/json"}
        )
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            raise DecodeError(f"Malformed JSON from {url}: {e}") from e

    async def post_form(self, url: str, data: dict[str, str]) -> str:
        """POST an application/x-www-form-urlencoded body."""
        return await self.request_text("POST", url, data=data)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
