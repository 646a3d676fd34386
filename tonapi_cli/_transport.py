# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Low-level async HTTP transport for TonAPI REST calls."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from .config import ApiConfig
from .exceptions import RemoteInvocationError

logger = logging.getLogger(__name__)


class AsyncTransport:
    """Async HTTP transport for TonAPI.

    Failed requests are reported once as ``RemoteInvocationError``; there is
    no retry here.

    Usage::

        async with AsyncTransport(config) as t:
            data = await t.request("GET", "/v2/accounts/EQ...")
    """

    def __init__(self, config: ApiConfig | None = None):
        self.config = config or ApiConfig.from_env()
        self._session: aiohttp.ClientSession | None = None

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    async def __aenter__(self) -> "AsyncTransport":
        await self._ensure_session()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.request_timeout)
            )
        return self._session

    async def request(
        self,
        method: str,
        path: str,
        query: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        session = await self._ensure_session()
        url = f"{self.base_url}{path}"
        logger.debug("Request: %s %s", method, url)
        try:
            async with session.request(
                method, url, params=_clean_query(query), json=body, headers=self.headers()
            ) as resp:
                logger.debug("Response: %d", resp.status)
                if resp.content_type == "application/json":
                    data = await resp.json()
                else:
                    data = await resp.text()
                if resp.status >= 400:
                    message = data.get("error") if isinstance(data, dict) else None
                    raise RemoteInvocationError(
                        message or f"HTTP {resp.status}", status=resp.status, body=data
                    )
                return data
        except aiohttp.ClientError as e:
            raise RemoteInvocationError(f"{method} {url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise RemoteInvocationError(
                f"{method} {url} timed out after {self.config.request_timeout}s"
            ) from e

    async def close(self) -> None:
        if self._session:
            await self._session.close()
            self._session = None


def _clean_query(query: dict[str, Any] | None) -> dict[str, str] | None:
    """Drop ``None`` values and render lists/bools the way TonAPI expects."""
    if not query:
        return None
    cleaned: dict[str, str] = {}
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            cleaned[key] = ",".join(str(v) for v in value)
        else:
            cleaned[key] = str(value)
    return cleaned or None
