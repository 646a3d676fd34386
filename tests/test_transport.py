# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for AsyncTransport against a stubbed aiohttp session."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp
import pytest

from tonapi_cli._transport import AsyncTransport, _clean_query
from tonapi_cli.config import ApiConfig
from tonapi_cli.exceptions import RemoteInvocationError


class _FakeResponse:
    def __init__(self, status: int, data: Any, content_type: str = "application/json"):
        self.status = status
        self.content_type = content_type
        self._data = data

    async def json(self) -> Any:
        return self._data

    async def text(self) -> str:
        return str(self._data)

    async def __aenter__(self) -> "_FakeResponse":
        return self

    async def __aexit__(self, *args: Any) -> None:
        return None


class _FakeSession:
    def __init__(self, response: _FakeResponse | None = None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> _FakeResponse:
        self.calls.append((method, url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response

    async def close(self) -> None:
        return None


def _transport(session: _FakeSession, **config: Any) -> AsyncTransport:
    t = AsyncTransport(ApiConfig(**config))
    t._session = session
    return t


def test_headers_with_key():
    t = AsyncTransport(ApiConfig(api_key="secret"))
    assert t.headers() == {"Content-Type": "application/json", "Authorization": "Bearer secret"}


def test_headers_without_key():
    t = AsyncTransport(ApiConfig(api_key=""))
    assert "Authorization" not in t.headers()


def test_clean_query():
    assert _clean_query(None) is None
    assert _clean_query({}) is None
    assert _clean_query({"a": None}) is None
    assert _clean_query({"limit": 10, "indirect": True, "tokens": ["ton", "usdt"], "skip": None}) == {
        "limit": "10",
        "indirect": "true",
        "tokens": "ton,usdt",
    }


@pytest.mark.asyncio
async def test_request_success():
    session = _FakeSession(_FakeResponse(200, {"balance": 1}))
    t = _transport(session, api_key="k")
    data = await t.request("GET", "/v2/accounts/EQabc", query={"currencies": "usd"})
    assert data == {"balance": 1}
    method, url, kwargs = session.calls[0]
    assert method == "GET"
    assert url == "https://tonapi.io/v2/accounts/EQabc"
    assert kwargs["params"] == {"currencies": "usd"}
    assert kwargs["headers"]["Authorization"] == "Bearer k"


@pytest.mark.asyncio
async def test_request_testnet_url():
    session = _FakeSession(_FakeResponse(200, {}))
    t = _transport(session, testnet=True)
    await t.request("GET", "/v2/status")
    assert session.calls[0][1] == "https://testnet.tonapi.io/v2/status"


@pytest.mark.asyncio
async def test_request_http_error():
    session = _FakeSession(_FakeResponse(404, {"error": "entity not found"}))
    t = _transport(session)
    with pytest.raises(RemoteInvocationError) as info:
        await t.request("GET", "/v2/accounts/nope")
    assert str(info.value) == "entity not found"
    assert info.value.status == 404
    assert info.value.body == {"error": "entity not found"}
    assert len(session.calls) == 1


@pytest.mark.asyncio
async def test_request_http_error_plain_text():
    session = _FakeSession(_FakeResponse(502, "Bad Gateway", content_type="text/plain"))
    t = _transport(session)
    with pytest.raises(RemoteInvocationError) as info:
        await t.request("GET", "/v2/status")
    assert str(info.value) == "HTTP 502"
    assert info.value.body == "Bad Gateway"


@pytest.mark.asyncio
async def test_request_connection_error_is_wrapped():
    cause = aiohttp.ClientConnectionError("connection refused")
    session = _FakeSession(exc=cause)
    t = _transport(session)
    with pytest.raises(RemoteInvocationError) as info:
        await t.request("GET", "/v2/status")
    assert info.value.__cause__ is cause
    assert len(session.calls) == 1


@pytest.mark.asyncio
async def test_request_timeout_is_wrapped():
    session = _FakeSession(exc=asyncio.TimeoutError())
    t = _transport(session, request_timeout=3)
    with pytest.raises(RemoteInvocationError, match="timed out after 3s"):
        await t.request("GET", "/v2/status")


@pytest.mark.asyncio
async def test_close():
    t = _transport(_FakeSession())
    await t.close()
    assert t._session is None
