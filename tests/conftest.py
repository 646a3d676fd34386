# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Shared test fixtures for tonapi-cli tests."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from tonapi_cli.config import ApiConfig
from tonapi_cli._transport import AsyncTransport


@pytest.fixture
def config() -> ApiConfig:
    """Test config with dummy values."""
    return ApiConfig(api_key="test-key", testnet=False, request_timeout=5)


@pytest.fixture
def mock_transport() -> AsyncTransport:
    """AsyncTransport with request mocked."""
    t = AsyncTransport.__new__(AsyncTransport)
    t.config = ApiConfig(api_key="test-key")
    t._session = None
    t.request = AsyncMock(return_value={"ok": True})
    t.close = AsyncMock()
    return t


@pytest.fixture
def graph() -> SimpleNamespace:
    """A hand-built client graph with every kind of attribute the reflector must sort out."""

    async def get_account(account_id, params=None):
        return {"address": account_id, "params": params}

    async def get_account_events(account_id, limit=20):
        return {"events": [], "account": account_id, "limit": limit}

    async def get_block(block_id):
        return {"seqno": block_id}

    def get_nft_item(address):
        return {"nft": address}

    async def get_rates(params={}):
        return {"rates": params}

    return SimpleNamespace(
        http=SimpleNamespace(request=AsyncMock()),
        accounts=SimpleNamespace(
            get_account=get_account,
            get_account_events=get_account_events,
            base_path="/v2/accounts",
        ),
        blocks=SimpleNamespace(get_block=get_block),
        nft=SimpleNamespace(get_nft_item=get_nft_item, _cache={}),
        rates=SimpleNamespace(get_rates=get_rates),
        _private=SimpleNamespace(secret=AsyncMock()),
        base_url="https://tonapi.io",
        timeout=30,
        helper=lambda: None,
    )
