# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for the TonApiWrapper facade."""

from unittest.mock import AsyncMock

import pytest

from tonapi_cli.client import AsyncTonApiClient
from tonapi_cli.config import ApiConfig
from tonapi_cli.exceptions import ArgumentParseError, ConfigError, NotFoundError
from tonapi_cli.wrapper import TonApiWrapper


def test_missing_api_key_raises():
    with pytest.raises(ConfigError) as info:
        TonApiWrapper(ApiConfig(api_key=""))
    assert "TON_API_KEY" in info.value.hint


def test_skip_api_key_check():
    api = TonApiWrapper(ApiConfig(api_key=""), skip_api_key_check=True)
    assert isinstance(api.client, AsyncTonApiClient)


def test_overrides_do_not_mutate_config(config):
    api = TonApiWrapper(config, testnet=True, api_key="other", module_filter=["NFT"])
    assert api.network == "testnet"
    assert api.config.api_key == "other"
    assert api.config.module_filter == ["nft"]
    assert config.testnet is False
    assert config.api_key == "test-key"


def test_network_logged(config, caplog):
    with caplog.at_level("INFO", logger="tonapi_cli.wrapper"):
        TonApiWrapper(config, testnet=True)
    assert "Using testnet network: https://testnet.tonapi.io" in caplog.text


def test_module_filter(config, graph):
    api = TonApiWrapper(config, module_filter=["accounts"], client=graph)
    assert api.get_api_modules() == ["accounts"]
    assert api.has_module("accounts")
    assert not api.has_module("nft")
    assert api.get_module_methods("accounts") == ["get_account", "get_account_events"]


def test_filter_from_config(graph):
    api = TonApiWrapper(ApiConfig(api_key="k", module_filter=["blocks"]), client=graph)
    assert api.get_api_modules() == ["blocks"]


def test_metadata(config, graph):
    api = TonApiWrapper(config, client=graph)
    assert api.get_method_description("blocks", "get_block") == "Method get_block from blocks module"
    assert api.get_method_signature("blocks", "get_block") == "block_id"
    assert api.get_method_signature("blocks", "missing") == ""


def test_sorted_listing(config, graph):
    listing = TonApiWrapper(config, client=graph).get_sorted_modules_and_methods()
    assert listing.modules == ["accounts", "blocks", "nft", "rates"]
    assert listing.methods_by_module["accounts"] == ["get_account", "get_account_events"]


def test_parse_arguments(config, graph):
    api = TonApiWrapper(config, client=graph)
    assert api.parse_arguments('{"limit": 1}', ["EQabc", "2"]) == [{"limit": 1}, "EQabc", 2]
    with pytest.raises(ArgumentParseError):
        api.parse_arguments("{oops")


@pytest.mark.asyncio
async def test_call_method(config, graph):
    async with TonApiWrapper(config, client=graph) as api:
        args = api.parse_arguments(None, ["EQabc", "5"])
        result = await api.call_method("accounts", "get_account_events", *args)
    assert result == {"events": [], "account": "EQabc", "limit": 5}


@pytest.mark.asyncio
async def test_call_method_not_found(config, graph):
    api = TonApiWrapper(config, client=graph)
    with pytest.raises(NotFoundError):
        await api.call_method("accounts", "delete_everything")


@pytest.mark.asyncio
async def test_close_closes_client(config):
    client = AsyncTonApiClient(config)
    client.close = AsyncMock()
    async with TonApiWrapper(config, client=client):
        pass
    client.close.assert_awaited_once()


def test_describe_all(config, graph):
    infos = TonApiWrapper(config, client=graph).describe_all()
    assert [f"{i.module}.{i.method}" for i in infos] == [
        "accounts.get_account",
        "accounts.get_account_events",
        "blocks.get_block",
        "nft.get_nft_item",
        "rates.get_rates",
    ]
    assert infos[-1].signature == "Optional RequestParams object"
