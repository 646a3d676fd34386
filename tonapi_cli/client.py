# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level TonAPI client with one namespace object per API section.

Usage::

    async with AsyncTonApiClient() as client:
        account = await client.accounts.get_account("EQ...")
        rates = await client.rates.get_rates({"tokens": "ton"})

The instance attributes are the object graph that
:class:`~tonapi_cli.reflector.ApiReflector` walks: every public attribute
except ``http`` is a namespace, every public method of a namespace is an
operation. Keep anything else underscore-prefixed.
"""

from __future__ import annotations

from typing import Any

from .config import ApiConfig
from ._transport import AsyncTransport
from .namespaces import (
    AccountsNamespace,
    BlockchainNamespace,
    DnsNamespace,
    EventsNamespace,
    JettonsNamespace,
    NftNamespace,
    RatesNamespace,
    StakingNamespace,
    TracesNamespace,
    UtilitiesNamespace,
    WalletNamespace,
)

#: Attribute holding the transport; never exposed as a namespace.
TRANSPORT_ATTR = "http"


class AsyncTonApiClient:
    """Async TonAPI client.

    Use as an async context manager::

        async with AsyncTonApiClient(config) as client:
            head = await client.blockchain.get_blockchain_masterchain_head()
    """

    def __init__(self, config: ApiConfig | None = None):
        self._config = config or ApiConfig.from_env()
        self.http = AsyncTransport(self._config)

        # Wire up namespaces
        self.accounts = AccountsNamespace(self.http)
        self.blockchain = BlockchainNamespace(self.http)
        self.dns = DnsNamespace(self.http)
        self.events = EventsNamespace(self.http)
        self.jettons = JettonsNamespace(self.http)
        self.nft = NftNamespace(self.http)
        self.rates = RatesNamespace(self.http)
        self.staking = StakingNamespace(self.http)
        self.traces = TracesNamespace(self.http)
        self.utilities = UtilitiesNamespace(self.http)
        self.wallet = WalletNamespace(self.http)

    @property
    def config(self) -> ApiConfig:
        return self._config

    async def __aenter__(self) -> "AsyncTonApiClient":
        await self.http.__aenter__()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.http.__aexit__(*args)

    async def close(self) -> None:
        await self.http.close()
