# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Accounts namespace — balances, jettons, NFTs and history of an account."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace, seg


class AccountsNamespace(BaseNamespace):

    async def get_account(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/accounts/{seg(account_id)}")

    async def get_accounts(self, body: dict[str, Any], params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Bulk lookup, body is {"account_ids": [...]}."""
        return await self._post("/v2/accounts/_bulk", body, params)

    async def get_account_public_key(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/accounts/{seg(account_id)}/publickey")

    async def get_account_jettons_balances(
        self, account_id: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self._get(f"/v2/accounts/{seg(account_id)}/jettons", params)

    async def get_account_nft_items(self, account_id: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._get(f"/v2/accounts/{seg(account_id)}/nfts", params)

    async def get_account_events(self, account_id: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        query = {"limit": 20}
        query.update(params or {})
        return await self._get(f"/v2/accounts/{seg(account_id)}/events", query)

    async def get_account_dns_back_resolve(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/accounts/{seg(account_id)}/dns/backresolve")

    async def search_accounts(self, name: str) -> dict[str, Any]:
        return await self._get("/v2/accounts/search", {"name": name})
