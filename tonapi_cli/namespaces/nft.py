# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""NFT namespace — collections, items and transfer history."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace, seg


class NftNamespace(BaseNamespace):

    async def get_nft_collections(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._get("/v2/nfts/collections", params)

    async def get_nft_collection(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/nfts/collections/{seg(account_id)}")

    async def get_items_from_collection(
        self, account_id: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self._get(f"/v2/nfts/collections/{seg(account_id)}/items", params)

    async def get_nft_item_by_address(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/nfts/{seg(account_id)}")

    async def get_nft_items_by_addresses(self, body: dict[str, Any]) -> dict[str, Any]:
        return await self._post("/v2/nfts/_bulk", body)

    async def get_nft_history_by_id(self, account_id: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        query = {"limit": 20}
        query.update(params or {})
        return await self._get(f"/v2/nfts/{seg(account_id)}/history", query)
