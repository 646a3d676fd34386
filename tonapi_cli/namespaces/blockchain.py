# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Blockchain namespace — raw blocks, transactions, get-methods and messages."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace, seg


class BlockchainNamespace(BaseNamespace):

    async def get_blockchain_masterchain_head(self) -> dict[str, Any]:
        return await self._get("/v2/blockchain/masterchain-head")

    async def get_blockchain_block(self, block_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/blockchain/blocks/{seg(block_id)}")

    async def get_blockchain_transaction(self, transaction_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/blockchain/transactions/{seg(transaction_id)}")

    async def get_blockchain_raw_account(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/blockchain/accounts/{seg(account_id)}")

    async def get_blockchain_account_transactions(
        self, account_id: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return await self._get(f"/v2/blockchain/accounts/{seg(account_id)}/transactions", params)

    async def exec_get_method_for_blockchain_account(
        self, account_id: str, method_name: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Run a get-method; pass stack arguments as {"args": [...]}."""
        return await self._get(
            f"/v2/blockchain/accounts/{seg(account_id)}/methods/{seg(method_name)}", params
        )

    async def get_blockchain_config(self) -> dict[str, Any]:
        return await self._get("/v2/blockchain/config")

    async def send_blockchain_message(self, body: dict[str, Any]) -> Any:
        """Broadcast a message, body is {"boc": "..."}."""
        return await self._post("/v2/blockchain/message", body)
