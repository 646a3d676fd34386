# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Wallet namespace — seqno and wallets by public key."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace, seg


class WalletNamespace(BaseNamespace):

    async def get_account_seqno(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/wallet/{seg(account_id)}/seqno")

    async def get_wallets_by_public_key(self, public_key: str) -> dict[str, Any]:
        return await self._get(f"/v2/pubkeys/{seg(public_key)}/wallets")
