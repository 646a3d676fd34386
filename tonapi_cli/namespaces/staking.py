# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Staking namespace — pools and nominators."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace, seg


class StakingNamespace(BaseNamespace):

    async def get_staking_pools(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._get("/v2/staking/pools", params)

    async def get_staking_pool_info(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/staking/pool/{seg(account_id)}")

    async def get_account_nominators_pools(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/staking/nominator/{seg(account_id)}/pools")
