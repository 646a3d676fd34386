# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Jettons namespace — jetton masters, holders and transfers."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace, seg


class JettonsNamespace(BaseNamespace):

    async def get_jettons(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._get("/v2/jettons", params)

    async def get_jetton_info(self, account_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/jettons/{seg(account_id)}")

    async def get_jetton_holders(self, account_id: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._get(f"/v2/jettons/{seg(account_id)}/holders", params)

    async def get_jettons_events(self, event_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/events/{seg(event_id)}/jettons")
