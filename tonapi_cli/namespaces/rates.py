# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Rates namespace — token prices and charts."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace


class RatesNamespace(BaseNamespace):

    async def get_rates(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """Prices for {"tokens": "ton", "currencies": "usd"}; defaults to TON/USD."""
        query = {"tokens": "ton", "currencies": "usd"}
        query.update(params or {})
        return await self._get("/v2/rates", query)

    async def get_chart_rates(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        query = {"token": "ton", "currency": "usd"}
        query.update(params or {})
        return await self._get("/v2/rates/chart", query)

    async def get_markets_rates(self) -> dict[str, Any]:
        return await self._get("/v2/rates/markets")
