# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Utilities namespace — service status and address parsing."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace, seg


class UtilitiesNamespace(BaseNamespace):

    async def status(self) -> dict[str, Any]:
        return await self._get("/v2/status")

    async def address_parse(self, account_id: str) -> dict[str, Any]:
        """All textual forms (raw, bounceable, non-bounceable) of an address."""
        return await self._get(f"/v2/address/{seg(account_id)}/parse")
