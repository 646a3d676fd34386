# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Traces namespace."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace, seg


class TracesNamespace(BaseNamespace):

    async def get_trace(self, trace_id: str) -> dict[str, Any]:
        return await self._get(f"/v2/traces/{seg(trace_id)}")

    async def emulate_message_to_trace(self, body: dict[str, Any], params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._post("/v2/traces/emulate", body, params)
