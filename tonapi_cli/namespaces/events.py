# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Events namespace."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace, seg


class EventsNamespace(BaseNamespace):

    async def get_event(self, event_id: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._get(f"/v2/events/{seg(event_id)}", params)

    async def emulate_message_to_event(self, body: dict[str, Any], params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._post("/v2/events/emulate", body, params)
