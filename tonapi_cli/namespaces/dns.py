# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""DNS namespace — .ton domain info, resolution and auctions."""

from __future__ import annotations

from typing import Any

from .base import BaseNamespace, seg


class DnsNamespace(BaseNamespace):

    async def get_dns_info(self, domain_name: str) -> dict[str, Any]:
        return await self._get(f"/v2/dns/{seg(domain_name)}")

    async def dns_resolve(self, domain_name: str) -> dict[str, Any]:
        return await self._get(f"/v2/dns/{seg(domain_name)}/resolve")

    async def get_domain_bids(self, domain_name: str) -> dict[str, Any]:
        return await self._get(f"/v2/dns/{seg(domain_name)}/bids")

    async def get_all_auctions(self, params: dict[str, Any] | None = None) -> dict[str, Any]:
        return await self._get("/v2/dns/auctions", params)
