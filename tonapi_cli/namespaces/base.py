# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Base namespace class for TonAPI endpoint groups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

if TYPE_CHECKING:
    from .._transport import AsyncTransport


class BaseNamespace:
    """Base class for all namespace wrappers.

    Public coroutine methods on a subclass are the operations the reflector
    discovers, so helpers here stay underscore-prefixed.
    """

    def __init__(self, transport: AsyncTransport) -> None:
        self._t = transport

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._t.request("GET", path, query=params)

    async def _post(self, path: str, body: Any = None, params: dict[str, Any] | None = None) -> Any:
        return await self._t.request("POST", path, query=params, body=body)


def seg(value: Any) -> str:
    """Quote one path segment; raw addresses keep their :."""
    return quote(str(value), safe=":")
