# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Client configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .exceptions import ConfigError

MAINNET_URL = "https://tonapi.io"
TESTNET_URL = "https://testnet.tonapi.io"


def split_modules(raw: str | None) -> list[str]:
    """Turn ``"Accounts, nft"`` into ``["accounts", "nft"]``."""
    if not raw:
        return []
    return [m.strip().lower() for m in raw.split(",") if m.strip()]


@dataclass
class ApiConfig:
    """All configuration for a TonAPI client."""

    api_key: str = ""
    testnet: bool = False
    request_timeout: int = 30
    module_filter: list[str] = field(default_factory=list)

    @property
    def network(self) -> str:
        return "testnet" if self.testnet else "mainnet"

    @property
    def base_url(self) -> str:
        return TESTNET_URL if self.testnet else MAINNET_URL

    @classmethod
    def from_env(cls) -> ApiConfig:
        """Load configuration from environment variables (and a ``.env`` file)."""
        load_dotenv()
        raw_timeout = os.environ.get("TON_API_TIMEOUT", "30")
        try:
            timeout = int(raw_timeout)
        except ValueError:
            raise ConfigError(f"TON_API_TIMEOUT must be an integer, got {raw_timeout!r}") from None
        return cls(
            api_key=os.environ.get("TON_API_KEY", ""),
            testnet=os.environ.get("TON_API_TESTNET", "false").lower() == "true",
            request_timeout=timeout,
            module_filter=split_modules(os.environ.get("TON_API_MODULES")),
        )
