# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Namespace wrappers for TonAPI endpoint groups."""

from .base import BaseNamespace
from .accounts import AccountsNamespace
from .blockchain import BlockchainNamespace
from .dns import DnsNamespace
from .events import EventsNamespace
from .jettons import JettonsNamespace
from .nft import NftNamespace
from .rates import RatesNamespace
from .staking import StakingNamespace
from .traces import TracesNamespace
from .utilities import UtilitiesNamespace
from .wallet import WalletNamespace

__all__ = [
    "BaseNamespace",
    "AccountsNamespace",
    "BlockchainNamespace",
    "DnsNamespace",
    "EventsNamespace",
    "JettonsNamespace",
    "NftNamespace",
    "RatesNamespace",
    "StakingNamespace",
    "TracesNamespace",
    "UtilitiesNamespace",
    "WalletNamespace",
]
