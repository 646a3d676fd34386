# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""TonAPI CLI — discover and call TonAPI methods by module and method name."""

__version__ = "0.1.0"

from .config import ApiConfig
from .client import AsyncTonApiClient
from .coercion import coerce
from .reflector import ApiReflector
from .wrapper import TonApiWrapper
from .exceptions import (
    TonApiCliError,
    ConfigError,
    NotFoundError,
    ArgumentParseError,
    RemoteInvocationError,
)
from .models import MethodInfo, ModuleListing

__all__ = [
    # Dispatch
    "ApiReflector",
    "TonApiWrapper",
    "coerce",
    # Client
    "AsyncTonApiClient",
    # Config
    "ApiConfig",
    # Errors
    "TonApiCliError",
    "ConfigError",
    "NotFoundError",
    "ArgumentParseError",
    "RemoteInvocationError",
    # Models
    "MethodInfo",
    "ModuleListing",
]
