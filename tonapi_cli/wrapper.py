# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""One-stop facade: config + client + reflector + argument coercion.

Usage::

    async with TonApiWrapper(testnet=True, api_key="...") as api:
        if api.has_method("accounts", "get_account"):
            args = api.parse_arguments(args=["EQ..."])
            account = await api.call_method("accounts", "get_account", *args)
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable

from . import coercion
from .client import AsyncTonApiClient
from .config import ApiConfig
from .exceptions import ConfigError
from .models import MethodInfo, ModuleListing
from .reflector import ApiReflector

logger = logging.getLogger(__name__)


class TonApiWrapper:
    """Reflective access to the TonAPI client by module and method name.

    Explicit arguments override the values in ``config`` (which defaults to
    :meth:`ApiConfig.from_env`). Without an API key the constructor raises
    :class:`ConfigError` unless ``skip_api_key_check`` is set.
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        *,
        testnet: bool | None = None,
        api_key: str | None = None,
        skip_api_key_check: bool = False,
        module_filter: Iterable[str] | None = None,
        client: Any = None,
    ):
        overrides: dict[str, Any] = {}
        if testnet is not None:
            overrides["testnet"] = testnet
        if api_key:
            overrides["api_key"] = api_key
        if module_filter is not None:
            overrides["module_filter"] = [m.strip().lower() for m in module_filter if m.strip()]
        self.config = replace(config or ApiConfig.from_env(), **overrides)

        logger.info("Using %s network: %s", self.config.network, self.config.base_url)

        if not self.config.api_key and not skip_api_key_check:
            raise ConfigError(
                "API key not specified",
                hint="Provide it using the --api-key option or set the TON_API_KEY environment variable",
            )

        self._client = client if client is not None else AsyncTonApiClient(self.config)
        self._reflector = ApiReflector(self._client, self.config.module_filter)

    @property
    def client(self) -> Any:
        return self._client

    @property
    def reflector(self) -> ApiReflector:
        return self._reflector

    @property
    def network(self) -> str:
        return self.config.network

    def get_api_modules(self) -> list[str]:
        return self._reflector.list_namespaces()

    def get_module_methods(self, module: str) -> list[str]:
        return self._reflector.list_operations(module)

    def has_module(self, module: str) -> bool:
        return self._reflector.has_namespace(module)

    def has_method(self, module: str, method: str) -> bool:
        return self._reflector.has_operation(module, method)

    async def call_method(self, module: str, method: str, *args: Any) -> Any:
        return await self._reflector.invoke(module, method, args)

    def get_method_description(self, module: str, method: str) -> str:
        return self._reflector.describe_operation(module, method)

    def get_method_signature(self, module: str, method: str) -> str:
        return self._reflector.infer_signature(module, method)

    def parse_arguments(self, params: str | None = None, args: Iterable[str] | None = None) -> list[Any]:
        return coercion.coerce(params, args)

    def get_sorted_modules_and_methods(self) -> ModuleListing:
        return self._reflector.list_all_sorted()

    def describe_all(self) -> list[MethodInfo]:
        return self._reflector.describe_all()

    async def close(self) -> None:
        close = getattr(self._client, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "TonApiWrapper":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
