# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for tonapi-cli.

Lookups that can fail softly (``has_namespace``, ``describe_operation``, ...)
return ``False`` or an empty value instead of raising; everything here is
reserved for conditions a caller cannot sensibly continue from.
"""

from __future__ import annotations

from typing import Any


class TonApiCliError(Exception):
    """Base class. ``exit_code`` is what the CLI exits with."""

    exit_code = 1

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigError(TonApiCliError):
    """Missing or invalid configuration (API key, timeout, ...)."""

    exit_code = 2


class NotFoundError(TonApiCliError):
    """Module or method does not exist, or is hidden by the module filter."""

    def __init__(self, module: str, method: str) -> None:
        super().__init__(
            f"Method {method} not found in module {module}",
            hint="Run `tonapi list` to see the available modules and methods",
        )
        self.module = module
        self.method = method


class ArgumentParseError(TonApiCliError):
    """The structured JSON parameter blob could not be parsed."""

    def __init__(self, raw: str, diagnostic: str) -> None:
        super().__init__(f"Error parsing JSON parameters: {diagnostic}")
        self.raw = raw
        self.diagnostic = diagnostic


class RemoteInvocationError(TonApiCliError):
    """TonAPI rejected the request or could not be reached."""

    def __init__(self, message: str, status: int | None = None, body: Any = None) -> None:
        super().__init__(message)
        self.status = status
        self.body = body
