# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pydantic models used by the reflector and the CLI."""

from .core import MethodInfo, ModuleListing

__all__ = ["MethodInfo", "ModuleListing"]
