# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pydantic models for reflector listings."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ModuleListing(BaseModel):
    """Sorted modules and, per module, its sorted methods."""

    modules: list[str] = Field(default_factory=list)
    methods_by_module: dict[str, list[str]] = Field(default_factory=dict)


class MethodInfo(BaseModel):
    module: str
    method: str
    description: str = ""
    signature: str = ""
