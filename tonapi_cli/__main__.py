# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
"""Allow ``python -m tonapi_cli``."""

from .cli import main

main()
