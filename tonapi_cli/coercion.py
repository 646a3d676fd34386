# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn CLI-style string input into an argument list for a remote call.

Two paths with different strictness:

* the structured parameter blob (``--params``) must be valid JSON, anything
  else is a user mistake and aborts the whole call;
* positional tokens are JSON-decoded when possible and otherwise kept as the
  literal string, so bare addresses and identifiers pass through untouched.

A token that is valid JSON is always decoded: ``true``, ``123`` and
``null`` arrive as ``True``, ``123`` and ``None``. Quote them
(``'"123"'``) to keep a string.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable

from .exceptions import ArgumentParseError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _loads(text: str) -> Any:
    # json accepts NaN/Infinity by default, strict JSON does not
    return json.loads(text, parse_constant=_reject_constant)


def parse_structured(raw_params: str) -> Any:
    """Strictly decode the structured parameter blob."""
    try:
        return _loads(raw_params)
    except (ValueError, RecursionError) as e:
        logger.error("Error parsing JSON parameters: %s", e)
        raise ArgumentParseError(raw_params, str(e)) from e


def parse_positional(token: str) -> Any:
    """Decode one positional token, falling back to the raw string."""
    try:
        return _loads(token)
    except (ValueError, RecursionError):
        return token


def coerce(raw_params: str | None = None, raw_positional: Iterable[str] | None = None) -> list[Any]:
    """Build the ordered argument list: parsed params first, then positional tokens."""
    args: list[Any] = []
    if raw_params:
        args.append(parse_structured(raw_params))
    if raw_positional:
        args.extend(parse_positional(token) for token in raw_positional)
    return args
