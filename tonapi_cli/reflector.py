# TonAPI CLI — reflective dispatch over the TonAPI client
# Copyright (C) 2025–2026 The tonapi-cli contributors
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Discover and invoke client operations by module and method name.

The reflector never holds a registry of its own: every query walks the live
client object, so whatever the client exposes right now is what the caller
sees. A *module* is a public, non-scalar, non-callable attribute of the
client other than the transport; a *method* is a public callable attribute
of a module.

All lookups fail softly (``False``, ``[]`` or ``""``). Only :meth:`invoke`
raises on an unknown name, since calling nothing has no useful result.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Iterable, Sequence

from .client import TRANSPORT_ATTR
from .exceptions import NotFoundError
from .models import MethodInfo, ModuleListing

logger = logging.getLogger(__name__)

PRIVATE_PREFIX = "_"

NO_PARAMETERS = "No parameters required"
OPTIONAL_REQUEST_PARAMS = "Optional RequestParams object"
SIGNATURE_UNAVAILABLE = "Parameter structure unavailable"

_SCALARS = (str, bytes, bytearray, int, float, complex, bool, type(None))


def _is_composite(value: Any) -> bool:
    return not callable(value) and not isinstance(value, _SCALARS)


def _instance_attrs(obj: Any) -> list[tuple[str, Any]]:
    """Attributes set on the instance, in assignment order when it has a ``__dict__``."""
    try:
        return list(vars(obj).items())
    except TypeError:
        # __slots__ objects and the like have no __dict__
        pass
    attrs = []
    for name in dir(obj):
        try:
            attrs.append((name, getattr(obj, name)))
        except Exception as e:
            logger.debug("Skipping attribute %s: %s", name, e)
    return attrs


class ApiReflector:
    """Introspects a namespaced client object and dispatches calls into it.

    ``module_filter`` is an optional allow-list of module names compared
    case-insensitively; an empty or missing filter shows every module.
    """

    def __init__(self, client: Any, module_filter: Iterable[str] | None = None) -> None:
        self._client = client
        self._filter = frozenset(
            m.strip().lower() for m in (module_filter or ()) if m and m.strip()
        )
        if self._filter:
            logger.info("Module filter applied: %s", ", ".join(sorted(self._filter)))

    @property
    def client(self) -> Any:
        return self._client

    @property
    def module_filter(self) -> frozenset[str]:
        return self._filter

    # ── Discovery ──────────────────────────────────────────────────────

    def list_namespaces(self) -> list[str]:
        names = [
            name
            for name, value in _instance_attrs(self._client)
            if name != TRANSPORT_ATTR
            and not name.startswith(PRIVATE_PREFIX)
            and _is_composite(value)
        ]
        if self._filter:
            names = [name for name in names if name.lower() in self._filter]
        return names

    def list_operations(self, namespace: str) -> list[str]:
        if not self.has_namespace(namespace):
            return []
        module = getattr(self._client, namespace)
        methods = []
        for name in dir(module):
            if name.startswith(PRIVATE_PREFIX):
                continue
            try:
                value = getattr(module, name)
            except Exception as e:
                logger.debug("Skipping %s.%s: %s", namespace, name, e)
                continue
            if callable(value):
                methods.append(name)
        return methods

    def has_namespace(self, namespace: str) -> bool:
        return namespace in self.list_namespaces()

    def has_operation(self, namespace: str, operation: str) -> bool:
        return self.has_namespace(namespace) and operation in self.list_operations(namespace)

    # ── Invocation ─────────────────────────────────────────────────────

    async def invoke(self, namespace: str, operation: str, args: Sequence[Any] = ()) -> Any:
        """Call ``namespace.operation(*args)`` and return what it resolves to.

        Raises :class:`NotFoundError` without calling anything when the pair
        is not visible. Errors from the call itself are logged and re-raised
        as they are.
        """
        if not self.has_operation(namespace, operation):
            raise NotFoundError(namespace, operation)

        method = getattr(getattr(self._client, namespace), operation)
        try:
            result = method(*args)
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            logger.error("Error calling %s.%s: %s", namespace, operation, e)
            raise

    # ── Advisory metadata ──────────────────────────────────────────────

    def describe_operation(self, namespace: str, operation: str) -> str:
        """Generic one-line description; not documentation."""
        try:
            if not self.has_operation(namespace, operation):
                return ""
            return f"Method {operation} from {namespace} module"
        except Exception as e:
            logger.debug("Description for %s.%s failed: %s", namespace, operation, e)
            return ""

    def infer_signature(self, namespace: str, operation: str) -> str:
        """Best-effort parameter hint for an operation, ``""`` if unknown."""
        try:
            if not self.has_operation(namespace, operation):
                return ""
            method = getattr(getattr(self._client, namespace), operation)
            try:
                sig = inspect.signature(method)
            except (ValueError, TypeError):
                return SIGNATURE_UNAVAILABLE
            return _summarize_signature(sig)
        except Exception as e:
            logger.debug("Signature lookup for %s.%s failed: %s", namespace, operation, e)
            return ""

    # ── Listings ───────────────────────────────────────────────────────

    def list_all_sorted(self) -> ModuleListing:
        modules = sorted(self.list_namespaces())
        return ModuleListing(
            modules=modules,
            methods_by_module={m: sorted(self.list_operations(m)) for m in modules},
        )

    def describe_all(self) -> list[MethodInfo]:
        listing = self.list_all_sorted()
        return [
            MethodInfo(
                module=module,
                method=method,
                description=self.describe_operation(module, method),
                signature=self.infer_signature(module, method),
            )
            for module in listing.modules
            for method in listing.methods_by_module[module]
        ]


def _summarize_signature(sig: inspect.Signature) -> str:
    params = list(sig.parameters.values())
    if not params:
        return NO_PARAMETERS
    if len(params) == 1 and params[0].name == "params" and _is_empty_default(params[0].default):
        return OPTIONAL_REQUEST_PARAMS
    return render_parameters(params)


def _is_empty_default(default: Any) -> bool:
    return default is None or (isinstance(default, dict) and not default)


def render_parameters(params: Sequence[inspect.Parameter]) -> str:
    """Render parameters the way they read in source, without the parens.

    String annotations (postponed evaluation) are printed as written rather
    than quoted like ``str(inspect.Signature)`` would.
    """
    parts: list[str] = []
    kinds = [p.kind for p in params]
    star_emitted = inspect.Parameter.VAR_POSITIONAL in kinds
    for i, p in enumerate(params):
        if p.kind is inspect.Parameter.KEYWORD_ONLY and not star_emitted:
            parts.append("*")
            star_emitted = True

        text = p.name
        if p.kind is inspect.Parameter.VAR_POSITIONAL:
            text = "*" + text
        elif p.kind is inspect.Parameter.VAR_KEYWORD:
            text = "**" + text

        annotated = p.annotation is not inspect.Parameter.empty
        if annotated:
            annotation = p.annotation if isinstance(p.annotation, str) else inspect.formatannotation(p.annotation)
            text += f": {annotation}"
        if p.default is not inspect.Parameter.empty:
            text += f" = {p.default!r}" if annotated else f"={p.default!r}"
        parts.append(text)

        is_last_positional_only = p.kind is inspect.Parameter.POSITIONAL_ONLY and (
            i + 1 == len(params) or params[i + 1].kind is not inspect.Parameter.POSITIONAL_ONLY
        )
        if is_last_positional_only:
            parts.append("/")
    return ", ".join(parts)
